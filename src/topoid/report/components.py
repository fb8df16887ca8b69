"""Validation of raw node ID components.

The plain constructors in :mod:`topoid.report.ids` trust their callers to
pass delimiter-free components. ``NodeIDFactory`` in strict mode checks that
presumption and refuses to build an ID that would not parse back.
"""

from __future__ import annotations

import logging
from typing import Annotated, FrozenSet, Iterable, Optional

from pydantic import AfterValidator

from ..config import get_settings
from . import ids
from .constants import EDGE_DELIM, RESERVED_CHARACTERS

logger = logging.getLogger(__name__)


class InvalidComponentError(ValueError):
    """Raised when a raw component contains a reserved character."""

    def __init__(self, value: str, character: str):
        super().__init__(f"component {value!r} contains reserved character {character!r}")
        self.value = value
        self.character = character


def ensure_delimiter_free(*parts: str, reserved: Optional[Iterable[str]] = None) -> None:
    """Raise ``InvalidComponentError`` for the first part holding a reserved character."""

    forbidden = RESERVED_CHARACTERS if reserved is None else frozenset(reserved)
    for part in parts:
        for character in part:
            if character in forbidden:
                raise InvalidComponentError(part, character)


def _reject_reserved(value: str) -> str:
    ensure_delimiter_free(value)
    return value


# For pydantic models that carry raw components (hostnames, pids, ports)
# before they are turned into node IDs. Only the wire delimiters are enforced
# here; TOPOID_EXTRA_RESERVED_CHARACTERS applies to NodeIDFactory alone, so
# model validation never depends on environment settings.
RawComponent = Annotated[str, AfterValidator(_reject_reserved)]


class NodeIDFactory:
    """Builds node, adjacency and edge IDs, optionally validating components.

    With ``strict`` left as ``None`` the factory follows
    ``TOPOID_STRICT_COMPONENTS``. The IDs produced are identical to the
    module-level constructors for valid input.
    """

    def __init__(
        self,
        strict: Optional[bool] = None,
        *,
        reserved: Optional[Iterable[str]] = None,
    ):
        settings = get_settings()
        self.strict = settings.strict_components if strict is None else strict
        if reserved is None:
            self.reserved: FrozenSet[str] = RESERVED_CHARACTERS | frozenset(
                settings.extra_reserved_characters
            )
        else:
            self.reserved = frozenset(reserved)

    def _check(self, *parts: str, reserved: Optional[FrozenSet[str]] = None) -> None:
        if not self.strict:
            return
        try:
            ensure_delimiter_free(*parts, reserved=self.reserved if reserved is None else reserved)
        except InvalidComponentError as exc:
            logger.warning("Rejected node ID component %r (reserved %r)", exc.value, exc.character)
            raise

    def host(self, host_id: str) -> str:
        self._check(host_id)
        return ids.make_host_node_id(host_id)

    def process(self, host_id: str, pid: str) -> str:
        self._check(host_id, pid)
        return ids.make_process_node_id(host_id, pid)

    def container(self, host_id: str, container_id: str) -> str:
        self._check(host_id, container_id)
        return ids.make_container_node_id(host_id, container_id)

    def address(self, host_id: str, address: str) -> str:
        self._check(host_id, address)
        return ids.make_address_node_id(host_id, address)

    def endpoint(self, host_id: str, address: str, port: str) -> str:
        self._check(host_id, address, port)
        return ids.make_endpoint_node_id(host_id, address, port)

    def pseudo(self, *parts: str) -> str:
        self._check(*parts)
        return ids.make_pseudo_node_id(*parts)

    # Node IDs legitimately contain the scope delimiter; only the edge
    # delimiter would break the derived keys.

    def adjacency(self, node_id: str) -> str:
        self._check(node_id, reserved=frozenset({EDGE_DELIM}))
        return ids.make_adjacency_id(node_id)

    def edge(self, src_node_id: str, dst_node_id: str) -> str:
        self._check(src_node_id, dst_node_id, reserved=frozenset({EDGE_DELIM}))
        return ids.make_edge_id(src_node_id, dst_node_id)


__all__ = [
    "InvalidComponentError",
    "NodeIDFactory",
    "RawComponent",
    "ensure_delimiter_free",
]

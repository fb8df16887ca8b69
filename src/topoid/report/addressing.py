"""Strategies that recover the IP address embedded in a node ID.

A topology picks one strategy when it is configured and keeps it for its
lifetime. Graph building code calls the strategy without knowing which kind
of node ID it is looking at.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from pydantic import ValidationError

from ..config import get_settings
from .constants import SCOPE_DELIM
from .scoping import IPAddress, parse_ip

logger = logging.getLogger(__name__)


class AddresserMisuseError(RuntimeError):
    """Raised when a topology without addresses is asked for one."""


class IDAddresser(Protocol):
    """Converts a node ID to an IP address, if possible."""

    def __call__(self, node_id: str) -> Optional[IPAddress]:
        ...


def _settings_log_malformed_ids() -> bool:
    # Extractors must not raise, so unusable settings mean logging stays off.
    try:
        return get_settings().log_malformed_ids
    except ValidationError:
        logger.debug("Invalid TOPOID_* settings; malformed ID logging disabled", exc_info=True)
        return False


def _address_field(
    node_id: str,
    field_count: int,
    addresser: str,
    log_malformed_ids: Optional[bool],
) -> Optional[IPAddress]:
    fields = node_id.split(SCOPE_DELIM, field_count - 1)
    if len(fields) != field_count:
        if log_malformed_ids is None:
            log_malformed_ids = _settings_log_malformed_ids()
        if log_malformed_ids:
            logger.debug("%s: bad input %r", addresser, node_id)
        return None
    return parse_ip(fields[1])


@dataclass(frozen=True, slots=True)
class EndpointIDAddresser:
    """Extracts the address from ``host;address;port`` endpoint node IDs.

    IPv4-mapped IPv6 text (``::ffff:10.0.0.1``) comes back as an
    ``IPv6Address``; compare through ``ipv4_mapped`` when the IPv4 form is
    wanted. ``log_malformed_ids`` overrides ``TOPOID_LOG_MALFORMED_IDS``.
    """

    log_malformed_ids: Optional[bool] = None

    def __call__(self, node_id: str) -> Optional[IPAddress]:
        return _address_field(node_id, 3, "EndpointIDAddresser", self.log_malformed_ids)


@dataclass(frozen=True, slots=True)
class AddressIDAddresser:
    """Extracts the address from ``host;address`` address node IDs.

    Returns IPv4-mapped literals as ``IPv6Address``, like the endpoint
    addresser.
    """

    log_malformed_ids: Optional[bool] = None

    def __call__(self, node_id: str) -> Optional[IPAddress]:
        return _address_field(node_id, 2, "AddressIDAddresser", self.log_malformed_ids)


@dataclass(frozen=True, slots=True)
class PanicIDAddresser:
    """Raises on every call.

    Used by topologies that never have edges, where extracting an IP from a
    node ID is nonsensical. Reaching it means a topology was wired with the
    wrong addresser, so the error is meant to propagate.
    """

    def __call__(self, node_id: str) -> Optional[IPAddress]:
        logger.error("PanicIDAddresser called on %r", node_id)
        raise AddresserMisuseError(f"PanicIDAddresser called on {node_id!r}")


ENDPOINT_ID_ADDRESSER = EndpointIDAddresser()
ADDRESS_ID_ADDRESSER = AddressIDAddresser()
PANIC_ID_ADDRESSER = PanicIDAddresser()


__all__ = [
    "ADDRESS_ID_ADDRESSER",
    "AddressIDAddresser",
    "AddresserMisuseError",
    "ENDPOINT_ID_ADDRESSER",
    "EndpointIDAddresser",
    "IDAddresser",
    "PANIC_ID_ADDRESSER",
    "PanicIDAddresser",
]

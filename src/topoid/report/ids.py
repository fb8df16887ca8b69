"""Constructors and parsers for topology node, adjacency and edge IDs.

Every function here is a pure string transform. The constructors never
validate their inputs: components are presumed free of ``SCOPE_DELIM`` and
``EDGE_DELIM``. Use :class:`topoid.report.components.NodeIDFactory` in
strict mode when that presumption cannot be trusted.
"""

from __future__ import annotations

from typing import Tuple

from .constants import (
    ADJACENCY_PREFIX,
    EDGE_DELIM,
    HOST_MARKER,
    PSEUDO_PREFIX,
    SCOPE_DELIM,
)
from .scoping import is_loopback


def make_adjacency_id(src_node_id: str) -> str:
    """Produce an adjacency ID from a node ID."""

    return ADJACENCY_PREFIX + src_node_id


def parse_adjacency_id(adjacency_id: str) -> Tuple[str, bool]:
    """Recover the node ID from an adjacency ID."""

    if not adjacency_id.startswith(ADJACENCY_PREFIX):
        return "", False
    return adjacency_id[len(ADJACENCY_PREFIX):], True


def make_edge_id(src_node_id: str, dst_node_id: str) -> str:
    """Produce a directed edge ID from two node IDs."""

    return src_node_id + EDGE_DELIM + dst_node_id


def parse_edge_id(edge_id: str) -> Tuple[str, str, bool]:
    """Split an edge ID into ``(src_node_id, dst_node_id, ok)``."""

    fields = edge_id.split(EDGE_DELIM, 1)
    if len(fields) != 2:
        return "", "", False
    return fields[0], fields[1], True


def make_endpoint_node_id(host_id: str, address: str, port: str) -> str:
    return make_address_node_id(host_id, address) + SCOPE_DELIM + port


def make_address_node_id(host_id: str, address: str) -> str:
    if not is_loopback(address):
        # Only loopback addresses are scoped by host ID.
        host_id = ""
    return host_id + SCOPE_DELIM + address


def make_process_node_id(host_id: str, pid: str) -> str:
    return host_id + SCOPE_DELIM + pid


def make_host_node_id(host_id: str) -> str:
    # Probe host IDs are presumed globally unique already. The marker makes
    # any attempt to use a raw probe host ID as a host node ID fail loudly.
    return host_id + SCOPE_DELIM + HOST_MARKER


def make_container_node_id(host_id: str, container_id: str) -> str:
    return host_id + SCOPE_DELIM + container_id


def parse_node_id(node_id: str) -> Tuple[str, str, bool]:
    """Split a node ID into ``(host_id, remainder, ok)``.

    ``host_id`` is blank for unscoped address and endpoint IDs.
    """

    fields = node_id.split(SCOPE_DELIM, 1)
    if len(fields) != 2:
        return "", "", False
    return fields[0], fields[1], True


def make_pseudo_node_id(*parts: str) -> str:
    return SCOPE_DELIM.join((PSEUDO_PREFIX, *parts))


__all__ = [
    "make_address_node_id",
    "make_adjacency_id",
    "make_container_node_id",
    "make_edge_id",
    "make_endpoint_node_id",
    "make_host_node_id",
    "make_process_node_id",
    "make_pseudo_node_id",
    "parse_adjacency_id",
    "parse_edge_id",
    "parse_node_id",
]

"""Node, adjacency and edge identifiers for topology reports."""

from .addressing import (
    ADDRESS_ID_ADDRESSER,
    ENDPOINT_ID_ADDRESSER,
    PANIC_ID_ADDRESSER,
    AddressIDAddresser,
    AddresserMisuseError,
    EndpointIDAddresser,
    IDAddresser,
    PanicIDAddresser,
)
from .components import InvalidComponentError, NodeIDFactory, RawComponent, ensure_delimiter_free
from .constants import (
    ADJACENCY_PREFIX,
    EDGE_DELIM,
    HOST_MARKER,
    PSEUDO_PREFIX,
    SCOPE_DELIM,
    THE_INTERNET,
)
from .ids import (
    make_address_node_id,
    make_adjacency_id,
    make_container_node_id,
    make_edge_id,
    make_endpoint_node_id,
    make_host_node_id,
    make_process_node_id,
    make_pseudo_node_id,
    parse_adjacency_id,
    parse_edge_id,
    parse_node_id,
)
from .scoping import IPAddress, is_loopback, parse_ip
from .topology import Topology, TopologyKind, addresser_for

__all__ = [
    "ADDRESS_ID_ADDRESSER",
    "ADJACENCY_PREFIX",
    "AddressIDAddresser",
    "AddresserMisuseError",
    "EDGE_DELIM",
    "ENDPOINT_ID_ADDRESSER",
    "EndpointIDAddresser",
    "HOST_MARKER",
    "IDAddresser",
    "IPAddress",
    "InvalidComponentError",
    "NodeIDFactory",
    "PANIC_ID_ADDRESSER",
    "PSEUDO_PREFIX",
    "PanicIDAddresser",
    "RawComponent",
    "SCOPE_DELIM",
    "THE_INTERNET",
    "Topology",
    "TopologyKind",
    "addresser_for",
    "ensure_delimiter_free",
    "is_loopback",
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
    "parse_ip",
    "parse_node_id",
]

"""Topology kinds and the ID addresser each one is wired with."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .addressing import (
    ADDRESS_ID_ADDRESSER,
    ENDPOINT_ID_ADDRESSER,
    PANIC_ID_ADDRESSER,
    IDAddresser,
)
from .constants import THE_INTERNET
from .ids import parse_edge_id
from .scoping import IPAddress


class TopologyKind(Enum):
    """Kinds of topology a report carries."""

    ENDPOINT = "endpoint"
    ADDRESS = "address"
    PROCESS = "process"
    CONTAINER = "container"
    HOST = "host"


_ADDRESSERS = {
    TopologyKind.ENDPOINT: ENDPOINT_ID_ADDRESSER,
    TopologyKind.ADDRESS: ADDRESS_ID_ADDRESSER,
    TopologyKind.PROCESS: PANIC_ID_ADDRESSER,
    TopologyKind.CONTAINER: PANIC_ID_ADDRESSER,
    TopologyKind.HOST: PANIC_ID_ADDRESSER,
}


def addresser_for(kind: TopologyKind) -> IDAddresser:
    """Return the ID addresser matching the node IDs of ``kind``."""

    return _ADDRESSERS[kind]


@dataclass(frozen=True, slots=True)
class Topology:
    """A topology kind bound to its ID addresser.

    Process, container and host topologies never carry edges, so their
    addresser raises ``AddresserMisuseError`` if anything asks.
    """

    kind: TopologyKind
    id_addresser: Optional[IDAddresser] = field(default=None)

    def __post_init__(self) -> None:
        if self.id_addresser is None:
            object.__setattr__(self, "id_addresser", addresser_for(self.kind))

    def address_of(self, node_id: str) -> Optional[IPAddress]:
        return self.id_addresser(node_id)

    def edge_addresses(self, edge_id: str) -> Tuple[Optional[IPAddress], Optional[IPAddress]]:
        """Map both ends of an edge ID to IP addresses."""

        src_node_id, dst_node_id, ok = parse_edge_id(edge_id)
        if not ok:
            return None, None
        return self.id_addresser(src_node_id), self.id_addresser(dst_node_id)

    @staticmethod
    def is_internet(node_id: str) -> bool:
        return node_id == THE_INTERNET


__all__ = ["Topology", "TopologyKind", "addresser_for"]

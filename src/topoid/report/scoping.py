"""Loopback scoping for address-bearing node IDs.

Loopback addresses are reused verbatim on every host, so an address node for
``127.0.0.1`` reported by two probes must stay two nodes. Every other address
is assumed to be globally meaningful and is deliberately left unscoped, so
that two hosts observing the same peer converge on a single node.
"""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_ip(text: str) -> Optional[IPAddress]:
    """Parse an IPv4 or IPv6 literal, returning ``None`` for anything else.

    Zone-qualified IPv6 text (``fe80::1%eth0``) is not an IP literal in node
    IDs and is rejected along with hostnames and CIDR notation.
    """

    if not text or "%" in text:
        return None
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def is_loopback(address: str) -> bool:
    """Return True when ``address`` is an IP literal in a loopback range."""

    ip = parse_ip(address)
    if ip is None:
        return False
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        # ::ffff:127.0.0.1 is the same host-local address as 127.0.0.1.
        return ip.ipv4_mapped.is_loopback
    return ip.is_loopback


__all__ = ["IPAddress", "is_loopback", "parse_ip"]

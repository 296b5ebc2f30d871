"""Network ranges: single IP addresses or CIDR subnets used for matching."""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
NetworkRange = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


def parse_network_range(text: str) -> NetworkRange:
    """Parse a single address or CIDR subnet.

    A bare address becomes a one-host network (``/32`` or ``/128``). Host
    bits set in a subnet are masked off, so ``10.1.2.3/8`` is ``10.0.0.0/8``.

    Raises:
        ValueError: If ``text`` is not a valid address or subnet.
    """
    return ipaddress.ip_network(text, strict=False)


def canonical_address(address: IPAddress) -> IPAddress:
    """Return the form of ``address`` used for matching.

    IPv4-mapped IPv6 addresses (``::ffff:10.1.2.3``), as reported by
    dual-stack listeners, are unwrapped to their IPv4 form. Every other
    address is returned unchanged.
    """
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        return address.ipv4_mapped
    return address


def parse_address(text: str) -> IPAddress:
    """Parse a single requester address into its canonical form.

    Raises:
        ValueError: If ``text`` is not a single IP address.
    """
    return canonical_address(ipaddress.ip_address(text.strip()))


def address_matches(address: IPAddress, ranges: Iterable[NetworkRange]) -> bool:
    """Return True if ``address`` lies inside any of ``ranges``.

    Addresses never match ranges of the other IP family.
    """
    return any(address in network for network in ranges)


__all__: list[str] = [
    "IPAddress",
    "NetworkRange",
    "parse_network_range",
    "canonical_address",
    "parse_address",
    "address_matches",
]

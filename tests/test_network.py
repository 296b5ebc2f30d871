"""Tests for network range helpers."""

from __future__ import annotations

from ipaddress import ip_address, ip_network

import pytest

from gateway_auth_policy.network import (
    address_matches,
    canonical_address,
    parse_address,
    parse_network_range,
)


def test_parse_network_range_single_address() -> None:
    network = parse_network_range("203.0.113.7")
    assert network.num_addresses == 1
    assert ip_address("203.0.113.7") in network


def test_parse_network_range_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_network_range("203.0.113.0/24/1")


def test_parse_address_strips_whitespace() -> None:
    assert parse_address(" 10.1.2.3 ") == ip_address("10.1.2.3")


def test_parse_address_unwraps_ipv4_mapped() -> None:
    assert parse_address("::ffff:10.1.2.3") == ip_address("10.1.2.3")


def test_canonical_address_unwraps_ipv4_mapped() -> None:
    assert canonical_address(ip_address("::ffff:10.1.2.3")) == ip_address("10.1.2.3")


@pytest.mark.parametrize("raw", ["10.1.2.3", "2001:db8::1"])
def test_canonical_address_keeps_other_addresses(raw: str) -> None:
    assert canonical_address(ip_address(raw)) == ip_address(raw)


def test_parse_address_rejects_subnet() -> None:
    with pytest.raises(ValueError):
        parse_address("10.0.0.0/8")


class TestAddressMatches:
    def test_inside_subnet(self) -> None:
        assert address_matches(ip_address("10.1.2.3"), [ip_network("10.0.0.0/8")])

    def test_exact_single_address(self) -> None:
        assert address_matches(
            ip_address("192.168.1.5"), [parse_network_range("192.168.1.5")]
        )

    def test_neighbour_of_single_address(self) -> None:
        assert not address_matches(
            ip_address("192.168.1.6"), [parse_network_range("192.168.1.5")]
        )

    def test_no_prefix_heuristics(self) -> None:
        # 10.10.x is not inside 10.1.0.0/16 even though the text shares a prefix
        assert not address_matches(ip_address("10.10.0.1"), [ip_network("10.1.0.0/16")])

    def test_mixed_families_never_match(self) -> None:
        assert not address_matches(ip_address("10.1.2.3"), [ip_network("::/0")])
        assert not address_matches(ip_address("2001:db8::1"), [ip_network("0.0.0.0/0")])

    def test_ipv6_subnet(self) -> None:
        assert address_matches(ip_address("2001:db8::1"), [ip_network("2001:db8::/32")])

    def test_any_of_several(self) -> None:
        ranges = [ip_network("10.0.0.0/8"), ip_network("172.16.0.0/12")]
        assert address_matches(ip_address("172.20.1.1"), ranges)

    def test_empty_list(self) -> None:
        assert not address_matches(ip_address("10.1.2.3"), [])

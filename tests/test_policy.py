"""Tests for the network policy evaluator."""

from __future__ import annotations

import logging
from ipaddress import ip_address, ip_network

import pytest

from gateway_auth_policy.policy import (
    BOTH_LISTS_WARNING,
    NetworkPolicy,
    second_factor_required,
)

TEN_NET = [ip_network("10.0.0.0/8")]
DOC_NET = [ip_network("203.0.113.0/24")]


@pytest.mark.parametrize(
    ("bypass", "enforce", "requester", "expected"),
    [
        (TEN_NET, [], "10.1.2.3", False),
        (TEN_NET, [], "192.168.1.1", True),
        ([], DOC_NET, "203.0.113.5", True),
        ([], DOC_NET, "8.8.8.8", False),
        ([], [], "8.8.8.8", True),
        ([], [], "10.1.2.3", True),
        ([], [], "2001:db8::1", True),
    ],
    ids=[
        "bypass-hit",
        "bypass-miss",
        "enforce-hit",
        "enforce-miss",
        "no-lists-public",
        "no-lists-private",
        "no-lists-ipv6",
    ],
)
def test_second_factor_required(bypass, enforce, requester, expected) -> None:
    assert second_factor_required(ip_address(requester), bypass, enforce) is expected


def test_bypass_single_address_entry() -> None:
    bypass = [ip_network("192.168.1.5/32")]
    assert not second_factor_required(ip_address("192.168.1.5"), bypass, [])
    assert second_factor_required(ip_address("192.168.1.6"), bypass, [])


def test_ipv4_mapped_address_object_is_unwrapped() -> None:
    mapped = ip_address("::ffff:10.1.2.3")
    assert second_factor_required(mapped, TEN_NET, []) is False


def test_both_lists_enforce_list_decides() -> None:
    bypass = [ip_network("10.0.0.0/8")]
    enforce = [ip_network("10.1.0.0/16")]

    assert second_factor_required(ip_address("10.1.2.3"), bypass, enforce)
    assert not second_factor_required(ip_address("10.2.0.1"), bypass, enforce)
    assert not second_factor_required(ip_address("8.8.8.8"), bypass, enforce)


class TestNetworkPolicy:
    def test_defaults_to_empty_lists(self) -> None:
        policy = NetworkPolicy()
        assert policy.bypass == ()
        assert policy.enforce == ()
        assert policy.is_second_factor_required("198.51.100.1")

    def test_from_lists_accepts_none(self) -> None:
        policy = NetworkPolicy.from_lists(None, None)
        assert policy == NetworkPolicy()

    def test_accepts_address_strings(self) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET)
        assert not policy.is_second_factor_required("10.1.2.3")
        assert policy.is_second_factor_required("192.168.1.1")

    def test_accepts_ipv4_mapped_addresses(self) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET)
        assert not policy.is_second_factor_required("::ffff:10.1.2.3")

    def test_ipv4_mapped_string_and_object_agree(self) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET)
        mapped = ip_address("::ffff:10.1.2.3")
        assert policy.is_second_factor_required(mapped) is False
        assert policy.is_second_factor_required(
            mapped
        ) == policy.is_second_factor_required(str(mapped))

    def test_ipv4_mapped_object_matches_enforce_list(self) -> None:
        policy = NetworkPolicy.from_lists(enforce=DOC_NET)
        assert policy.is_second_factor_required(ip_address("::ffff:203.0.113.9"))

    def test_rejects_malformed_requester(self) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET)
        with pytest.raises(ValueError):
            policy.is_second_factor_required("10.1.2.300")

    def test_no_warnings_for_single_list(self) -> None:
        assert NetworkPolicy.from_lists(bypass=TEN_NET).warnings() == []
        assert NetworkPolicy.from_lists(enforce=DOC_NET).warnings() == []

    def test_warns_when_both_lists_configured(self) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET, enforce=DOC_NET)
        assert policy.warnings() == [BOTH_LISTS_WARNING]

    def test_logs_decision(self, caplog: pytest.LogCaptureFixture) -> None:
        policy = NetworkPolicy.from_lists(bypass=TEN_NET)
        with caplog.at_level(logging.DEBUG, logger="gateway_auth_policy.policy"):
            policy.is_second_factor_required("10.1.2.3")
        assert "Second factor skipped for 10.1.2.3" in caplog.text

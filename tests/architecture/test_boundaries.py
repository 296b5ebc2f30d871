from pytest_archon import archrule


def test_properties_independence() -> None:
    """
    The property type system is the foundation. It must not know about the
    policy, the MFA extensions or the gate that consume it.
    """
    (
        archrule("properties_are_independent")
        .match("gateway_auth_policy.properties*")
        .should_not_import("gateway_auth_policy.policy*")
        .should_not_import("gateway_auth_policy.environment*")
        .should_not_import("gateway_auth_policy.totp*")
        .should_not_import("gateway_auth_policy.duo*")
        .should_not_import("gateway_auth_policy.mfa*")
        .check("gateway_auth_policy")
    )


def test_network_is_a_leaf() -> None:
    """
    Network ranges are plain value objects built on the standard library.
    """
    (
        archrule("network_is_leaf")
        .match("gateway_auth_policy.network")
        .should_not_import("gateway_auth_policy.properties*")
        .should_not_import("gateway_auth_policy.policy*")
        .should_not_import("gateway_auth_policy.environment*")
        .check("gateway_auth_policy")
    )


def test_policy_is_pure() -> None:
    """
    The policy evaluator only sees validated ranges. It must not read
    configuration or call verifiers itself.
    """
    (
        archrule("policy_is_pure")
        .match("gateway_auth_policy.policy")
        .should_not_import("gateway_auth_policy.environment*")
        .should_not_import("gateway_auth_policy.properties*")
        .should_not_import("gateway_auth_policy.mfa*")
        .check("gateway_auth_policy")
    )


def test_extensions_do_not_depend_on_each_other() -> None:
    """TOTP and Duo configuration are separate extensions."""
    (
        archrule("totp_independent_of_duo")
        .match("gateway_auth_policy.totp*")
        .should_not_import("gateway_auth_policy.duo*")
        .check("gateway_auth_policy")
    )
    (
        archrule("duo_independent_of_totp")
        .match("gateway_auth_policy.duo*")
        .should_not_import("gateway_auth_policy.totp*")
        .check("gateway_auth_policy")
    )


def test_gate_does_not_read_configuration() -> None:
    """The gate receives a ready policy; it never parses configuration."""
    (
        archrule("gate_without_configuration")
        .match("gateway_auth_policy.mfa*")
        .should_not_import("gateway_auth_policy.environment*")
        .should_not_import("gateway_auth_policy.properties*")
        .check("gateway_auth_policy")
    )

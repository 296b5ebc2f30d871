"""Configuration and authentication-policy exceptions.

All errors inherit from GatewayAuthError so hosts can catch everything the
package raises with a single clause.
"""

from __future__ import annotations

# ═══════════════════════════════════════════════════════════════
# BASE ERROR
# ═══════════════════════════════════════════════════════════════


class GatewayAuthError(Exception):
    """Root exception for the gateway-auth-policy package."""


# ═══════════════════════════════════════════════════════════════
# CONFIGURATION ERRORS
# ═══════════════════════════════════════════════════════════════


class ConfigurationError(GatewayAuthError):
    """Base class for errors in operator-supplied configuration.

    Configuration errors are deterministic. They are never retried or
    replaced by a default; the operator has to fix the value.
    """


class PropertyValueError(ConfigurationError):
    """Raised when a configured value cannot be parsed or is out of range.

    Attributes:
        property_name: Declared name of the property (e.g. ``totp-digits``).
        value: The offending raw text.
        cause: Human-readable reason, e.g. ``"must be an integer"``.
    """

    def __init__(self, property_name: str, value: str | None, cause: str) -> None:
        self.property_name = property_name
        self.value = value
        self.cause = cause
        super().__init__(f'Property "{property_name}": {cause} (got {value!r}).')


class NetworkRangeError(PropertyValueError):
    """Raised when an IP address or CIDR subnet entry is malformed."""


class MissingPropertyError(ConfigurationError):
    """Raised when a required property has no value at all."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(f'Property "{property_name}" is required.')


# ═══════════════════════════════════════════════════════════════
# MFA ERRORS
# ═══════════════════════════════════════════════════════════════


class MfaError(GatewayAuthError):
    """Base class for second-factor errors."""


class MfaRequiredError(MfaError):
    """Raised by a verifier when the user still has to present a second factor.

    Attributes:
        available_methods: MFA methods the user may complete.
    """

    def __init__(
        self,
        message: str = "Second authentication factor required",
        available_methods: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.available_methods = available_methods or ["totp"]


class MfaInvalidError(MfaError):
    """Raised by a verifier when the presented second factor is wrong."""


class ClientAddressError(MfaError):
    """Raised when the requester address is missing or not a single IP."""


__all__: list[str] = [
    # Base
    "GatewayAuthError",
    # Configuration
    "ConfigurationError",
    "PropertyValueError",
    "NetworkRangeError",
    "MissingPropertyError",
    # MFA
    "MfaError",
    "MfaRequiredError",
    "MfaInvalidError",
    "ClientAddressError",
]

"""Gateway Auth Policy Package

Network-scoped second-factor policy for a remote-access gateway, plus the
typed configuration properties authentication modules are configured with.

Usage:
    ```python
    from gateway_auth_policy import (
        Environment,
        MappingConfigurationSource,
        TotpConfigurationService,
    )

    environment = Environment(
        MappingConfigurationSource({"totp-bypass-hosts": "10.0.0.0/8"})
    )
    config = TotpConfigurationService(environment)

    policy = config.get_network_policy()
    policy.is_second_factor_required("10.1.2.3")  # False
    policy.is_second_factor_required("192.168.1.1")  # True
    ```

Submodules:
    - `properties`: property declarations and scalar kinds
    - `environment`: configuration sources and defaulting
    - `policy`: bypass/enforce host list evaluation
    - `totp`, `duo`: configuration of the MFA extensions
    - `forms`: field descriptors for the web front end
    - `mfa`: verifier port and the second-factor gate
"""

from __future__ import annotations

# Configuration
from .duo import DuoConfigurationService
from .environment import (
    ChainedConfigurationSource,
    Environment,
    EnvironmentVariableSource,
    IConfigurationSource,
    MappingConfigurationSource,
)

# Exceptions
from .exceptions import (
    ClientAddressError,
    ConfigurationError,
    GatewayAuthError,
    MfaError,
    MfaInvalidError,
    MfaRequiredError,
    MissingPropertyError,
    NetworkRangeError,
    PropertyValueError,
)

# Forms
from .forms import Form, FormField, HostRestrictionField

# MFA
from .mfa import ISecondFactorVerifier, SecondFactorGate

# Network
from .network import address_matches, parse_address, parse_network_range

# Policy
from .policy import NetworkPolicy, second_factor_required

# Properties
from .properties import (
    BOOLEAN,
    INTEGER,
    LONG,
    NETWORK_RANGE,
    STRING,
    URI,
    Property,
    PropertyKind,
    enumerated,
)

# Request context
from .request_context import (
    RequestContext,
    get_client_ip,
    get_request_context,
    reset_request_context,
    set_request_context,
)
from .totp import TotpConfigurationService, TotpMode, TotpSettings

__all__: list[str] = [
    # Exceptions
    "GatewayAuthError",
    "ConfigurationError",
    "PropertyValueError",
    "NetworkRangeError",
    "MissingPropertyError",
    "MfaError",
    "MfaRequiredError",
    "MfaInvalidError",
    "ClientAddressError",
    # Properties
    "Property",
    "PropertyKind",
    "STRING",
    "INTEGER",
    "LONG",
    "BOOLEAN",
    "URI",
    "NETWORK_RANGE",
    "enumerated",
    # Network
    "parse_network_range",
    "parse_address",
    "address_matches",
    # Environment
    "IConfigurationSource",
    "MappingConfigurationSource",
    "EnvironmentVariableSource",
    "ChainedConfigurationSource",
    "Environment",
    # Policy
    "NetworkPolicy",
    "second_factor_required",
    # Configuration services
    "TotpConfigurationService",
    "TotpMode",
    "TotpSettings",
    "DuoConfigurationService",
    # Forms
    "FormField",
    "HostRestrictionField",
    "Form",
    # MFA
    "ISecondFactorVerifier",
    "SecondFactorGate",
    # Request context
    "RequestContext",
    "get_request_context",
    "set_request_context",
    "reset_request_context",
    "get_client_ip",
]

__version__ = "0.1.0"

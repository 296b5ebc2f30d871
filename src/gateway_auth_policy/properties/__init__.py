"""Typed configuration properties.

Declare a property once as a module-level constant, then parse raw strings
from any configuration source through it:

    ```python
    from gateway_auth_policy.properties import INTEGER, NETWORK_RANGE, Property

    TOTP_DIGITS = Property("totp-digits", INTEGER)
    BYPASS_HOSTS = Property("totp-bypass-hosts", NETWORK_RANGE)

    TOTP_DIGITS.parse_value("6")  # 6
    BYPASS_HOSTS.parse_value_collection("10.0.0.0/8, 192.168.1.5")
    ```
"""

from .base import DELIMITER_PATTERN, Property, split_collection
from .kinds import (
    BOOLEAN,
    INTEGER,
    LONG,
    NETWORK_RANGE,
    STRING,
    URI,
    PropertyKind,
    enumerated,
)

__all__: list[str] = [
    "Property",
    "PropertyKind",
    "DELIMITER_PATTERN",
    "split_collection",
    # Kinds
    "STRING",
    "INTEGER",
    "LONG",
    "BOOLEAN",
    "URI",
    "NETWORK_RANGE",
    "enumerated",
]

"""TOTP extension configuration."""

from .config import (
    TOTP_BYPASS_HOSTS,
    TOTP_DIGITS,
    TOTP_ENFORCE_HOSTS,
    TOTP_ISSUER,
    TOTP_MODE,
    TOTP_PERIOD,
    TotpConfigurationService,
    TotpMode,
    TotpSettings,
)

__all__: list[str] = [
    "TotpMode",
    "TotpSettings",
    "TotpConfigurationService",
    "TOTP_ISSUER",
    "TOTP_DIGITS",
    "TOTP_PERIOD",
    "TOTP_MODE",
    "TOTP_BYPASS_HOSTS",
    "TOTP_ENFORCE_HOSTS",
]

"""Configuration of the TOTP authentication extension.

Reads the TOTP tunables and host lists from an :class:`Environment`. How
codes are generated or checked is up to the verifier that consumes these
values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..exceptions import PropertyValueError
from ..policy import NetworkPolicy
from ..properties import INTEGER, NETWORK_RANGE, STRING, Property, enumerated

if TYPE_CHECKING:
    from ..environment import Environment
    from ..network import NetworkRange

logger = logging.getLogger(__name__)


class TotpMode(Enum):
    """Hash algorithm used to generate TOTP codes."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"


DEFAULT_ISSUER = "Apache Guacamole"
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_MODE = TotpMode.SHA1

MIN_DIGITS = 6
MAX_DIGITS = 8

# ═══════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════

#: Human-readable name of the entity issuing user accounts.
TOTP_ISSUER = Property("totp-issuer", STRING)

#: Number of digits in each generated code.
TOTP_DIGITS = Property("totp-digits", INTEGER)

#: How long each generated code remains valid, in seconds.
TOTP_PERIOD = Property("totp-period", INTEGER)

#: Hash algorithm: "sha1", "sha256" or "sha512".
TOTP_MODE = Property("totp-mode", enumerated(TotpMode))

#: Addresses and subnets whose users are never prompted for a code. If
#: unset, every user is prompted.
TOTP_BYPASS_HOSTS = Property("totp-bypass-hosts", NETWORK_RANGE)

#: Addresses and subnets whose users must enter a code. If set, users from
#: all other hosts are not prompted.
TOTP_ENFORCE_HOSTS = Property("totp-enforce-hosts", NETWORK_RANGE)


@dataclass(frozen=True)
class TotpSettings:
    """Snapshot of the TOTP configuration.

    Attributes:
        issuer: Issuer name shown in authenticator apps.
        digits: Code length, 6 to 8.
        period: Code validity in seconds.
        mode: Hash algorithm.
        policy: Bypass/enforce host lists.
    """

    issuer: str
    digits: int
    period: int
    mode: TotpMode
    policy: NetworkPolicy


class TotpConfigurationService:
    """Typed access to the TOTP extension's configuration.

    Every getter re-reads the environment; nothing is cached.

    Example:
        ```python
        config = TotpConfigurationService(Environment(source))
        if config.get_network_policy().is_second_factor_required(client_ip):
            await verifier.verify(username, client_ip)
        ```
    """

    def __init__(self, environment: Environment) -> None:
        self.environment = environment

    def _raw_text(self, prop: Property[int], parsed: int) -> str:
        raw = self.environment.get_raw_value(prop)
        return raw if raw is not None else str(parsed)

    def get_issuer(self) -> str:
        return self.environment.get_property(TOTP_ISSUER, DEFAULT_ISSUER)

    def get_digits(self) -> int:
        """Return the code length.

        Raises:
            PropertyValueError: If ``totp-digits`` is not an integer or lies
                outside 6..8.
        """
        digits = self.environment.get_property(TOTP_DIGITS, DEFAULT_DIGITS)
        if not MIN_DIGITS <= digits <= MAX_DIGITS:
            raise PropertyValueError(
                TOTP_DIGITS.name,
                self._raw_text(TOTP_DIGITS, digits),
                f"must be between {MIN_DIGITS} and {MAX_DIGITS} digits",
            )
        return digits

    def get_period(self) -> int:
        period = self.environment.get_property(TOTP_PERIOD, DEFAULT_PERIOD)
        if period <= 0:
            raise PropertyValueError(
                TOTP_PERIOD.name,
                self._raw_text(TOTP_PERIOD, period),
                "must be a positive number of seconds",
            )
        return period

    def get_mode(self) -> TotpMode:
        return self.environment.get_property(TOTP_MODE, DEFAULT_MODE)

    def get_bypass_hosts(self) -> list[NetworkRange]:
        return self.environment.get_property_collection(TOTP_BYPASS_HOSTS, [])

    def get_enforce_hosts(self) -> list[NetworkRange]:
        return self.environment.get_property_collection(TOTP_ENFORCE_HOSTS, [])

    def get_network_policy(self) -> NetworkPolicy:
        """Build the bypass/enforce policy, logging any configuration concern."""
        policy = NetworkPolicy.from_lists(
            bypass=self.get_bypass_hosts(),
            enforce=self.get_enforce_hosts(),
        )
        for warning in policy.warnings():
            logger.warning(
                "%s / %s: %s",
                TOTP_BYPASS_HOSTS.name,
                TOTP_ENFORCE_HOSTS.name,
                warning,
            )
        return policy

    def get_settings(self) -> TotpSettings:
        """Read and validate every TOTP property at once.

        Raises:
            PropertyValueError: For the first invalid property.
        """
        return TotpSettings(
            issuer=self.get_issuer(),
            digits=self.get_digits(),
            period=self.get_period(),
            mode=self.get_mode(),
            policy=self.get_network_policy(),
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

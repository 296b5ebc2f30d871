"""Configuration of the Duo authentication extension."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import PropertyValueError
from ..policy import NetworkPolicy
from ..properties import INTEGER, NETWORK_RANGE, STRING, URI, Property

if TYPE_CHECKING:
    from ..environment import Environment
    from ..network import NetworkRange

logger = logging.getLogger(__name__)

DEFAULT_AUTH_TIMEOUT = 5

#: Hostname of the Duo API endpoint assigned to the account.
DUO_API_HOSTNAME = Property("duo-api-hostname", STRING)

#: Client ID of the Duo Web SDK application.
DUO_CLIENT_ID = Property("duo-client-id", STRING)

#: Client secret of the Duo Web SDK application.
DUO_CLIENT_SECRET = Property("duo-client-secret", STRING)

#: URI Duo redirects back to after the user has been verified.
DUO_REDIRECT_URI = Property("duo-redirect-uri", URI)

#: Minutes a user may take to complete Duo verification.
DUO_AUTH_TIMEOUT = Property("duo-auth-timeout", INTEGER)

#: Addresses and subnets whose users skip Duo verification.
DUO_BYPASS_HOSTS = Property("duo-bypass-hosts", NETWORK_RANGE)

#: Addresses and subnets whose users must complete Duo verification; users
#: from all other hosts skip it.
DUO_ENFORCE_HOSTS = Property("duo-enforce-hosts", NETWORK_RANGE)


class DuoConfigurationService:
    """Typed access to the Duo extension's configuration.

    Credentials and the redirect URI are required; reading them raises
    MissingPropertyError when they are not configured.
    """

    def __init__(self, environment: Environment) -> None:
        self.environment = environment

    def _raw_text(self, prop: Property[int], parsed: int) -> str:
        raw = self.environment.get_raw_value(prop)
        return raw if raw is not None else str(parsed)

    def get_api_hostname(self) -> str:
        return self.environment.get_required_property(DUO_API_HOSTNAME)

    def get_client_id(self) -> str:
        return self.environment.get_required_property(DUO_CLIENT_ID)

    def get_client_secret(self) -> str:
        return self.environment.get_required_property(DUO_CLIENT_SECRET)

    def get_redirect_uri(self) -> str:
        return self.environment.get_required_property(DUO_REDIRECT_URI)

    def get_auth_timeout(self) -> int:
        timeout = self.environment.get_property(DUO_AUTH_TIMEOUT, DEFAULT_AUTH_TIMEOUT)
        if timeout <= 0:
            raise PropertyValueError(
                DUO_AUTH_TIMEOUT.name,
                self._raw_text(DUO_AUTH_TIMEOUT, timeout),
                "must be a positive number of minutes",
            )
        return timeout

    def get_bypass_hosts(self) -> list[NetworkRange]:
        return self.environment.get_property_collection(DUO_BYPASS_HOSTS, [])

    def get_enforce_hosts(self) -> list[NetworkRange]:
        return self.environment.get_property_collection(DUO_ENFORCE_HOSTS, [])

    def get_network_policy(self) -> NetworkPolicy:
        policy = NetworkPolicy.from_lists(
            bypass=self.get_bypass_hosts(),
            enforce=self.get_enforce_hosts(),
        )
        for warning in policy.warnings():
            logger.warning(
                "%s / %s: %s", DUO_BYPASS_HOSTS.name, DUO_ENFORCE_HOSTS.name, warning
            )
        return policy


__all__: list[str] = [
    "DuoConfigurationService",
    "DUO_API_HOSTNAME",
    "DUO_CLIENT_ID",
    "DUO_CLIENT_SECRET",
    "DUO_REDIRECT_URI",
    "DUO_AUTH_TIMEOUT",
    "DUO_BYPASS_HOSTS",
    "DUO_ENFORCE_HOSTS",
]

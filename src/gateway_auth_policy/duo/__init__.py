"""Duo extension configuration."""

from .config import (
    DUO_API_HOSTNAME,
    DUO_AUTH_TIMEOUT,
    DUO_BYPASS_HOSTS,
    DUO_CLIENT_ID,
    DUO_CLIENT_SECRET,
    DUO_ENFORCE_HOSTS,
    DUO_REDIRECT_URI,
    DuoConfigurationService,
)

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

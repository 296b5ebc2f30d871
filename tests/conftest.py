"""Shared fixtures for gateway-auth-policy tests."""

from __future__ import annotations

from typing import Callable

import pytest

from gateway_auth_policy import Environment, MappingConfigurationSource


@pytest.fixture
def make_environment() -> Callable[..., Environment]:
    """Factory building an Environment from keyword values.

    Underscores in keyword names become dashes, so ``totp_digits="8"``
    configures ``totp-digits``.
    """

    def _make(**values: str) -> Environment:
        return Environment(
            MappingConfigurationSource(
                {name.replace("_", "-"): value for name, value in values.items()}
            )
        )

    return _make


@pytest.fixture
def empty_environment() -> Environment:
    """Environment with nothing configured."""
    return Environment(MappingConfigurationSource())

"""Configuration sources and the Environment that reads properties from them.

The package never owns configuration. A host hands an
:class:`IConfigurationSource` to :class:`Environment`, which reads raw strings
on every access, parses them through a :class:`Property` and applies the
caller's default only when the property is absent.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Protocol, TypeVar, overload, runtime_checkable

from .exceptions import MissingPropertyError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .properties import Property

T = TypeVar("T")

logger = logging.getLogger(__name__)


@runtime_checkable
class IConfigurationSource(Protocol):
    """Protocol for raw configuration lookup.

    Implementations return the raw string stored under ``name`` or ``None``
    if nothing is configured. They must not parse or default values.
    """

    def get(self, name: str) -> str | None:
        """Return the raw value of ``name``, or None if absent."""
        ...


class MappingConfigurationSource(IConfigurationSource):
    """Configuration source backed by a plain mapping.

    Useful for fixtures and for hosts that load their own properties file.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)


class EnvironmentVariableSource(IConfigurationSource):
    """Configuration source backed by process environment variables.

    Property names are mapped to variable names by upper-casing them and
    replacing ``-`` and ``.`` with ``_``, so ``totp-issuer`` is read from
    ``TOTP_ISSUER`` (or ``<PREFIX>TOTP_ISSUER`` when a prefix is given).
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "",
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self.prefix = prefix

    def variable_name(self, name: str) -> str:
        """Map a property name to the environment variable holding it.

        Args:
            name: Declared property name, e.g. ``totp-issuer``.

        Returns:
            The prefixed, upper-cased variable name, e.g. ``TOTP_ISSUER``.
        """
        return self.prefix + name.upper().replace("-", "_").replace(".", "_")

    def get(self, name: str) -> str | None:
        return self._environ.get(self.variable_name(name))


class ChainedConfigurationSource(IConfigurationSource):
    """Consult several sources in order; the first non-None value wins.

    Example:
        ```python
        source = ChainedConfigurationSource(
            EnvironmentVariableSource(),  # overrides
            MappingConfigurationSource(properties_from_file),
        )
        ```
    """

    def __init__(self, *sources: IConfigurationSource) -> None:
        self.sources = sources

    def get(self, name: str) -> str | None:
        for source in self.sources:
            value = source.get(name)
            if value is not None:
                return value
        return None


class Environment:
    """Reads typed property values from a configuration source.

    Values are not cached; every call re-reads the source. A default only
    replaces an absent value, never an invalid one.
    """

    def __init__(self, source: IConfigurationSource) -> None:
        self.source = source

    def get_raw_value(self, prop: Property[T]) -> str | None:
        """Return the unparsed text configured for ``prop``, or None."""
        return self.source.get(prop.name)

    @overload
    def get_property(self, prop: Property[T]) -> T | None: ...

    @overload
    def get_property(self, prop: Property[T], default: T) -> T: ...

    def get_property(self, prop: Property[T], default: T | None = None) -> T | None:
        """Return the parsed value of ``prop``, or ``default`` if absent.

        Raises:
            PropertyValueError: If the configured value is invalid.
        """
        value = prop.parse_value(self.source.get(prop.name))
        if value is None:
            return default
        return value

    @overload
    def get_property_collection(self, prop: Property[T]) -> list[T] | None: ...

    @overload
    def get_property_collection(
        self, prop: Property[T], default: list[T]
    ) -> list[T]: ...

    def get_property_collection(
        self, prop: Property[T], default: list[T] | None = None
    ) -> list[T] | None:
        """Return the parsed list value of ``prop``, or ``default`` if absent.

        A configured value with no entries counts as absent.

        Raises:
            PropertyValueError: If any entry is invalid.
        """
        values = prop.parse_value_collection(self.source.get(prop.name))
        if values is None:
            return default
        return values

    def get_required_property(self, prop: Property[T]) -> T:
        """Return the parsed value of ``prop``, which must be configured.

        Raises:
            MissingPropertyError: If the property is not set.
            PropertyValueError: If the configured value is invalid.
        """
        value = prop.parse_value(self.source.get(prop.name))
        if value is None:
            logger.error("Required property %s is not configured", prop.name)
            raise MissingPropertyError(prop.name)
        return value


__all__: list[str] = [
    "IConfigurationSource",
    "MappingConfigurationSource",
    "EnvironmentVariableSource",
    "ChainedConfigurationSource",
    "Environment",
]

"""Scalar property kinds.

Each kind is a tagged value carrying the function that turns one raw string
into a typed value. Converters raise ``ValueError`` with a human-readable
cause; :class:`~gateway_auth_policy.properties.base.Property` attaches the
property name and re-raises the kind's error type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar
from urllib.parse import urlsplit

from ..exceptions import NetworkRangeError, PropertyValueError
from ..network import NetworkRange, parse_network_range

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_DECIMAL = re.compile(r"[+-]?[0-9]+")

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


@dataclass(frozen=True)
class PropertyKind(Generic[T]):
    """A scalar value kind.

    Attributes:
        label: Short name used in ``repr`` and docs (``"integer"``).
        convert: Parses one raw string, raising ``ValueError(cause)``.
        error_type: Exception raised when ``convert`` fails.
    """

    label: str
    convert: Callable[[str], T]
    error_type: type[PropertyValueError] = PropertyValueError


def _bounded_int(cause: str, low: int, high: int) -> Callable[[str], int]:
    def convert(value: str) -> int:
        if not _DECIMAL.fullmatch(value):
            raise ValueError(cause)
        try:
            number = int(value)
        except ValueError:
            # Digit strings beyond the interpreter's conversion limit
            raise ValueError(cause) from None
        if not low <= number <= high:
            raise ValueError(cause)
        return number

    return convert


def _convert_string(value: str) -> str:
    return value


def _convert_boolean(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError('must be "true" or "false"')


def _convert_uri(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc:
        raise ValueError("must be an absolute URI")
    return value


def _convert_network_range(value: str) -> NetworkRange:
    try:
        return parse_network_range(value)
    except ValueError as exc:
        raise ValueError("invalid network address") from exc


STRING: PropertyKind[str] = PropertyKind("string", _convert_string)
INTEGER: PropertyKind[int] = PropertyKind(
    "integer", _bounded_int("must be an integer", INT32_MIN, INT32_MAX)
)
LONG: PropertyKind[int] = PropertyKind(
    "long", _bounded_int("must be a long", INT64_MIN, INT64_MAX)
)
BOOLEAN: PropertyKind[bool] = PropertyKind("boolean", _convert_boolean)
URI: PropertyKind[str] = PropertyKind("uri", _convert_uri)
NETWORK_RANGE: PropertyKind[NetworkRange] = PropertyKind(
    "network-range", _convert_network_range, NetworkRangeError
)


def enumerated(enum_type: type[E]) -> PropertyKind[E]:
    """Build a kind matching raw text case-sensitively against member values.

    Example:
        ```python
        class Mode(Enum):
            SHA1 = "sha1"
            SHA256 = "sha256"

        TOTP_MODE = Property("totp-mode", enumerated(Mode))
        ```
    """
    symbols = {str(member.value): member for member in enum_type}
    cause = "must be one of " + ", ".join(f'"{s}"' for s in symbols)

    def convert(value: str) -> E:
        try:
            return symbols[value]
        except KeyError:
            raise ValueError(cause) from None

    return PropertyKind(f"enum[{enum_type.__name__}]", convert)


__all__: list[str] = [
    "PropertyKind",
    "STRING",
    "INTEGER",
    "LONG",
    "BOOLEAN",
    "URI",
    "NETWORK_RANGE",
    "enumerated",
]

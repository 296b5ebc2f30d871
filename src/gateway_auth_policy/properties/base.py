"""Property declarations: named, typed configuration entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from .kinds import PropertyKind

T = TypeVar("T")

#: Separator between entries of a collection value: a comma, optionally
#: surrounded by whitespace.
DELIMITER_PATTERN = re.compile(r"\s*,\s*")


def split_collection(value: str) -> list[str]:
    """Split a delimited collection value into its raw entries.

    Surrounding whitespace is stripped and trailing empty entries are
    dropped, so ``""`` and ``" , "`` both yield ``[]``. Empty entries in the
    middle of the list are kept and fail later as normal values would.
    """
    entries = DELIMITER_PATTERN.split(value.strip())
    while entries and not entries[-1]:
        entries.pop()
    return entries


@dataclass(frozen=True)
class Property(Generic[T]):
    """A named configuration entry of a given kind.

    Declarations hold no state; they only identify a value in some
    configuration source and know how to parse it.

    Example:
        ```python
        TOTP_DIGITS = Property("totp-digits", INTEGER)

        TOTP_DIGITS.parse_value("8")  # 8
        TOTP_DIGITS.parse_value(None)  # None
        TOTP_DIGITS.parse_value("eight")  # raises PropertyValueError
        ```
    """

    name: str
    kind: PropertyKind[T]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Property name must be a non-empty string")

    def parse_value(self, value: str | None) -> T | None:
        """Parse a single raw value.

        Args:
            value: Raw text from the configuration source, or ``None`` if
                the property is not set.

        Returns:
            The typed value, or ``None`` if ``value`` is ``None``. Defaults
            are never substituted here.

        Raises:
            PropertyValueError: If the text violates the kind's rule. The
                kind decides the exact subclass (``NetworkRangeError`` for
                network ranges).
        """
        if value is None:
            return None
        return self._convert(value)

    def parse_value_collection(self, value: str | None) -> list[T] | None:
        """Parse a comma-delimited list of raw values.

        Entries keep their order and duplicates are kept. A value with no
        entries is reported as ``None``, the same as an unset property.

        Raises:
            PropertyValueError: For the first entry that fails to parse.
                No partial result is returned.
        """
        if value is None:
            return None

        entries = split_collection(value)
        if not entries:
            return None

        return [self._convert(entry) for entry in entries]

    def _convert(self, value: str) -> T:
        try:
            return self.kind.convert(value)
        except ValueError as exc:
            raise self.kind.error_type(self.name, value, str(exc)) from exc

    def __repr__(self) -> str:
        return f"Property({self.name!r}, {self.kind.label})"


__all__: list[str] = ["DELIMITER_PATTERN", "Property", "split_collection"]

"""
Unit tables for size formatting.

Provides the numeric bases used to scale byte counts, the built-in suffix
tables for each base, and validation of caller-supplied tables.

Example Usage:
    >>> default_units(Base.BINARY)[:3]
    ('B', 'KiB', 'MiB')

    >>> default_units(Base.DECIMAL)[-1]
    'QB'

    >>> Base.parse("decimal")
    <Base.DECIMAL: 1000>
"""

from collections.abc import Mapping
from enum import IntEnum
from typing import Any

from .exceptions import ConfigurationError

BINARY_UNITS_KEY = "binary_units"
DECIMAL_UNITS_KEY = "decimal_units"

# IEC suffixes (1024-based)
_DEFAULT_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

# SI suffixes (1000-based), including the 2022 ronna/quetta prefixes
_DEFAULT_DECIMAL_UNITS = (
    "B",
    "KB",
    "MB",
    "GB",
    "TB",
    "PB",
    "EB",
    "ZB",
    "YB",
    "RB",
    "QB",
)


class Base(IntEnum):
    """Numeric radix used to scale a byte count."""

    BINARY = 1024
    DECIMAL = 1000

    @classmethod
    def parse(cls, value: Any) -> "Base":
        """
        Convert a base given as enum, integer or name into a Base.

        Args:
            value: Base member, 1024/1000, or 'binary'/'decimal' (any case)

        Returns:
            Matching Base member

        Raises:
            ConfigurationError: If the value names no known base
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ConfigurationError(
            "Unknown base, expected 'binary' (1024) or 'decimal' (1000)", base=value
        )

    @property
    def units_key(self) -> str:
        """Key of this base's table in a custom units mapping."""
        return BINARY_UNITS_KEY if self is Base.BINARY else DECIMAL_UNITS_KEY


def default_units(base: int) -> tuple[str, ...]:
    """
    Return the built-in suffix table for a base.

    Anything other than the binary base gets the decimal table.
    """
    if base == Base.BINARY:
        return _DEFAULT_BINARY_UNITS
    return _DEFAULT_DECIMAL_UNITS


def default_unit_tables() -> dict[str, tuple[str, ...]]:
    """Return both built-in tables in the custom units shape."""
    return {
        BINARY_UNITS_KEY: _DEFAULT_BINARY_UNITS,
        DECIMAL_UNITS_KEY: _DEFAULT_DECIMAL_UNITS,
    }


def _validate_table(units: Mapping[str, Any], key: str) -> None:
    table = units.get(key)
    if not isinstance(table, (list, tuple)) or not table:
        raise ConfigurationError(
            f"Unit tables must contain a non-empty '{key}' sequence", units=units
        )
    for suffix in table:
        if not isinstance(suffix, str):
            raise ConfigurationError(
                f"Unit suffixes in '{key}' must be strings", units=units
            )


def validate_units(units: Any) -> None:
    """
    Validate the structure of caller-supplied unit tables.

    Only the shape is checked: the tables are not required to cover every
    magnitude a byte count may reach.

    Args:
        units: Mapping expected to hold 'binary_units' and 'decimal_units'

    Raises:
        ConfigurationError: If either table is absent, not a list/tuple, empty,
            or holds non-string suffixes
    """
    if not isinstance(units, Mapping):
        raise ConfigurationError(
            f"Unit tables must be a mapping with '{BINARY_UNITS_KEY}' "
            f"and '{DECIMAL_UNITS_KEY}' keys",
            units=units,
        )
    _validate_table(units, BINARY_UNITS_KEY)
    _validate_table(units, DECIMAL_UNITS_KEY)


# Public API
__all__ = [
    "Base",
    "BINARY_UNITS_KEY",
    "DECIMAL_UNITS_KEY",
    "default_units",
    "default_unit_tables",
    "validate_units",
]

"""
Human-readable file size formatting.

FileSizeHandler pulls a byte count from a size source, scales it to the
largest fitting unit of the selected base, and formats the number according
to a locale.

Example Usage:
    >>> handler = FileSizeHandler.create().with_bytes(1_500_000).with_base_decimal()
    >>> handler.formatted_size()
    '1.50 MB'

    >>> str(FileSizeHandler.create("de_DE").with_bytes(1_234_567_890).with_base(1000))
    '1,23 GB'

    >>> handler = FileSizeHandler.create().with_local_file("video.mp4")
    >>> handler.formatted_size(precision=1)
    '1.4 GiB'
"""

import logging
import os
from collections.abc import Mapping, Sequence
from decimal import Decimal, localcontext
from typing import Any

from .exceptions import ConfigurationError
from .localization import format_decimal, validate_locale
from .sources import (
    LocalFileSource,
    NullSource,
    SizeSource,
    SourceAdapter,
    StaticSource,
    SupportsSizeInBytes,
)
from .units import Base, default_unit_tables, validate_units

lg = logging.getLogger(__name__)

DEFAULT_PRECISION = 2


def magnitude_index(num_bytes: int, base: int) -> int:
    """
    Number of times num_bytes can be divided by base while staying >= 1.

    Computed with integer arithmetic; zero bytes has magnitude 0.
    """
    index = 0
    threshold = base
    while num_bytes >= threshold:
        index += 1
        threshold *= base
    return index


class FileSizeHandler:
    """
    Formats the byte count of a size source as a human-readable string.

    Instances are built with create() or from_config(), configured with the
    chainable with_* methods, and queried with formatted_size() or str().
    The last formatted string is cached; any with_* call clears it.

    Note:
        Not thread-safe. Use one instance per target, or serialize
        configure-then-format sequences on a shared instance.
    """

    def __init__(
        self,
        locale: str,
        units: Mapping[str, Sequence[str]],
        precision: int = DEFAULT_PRECISION,
    ) -> None:
        """
        Initialize from already validated settings; use create() instead.

        Args:
            locale: Validated locale tag
            units: Validated unit tables
            precision: Default number of fraction digits
        """
        self._base = Base.BINARY
        self._locale = locale
        self._units = {key: tuple(table) for key, table in units.items()}
        self._precision = precision
        self._source: SizeSource = NullSource()
        self._cache: str | None = None

    @classmethod
    def create(
        cls,
        locale: str | None = "en_US",
        units: Mapping[str, Sequence[str]] | None = None,
    ) -> "FileSizeHandler":
        """
        Create a formatter with the given locale and unit tables.

        Args:
            locale: Locale tag of the form 'en_US'; None means 'en_US'
            units: Mapping with non-empty 'binary_units' and 'decimal_units'
                sequences; empty or None means the built-in tables

        Returns:
            A formatter in binary base with no source attached

        Raises:
            LocaleFormatError: If the locale tag is malformed
            ConfigurationError: If the unit tables are malformed
        """
        locale = validate_locale(locale)
        if not units:
            units = default_unit_tables()
        else:
            validate_units(units)
        return cls(locale, units)

    @classmethod
    def from_config(cls, fname: str, section: str = "sizehandler") -> "FileSizeHandler":
        """
        Create a formatter from a YAML configuration file.

        Args:
            fname: Path to the YAML file
            section: Top-level key holding the formatter settings

        Returns:
            Configured formatter with no source attached

        Raises:
            NotFoundError: If the file does not exist
            ConfigurationError: If the file or its settings are invalid
            LocaleFormatError: If the configured locale is malformed
        """
        from .config import load_config

        settings = load_config(fname, section=section)
        handler = cls.create(settings.get("locale", "en_US"), settings.get("units"))
        if "base" in settings:
            handler.with_base(settings["base"])
        if "precision" in settings:
            handler._precision = settings["precision"]
        return handler

    def __str__(self) -> str:
        """Return the cached formatted size, computing it if needed."""
        if self._cache is not None:
            return self._cache
        return self.formatted_size()

    def __repr__(self) -> str:
        return (
            f"FileSizeHandler(base={self._base.name.lower()}, "
            f"locale={self._locale!r}, source={self._source!r})"
        )

    @property
    def base(self) -> Base:
        """Current scaling base."""
        return self._base

    @property
    def locale(self) -> str:
        """Locale tag used for number formatting."""
        return self._locale

    @property
    def units(self) -> dict[str, tuple[str, ...]]:
        """Unit tables keyed by 'binary_units' and 'decimal_units'."""
        return dict(self._units)

    @property
    def precision(self) -> int:
        """Default number of fraction digits."""
        return self._precision

    @property
    def source(self) -> SizeSource:
        """Currently attached size source."""
        return self._source

    def _invalidate(self) -> None:
        self._cache = None

    def with_base(self, base: Any) -> "FileSizeHandler":
        """
        Set the scaling base.

        Args:
            base: Base member, 1024/1000, or 'binary'/'decimal'

        Raises:
            ConfigurationError: If base names no known base
        """
        self._base = Base.parse(base)
        self._invalidate()
        lg.debug("base set", extra={"base": int(self._base)})
        return self

    def with_base_binary(self) -> "FileSizeHandler":
        """Use 1024-based units (KiB, MiB, ...)."""
        return self.with_base(Base.BINARY)

    def with_base_decimal(self) -> "FileSizeHandler":
        """Use 1000-based units (KB, MB, ...)."""
        return self.with_base(Base.DECIMAL)

    def _install(self, source: SizeSource) -> "FileSizeHandler":
        self._source = source
        self._invalidate()
        lg.debug("size source attached", extra={"source": repr(source)})
        return self

    def with_source(self, source: SupportsSizeInBytes) -> "FileSizeHandler":
        """
        Attach any object exposing size_in_bytes(), replacing the current source.

        Raises:
            ConfigurationError: If source has no callable size_in_bytes
        """
        return self._install(SourceAdapter(source))

    def with_local_file(self, path: str | os.PathLike[str]) -> "FileSizeHandler":
        """
        Attach a local file, replacing the current source.

        Raises:
            NotFoundError: If the path does not exist
        """
        return self._install(LocalFileSource(path))

    def with_bytes(self, num_bytes: int) -> "FileSizeHandler":
        """
        Attach a fixed byte count, replacing the current source.

        Raises:
            InvalidSizeError: If num_bytes is negative or not an int
        """
        return self._install(StaticSource(num_bytes))

    def size_in_bytes(self) -> int:
        """
        Get the byte count from the current source.

        Raises:
            NoSourceError: If no source has been attached
        """
        return self._source.size_in_bytes()

    def _current_units(self) -> tuple[str, ...]:
        units = self._units.get(self._base.units_key, ())
        if not units:
            raise ConfigurationError(
                "No units configured for base", base=int(self._base)
            )
        return units

    def formatted_size(self, precision: int | None = None) -> str:
        """
        Format the source's byte count with the largest fitting unit.

        A byte count beyond the largest configured unit is expressed in that
        unit, e.g. '5,000.00 KB' for 5,000,000 bytes with units ['B', 'KB'].
        Rounding never promotes to the next unit: 1,048,575 bytes formats as
        '1,024.00 KiB', not '1.00 MiB'.

        Args:
            precision: Number of fraction digits (default: the formatter's
                precision, 2 unless configured otherwise)

        Returns:
            Formatted size such as '1.43 MiB'

        Raises:
            NoSourceError: If no source has been attached
            ConfigurationError: If precision is negative
            OSError: If a local file can no longer be stat-ed
        """
        if precision is None:
            precision = self._precision

        num_bytes = self.size_in_bytes()
        units = self._current_units()

        index = magnitude_index(num_bytes, self._base)
        if index >= len(units):
            lg.debug(
                "size exceeds largest unit, clamping",
                extra={"size": num_bytes, "index": index, "unit": units[-1]},
            )
            index = len(units) - 1

        # 1 / 1024**k terminates within 10*k decimal places, so the quotient is exact
        with localcontext() as ctx:
            ctx.prec = len(str(num_bytes)) + 10 * index + 2
            scaled = Decimal(num_bytes) / Decimal(int(self._base) ** index)
        number = format_decimal(scaled, self._locale, precision)

        self._cache = f"{number} {units[index]}"
        return self._cache


def format_size(
    num_bytes: int,
    base: Any = Base.BINARY,
    precision: int = DEFAULT_PRECISION,
    locale: str | None = "en_US",
    units: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """
    Format a plain byte count.

    Args:
        num_bytes: Non-negative byte count
        base: Base member, 1024/1000, or 'binary'/'decimal'
        precision: Number of fraction digits
        locale: Locale tag of the form 'en_US'
        units: Optional custom unit tables

    Returns:
        Formatted size string

    Examples:
        >>> format_size(1536)
        '1.50 KiB'
        >>> format_size(1_500_000, base="decimal", locale="de_DE")
        '1,50 MB'
    """
    handler = FileSizeHandler.create(locale, units).with_base(base)
    handler.with_bytes(num_bytes)
    return handler.formatted_size(precision)


# Public API
__all__ = ["FileSizeHandler", "format_size", "magnitude_index", "DEFAULT_PRECISION"]

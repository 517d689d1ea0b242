from importlib.metadata import PackageNotFoundError, version

from .config import load_config
from .exceptions import (
    ConfigurationError,
    InvalidSizeError,
    LocaleFormatError,
    NoSourceError,
    NotFoundError,
    SizeError,
)
from .handler import FileSizeHandler, format_size
from .localization import DEFAULT_LOCALE, format_decimal, validate_locale
from .sources import (
    LocalFileSource,
    NullSource,
    SizeSource,
    SourceAdapter,
    StaticSource,
    SupportsSizeInBytes,
)
from .units import Base, default_unit_tables, default_units, validate_units

# Version is read from package metadata
try:
    __version__ = version("sizehandler")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Formatter
    "FileSizeHandler",
    "format_size",
    # Units
    "Base",
    "default_units",
    "default_unit_tables",
    "validate_units",
    # Sources
    "SizeSource",
    "SupportsSizeInBytes",
    "NullSource",
    "LocalFileSource",
    "StaticSource",
    "SourceAdapter",
    # Locale
    "DEFAULT_LOCALE",
    "validate_locale",
    "format_decimal",
    # Config
    "load_config",
    # Exceptions
    "SizeError",
    "NoSourceError",
    "NotFoundError",
    "LocaleFormatError",
    "ConfigurationError",
    "InvalidSizeError",
]

"""
YAML configuration for size formatters.

Settings live under a single top-level section:

    sizehandler:
      locale: de_DE
      base: decimal        # binary | decimal | 1024 | 1000
      precision: 1
      units:
        binary_units: [B, KiB, MiB]
        decimal_units: [B, kB, MB]

Every key is optional. Values are checked here; locale and unit tables are
validated again by FileSizeHandler.create().
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError, NotFoundError
from .units import Base, validate_units

lg = logging.getLogger(__name__)

# Maximum config file size (1MB); formatter settings are a handful of keys
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULT_SECTION = "sizehandler"

_KNOWN_KEYS = frozenset({"locale", "base", "precision", "units"})


def _check_file_size(fname_path: Path) -> None:
    """Reject oversized configuration files before parsing them."""
    file_size = os.path.getsize(fname_path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigurationError(
            f"Configuration file exceeds maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(fname_path),
            size=file_size,
        )


def _read_yaml(fname_path: Path) -> Any:
    with open(fname_path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Malformed YAML: {e}", path=str(fname_path)
            ) from e


def _validate_settings(settings: dict[str, Any], fname_path: Path) -> None:
    unknown = sorted(set(settings) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(
            "Unknown configuration keys", path=str(fname_path), keys=unknown
        )

    if "base" in settings:
        settings["base"] = Base.parse(settings["base"])

    if "precision" in settings:
        precision = settings["precision"]
        if (
            not isinstance(precision, int)
            or isinstance(precision, bool)
            or precision < 0
        ):
            raise ConfigurationError(
                "Precision must be a non-negative integer", precision=precision
            )

    if settings.get("units"):
        validate_units(settings["units"])


def load_config(
    fname: str | os.PathLike[str], section: str = DEFAULT_SECTION
) -> dict[str, Any]:
    """
    Load formatter settings from a YAML file.

    Args:
        fname: Path to the YAML file
        section: Top-level key holding the settings

    Returns:
        Settings dictionary; empty if the section is absent. 'base' is
        returned as a Base member.

    Raises:
        NotFoundError: If the file does not exist
        ConfigurationError: If the file is too large, malformed, or holds
            invalid settings
    """
    fname_path = Path(fname).expanduser()
    if not fname_path.is_file():
        raise NotFoundError(fname_path)
    fname_path = fname_path.resolve()
    _check_file_size(fname_path)

    data = _read_yaml(fname_path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration document must be a mapping", path=str(fname_path)
        )

    settings = data.get(section)
    if settings is None:
        lg.debug("no formatter section in config", extra={"path": str(fname_path)})
        return {}
    if not isinstance(settings, dict):
        raise ConfigurationError(
            f"Configuration section '{section}' must be a mapping",
            path=str(fname_path),
        )

    settings = dict(settings)
    _validate_settings(settings, fname_path)
    lg.debug(
        "formatter config loaded",
        extra={"path": str(fname_path), "keys": sorted(settings)},
    )
    return settings


# Public API
__all__ = ["load_config", "MAX_CONFIG_SIZE_BYTES", "DEFAULT_SECTION"]

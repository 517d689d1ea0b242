"""
Exception hierarchy for sizehandler.

Every error raised by the library derives from SizeError, so callers can catch
all formatting failures with a single except clause. OS-level failures that
happen while stat-ing a file are not wrapped and propagate as OSError.
"""

from typing import Any


class SizeError(Exception):
    """
    Base exception for all sizehandler errors.

    Example:
        try:
            text = FileSizeHandler.create().with_local_file(path).formatted_size()
        except SizeError as e:
            lg.error(f"cannot format size: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Offending values kept for diagnostics (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class NoSourceError(SizeError):
    """Raised when a byte count is requested before any size source is attached."""

    def __init__(self) -> None:
        super().__init__("No size source has been set")


class NotFoundError(SizeError):
    """Raised when a local file does not exist at the time its source is created."""

    def __init__(self, path: Any) -> None:
        super().__init__("File not found", path=str(path))
        self.path = path


class LocaleFormatError(SizeError):
    """Raised when a locale tag does not match the 'en_US' shape."""

    def __init__(self, locale: Any) -> None:
        super().__init__(
            "Invalid locale format, expected two lowercase letters, "
            "an underscore and two uppercase letters (e.g. 'en_US')",
            locale=locale,
        )
        self.locale = locale


class ConfigurationError(SizeError):
    """
    Configuration-related errors.

    Examples:
        - Custom unit tables missing 'binary_units' or 'decimal_units'
        - Empty or non-sequence unit table
        - Unknown base name
        - Malformed YAML configuration file
    """

    pass


class InvalidSizeError(SizeError):
    """Raised when a size source reports a negative or non-integer byte count."""

    pass

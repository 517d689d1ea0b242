"""
Size sources.

A size source reports the byte count of some target resource. This module
defines the abstract interface and the shipped implementations:

- LocalFileSource: stats a file on the local filesystem
- NullSource: placeholder that always fails, used before a source is attached
- SourceAdapter: wraps any external object exposing size_in_bytes()
- StaticSource: a fixed, already known byte count

New kinds of sources (remote blobs, archive entries, ...) only need a
size_in_bytes() method; SourceAdapter normalizes them for the formatter.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from .exceptions import (
    ConfigurationError,
    InvalidSizeError,
    NoSourceError,
    NotFoundError,
)

lg = logging.getLogger(__name__)


@runtime_checkable
class SupportsSizeInBytes(Protocol):
    """Anything that can report a non-negative byte count."""

    def size_in_bytes(self) -> int: ...


def _check_byte_count(value: Any, source: Any) -> int:
    """
    Validate a byte count reported by a source.

    Raises:
        InvalidSizeError: If the value is not an int or is negative
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidSizeError(
            f"Byte count must be an integer, got {type(value).__name__}",
            source=type(source).__name__,
        )
    if value < 0:
        raise InvalidSizeError(
            "Byte count cannot be negative", size=value, source=type(source).__name__
        )
    return value


class SizeSource(ABC):
    """
    Abstract base class for byte count providers.

    Implementations raise on failure rather than returning a sentinel; the
    error type is implementation-defined (OSError for filesystem problems).
    """

    @abstractmethod
    def size_in_bytes(self) -> int:
        """
        Get the current size of the target in bytes.

        Returns:
            int: Non-negative byte count
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NullSource(SizeSource):
    """Placeholder source that signals no source has been attached."""

    def size_in_bytes(self) -> int:
        """
        Always fails.

        Raises:
            NoSourceError: Always
        """
        raise NoSourceError()


class LocalFileSource(SizeSource):
    """
    Size of a file on the local filesystem.

    Existence is checked once, at construction. The size is read on every
    size_in_bytes() call, so a file removed in between surfaces as OSError.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """
        Initialize the source for a local path.

        Args:
            path: Path to the file

        Raises:
            NotFoundError: If the path does not exist
        """
        if not os.path.exists(path):
            raise NotFoundError(path)
        self._path = os.fspath(path)

    @property
    def path(self) -> str:
        """Path of the file being measured."""
        return self._path

    def size_in_bytes(self) -> int:
        """
        Stat the file and return its current size.

        Raises:
            OSError: If the file can no longer be stat-ed
        """
        return os.path.getsize(self._path)

    def __repr__(self) -> str:
        return f"LocalFileSource({self._path!r})"


class StaticSource(SizeSource):
    """A byte count that is already known."""

    def __init__(self, num_bytes: int) -> None:
        self._num_bytes = _check_byte_count(num_bytes, self)

    def size_in_bytes(self) -> int:
        return self._num_bytes

    def __repr__(self) -> str:
        return f"StaticSource({self._num_bytes})"


class SourceAdapter(SizeSource):
    """
    Normalizes an externally supplied size provider.

    Errors raised by the wrapped object propagate unchanged; the byte count it
    returns is checked to be a non-negative integer.
    """

    def __init__(self, source: SupportsSizeInBytes) -> None:
        """
        Wrap a size provider.

        Args:
            source: Object with a callable size_in_bytes() method

        Raises:
            ConfigurationError: If source has no callable size_in_bytes
        """
        if not callable(getattr(source, "size_in_bytes", None)):
            raise ConfigurationError(
                "Size source must provide a callable size_in_bytes() method",
                source=type(source).__name__,
            )
        self._source = source

    @property
    def wrapped(self) -> SupportsSizeInBytes:
        """The adapted provider."""
        return self._source

    def size_in_bytes(self) -> int:
        value = self._source.size_in_bytes()
        lg.debug(
            "size reported by adapted source",
            extra={"source": type(self._source).__name__, "size": value},
        )
        return _check_byte_count(value, self._source)

    def __repr__(self) -> str:
        return f"SourceAdapter({self._source!r})"


# Public API
__all__ = [
    "SizeSource",
    "SupportsSizeInBytes",
    "NullSource",
    "LocalFileSource",
    "StaticSource",
    "SourceAdapter",
]

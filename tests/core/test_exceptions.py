"""
Tests for the sizehandler exception hierarchy.

Tests key exception features including:
- Base SizeError with context
- Specific exception classes and their messages
- Exception inheritance
"""

import pytest

from sizehandler.exceptions import (
    ConfigurationError,
    InvalidSizeError,
    LocaleFormatError,
    NoSourceError,
    NotFoundError,
    SizeError,
)

# =============================================================================
# Test SizeError Base Class
# =============================================================================


@pytest.mark.unit
class TestSizeError:
    """Test SizeError base class."""

    def test_message_only(self):
        """Test SizeError with simple message."""
        error = SizeError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}

    def test_with_context(self):
        """Test context is kept and rendered."""
        error = SizeError("Test error", path="/tmp/x", size=12)
        assert error.context == {"path": "/tmp/x", "size": 12}
        assert str(error) == "Test error (path='/tmp/x', size=12)"

    def test_can_be_raised(self):
        """Test SizeError can be raised and caught."""
        with pytest.raises(SizeError, match="boom"):
            raise SizeError("boom")


# =============================================================================
# Test Specific Errors
# =============================================================================


@pytest.mark.unit
class TestSpecificErrors:
    """Test the specific error kinds."""

    @pytest.mark.parametrize(
        "error",
        [
            NoSourceError(),
            NotFoundError("/no/such/file"),
            LocaleFormatError("english"),
            ConfigurationError("bad"),
            InvalidSizeError("bad"),
        ],
    )
    def test_inherits_from_size_error(self, error):
        """Test all errors can be caught as SizeError."""
        assert isinstance(error, SizeError)

    def test_no_source_message(self):
        """Test NoSourceError message."""
        assert str(NoSourceError()) == "No size source has been set"

    def test_not_found_carries_path(self):
        """Test NotFoundError keeps the offending path."""
        error = NotFoundError("/no/such/file")
        assert error.path == "/no/such/file"
        assert "/no/such/file" in str(error)
        assert error.context == {"path": "/no/such/file"}

    def test_locale_format_carries_locale(self):
        """Test LocaleFormatError keeps the offending locale."""
        error = LocaleFormatError("english")
        assert error.locale == "english"
        assert "locale='english'" in str(error)
        assert "en_US" in str(error)

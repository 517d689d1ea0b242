"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the sizehandler test suite.
"""

import logging
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use the filesystem)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="sizehandler-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_file(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Provide an empty temporary file in a temporary directory.

    Args:
        temp_dir: Temporary directory fixture

    Yields:
        Path: Temporary file path
    """
    temp_file_path = temp_dir / "test_file.bin"
    temp_file_path.touch()
    yield temp_file_path


@pytest.fixture
def sized_file(temp_dir: Path) -> Callable[[int], Path]:
    """
    Provide a factory creating files of an exact byte size.

    Returns:
        Callable taking a size in bytes and returning the file path
    """

    def _make(size: int, name: str = "sized.bin") -> Path:
        path = temp_dir / name
        with open(path, "wb") as f:
            f.truncate(size)
        return path

    return _make


@pytest.fixture
def write_config(temp_dir: Path) -> Callable[[str], Path]:
    """
    Provide a factory writing YAML config text to a file.

    Returns:
        Callable taking YAML text and returning the file path
    """

    def _write(text: str, name: str = "sizehandler.yaml") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def debug_logging(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture sizehandler debug records."""
    caplog.set_level(logging.DEBUG, logger="sizehandler")
    return caplog


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)

"""Packaging for sizehandler.

Human-readable, locale-aware file size formatting with pluggable size sources.
"""

from pathlib import Path

from setuptools import find_packages, setup

_HERE = Path(__file__).parent


def _long_description() -> str:
    """Read the README if present."""
    readme = _HERE / "README.md"
    return readme.read_text() if readme.is_file() else ""


setup(
    name="sizehandler",
    version="0.1.0",
    description="Human-readable, locale-aware file size formatting",
    long_description=_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["sizehandler", "sizehandler.*"]),
    python_requires=">=3.10",
    install_requires=[
        "Babel>=2.12",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

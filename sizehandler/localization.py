"""
Locale handling for size formatting.

Locale tags are validated against the 'en_US' shape and resolved against
CLDR data via Babel, which supplies the grouping and decimal separators.
"""

import logging
import re
from decimal import Decimal, localcontext
from functools import lru_cache
from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal as _babel_format_decimal

from .exceptions import ConfigurationError, LocaleFormatError

lg = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"

# Trusted, fixed pattern: two lowercase letters, underscore, two uppercase letters
LOCALE_PATTERN = re.compile(r"^[a-z]{2}_[A-Z]{2}$")

# Extra significant digits kept beyond integer and fraction digits when rounding
_PREC_HEADROOM = 10


def validate_locale(locale: Any) -> str:
    """
    Validate a locale tag.

    Args:
        locale: Locale tag such as 'de_DE', or None for the default

    Returns:
        The validated tag, or DEFAULT_LOCALE when locale is None

    Raises:
        LocaleFormatError: If the tag is not a string of the form 'ab_CD'
    """
    if locale is None:
        return DEFAULT_LOCALE
    if not isinstance(locale, str) or not LOCALE_PATTERN.fullmatch(locale):
        raise LocaleFormatError(locale)
    return locale


@lru_cache(maxsize=64)
def resolve_locale(locale: str) -> Locale:
    """
    Load CLDR data for a validated locale tag.

    Tags that are well-formed but unknown to CLDR fall back to DEFAULT_LOCALE.
    """
    try:
        return Locale.parse(locale)
    except (UnknownLocaleError, ValueError):
        lg.warning(
            "unknown locale, falling back to default",
            extra={"locale": locale, "default": DEFAULT_LOCALE},
        )
        return Locale.parse(DEFAULT_LOCALE)


def _decimal_pattern(fraction_digits: int) -> str:
    if fraction_digits == 0:
        return "#,##0"
    return "#,##0." + "0" * fraction_digits


def format_decimal(
    value: int | float | Decimal, locale: str, fraction_digits: int = 2
) -> str:
    """
    Format a number with locale-specific separators and fixed fraction digits.

    Args:
        value: Number to format
        locale: Validated locale tag
        fraction_digits: Exact number of digits after the decimal separator

    Returns:
        Formatted number, e.g. '1,234.56' for en_US or '1.234,56' for de_DE

    Raises:
        ConfigurationError: If fraction_digits is negative or not an int

    Examples:
        >>> format_decimal(1234.5, "en_US")
        '1,234.50'
        >>> format_decimal(1234.5, "de_DE", 1)
        '1.234,5'
    """
    if (
        not isinstance(fraction_digits, int)
        or isinstance(fraction_digits, bool)
        or fraction_digits < 0
    ):
        raise ConfigurationError(
            "Precision must be a non-negative integer", precision=fraction_digits
        )
    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    # Rounding happens in the active decimal context; it must hold every digit
    with localcontext() as ctx:
        ctx.prec = max(value.adjusted() + 1, 1) + fraction_digits + _PREC_HEADROOM
        return _babel_format_decimal(
            value,
            format=_decimal_pattern(fraction_digits),
            locale=resolve_locale(locale),
        )


# Public API
__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_PATTERN",
    "validate_locale",
    "resolve_locale",
    "format_decimal",
]

"""Locale-aware display formatting driven by explicit tables.

Output does not depend on the host's locale database, so the same value
renders identically on every machine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..config import settings
from ..exceptions import ConfigurationError
from ..services.rounding import to_fixed

NBSP = "\u00a0"


@dataclass(frozen=True)
class NumberSymbols:
    group: str
    decimal: str
    minus: str


LOCALE_SYMBOLS: Dict[str, NumberSymbols] = {
    "sv-SE": NumberSymbols(group=NBSP, decimal=",", minus="\u2212"),
    "en-US": NumberSymbols(group=",", decimal=".", minus="-"),
}

# (locale, currency) -> pattern around the formatted number
CURRENCY_PATTERNS: Dict[Tuple[str, str], str] = {
    ("sv-SE", "SEK"): "{number}" + NBSP + "kr",
    ("sv-SE", "USD"): "{number}" + NBSP + "US$",
    ("en-US", "USD"): "${number}",
    ("en-US", "SEK"): "SEK" + NBSP + "{number}",
}


def _symbols(locale: str) -> NumberSymbols:
    try:
        return LOCALE_SYMBOLS[locale]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported display locale: {locale}", {"locale": locale}
        ) from None


def _group_digits(integer_part: str, separator: str) -> str:
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return separator.join(groups)


def _format_magnitude(
    value: float,
    symbols: NumberSymbols,
    min_fraction_digits: int,
    max_fraction_digits: int,
) -> str:
    fixed = to_fixed(abs(value), max_fraction_digits)
    integer_part, _, fraction = fixed.partition(".")
    while len(fraction) > min_fraction_digits and fraction.endswith("0"):
        fraction = fraction[:-1]
    text = _group_digits(integer_part, symbols.group)
    if fraction:
        text += symbols.decimal + fraction
    return text


def format_number(
    value: float,
    locale: Optional[str] = None,
    max_fraction_digits: int = 3,
) -> str:
    """Format a plain number with the locale's grouping and decimal mark."""
    locale = locale or settings.display_locale
    symbols = _symbols(locale)
    text = _format_magnitude(value, symbols, 0, max_fraction_digits)
    return f"{symbols.minus}{text}" if value < 0 else text


def format_currency(
    value: float,
    locale: Optional[str] = None,
    currency: Optional[str] = None,
    fraction_digits: int = 2,
) -> str:
    """Format a currency amount, e.g. ``1 234 567 kr`` or ``$1,234.50``."""
    locale = locale or settings.display_locale
    currency = currency or settings.display_currency
    symbols = _symbols(locale)

    pattern = CURRENCY_PATTERNS.get((locale, currency))
    if pattern is None:
        raise ConfigurationError(
            f"Unsupported currency {currency} for locale {locale}",
            {"locale": locale, "currency": currency},
        )

    number = _format_magnitude(value, symbols, fraction_digits, fraction_digits)
    text = pattern.format(number=number)
    return f"{symbols.minus}{text}" if value < 0 else text


def format_currency_sek(value: float) -> str:
    """Whole kronor in Swedish notation."""
    return format_currency(value, locale="sv-SE", currency="SEK", fraction_digits=0)


def format_number_se(value: float) -> str:
    return format_number(value, locale="sv-SE")


def format_percentage(value: float) -> str:
    return f"{to_fixed(value, 1)}%"

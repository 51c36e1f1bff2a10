import pytest

from property_finance.exceptions import ConfigurationError
from property_finance.services.rounding import (
    plain_number,
    round_currency,
    round_percentage,
    to_fixed,
)
from property_finance.utils.formatting import (
    format_currency,
    format_currency_sek,
    format_number,
    format_number_se,
    format_percentage,
)

NBSP = "\u00a0"


def test_round_currency_rounds_halves_up():
    assert round_currency(0.125) == 0.13
    assert round_currency(-0.125) == -0.12
    assert round_currency(1798.6515) == 1798.65


def test_round_percentage_rounds_halves_up():
    assert round_percentage(0.25) == 0.3
    assert round_percentage(33.333) == 33.3


def test_to_fixed_uses_exact_binary_value():
    assert to_fixed(72.25, 1) == "72.3"
    assert to_fixed(70.0, 1) == "70.0"
    assert to_fixed(4.50001, 1) == "4.5"


def test_plain_number_drops_integral_fraction():
    assert plain_number(7.0) == "7"
    assert plain_number(6.5) == "6.5"


def test_format_currency_sek_whole_kronor():
    assert format_currency_sek(1_234_567) == f"1{NBSP}234{NBSP}567{NBSP}kr"
    assert format_currency_sek(999.5) == f"1{NBSP}000{NBSP}kr"


def test_format_currency_sek_negative():
    assert format_currency_sek(-2_500) == f"\u22122{NBSP}500{NBSP}kr"


def test_format_currency_usd():
    assert format_currency(1_234.5, locale="en-US", currency="USD") == "$1,234.50"
    assert format_currency(-50, locale="en-US", currency="USD") == "-$50.00"
    assert format_currency(999.999, locale="en-US", currency="USD") == "$1,000.00"


def test_format_currency_defaults_to_display_settings():
    assert format_currency(100) == f"100,00{NBSP}kr"


def test_format_number_se():
    assert format_number_se(1_000_000) == f"1{NBSP}000{NBSP}000"
    assert format_number_se(1_234.5) == f"1{NBSP}234,5"
    assert format_number(1_234.5678, locale="en-US") == "1,234.568"


def test_format_percentage():
    assert format_percentage(28.0) == "28.0%"
    assert format_percentage(36.66) == "36.7%"


def test_unknown_locale_raises():
    with pytest.raises(ConfigurationError):
        format_currency(100, locale="de-DE", currency="EUR")


def test_unsupported_currency_for_locale_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        format_currency(100, locale="en-US", currency="EUR")

    assert exc_info.value.details == {"locale": "en-US", "currency": "EUR"}

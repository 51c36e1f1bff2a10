import pytest

from property_finance.exceptions import InvalidInputError
from property_finance.services.mortgage_calculator import (
    StandardMortgageCalculator,
    calculate_mortgage_payment,
)
from property_finance.services.swedish_mortgage import SwedishMortgageCalculator
from tests.factories import build_mortgage_params, build_swedish_params


def test_thirty_year_loan_matches_amortization_table():
    result = calculate_mortgage_payment(build_mortgage_params())

    assert result.monthly_payment == pytest.approx(1798.65)
    assert result.total_payments == pytest.approx(1798.65 * 360)
    assert result.total_interest == pytest.approx(1798.65 * 360 - 300_000)


def test_totals_derive_from_rounded_payment():
    result = calculate_mortgage_payment(
        build_mortgage_params(principal=250_000, annual_interest_rate=0.055, loan_term_years=15)
    )

    assert result.total_payments == pytest.approx(result.monthly_payment * 180, abs=0.005)
    assert result.total_interest == pytest.approx(result.total_payments - 250_000, abs=0.01)


@pytest.mark.parametrize(
    "rate, years",
    [(0.06, 30), (0.0, 10), (0.12, 1), (0.035, 25)],
)
def test_zero_principal_returns_zero_result(rate, years):
    result = calculate_mortgage_payment(
        build_mortgage_params(principal=0, annual_interest_rate=rate, loan_term_years=years)
    )

    assert result.monthly_payment == 0
    assert result.total_payments == 0
    assert result.total_interest == 0


def test_zero_rate_is_simple_division():
    result = calculate_mortgage_payment(
        build_mortgage_params(principal=120_000, annual_interest_rate=0, loan_term_years=10)
    )

    assert result.monthly_payment == 1_000
    assert result.monthly_payment * 120 == result.total_payments
    assert result.total_payments == 120_000
    assert result.total_interest == 0


def test_zero_rate_total_is_principal_not_rounded_payment():
    result = calculate_mortgage_payment(
        build_mortgage_params(principal=100_000, annual_interest_rate=0, loan_term_years=30)
    )

    assert result.monthly_payment == pytest.approx(277.78)
    assert result.total_payments == 100_000


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"principal": -1}, "principal"),
        ({"annual_interest_rate": -0.01}, "annual_interest_rate"),
        ({"loan_term_years": 0}, "loan_term_years"),
        ({"loan_term_years": -5}, "loan_term_years"),
        ({"principal": float("nan")}, "principal"),
        ({"annual_interest_rate": float("inf")}, "annual_interest_rate"),
    ],
)
def test_invalid_inputs_raise(overrides, field):
    with pytest.raises(InvalidInputError) as exc_info:
        calculate_mortgage_payment(build_mortgage_params(**overrides))

    assert field in exc_info.value.details


def test_calculators_share_calculate_capability():
    calculators = [
        (StandardMortgageCalculator(), build_mortgage_params()),
        (SwedishMortgageCalculator(), build_swedish_params()),
    ]

    for calculator, params in calculators:
        assert calculator.calculate(params).monthly_payment > 0

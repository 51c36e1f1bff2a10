import pytest
from pydantic import ValidationError

from property_finance.domain.schemas import MortgageParams, PropertyType
from tests.factories import build_swedish_params, build_swedish_total_cost_params


def test_property_type_is_closed():
    with pytest.raises(ValidationError):
        build_swedish_params(property_type="condo")


def test_property_type_accepts_values():
    assert build_swedish_params(property_type="brf").property_type == PropertyType.BRF


def test_params_are_immutable():
    params = MortgageParams(principal=100_000, annual_interest_rate=0.05, loan_term_years=20)

    with pytest.raises(ValidationError):
        params.principal = 200_000


def test_rejects_currency_strings():
    with pytest.raises(ValidationError):
        MortgageParams(principal="100,000", annual_interest_rate=0.05, loan_term_years=20)


def test_total_cost_params_flatten_into_mortgage_params():
    params = build_swedish_total_cost_params(
        brf_monthly=3_500, gross_annual_income=700_000, total_debt=2_000_000
    )

    mortgage = params.mortgage_params()

    assert mortgage.purchase_price == params.purchase_price
    assert mortgage.property_type == params.property_type
    assert mortgage.gross_annual_income == 700_000
    assert mortgage.total_debt == 2_000_000


def test_fractional_loan_term_is_rejected():
    with pytest.raises(ValidationError):
        MortgageParams(principal=100_000, annual_interest_rate=0.05, loan_term_years=7.5)

    description = MortgageParams.model_fields["loan_term_years"].description
    assert description.startswith("Whole years")

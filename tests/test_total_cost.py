import pytest

from property_finance.domain.schemas import PropertyType
from property_finance.exceptions import LoanCapExceededError
from property_finance.services.swedish_mortgage import calculate_swedish_mortgage_payment
from property_finance.services.total_cost import (
    calculate_swedish_total_cost,
    calculate_total_cost,
)
from tests.factories import (
    build_swedish_params,
    build_swedish_total_cost_params,
    build_total_cost_params,
)


def test_total_cost_without_extras_equals_mortgage_payment():
    result = calculate_total_cost(build_total_cost_params(maintenance_rate=0))

    assert result.total_monthly == pytest.approx(result.monthly_mortgage)
    assert result.monthly_mortgage == pytest.approx(1798.65)
    assert result.total_annual == pytest.approx(1798.65 * 12)


def test_total_cost_adds_recurring_costs():
    result = calculate_total_cost(
        build_total_cost_params(
            property_tax_annual=3_600,
            insurance_annual=1_200,
            hoa_monthly=250,
            pmi_monthly=125,
        )
    )

    assert result.monthly_property_tax == pytest.approx(300.0)
    assert result.monthly_insurance == pytest.approx(100.0)
    assert result.monthly_hoa == pytest.approx(250.0)
    assert result.monthly_pmi == pytest.approx(125.0)
    # 1% default maintenance on 400k
    assert result.monthly_maintenance == pytest.approx(333.33)
    assert result.total_monthly == pytest.approx(2906.98)
    assert result.total_annual == pytest.approx(2906.98 * 12, abs=0.01)


def test_total_cost_honours_explicit_maintenance_rate():
    result = calculate_total_cost(build_total_cost_params(maintenance_rate=0.02))

    assert result.monthly_maintenance == pytest.approx(666.67)


def test_swedish_villa_defaults_to_one_percent_maintenance():
    result = calculate_swedish_total_cost(build_swedish_total_cost_params())

    assert result.monthly_maintenance == pytest.approx(2_500.0)
    assert result.monthly_brf == 0


def test_swedish_brf_maintenance_included_in_fee():
    params = build_swedish_total_cost_params(
        property_type=PropertyType.BRF,
        brf_monthly=4_000,
        property_tax_annual=0,
    )
    result = calculate_swedish_total_cost(params)
    mortgage = calculate_swedish_mortgage_payment(
        build_swedish_params(property_type=PropertyType.BRF)
    )

    assert result.monthly_maintenance == 0
    assert result.monthly_brf == pytest.approx(4_000.0)
    assert result.monthly_mortgage == pytest.approx(mortgage.monthly_payment)
    assert result.monthly_interest == pytest.approx(mortgage.monthly_interest)
    assert result.monthly_amortization == pytest.approx(mortgage.monthly_amortization)
    assert result.total_monthly == pytest.approx(mortgage.monthly_payment + 4_000, abs=0.01)


def test_swedish_brf_accepts_explicit_maintenance_rate():
    result = calculate_swedish_total_cost(
        build_swedish_total_cost_params(property_type="brf", maintenance_rate=0.005)
    )

    assert result.monthly_maintenance == pytest.approx(1_250.0)


def test_swedish_total_annual_is_twelve_months():
    result = calculate_swedish_total_cost(
        build_swedish_total_cost_params(property_tax_annual=9_287, insurance_annual=4_800)
    )

    assert result.monthly_property_tax == pytest.approx(773.92)
    assert result.monthly_insurance == pytest.approx(400.0)
    assert result.total_annual == pytest.approx(result.total_monthly * 12, abs=0.06)


def test_swedish_total_cost_propagates_loan_cap():
    with pytest.raises(LoanCapExceededError):
        calculate_swedish_total_cost(build_swedish_total_cost_params(down_payment_percent=10))

"""Monthly and yearly cost of ownership on top of the mortgage payment."""

from __future__ import annotations

import logging

from property_finance.configuration import lending_limits
from property_finance.domain.schemas import (
    SwedishTotalCostParams,
    SwedishTotalCostResult,
    TotalCostParams,
    TotalCostResult,
)
from property_finance.services.mortgage_calculator import calculate_mortgage_payment
from property_finance.services.rounding import round_currency
from property_finance.services.swedish_mortgage import calculate_swedish_mortgage_payment

logger = logging.getLogger(__name__)


def calculate_total_cost(params: TotalCostParams) -> TotalCostResult:
    """Mortgage payment plus taxes, insurance, HOA, PMI and maintenance."""

    mortgage = calculate_mortgage_payment(params.mortgage)

    maintenance_rate = (
        params.maintenance_rate
        if params.maintenance_rate is not None
        else lending_limits.DEFAULT_MAINTENANCE_RATE
    )

    monthly_property_tax = round_currency(params.property_tax_annual / 12)
    monthly_insurance = round_currency(params.insurance_annual / 12)
    monthly_hoa = round_currency(params.hoa_monthly)
    monthly_pmi = round_currency(params.pmi_monthly)
    monthly_maintenance = round_currency(params.purchase_price * maintenance_rate / 12)

    total_monthly = (
        mortgage.monthly_payment
        + monthly_property_tax
        + monthly_insurance
        + monthly_hoa
        + monthly_pmi
        + monthly_maintenance
    )

    return TotalCostResult(
        monthly_mortgage=mortgage.monthly_payment,
        monthly_property_tax=monthly_property_tax,
        monthly_insurance=monthly_insurance,
        monthly_hoa=monthly_hoa,
        monthly_pmi=monthly_pmi,
        monthly_maintenance=monthly_maintenance,
        total_monthly=round_currency(total_monthly),
        total_annual=round_currency(total_monthly * 12),
    )


def calculate_swedish_total_cost(params: SwedishTotalCostParams) -> SwedishTotalCostResult:
    """Swedish ownership cost: no PMI, BRF fee instead of HOA.

    Maintenance defaults to 1% of the price yearly for a villa and to nothing
    for a bostadsrätt, whose avgift already covers upkeep. An explicit
    ``maintenance_rate`` is honoured for both.
    """

    mortgage = calculate_swedish_mortgage_payment(params.mortgage_params())

    if params.maintenance_rate is not None:
        maintenance_rate = params.maintenance_rate
    else:
        maintenance_rate = lending_limits.DEFAULT_MAINTENANCE_RATE_BY_PROPERTY[
            params.property_type
        ]

    monthly_property_tax = round_currency(params.property_tax_annual / 12)
    monthly_insurance = round_currency(params.insurance_annual / 12)
    monthly_brf = round_currency(params.brf_monthly)
    monthly_maintenance = round_currency(params.purchase_price * maintenance_rate / 12)

    total_monthly = (
        mortgage.monthly_payment
        + monthly_property_tax
        + monthly_insurance
        + monthly_brf
        + monthly_maintenance
    )

    logger.debug(
        "computed swedish total cost",
        extra={
            "property_type": params.property_type.value,
            "maintenance_rate": maintenance_rate,
            "total_monthly": total_monthly,
        },
    )

    return SwedishTotalCostResult(
        monthly_mortgage=mortgage.monthly_payment,
        monthly_interest=mortgage.monthly_interest,
        monthly_amortization=mortgage.monthly_amortization,
        monthly_property_tax=monthly_property_tax,
        monthly_insurance=monthly_insurance,
        monthly_brf=monthly_brf,
        monthly_maintenance=monthly_maintenance,
        total_monthly=round_currency(total_monthly),
        total_annual=round_currency(total_monthly * 12),
    )

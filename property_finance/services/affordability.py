"""Debt-to-income affordability checks: US guidelines and Swedish kalkylränta."""

from __future__ import annotations

import logging

from property_finance.configuration import lending_limits
from property_finance.domain.schemas import (
    DTIKind,
    DTIParams,
    DTIResult,
    DTIStatus,
    SwedishAffordabilityParams,
    SwedishAffordabilityResult,
)
from property_finance.exceptions import InvalidInputError
from property_finance.services.mortgage_calculator import require_finite
from property_finance.services.rounding import plain_number, round_percentage, to_fixed
from property_finance.services.swedish_mortgage import debt_to_income_multiple

logger = logging.getLogger(__name__)


def _require_income(gross_monthly_income: float) -> None:
    require_finite(gross_monthly_income=gross_monthly_income)
    if gross_monthly_income <= 0:
        raise InvalidInputError(
            "Gross monthly income must be positive",
            {"gross_monthly_income": gross_monthly_income},
        )


def classify_dti(value: float, kind: DTIKind) -> DTIStatus:
    """Map a ratio in percent to its display band."""
    bands = lending_limits.DTI_STATUS_BANDS[kind]
    if value <= bands.good:
        return DTIStatus.GOOD
    if value <= bands.caution:
        return DTIStatus.CAUTION
    return DTIStatus.HIGH


def calculate_dti(params: DTIParams) -> DTIResult:
    """Front-end and back-end DTI with conventional, FHA and ideal flags.

    Flags and bands are evaluated on the returned one-decimal ratios.
    """

    _require_income(params.gross_monthly_income)
    require_finite(
        monthly_housing_cost=params.monthly_housing_cost,
        monthly_other_debts=params.monthly_other_debts,
    )

    income = params.gross_monthly_income
    front_end_dti = round_percentage(params.monthly_housing_cost / income * 100)
    back_end_dti = round_percentage(
        (params.monthly_housing_cost + params.monthly_other_debts) / income * 100
    )

    return DTIResult(
        front_end_dti=front_end_dti,
        back_end_dti=back_end_dti,
        can_afford_conventional=back_end_dti <= lending_limits.CONVENTIONAL_MAX_BACK_END_DTI,
        can_afford_fha=(
            front_end_dti <= lending_limits.FHA_MAX_FRONT_END_DTI
            and back_end_dti <= lending_limits.FHA_MAX_BACK_END_DTI
        ),
        can_afford_ideal=back_end_dti <= lending_limits.IDEAL_MAX_BACK_END_DTI,
        front_end_status=classify_dti(front_end_dti, DTIKind.FRONT_END),
        back_end_status=classify_dti(back_end_dti, DTIKind.BACK_END),
    )


def calculate_swedish_affordability(
    params: SwedishAffordabilityParams,
) -> SwedishAffordabilityResult:
    """Affordability at the kalkylränta.

    The housing cost is expected to already be computed at the stress-test
    rate; the rate is carried into the result and the reasoning text only.
    """

    _require_income(params.gross_monthly_income)
    require_finite(
        monthly_housing_cost=params.monthly_housing_cost,
        monthly_other_debts=params.monthly_other_debts,
    )

    income = params.gross_monthly_income
    housing_ratio = params.monthly_housing_cost / income * 100
    total_debt_ratio = (params.monthly_housing_cost + params.monthly_other_debts) / income * 100

    multiple = debt_to_income_multiple(params.total_debt, params.gross_annual_income)
    requires_extra_amortization = (
        multiple is not None
        and multiple > lending_limits.DEBT_TO_INCOME_SURCHARGE_MULTIPLE
    )

    reasoning = (
        f"At {plain_number(params.stress_test_rate)}% kalkylränta: "
        f"housing {to_fixed(housing_ratio, 1)}%, "
        f"total debt {to_fixed(total_debt_ratio, 1)}%"
    )

    logger.debug(
        "computed swedish affordability",
        extra={
            "stress_test_rate": params.stress_test_rate,
            "total_debt_ratio": total_debt_ratio,
        },
    )

    return SwedishAffordabilityResult(
        housing_cost_ratio=round_percentage(housing_ratio),
        total_debt_ratio=round_percentage(total_debt_ratio),
        stress_test_rate=params.stress_test_rate,
        can_afford_conservative=total_debt_ratio <= lending_limits.SWEDISH_CONSERVATIVE_DEBT_RATIO,
        can_afford_standard=total_debt_ratio <= lending_limits.SWEDISH_STANDARD_DEBT_RATIO,
        reasoning=reasoning,
        debt_to_income_multiple=round_percentage(multiple) if multiple is not None else None,
        requires_extra_amortization=requires_extra_amortization,
    )

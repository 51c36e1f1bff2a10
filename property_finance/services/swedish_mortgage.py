"""
Swedish mortgage payment with bolånetak and amorteringskrav.

The monthly payment is the annuity on the loan at the quoted rate (percent,
6 = 6%) plus the mandatory amortization that Finansinspektionen requires for
the loan-to-value and, optionally, the borrower's debt-to-income multiple.
"""

from __future__ import annotations

import logging

from property_finance.configuration import lending_limits
from property_finance.domain.schemas import (
    AmortizationParams,
    AmortizationResult,
    SwedishMortgageParams,
    SwedishMortgageResult,
)
from property_finance.exceptions import InvalidInputError, LoanCapExceededError
from property_finance.services.mortgage_calculator import amortizing_payment, require_finite
from property_finance.services.rounding import round_currency, round_percentage, to_fixed

logger = logging.getLogger(__name__)


def debt_to_income_multiple(total_debt: float | None, gross_annual_income: float | None) -> float | None:
    """Debt multiple of yearly income, or None unless both figures are given."""
    if not total_debt or not gross_annual_income:
        return None
    return total_debt / gross_annual_income


def calculate_amorteringskrav(params: AmortizationParams) -> AmortizationResult:
    """Mandatory yearly amortization for a loan against its purchase price."""

    require_finite(purchase_price=params.purchase_price, principal=params.principal)
    if params.purchase_price <= 0:
        raise InvalidInputError(
            "Purchase price must be positive", {"purchase_price": params.purchase_price}
        )
    if params.principal < 0:
        raise InvalidInputError(
            "Principal must be non-negative", {"principal": params.principal}
        )

    ltv = (params.principal / params.purchase_price) * 100
    ltv_text = to_fixed(ltv, 1)

    yearly_percent = 0
    reason = lending_limits.NO_AMORTIZATION_REASON.format(ltv=ltv_text)
    for tier in lending_limits.AMORTIZATION_TIERS:
        if ltv > tier.ltv_floor_percent:
            yearly_percent = tier.yearly_percent
            reason = tier.reason.format(ltv=ltv_text)
            break

    multiple = debt_to_income_multiple(params.total_debt, params.gross_annual_income)
    if multiple is not None and multiple > lending_limits.DEBT_TO_INCOME_SURCHARGE_MULTIPLE:
        yearly_percent += lending_limits.DEBT_TO_INCOME_SURCHARGE_PERCENT
        reason += f" + 1% (debt {to_fixed(multiple, 1)}x income > 4.5x)"

    monthly_amortization = (params.principal * (yearly_percent / 100)) / 12

    return AmortizationResult(
        monthly_amortization=round_currency(monthly_amortization),
        yearly_amortization_percent=yearly_percent,
        reason=reason,
    )


class SwedishMortgageCalculator:
    """Annuity plus amorteringskrav, enforcing the 85% loan cap."""

    def calculate(self, params: SwedishMortgageParams) -> SwedishMortgageResult:
        purchase_price = params.purchase_price
        down_payment_percent = params.down_payment_percent
        annual_interest_rate = params.annual_interest_rate
        loan_term_years = params.loan_term_years

        down_payment = purchase_price * (down_payment_percent / 100)
        principal = purchase_price - down_payment

        # The loan cap is reported ahead of any other input problem.
        ltv = (principal / purchase_price) * 100 if purchase_price != 0 else 0.0
        if ltv > lending_limits.LTV_CAP_PERCENT:
            logger.info(
                "rejected loan above bolånetak",
                extra={"ltv": ltv, "purchase_price": purchase_price},
            )
            raise LoanCapExceededError(
                f"LTV {to_fixed(ltv, 1)}% exceeds 85% bolånetak (loan cap). "
                "Minimum down payment is 15%.",
                {
                    "ltv": round_percentage(ltv),
                    "ltv_limit": lending_limits.LTV_CAP_PERCENT,
                    "minimum_down_payment_percent": 100 - lending_limits.LTV_CAP_PERCENT,
                },
            )

        require_finite(
            purchase_price=purchase_price,
            down_payment_percent=down_payment_percent,
            annual_interest_rate=annual_interest_rate,
        )
        if purchase_price <= 0:
            raise InvalidInputError(
                "Purchase price must be positive", {"purchase_price": purchase_price}
            )
        if down_payment_percent < 0 or down_payment_percent > 100:
            raise InvalidInputError(
                "Down payment percent must be between 0 and 100",
                {"down_payment_percent": down_payment_percent},
            )
        if annual_interest_rate < 0:
            raise InvalidInputError(
                "Interest rate must be non-negative",
                {"annual_interest_rate": annual_interest_rate},
            )
        if loan_term_years <= 0:
            raise InvalidInputError(
                "Loan term must be positive", {"loan_term_years": loan_term_years}
            )

        num_payments = loan_term_years * 12

        if annual_interest_rate == 0 or principal == 0:
            monthly_interest = 0.0
        else:
            monthly_interest = amortizing_payment(
                principal, annual_interest_rate / 100 / 12, num_payments
            )

        amortization = calculate_amorteringskrav(
            AmortizationParams(
                principal=principal,
                purchase_price=purchase_price,
                gross_annual_income=params.gross_annual_income,
                total_debt=params.total_debt,
            )
        )

        monthly_payment = monthly_interest + amortization.monthly_amortization
        total_payments = monthly_payment * num_payments
        total_interest = total_payments - principal

        logger.debug(
            "computed swedish mortgage payment",
            extra={
                "principal": principal,
                "ltv": ltv,
                "amortization_percent": amortization.yearly_amortization_percent,
            },
        )

        return SwedishMortgageResult(
            monthly_payment=round_currency(monthly_payment),
            monthly_interest=round_currency(monthly_interest),
            monthly_amortization=amortization.monthly_amortization,
            amortization_percent=amortization.yearly_amortization_percent,
            amortization_reason=amortization.reason,
            total_payments=round_currency(total_payments),
            total_interest=round_currency(total_interest),
            ltv=round_percentage(ltv),
        )


def calculate_swedish_mortgage_payment(params: SwedishMortgageParams) -> SwedishMortgageResult:
    """Calculate a Swedish mortgage payment including amorteringskrav."""
    return SwedishMortgageCalculator().calculate(params)

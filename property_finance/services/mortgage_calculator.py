"""
Generic (US-style) fixed-rate mortgage calculator.

Rates are decimal fractions here (0.06 = 6%). The Swedish variant in
``swedish_mortgage`` uses percentages and must not be fed these params.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol, TypeVar

from property_finance.domain.schemas import MortgageParams, MortgageResult
from property_finance.exceptions import InvalidInputError
from property_finance.services.rounding import round_currency

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", contravariant=True)
ResultT = TypeVar("ResultT", covariant=True)


class MortgageCalculator(Protocol[ParamsT, ResultT]):
    """Capability shared by the generic and Swedish calculators."""

    def calculate(self, params: ParamsT) -> ResultT: ...


def amortizing_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Unrounded PMT payment for a positive monthly rate."""
    factor = (1 + monthly_rate) ** months
    return principal * (monthly_rate * factor) / (factor - 1)


def require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number", {name: value})


def validate_loan_terms(
    *, principal: float, annual_interest_rate: float, loan_term_years: int
) -> None:
    require_finite(principal=principal, annual_interest_rate=annual_interest_rate)
    if principal < 0:
        raise InvalidInputError(
            "Principal must be non-negative", {"principal": principal}
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


class StandardMortgageCalculator:
    """Monthly payment, total paid and total interest for an amortizing loan."""

    def calculate(self, params: MortgageParams) -> MortgageResult:
        principal = params.principal
        rate = params.annual_interest_rate
        years = params.loan_term_years

        validate_loan_terms(
            principal=principal, annual_interest_rate=rate, loan_term_years=years
        )

        if principal == 0:
            return MortgageResult(monthly_payment=0.0, total_payments=0.0, total_interest=0.0)

        num_payments = years * 12

        if rate == 0:
            return MortgageResult(
                monthly_payment=round_currency(principal / num_payments),
                total_payments=round_currency(principal),
                total_interest=0.0,
            )

        # Totals derive from the rounded payment, matching a printed schedule.
        monthly_payment = round_currency(
            amortizing_payment(principal, rate / 12, num_payments)
        )
        total_payments = monthly_payment * num_payments
        total_interest = total_payments - principal

        logger.debug(
            "computed mortgage payment",
            extra={
                "principal": principal,
                "annual_interest_rate": rate,
                "num_payments": num_payments,
                "monthly_payment": monthly_payment,
            },
        )

        return MortgageResult(
            monthly_payment=monthly_payment,
            total_payments=round_currency(total_payments),
            total_interest=round_currency(total_interest),
        )


def calculate_mortgage_payment(params: MortgageParams) -> MortgageResult:
    """Calculate a generic mortgage payment."""
    return StandardMortgageCalculator().calculate(params)

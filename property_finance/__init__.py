"""Mortgage, ownership-cost and affordability calculations for property comparison."""

from .domain.schemas import (
    AmortizationParams,
    AmortizationResult,
    DTIKind,
    DTIParams,
    DTIResult,
    DTIStatus,
    MortgageParams,
    MortgageResult,
    PropertyType,
    SwedishAffordabilityParams,
    SwedishAffordabilityResult,
    SwedishMortgageParams,
    SwedishMortgageResult,
    SwedishTotalCostParams,
    SwedishTotalCostResult,
    TotalCostParams,
    TotalCostResult,
)
from .exceptions import (
    AppException,
    ConfigurationError,
    InvalidInputError,
    LoanCapExceededError,
    PolicyViolationError,
)
from .services import (
    calculate_amorteringskrav,
    calculate_dti,
    calculate_mortgage_payment,
    calculate_swedish_affordability,
    calculate_swedish_mortgage_payment,
    calculate_swedish_total_cost,
    calculate_total_cost,
    classify_dti,
)
from .utils import (
    format_currency,
    format_currency_sek,
    format_number_se,
    format_percentage,
)

__all__ = [
    "AmortizationParams",
    "AmortizationResult",
    "DTIKind",
    "DTIParams",
    "DTIResult",
    "DTIStatus",
    "MortgageParams",
    "MortgageResult",
    "PropertyType",
    "SwedishAffordabilityParams",
    "SwedishAffordabilityResult",
    "SwedishMortgageParams",
    "SwedishMortgageResult",
    "SwedishTotalCostParams",
    "SwedishTotalCostResult",
    "TotalCostParams",
    "TotalCostResult",
    "AppException",
    "ConfigurationError",
    "InvalidInputError",
    "LoanCapExceededError",
    "PolicyViolationError",
    "calculate_amorteringskrav",
    "calculate_dti",
    "calculate_mortgage_payment",
    "calculate_swedish_affordability",
    "calculate_swedish_mortgage_payment",
    "calculate_swedish_total_cost",
    "calculate_total_cost",
    "classify_dti",
    "format_currency",
    "format_currency_sek",
    "format_number_se",
    "format_percentage",
]

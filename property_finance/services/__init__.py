from .affordability import calculate_dti, calculate_swedish_affordability, classify_dti
from .mortgage_calculator import (
    MortgageCalculator,
    StandardMortgageCalculator,
    calculate_mortgage_payment,
)
from .rounding import round_currency, round_percentage
from .swedish_mortgage import (
    SwedishMortgageCalculator,
    calculate_amorteringskrav,
    calculate_swedish_mortgage_payment,
)
from .total_cost import calculate_swedish_total_cost, calculate_total_cost

__all__ = [
    "calculate_dti",
    "calculate_swedish_affordability",
    "classify_dti",
    "MortgageCalculator",
    "StandardMortgageCalculator",
    "calculate_mortgage_payment",
    "round_currency",
    "round_percentage",
    "SwedishMortgageCalculator",
    "calculate_amorteringskrav",
    "calculate_swedish_mortgage_payment",
    "calculate_swedish_total_cost",
    "calculate_total_cost",
]

"""Domain schemas for mortgage, ownership-cost and affordability calculations.

Parameter records only enforce shape and the closed enumerations. Magnitude
checks (negative principal, non-positive term, zero income...) belong to the
services, which raise the engine's own errors instead of pydantic's.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PropertyType(str, Enum):
    """Swedish property tenure classification."""

    VILLA = "villa"
    BRF = "brf"


class DTIKind(str, Enum):
    """Which debt-to-income ratio a value represents."""

    FRONT_END = "front"
    BACK_END = "back"


class DTIStatus(str, Enum):
    """Display band for a debt-to-income ratio."""

    GOOD = "good"
    CAUTION = "caution"
    HIGH = "high"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Generic (US-style) mortgage
# ---------------------------------------------------------------------------


class MortgageParams(_Record):
    """Loan inputs; the rate is a decimal fraction (0.06 = 6%)."""

    principal: float
    annual_interest_rate: float
    loan_term_years: int = Field(
        ..., description="Whole years; fractional terms such as 7.5 are rejected"
    )


class MortgageResult(_Record):
    monthly_payment: float
    total_payments: float
    total_interest: float


class TotalCostParams(_Record):
    """Ownership-cost inputs wrapping the generic loan parameters."""

    purchase_price: float
    mortgage: MortgageParams
    property_tax_annual: float = 0.0
    insurance_annual: float = 0.0
    hoa_monthly: float = 0.0
    pmi_monthly: float = 0.0
    maintenance_rate: Optional[float] = Field(
        default=None,
        description="Yearly maintenance as a share of purchase price; 1% when omitted.",
    )


class TotalCostResult(_Record):
    monthly_mortgage: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_hoa: float
    monthly_pmi: float
    monthly_maintenance: float
    total_monthly: float
    total_annual: float


class DTIParams(_Record):
    gross_monthly_income: float
    monthly_housing_cost: float
    monthly_other_debts: float = 0.0


class DTIResult(_Record):
    front_end_dti: float
    back_end_dti: float
    can_afford_conventional: bool
    can_afford_fha: bool
    can_afford_ideal: bool
    front_end_status: DTIStatus
    back_end_status: DTIStatus


# ---------------------------------------------------------------------------
# Swedish mortgage
# ---------------------------------------------------------------------------


class AmortizationParams(_Record):
    principal: float
    purchase_price: float
    gross_annual_income: Optional[float] = None
    total_debt: Optional[float] = None


class AmortizationResult(_Record):
    monthly_amortization: float
    yearly_amortization_percent: int
    reason: str


class SwedishMortgageParams(_Record):
    """Loan inputs; the rate is a percentage (6 = 6%)."""

    purchase_price: float
    down_payment_percent: float
    annual_interest_rate: float
    loan_term_years: int = Field(
        ..., description="Whole years; fractional terms such as 7.5 are rejected"
    )
    property_type: PropertyType
    gross_annual_income: Optional[float] = Field(
        default=None,
        description="Enables the debt-to-income amortization surcharge together with total_debt.",
    )
    total_debt: Optional[float] = None


class SwedishMortgageResult(_Record):
    monthly_payment: float
    monthly_interest: float
    monthly_amortization: float
    amortization_percent: int
    amortization_reason: str
    total_payments: float
    total_interest: float
    ltv: float


class SwedishTotalCostParams(_Record):
    purchase_price: float
    down_payment_percent: float
    annual_interest_rate: float
    loan_term_years: int = Field(
        ..., description="Whole years; fractional terms such as 7.5 are rejected"
    )
    property_type: PropertyType
    property_tax_annual: float = 0.0
    insurance_annual: float = 0.0
    brf_monthly: float = Field(default=0.0, description="BRF-avgift")
    maintenance_rate: Optional[float] = Field(
        default=None,
        description="Defaults to 1% for villa and 0 for brf (included in the fee).",
    )
    gross_annual_income: Optional[float] = None
    total_debt: Optional[float] = None

    def mortgage_params(self) -> SwedishMortgageParams:
        return SwedishMortgageParams(
            purchase_price=self.purchase_price,
            down_payment_percent=self.down_payment_percent,
            annual_interest_rate=self.annual_interest_rate,
            loan_term_years=self.loan_term_years,
            property_type=self.property_type,
            gross_annual_income=self.gross_annual_income,
            total_debt=self.total_debt,
        )


class SwedishTotalCostResult(_Record):
    monthly_mortgage: float
    monthly_interest: float
    monthly_amortization: float
    monthly_property_tax: float
    monthly_insurance: float
    monthly_brf: float
    monthly_maintenance: float
    total_monthly: float
    total_annual: float


class SwedishAffordabilityParams(_Record):
    """Housing cost is expected to be precomputed at the stress-test rate."""

    gross_monthly_income: float
    monthly_housing_cost: float
    monthly_other_debts: float = 0.0
    stress_test_rate: float = Field(..., description="Kalkylränta in percent")
    total_debt: Optional[float] = None
    gross_annual_income: Optional[float] = None


class SwedishAffordabilityResult(_Record):
    housing_cost_ratio: float
    total_debt_ratio: float
    stress_test_rate: float
    can_afford_conservative: bool
    can_afford_standard: bool
    reasoning: str
    debt_to_income_multiple: Optional[float] = None
    requires_extra_amortization: bool = False

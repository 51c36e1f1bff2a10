"""Centralized Swedish and US lending thresholds used across the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from property_finance.domain.schemas import DTIKind, PropertyType

# ---------------------------------------------------------------------------
# Swedish regulation (Finansinspektionen)
# ---------------------------------------------------------------------------

# Bolånetak: maximum loan-to-value in percent of the purchase price.
LTV_CAP_PERCENT: float = 85.0


@dataclass(frozen=True)
class AmortizationTier:
    """Yearly amortization required when LTV is strictly above the floor."""

    ltv_floor_percent: float
    yearly_percent: int
    reason: str


# Amorteringskrav tiers, highest floor first; first match wins.
AMORTIZATION_TIERS: Tuple[AmortizationTier, ...] = (
    AmortizationTier(
        ltv_floor_percent=70.0,
        yearly_percent=2,
        reason="LTV {ltv}% > 70% → 2% yearly",
    ),
    AmortizationTier(
        ltv_floor_percent=50.0,
        yearly_percent=1,
        reason="LTV {ltv}% (50-70%) → 1% yearly",
    ),
)
NO_AMORTIZATION_REASON: str = "LTV {ltv}% ≤ 50% → no requirement"

# Skärpt amorteringskrav: extra yearly amortization above this debt multiple.
DEBT_TO_INCOME_SURCHARGE_MULTIPLE: float = 4.5
DEBT_TO_INCOME_SURCHARGE_PERCENT: int = 1

# Kalkylränta affordability ceilings on total debt ratio (percent of gross income).
SWEDISH_CONSERVATIVE_DEBT_RATIO: float = 50.0
SWEDISH_STANDARD_DEBT_RATIO: float = 60.0

# Yearly maintenance as a share of purchase price; BRF fees already include it.
DEFAULT_MAINTENANCE_RATE_BY_PROPERTY: Mapping[PropertyType, float] = {
    PropertyType.VILLA: 0.01,
    PropertyType.BRF: 0.0,
}

# ---------------------------------------------------------------------------
# US debt-to-income guidelines
# ---------------------------------------------------------------------------

DEFAULT_MAINTENANCE_RATE: float = 0.01

CONVENTIONAL_MAX_BACK_END_DTI: float = 50.0
FHA_MAX_FRONT_END_DTI: float = 31.0
FHA_MAX_BACK_END_DTI: float = 43.0
IDEAL_MAX_BACK_END_DTI: float = 36.0


@dataclass(frozen=True)
class DTIBands:
    """Inclusive upper bounds for the good and caution display bands."""

    good: float
    caution: float


DTI_STATUS_BANDS: Mapping[DTIKind, DTIBands] = {
    DTIKind.FRONT_END: DTIBands(good=28.0, caution=36.0),
    DTIKind.BACK_END: DTIBands(good=36.0, caution=43.0),
}

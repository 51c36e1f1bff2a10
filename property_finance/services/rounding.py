"""Rounding helpers shared by every calculator.

Results are rounded half-up (ties go towards +inf) on the scaled value, which
is what the display layer expects. Python's built-in ``round`` uses banker's
rounding and must not be used for output fields.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def _round_half_up(value: float, digits: int) -> float:
    scale = 10**digits
    scaled = value * scale
    floored = math.floor(scaled)
    rounded = floored + 1 if scaled - floored >= 0.5 else floored
    return rounded / scale


def round_currency(value: float) -> float:
    """Round a currency amount to 2 decimals."""
    return _round_half_up(value, 2)


def round_percentage(value: float) -> float:
    """Round a ratio expressed in percent to 1 decimal."""
    return _round_half_up(value, 1)


def to_fixed(value: float, digits: int = 1) -> str:
    """Fixed-point text of the exact binary value, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def plain_number(value: float) -> str:
    """Shortest text for a number: ``7`` rather than ``7.0``."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))

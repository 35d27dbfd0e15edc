"""
Rounding helpers for currency and percentage figures.

Values are computed in binary floating point and rounded half away from zero
on their shortest decimal representation, so 1.005 rounds to 1.01 and
-2.675 rounds to -2.68. Non-finite values round to 0.0.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")

# Floats this large carry no fractional digits worth rounding
PRECISION_LIMIT = 1e15


def round_half_up(value: float, places: int = 2) -> float:
    """Round a float half away from zero to the given number of places."""
    if not math.isfinite(value):
        return 0.0
    if abs(value) >= PRECISION_LIMIT:
        return float(value)
    quantum = CENTS if places == 2 else Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> float:
    """Round a money amount to whole cents."""
    return round_half_up(value, 2)

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def clamp(number: float, minimum: float, maximum: float) -> float:
    """Limit ``number`` to ``[minimum, maximum]``. NaN input is returned as is."""

    if minimum > maximum:
        raise ValueError("Minimum value must be less than or equal to the maximum value")
    if math.isnan(minimum):
        raise ValueError("Minimum value must be a number")
    if math.isnan(maximum):
        raise ValueError("Maximum value must be a number")

    if math.isnan(number):
        return number
    return max(minimum, min(number, maximum))


def round_float(number: float, digits: int = 2) -> float:
    """Round half away from zero to ``digits`` decimals.

    Rounding works on the exact binary value, so ``round_float(1.005, 2)`` is
    ``1.0`` while ``round_float(2.5, 0)`` is ``3.0``.
    """

    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
        raise ValueError("Digits must be a positive integer")
    if not math.isfinite(number):
        return number

    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


__all__ = ["clamp", "round_float"]

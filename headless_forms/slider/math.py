from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math


def normalize_step(step: float | None, default: float = 1.0) -> float:
    if step is None or not math.isfinite(step) or step <= 0:
        return default
    return float(step)


def decimals_from_step(step: float) -> int:
    if step <= 0 or not math.isfinite(step):
        return 0
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)


def quantize(value: float, step: float) -> float:
    """Snap `value` to the nearest multiple of `step`, halves away from zero.

    Works in decimal so that multiples of fractional steps come out exact
    (0.1 * 3 is 0.3, not 0.30000000000000004).
    """

    if not math.isfinite(value):
        return value
    d_step = Decimal(str(normalize_step(step)))
    try:
        multiples = (Decimal(str(value)) / d_step).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return float(value)
    return float(multiples * d_step)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))

from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable
import math

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, float(x)))

def clamp_int(x: int, lo: float, hi: float) -> int:
    """Clamp without a float round-trip, so unbounded ints survive intact."""
    x = int(x)
    if x < lo:
        return int(lo)
    if x > hi:
        return int(hi)
    return x

def round_half_up(x: float) -> int:
    """Round half away from zero; Python's round() would send 74.5 to 74."""
    return int(Decimal(repr(float(x))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def weighted_sum(values: Iterable[float], weights: Iterable[float]) -> float:
    return math.fsum(float(x) * float(y) for x, y in zip(values, weights))

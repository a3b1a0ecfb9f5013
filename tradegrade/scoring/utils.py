"""
Decimal Utilities
tradegrade/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from tradegrade.core.exceptions import WeightMismatchException

Number = Union[Decimal, float, int, str]

_ONE_DAY = timedelta(days=1)


def to_decimal(value: Number, places: Optional[int] = None) -> Decimal:
    """Convert a number to Decimal, optionally quantized to `places` digits."""
    if isinstance(value, Decimal):
        d = value
    else:
        d = Decimal(str(value))
    if places is None:
        return d
    return d.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("-50"),
    max_val: Decimal = Decimal("50"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: List[Decimal]) -> Optional[Decimal]:
    """Arithmetic mean, or None for an empty list."""
    if not values:
        return None
    return sum(values, Decimal("0")) / Decimal(len(values))


def weighted_mean(values: List[Decimal], weights: List[Decimal]) -> Optional[Decimal]:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns None if there are no values or all weights are zero.
    """
    if len(values) != len(weights):
        raise WeightMismatchException(len(values), len(weights))

    total_weight = sum(weights, Decimal("0"))
    if total_weight == 0:
        return None

    numerator = sum((v * w for v, w in zip(values, weights)), Decimal("0"))
    return numerator / total_weight


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, rounded up (negative if end precedes start)."""
    return -((start - end) // _ONE_DAY)


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator, or 0 when the denominator is 0."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator

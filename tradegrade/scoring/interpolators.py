"""
Interpolators
tradegrade/scoring/interpolators.py

Piecewise-linear curve evaluation over fixed anchor tables, and the three
curve-based metrics built on it:

    calculate_magnitude_accuracy   - overestimate vs underestimate curves
    calculate_forecast_edge        - relative multiple (asset / market) curve
    calculate_directional_accuracy - banded direction score with a 1%-3% ramp

Every function returns a Decimal on the -50..+50 scale. Callers clamp.
"""

from decimal import Decimal
from typing import Any, Mapping, Sequence

from tradegrade.scoring.constants import (
    DIRECTIONAL_SCORES,
    DIRECTIONAL_THRESHOLDS,
    FLAT_MARKET_BANDS,
    FLAT_MARKET_FLOOR,
    FORECAST_EDGE_POINTS,
    LOSS_AVOIDANCE_BASE,
    LOSS_AVOIDANCE_SCALE,
    MAGNITUDE_ACTUAL_FLAT_SCORE,
    MAGNITUDE_BOTH_FLAT_SCORE,
    MAGNITUDE_OVERESTIMATE_POINTS,
    MAGNITUDE_PREDICTED_FLAT_SCORE,
    MAGNITUDE_UNDERESTIMATE_POINTS,
    SCORE_MAX,
)
from tradegrade.scoring.utils import Number, to_decimal

ZERO = Decimal("0")


def _field(point: Any, name: str) -> Decimal:
    if isinstance(point, Mapping):
        return to_decimal(point[name])
    return to_decimal(getattr(point, name))


def lerp(x: Decimal, x0: Decimal, x1: Decimal, y0: Decimal, y1: Decimal) -> Decimal:
    """Linear interpolation of y at x between (x0, y0) and (x1, y1)."""
    if x1 == x0:
        return y0
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


def interpolate(value: Number, points: Sequence[Any], key: str = "x") -> Decimal:
    """
    Interpolate a score from anchor points sorted by descending `key`.

    Points may be objects or mappings exposing `key` and `score`.
    Values beyond either extreme anchor take that anchor's score (flat
    extrapolation); values on an anchor return its score exactly.
    """
    if not points:
        return ZERO
    if len(points) == 1:
        return _field(points[0], "score")

    v = to_decimal(value)

    if v >= _field(points[0], key):
        return _field(points[0], "score")
    if v <= _field(points[-1], key):
        return _field(points[-1], "score")

    for upper, lower in zip(points, points[1:]):
        x0 = _field(upper, key)
        x1 = _field(lower, key)
        if x1 <= v <= x0:
            return lerp(v, x1, x0, _field(lower, "score"), _field(upper, "score"))

    return ZERO


def calculate_magnitude_accuracy(predicted_move: Number, actual_move: Number) -> Decimal:
    """
    Score how close the predicted move size was to the actual move size.

    Args:
        predicted_move: Predicted fractional move (0.40 = +40%).
        actual_move: Realized fractional move.

    Returns:
        Score from -50 to +50. Overshooting is penalized on the harsher
        overestimate curve; undershooting on the softer underestimate curve.
    """
    predicted = to_decimal(predicted_move)
    actual = to_decimal(actual_move)

    if predicted == 0 and actual == 0:
        return MAGNITUDE_BOTH_FLAT_SCORE
    if predicted == 0:
        return MAGNITUDE_PREDICTED_FLAT_SCORE
    if actual == 0:
        return MAGNITUDE_ACTUAL_FLAT_SCORE

    # Wrong direction counts as 0% accuracy on the harsher curve
    if (predicted > 0) != (actual > 0):
        return interpolate(ZERO, MAGNITUDE_OVERESTIMATE_POINTS)

    abs_predicted = abs(predicted)
    abs_actual = abs(actual)
    if abs_predicted > abs_actual:
        return interpolate(abs_actual / abs_predicted, MAGNITUDE_OVERESTIMATE_POINTS)
    return interpolate(abs_predicted / abs_actual, MAGNITUDE_UNDERESTIMATE_POINTS)


def calculate_forecast_edge(asset_return: Number, market_return: Number) -> Decimal:
    """
    Score asset performance relative to the market over the same period.

    Regimes:
        market == 0          absolute return bands
        market < 0, asset≥0  loss avoidance: 30 + 20 × |asset − market| / |market|, ≤ 50
        market < 0, asset<0  curve at market / asset (losing less than market > 1×)
        market > 0           curve at asset / market
    """
    asset = to_decimal(asset_return)
    market = to_decimal(market_return)

    if market == 0:
        for minimum, score in FLAT_MARKET_BANDS:
            if asset >= minimum:
                return score
        return FLAT_MARKET_FLOOR

    if market < 0:
        if asset >= 0:
            loss_avoidance = abs(asset - market) / abs(market)
            return min(SCORE_MAX, LOSS_AVOIDANCE_BASE + loss_avoidance * LOSS_AVOIDANCE_SCALE)
        # Both lost: reciprocal of relative loss, so losing half as much reads as 2×
        return interpolate(market / asset, FORECAST_EDGE_POINTS)

    return interpolate(asset / market, FORECAST_EDGE_POINTS)


def calculate_directional_accuracy(
    predicted_direction: int,
    actual_move: Number,
    strong_move_threshold: Number = DIRECTIONAL_THRESHOLDS["strong_move"],
    modest_move_threshold: Number = DIRECTIONAL_THRESHOLDS["modest_move"],
) -> Decimal:
    """
    Score whether the asset moved the predicted way, scaled by move size.

    Args:
        predicted_direction: 1 for up, -1 for down.
        actual_move: Signed fractional move.
        strong_move_threshold: |move| at or above this is a strong move (±50).
        modest_move_threshold: |move| at or above this is a modest move (±25).

    Returns:
        0 inside the 1% noise band, ±50 / ±25 on strong / modest moves, and
        a linear ramp towards ±25 between 1% and the modest threshold.
    """
    move = to_decimal(actual_move)
    strong = to_decimal(strong_move_threshold)
    modest = to_decimal(modest_move_threshold)
    noise = DIRECTIONAL_THRESHOLDS["noise"]

    abs_move = abs(move)
    actual_direction = 1 if move >= 0 else -1
    correct = predicted_direction == actual_direction

    if abs_move < noise:
        return DIRECTIONAL_SCORES["flat"]

    if abs_move >= strong:
        return DIRECTIONAL_SCORES["strongly_correct" if correct else "strongly_wrong"]

    if abs_move >= modest:
        return DIRECTIONAL_SCORES["correct" if correct else "wrong"]

    t = (abs_move - noise) / (modest - noise)
    ramp = t * DIRECTIONAL_SCORES["correct"]
    return ramp if correct else -ramp

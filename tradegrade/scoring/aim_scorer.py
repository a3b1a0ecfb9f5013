"""
scoring/aim_scorer.py — Aim Scorer (primary scoring unit)

Scores one price prediction from its entry/target/actual prices.

Metrics (weighted AVERAGE, result stays on the -50..+50 scale):
    directional_accuracy   0.20
    magnitude_accuracy     0.30
    forecast_edge          0.35
    thesis_validity        0.15

Difficulty:
    annualized = predicted_move / planned_days × 365
    difficulty = 1.0 + (annualized − 0.10) / 2.0      clamped to [1.0, 5.0]

Difficulty is reported next to the score for context and never scales it.
"""

from decimal import Decimal
from typing import Dict, Optional, Tuple

import structlog

from tradegrade.core.exceptions import InvalidSelfRatingException
from tradegrade.models.aim import AimMetricScores, AimScore, AimScoringInput, CatalystOutcome
from tradegrade.scoring.constants import (
    AIM_WEIGHTS,
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    DIFFICULTY_DIVISOR,
    DIFFICULTY_LEVEL_DEFAULT,
    DIFFICULTY_LEVELS,
    DIFFICULTY_MAX,
    DIFFICULTY_MIN,
    EMR_BASELINE,
    SCORING_VERSION,
    THESIS_VALIDITY_SCORES,
)
from tradegrade.scoring.grade_mapper import clamp_score, score_to_grade
from tradegrade.scoring.interpolators import (
    calculate_directional_accuracy,
    calculate_forecast_edge,
    calculate_magnitude_accuracy,
)
from tradegrade.scoring.utils import Number, clamp, days_between, to_decimal

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


def annualize_return(return_percent: Number, duration_days: int) -> Decimal:
    """Simple (non-compounded) annualization; 0 for non-positive durations."""
    if duration_days <= 0:
        return ZERO
    return to_decimal(return_percent) * DAYS_PER_YEAR / Decimal(duration_days)


def calculate_difficulty(
    predicted_move: Number,
    duration_days: int,
    market_baseline: Decimal = EMR_BASELINE,
) -> Decimal:
    """
    Difficulty multiplier for a prediction.

    Example: 50% predicted annualized, 10% baseline → alpha 0.40 → 1.20
    """
    alpha = annualize_return(predicted_move, duration_days) - market_baseline
    difficulty = Decimal("1") + alpha / DIFFICULTY_DIVISOR
    return clamp(difficulty, DIFFICULTY_MIN, DIFFICULTY_MAX)


def get_difficulty_level(multiplier: Number) -> str:
    """Human-readable label for a difficulty multiplier."""
    m = to_decimal(multiplier)
    for minimum, label in DIFFICULTY_LEVELS:
        if m >= minimum:
            return label
    return DIFFICULTY_LEVEL_DEFAULT


def calculate_thesis_validity(
    catalyst: Optional[CatalystOutcome],
    risks_documented: bool,
) -> Tuple[Decimal, bool]:
    """
    Score whether the thesis catalyst played out.

    Returns:
        (score, capped). No catalyst data scores a neutral 0. A positive
        score is capped to 0 when risks were not documented.
    """
    if catalyst is None:
        return ZERO, False

    score = THESIS_VALIDITY_SCORES.get((catalyst.occurred, catalyst.price_reaction), ZERO)

    capped = not risks_documented and score > 0
    if capped:
        score = ZERO
    return score, capped


def calculate_time_normalized_profits(
    return_percent: Number,
    duration_days: int,
) -> Dict[str, Decimal]:
    """Return per day / month (30d) / year (365d); zeros for non-positive durations."""
    if duration_days <= 0:
        return {"per_day": ZERO, "per_month": ZERO, "per_year": ZERO}

    per_day = to_decimal(return_percent) / Decimal(duration_days)
    return {
        "per_day": per_day,
        "per_month": per_day * DAYS_PER_MONTH,
        "per_year": per_day * DAYS_PER_YEAR,
    }


def apply_self_reflection(
    score: AimScore,
    rating: int,
    notes: Optional[str] = None,
) -> AimScore:
    """Attach the trader's own 1-5 rating (and notes) to a computed score."""
    if not 1 <= rating <= 5:
        raise InvalidSelfRatingException(rating)
    return score.model_copy(
        update={"self_rating": rating, "self_reflection_notes": notes}
    )


class AimScorer:
    """Calculate Aim scores."""

    def calculate_metrics(self, inp: AimScoringInput) -> Tuple[AimMetricScores, bool]:
        """The four metrics plus whether thesis validity was capped."""
        predicted_move = (inp.target_price - inp.entry_price) / inp.entry_price
        actual_move = (inp.actual_price - inp.entry_price) / inp.entry_price
        predicted_direction = 1 if predicted_move >= 0 else -1

        directional = calculate_directional_accuracy(predicted_direction, actual_move)
        magnitude = calculate_magnitude_accuracy(predicted_move, actual_move)
        edge = calculate_forecast_edge(actual_move, inp.market_return_percent)
        thesis, capped = calculate_thesis_validity(inp.catalyst, inp.risks_documented)

        metrics = AimMetricScores(
            directional_accuracy=clamp_score(directional),
            magnitude_accuracy=clamp_score(magnitude),
            forecast_edge=clamp_score(edge),
            thesis_validity=clamp_score(thesis),
        )
        return metrics, capped

    @staticmethod
    def final_score(metrics: AimMetricScores) -> Decimal:
        """Weighted average of the metrics, clamped."""
        weighted = sum(
            (getattr(metrics, name) * weight for name, weight in AIM_WEIGHTS.items()),
            ZERO,
        )
        return clamp_score(weighted)

    def calculate(self, inp: AimScoringInput) -> AimScore:
        """
        Score a closed aim.

        Args:
            inp: Aim facts. Planned duration is start → target date and drives
                 difficulty and predicted profits; realized duration is
                 start → close and drives actual profits.

        Returns:
            AimScore with metrics, final score, grade and time-normalized profits.
        """
        metrics, capped = self.calculate_metrics(inp)
        final = self.final_score(metrics)
        grade = score_to_grade(final)

        predicted_move = (inp.target_price - inp.entry_price) / inp.entry_price
        actual_move = (inp.actual_price - inp.entry_price) / inp.entry_price
        planned_days = days_between(inp.start_date, inp.target_date)
        actual_days = days_between(inp.start_date, inp.close_date)

        difficulty = to_decimal(calculate_difficulty(predicted_move, planned_days), 2)
        predicted = calculate_time_normalized_profits(predicted_move, planned_days)
        actual = calculate_time_normalized_profits(actual_move, actual_days)

        logger.info(
            "aim_scored",
            scoring_version=SCORING_VERSION,
            aim_id=inp.aim_id,
            symbol=inp.symbol,
            catalyst_type=inp.catalyst_type,
            directional_accuracy=float(metrics.directional_accuracy),
            magnitude_accuracy=float(metrics.magnitude_accuracy),
            forecast_edge=float(metrics.forecast_edge),
            thesis_validity=float(metrics.thesis_validity),
            thesis_validity_capped=capped,
            difficulty_multiplier=float(difficulty),
            final_score=float(final),
            letter_grade=grade.value,
        )

        return AimScore(
            aim_id=inp.aim_id,
            metrics=metrics,
            difficulty_multiplier=difficulty,
            final_score=final,
            letter_grade=grade,
            predicted_profit_per_day=predicted["per_day"],
            predicted_profit_per_month=predicted["per_month"],
            predicted_profit_per_year=predicted["per_year"],
            actual_profit_per_day=actual["per_day"],
            actual_profit_per_month=actual["per_month"],
            actual_profit_per_year=actual["per_year"],
            risks_documented=inp.risks_documented,
            thesis_validity_capped=capped,
            self_rating=inp.self_rating,
            self_reflection_notes=inp.self_reflection_notes,
        )

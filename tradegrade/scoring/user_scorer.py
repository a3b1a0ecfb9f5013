"""
scoring/user_scorer.py — User Career Scorer

Aggregates every Target a user has closed into two career scores:
- Prediction Quality: how good the ideas are (from Aims)
- Performance: how well they are executed (from Shots)

Both are weighted by capital invested per target. Targets without a
prediction (or performance) score are left out of that average.
"""

from decimal import Decimal
from typing import List, Optional

import structlog

from tradegrade.models.enumerations import LetterGrade, Trend
from tradegrade.models.target import TargetScore
from tradegrade.models.user import CareerLevel, ScoreTrend, UserCareerScore, UserCareerScoringInput
from tradegrade.scoring.constants import CAREER_LEVELS, SCORING_VERSION, TREND_STABLE_BAND
from tradegrade.scoring.grade_mapper import clamp_score, score_to_grade
from tradegrade.scoring.utils import weighted_mean

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")


def _capital_weighted(target_scores: List[TargetScore], field: str) -> Optional[Decimal]:
    scored = [t for t in target_scores if getattr(t, field) is not None]
    if not scored:
        return None

    values = [getattr(t, field) for t in scored]
    weights = [
        t.total_capital_invested if t.total_capital_invested > 0 else ONE
        for t in scored
    ]
    result = weighted_mean(values, weights)
    if result is None:
        return None
    return clamp_score(result)


def calculate_career_prediction_score(target_scores: List[TargetScore]) -> Optional[Decimal]:
    return _capital_weighted(target_scores, "prediction_score")


def calculate_career_performance_score(target_scores: List[TargetScore]) -> Optional[Decimal]:
    return _capital_weighted(target_scores, "performance_score")


def calculate_total_pnl(target_scores: List[TargetScore]) -> Decimal:
    return sum((t.total_pnl_dollars for t in target_scores), ZERO)


def get_career_level(total_aims_scored: int, total_shots_scored: int) -> CareerLevel:
    """Experience level from combined aim + shot count."""
    activity = total_aims_scored + total_shots_scored
    for minimum, level, description in CAREER_LEVELS:
        if activity >= minimum:
            return CareerLevel(level=level, description=description)
    _, level, description = CAREER_LEVELS[-1]
    return CareerLevel(level=level, description=description)


def _trend(delta: Decimal) -> Trend:
    if delta > TREND_STABLE_BAND:
        return Trend.UP
    if delta < -TREND_STABLE_BAND:
        return Trend.DOWN
    return Trend.STABLE


def calculate_score_trend(
    recent_target_scores: List[TargetScore],
    older_target_scores: List[TargetScore],
) -> ScoreTrend:
    """
    Direction of change between two cohorts of targets (e.g. the last 5-10
    vs the 5-10 before). Moves within ±3 points are stable; a cohort with
    no score counts as 0.
    """
    def _or_zero(value: Optional[Decimal]) -> Decimal:
        return value if value is not None else ZERO

    prediction_delta = (
        _or_zero(calculate_career_prediction_score(recent_target_scores))
        - _or_zero(calculate_career_prediction_score(older_target_scores))
    )
    performance_delta = (
        _or_zero(calculate_career_performance_score(recent_target_scores))
        - _or_zero(calculate_career_performance_score(older_target_scores))
    )

    return ScoreTrend(
        prediction_trend=_trend(prediction_delta),
        performance_trend=_trend(performance_delta),
        prediction_delta=prediction_delta,
        performance_delta=performance_delta,
    )


class UserCareerScorer:
    """Calculate a user's career scores."""

    def calculate(self, inp: UserCareerScoringInput) -> UserCareerScore:
        """
        Returns:
            UserCareerScore. With no contributing targets both scores are 0
            and both grades are C.
        """
        prediction = calculate_career_prediction_score(inp.target_scores)
        performance = calculate_career_performance_score(inp.target_scores)
        total_pnl = calculate_total_pnl(inp.target_scores)
        level = get_career_level(inp.total_aims_scored, inp.total_shots_scored)

        result = UserCareerScore(
            user_id=inp.user_id,
            prediction_quality_score=prediction if prediction is not None else ZERO,
            prediction_grade=score_to_grade(prediction) if prediction is not None else LetterGrade.C,
            performance_score=performance if performance is not None else ZERO,
            performance_grade=score_to_grade(performance) if performance is not None else LetterGrade.C,
            total_aims_scored=inp.total_aims_scored,
            total_shots_scored=inp.total_shots_scored,
            total_pnl_dollars=total_pnl,
            career_level=level,
        )

        logger.info(
            "career_scored",
            scoring_version=SCORING_VERSION,
            user_id=inp.user_id,
            targets=len(inp.target_scores),
            prediction_quality_score=float(result.prediction_quality_score),
            performance_score=float(result.performance_score),
            total_pnl_dollars=float(total_pnl),
            career_level=level.level,
        )
        return result

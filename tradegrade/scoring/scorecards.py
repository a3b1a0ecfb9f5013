"""
scoring/scorecards.py — Scorecard builders

Turn computed scores into display-neutral scorecards: a compact grade-only
view and detailed metric breakdowns for Aims and Shots. Rendering is left
to the caller.
"""

from decimal import Decimal
from typing import Optional, Tuple

from tradegrade.models.aim import AimScore
from tradegrade.models.enumerations import Trend
from tradegrade.models.scorecard import (
    BonusRow,
    CompactScorecard,
    DetailScorecard,
    MetricRow,
    MultiplierRow,
)
from tradegrade.models.shot import ShotScore
from tradegrade.scoring.aim_scorer import get_difficulty_level
from tradegrade.scoring.constants import AIM_WEIGHTS, SHOT_WEIGHTS
from tradegrade.scoring.grade_mapper import GradeLike, get_grade_description, score_to_grade
from tradegrade.scoring.risk_assessor import get_risk_grade_description
from tradegrade.scoring.utils import Number, to_decimal

# (metric field, label, description)
_AIM_METRICS: Tuple[Tuple[str, str, str], ...] = (
    ("directional_accuracy", "Directional Accuracy",
     "Did the asset move in the predicted direction?"),
    ("magnitude_accuracy", "Magnitude Accuracy",
     "How close was the predicted move to reality?"),
    ("forecast_edge", "Forecast Edge",
     "Performance relative to market benchmark"),
    ("thesis_validity", "Thesis Validity",
     "Did the move occur for the stated reasons?"),
)

_SHOT_METRICS: Tuple[Tuple[str, str, str], ...] = (
    ("performance_score", "Performance",
     "Time-weighted P&L vs opportunity cost"),
    ("shot_forecast_edge", "Forecast Edge",
     "Outperformance vs market during hold"),
    ("perfect_shot_capture", "Perfect Shot Capture",
     "How efficiently you captured the opportunity"),
)


def build_compact_scorecard(
    grade: GradeLike,
    score: Number,
    trend: Optional[Trend] = None,
) -> CompactScorecard:
    return CompactScorecard(
        grade=grade,
        score=to_decimal(score),
        description=get_grade_description(grade),
        trend=trend,
    )


def build_aim_detail_scorecard(aim_score: AimScore) -> DetailScorecard:
    """Four weighted metric rows plus the (informational) difficulty multiplier."""
    metrics = [
        MetricRow(
            name=label,
            score=getattr(aim_score.metrics, field),
            grade=score_to_grade(getattr(aim_score.metrics, field)),
            description=description,
            weight=AIM_WEIGHTS[field],
        )
        for field, label, description in _AIM_METRICS
    ]

    difficulty = MultiplierRow(
        name="Difficulty",
        value=aim_score.difficulty_multiplier,
        description=get_difficulty_level(aim_score.difficulty_multiplier),
    )

    return DetailScorecard(
        metrics=metrics,
        final_score=aim_score.final_score,
        final_grade=aim_score.letter_grade,
        multipliers=[difficulty],
    )


def build_shot_detail_scorecard(shot_score: ShotScore) -> DetailScorecard:
    """
    Three weighted metric rows, the risk-mitigation row (weight 0, it acts
    through the multiplier), the risk multiplier and the adaptability bonus.
    """
    metrics = [
        MetricRow(
            name=label,
            score=getattr(shot_score.metrics, field),
            grade=score_to_grade(getattr(shot_score.metrics, field)),
            description=description,
            weight=SHOT_WEIGHTS[field],
        )
        for field, label, description in _SHOT_METRICS
    ]
    metrics.append(
        MetricRow(
            name="Risk Mitigation",
            score=shot_score.metrics.risk_mitigation_score,
            grade=score_to_grade(shot_score.metrics.risk_mitigation_score),
            description=get_risk_grade_description(shot_score.risk_grade),
            weight=Decimal("0"),
        )
    )

    risk = MultiplierRow(
        name="Risk Multiplier",
        value=shot_score.risk_multiplier,
        description=f"Risk grade {shot_score.risk_grade.value}",
    )
    adaptability = BonusRow(
        name="Adaptability",
        value=shot_score.adaptability_bonus,
        locked=shot_score.adaptability_locked,
    )

    return DetailScorecard(
        metrics=metrics,
        final_score=shot_score.final_score,
        final_grade=shot_score.letter_grade,
        multipliers=[risk],
        bonuses=[adaptability],
    )

"""
scoring/shot_scorer.py — Shot Scorer (execution quality)

Metrics feeding the base score (weights sum to 1.0):
    performance_score      0.45   annualized alpha vs market × 100
    shot_forecast_edge     0.35   realized return vs market, via the edge curve
    perfect_shot_capture   0.20   realized / best-possible (peak) return

Risk mitigation does not enter the average. It becomes a multiplier:
    final = clamp(base × risk_multiplier + adaptability_bonus)
"""

from decimal import Decimal
from typing import Tuple

import structlog

from tradegrade.models.enumerations import ExecutionDiscipline, RiskPlanQuality
from tradegrade.models.shot import ShotMetricScores, ShotScore, ShotScoringInput
from tradegrade.scoring.aim_scorer import annualize_return, calculate_time_normalized_profits
from tradegrade.scoring.constants import (
    PERFORMANCE_ALPHA_SCALE,
    SCORE_MAX,
    SCORE_MIN,
    SCORING_VERSION,
    SHOT_WEIGHTS,
)
from tradegrade.scoring.grade_mapper import clamp_score, score_to_grade
from tradegrade.scoring.interpolators import calculate_forecast_edge
from tradegrade.scoring.risk_assessor import (
    RiskAssessmentResult,
    assess_risk,
    calculate_adaptability_bonus,
    determine_execution_discipline,
    determine_plan_quality,
)
from tradegrade.scoring.utils import Number, days_between, to_decimal

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


def calculate_performance_score(
    entry_price: Number,
    exit_price: Number,
    duration_days: int,
    market_return_percent: Number,
) -> Decimal:
    """
    Time-weighted P&L against the market: higher returns in less time score better.

    Roughly +50% annualized alpha = +50, -50% = -50.
    """
    entry = to_decimal(entry_price)
    shot_return = (to_decimal(exit_price) - entry) / entry

    alpha = (
        annualize_return(shot_return, duration_days)
        - annualize_return(market_return_percent, duration_days)
    )
    return clamp_score(alpha * PERFORMANCE_ALPHA_SCALE)


def calculate_perfect_shot_capture(
    entry_price: Number,
    exit_price: Number,
    peak_price: Number,
) -> Decimal:
    """
    Share of the available upside that was actually captured.

    100% capture = 50, 50% = 0, 0% = -50; losing money when there was
    upside scales down to -50 at -100% capture.
    """
    entry = to_decimal(entry_price)
    realized = (to_decimal(exit_price) - entry) / entry
    perfect = (to_decimal(peak_price) - entry) / entry

    if perfect <= 0:
        # No upside was available: reward not losing
        if realized >= 0:
            return SCORE_MAX
        return clamp_score(realized * 100)

    capture = realized / perfect
    if capture >= 1:
        return SCORE_MAX
    if capture >= 0:
        return (capture - Decimal("0.5")) * 100
    return max(SCORE_MIN, capture * 50)


def calculate_capital_time_weight(position_size: Number, duration_days: int) -> Decimal:
    """Position size × days held, used to weight shots within a target."""
    return to_decimal(position_size) * Decimal(duration_days)


class ShotScorer:
    """Calculate Shot scores."""

    @staticmethod
    def assess_risk(inp: ShotScoringInput) -> RiskAssessmentResult:
        """Risk assessment from explicit classifications, else from the flags."""
        plan_quality = inp.risk_plan_quality
        if plan_quality is None:
            plan_quality = determine_plan_quality(inp.risk_plan_flags)

        discipline = inp.execution_discipline
        if discipline is None:
            discipline = determine_execution_discipline(inp.execution_flags)

        return assess_risk(RiskPlanQuality(plan_quality), ExecutionDiscipline(discipline))

    def calculate_metrics(
        self, inp: ShotScoringInput
    ) -> Tuple[ShotMetricScores, RiskAssessmentResult]:
        duration = days_between(inp.entry_date, inp.exit_date)
        shot_return = (inp.exit_price - inp.entry_price) / inp.entry_price

        performance = calculate_performance_score(
            inp.entry_price, inp.exit_price, duration, inp.market_return_percent
        )
        edge = calculate_forecast_edge(shot_return, inp.market_return_percent)
        capture = calculate_perfect_shot_capture(inp.entry_price, inp.exit_price, inp.peak_price)
        risk = self.assess_risk(inp)

        metrics = ShotMetricScores(
            performance_score=clamp_score(performance),
            shot_forecast_edge=clamp_score(edge),
            perfect_shot_capture=clamp_score(capture),
            risk_mitigation_score=risk.risk_score,
        )
        return metrics, risk

    @staticmethod
    def base_score(metrics: ShotMetricScores) -> Decimal:
        """Weighted average of the three execution metrics (not clamped)."""
        return sum(
            (getattr(metrics, name) * weight for name, weight in SHOT_WEIGHTS.items()),
            ZERO,
        )

    def calculate(self, inp: ShotScoringInput) -> ShotScore:
        """
        Score a closed shot.

        Args:
            inp: Shot facts. Risk plan quality / execution discipline are used
                 as given, or derived from their flags when omitted.

        Returns:
            ShotScore with metrics, risk grade and multiplier, adaptability
            bonus, final score, grade and time-normalized profits.
        """
        metrics, risk = self.calculate_metrics(inp)
        base = self.base_score(metrics)
        adaptability = calculate_adaptability_bonus(inp.adaptability_score, inp.is_pro)

        final = clamp_score(base * risk.risk_multiplier + adaptability.bonus)
        grade = score_to_grade(final)

        duration = days_between(inp.entry_date, inp.exit_date)
        shot_return = (inp.exit_price - inp.entry_price) / inp.entry_price
        profits = calculate_time_normalized_profits(shot_return, duration)
        weight = calculate_capital_time_weight(inp.position_size, duration)

        logger.info(
            "shot_scored",
            scoring_version=SCORING_VERSION,
            shot_id=inp.shot_id,
            aim_id=inp.aim_id,
            performance_score=float(metrics.performance_score),
            shot_forecast_edge=float(metrics.shot_forecast_edge),
            perfect_shot_capture=float(metrics.perfect_shot_capture),
            risk_grade=risk.risk_grade.value,
            risk_multiplier=float(risk.risk_multiplier),
            adaptability_bonus=float(adaptability.bonus),
            base_score=float(base),
            final_score=float(final),
            letter_grade=grade.value,
        )

        return ShotScore(
            shot_id=inp.shot_id,
            aim_id=inp.aim_id,
            metrics=metrics,
            risk_grade=risk.risk_grade,
            risk_multiplier=risk.risk_multiplier,
            adaptability_score=inp.adaptability_score if inp.adaptability_score is not None else ZERO,
            adaptability_bonus=adaptability.bonus,
            adaptability_locked=adaptability.locked,
            base_score=base,
            final_score=final,
            letter_grade=grade,
            profit_per_day=profits["per_day"],
            profit_per_month=profits["per_month"],
            profit_per_year=profits["per_year"],
            capital_time_weight=weight,
        )

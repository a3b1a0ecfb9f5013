"""
scoring/target_scorer.py — Target Scorer

Aggregates a Target's Aims and Shots into two scores:
    prediction_score   = mean(aim.final_score)                          thinking quality
    performance_score  = Σ(shot.final × size × days) / Σ(size × days)   execution quality

plus P&L, capital, time, accuracy, win/loss and market-comparison metrics.
"""

from decimal import Decimal
from typing import Dict, List, Optional

import structlog

from tradegrade.models.aim import AimScore
from tradegrade.models.shot import ShotScore
from tradegrade.models.target import ShotDetail, TargetScore, TargetScoringInput
from tradegrade.scoring.constants import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    HELD_UNTIL_END_FRACTION,
    SCORING_VERSION,
)
from tradegrade.scoring.grade_mapper import clamp_score, score_to_grade
from tradegrade.scoring.utils import days_between, mean, safe_ratio, weighted_mean

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")


def _positive_or_one(weight: Optional[Decimal]) -> Decimal:
    if weight is None or weight <= 0:
        return ONE
    return weight


def _clamp_optional(value: Optional[Decimal]) -> Optional[Decimal]:
    if value is None:
        return None
    return clamp_score(value)


class TargetScorer:
    """Calculate Target scores from already-scored Aims and Shots."""

    @staticmethod
    def prediction_score(aim_scores: List[AimScore]) -> Optional[Decimal]:
        """Equal-weight mean of aim final scores; None without aims."""
        return _clamp_optional(mean([a.final_score for a in aim_scores]))

    @staticmethod
    def performance_score(
        shot_scores: List[ShotScore],
        shot_details: List[ShotDetail],
    ) -> Optional[Decimal]:
        """
        Capital-time weighted mean of shot final scores; None without shots.

        Weight = position_size × days_held from the matching detail. Shots
        with no detail, or a non-positive weight, count with weight 1.
        """
        if not shot_scores:
            return None

        weight_map: Dict[str, Decimal] = {
            d.shot_id: d.position_size * Decimal(d.days_held) for d in shot_details
        }
        weights = [_positive_or_one(weight_map.get(s.shot_id)) for s in shot_scores]
        return _clamp_optional(weighted_mean([s.final_score for s in shot_scores], weights))

    @staticmethod
    def pnl_metrics(shot_details: List[ShotDetail]) -> Dict[str, Decimal]:
        total_pnl = ZERO
        total_capital = ZERO
        max_possible = ZERO

        for d in shot_details:
            quantity = d.position_size / d.entry_price
            total_pnl += (d.exit_price - d.entry_price) * quantity
            total_capital += d.position_size
            max_possible += max(ZERO, (d.peak_price - d.entry_price) * quantity)

        # Overlap data is not available, so all capital counts as deployed at once
        peak_capital = total_capital

        return {
            "total_pnl_dollars": total_pnl,
            "total_pnl_percent": safe_ratio(total_pnl, total_capital),
            "max_possible_return_percent": safe_ratio(max_possible, total_capital),
            "total_capital_invested": total_capital,
            "peak_capital_at_once": peak_capital,
            "capital_efficiency": safe_ratio(total_pnl, peak_capital),
        }

    @staticmethod
    def time_metrics(inp: TargetScoringInput) -> Dict[str, object]:
        duration = days_between(inp.first_aim_date, inp.close_date)
        held = [Decimal(d.days_held) for d in inp.shot_details]

        avg_holding = mean(held)
        held_until_end = any(h >= Decimal(duration) * HELD_UNTIL_END_FRACTION for h in held)

        return {
            "target_duration_days": duration,
            "held_until_end": held_until_end,
            "avg_holding_period_days": avg_holding if avg_holding is not None else ZERO,
        }

    @staticmethod
    def prediction_accuracy(aim_scores: List[AimScore]) -> Dict[str, Decimal]:
        """Mean annualized predicted vs actual return across aims."""
        predicted = mean([a.predicted_profit_per_year for a in aim_scores])
        actual = mean([a.actual_profit_per_year for a in aim_scores])
        if predicted is None or actual is None:
            return {
                "predicted_return_percent": ZERO,
                "actual_return_percent": ZERO,
                "prediction_accuracy_ratio": ZERO,
            }
        return {
            "predicted_return_percent": predicted,
            "actual_return_percent": actual,
            "prediction_accuracy_ratio": safe_ratio(actual, predicted),
        }

    @staticmethod
    def win_loss(aim_scores: List[AimScore]) -> Dict[str, object]:
        """An aim wins when it called the direction correctly."""
        total = len(aim_scores)
        wins = sum(1 for a in aim_scores if a.metrics.directional_accuracy > 0)
        return {
            "winning_aims_count": wins,
            "total_aims_count": total,
            "win_ratio": safe_ratio(Decimal(wins), Decimal(total)),
        }

    @staticmethod
    def average_profits(
        shot_scores: List[ShotScore],
        shot_details: List[ShotDetail],
    ) -> Dict[str, Decimal]:
        """Position-size weighted mean of shot profit per day."""
        size_map = {d.shot_id: d.position_size for d in shot_details}
        weights = [_positive_or_one(size_map.get(s.shot_id)) for s in shot_scores]
        per_day = weighted_mean([s.profit_per_day for s in shot_scores], weights)
        if per_day is None:
            per_day = ZERO
        return {
            "avg_profit_per_day": per_day,
            "avg_profit_per_month": per_day * DAYS_PER_MONTH,
            "avg_profit_per_year": per_day * DAYS_PER_YEAR,
        }

    def calculate(self, inp: TargetScoringInput) -> TargetScore:
        """
        Score a closed target.

        Returns:
            TargetScore. prediction_* / performance_* are None when there
            are no aims / shots.
        """
        prediction = self.prediction_score(inp.aim_scores)
        performance = self.performance_score(inp.shot_scores, inp.shot_details)

        pnl = self.pnl_metrics(inp.shot_details)
        time_metrics = self.time_metrics(inp)
        accuracy = self.prediction_accuracy(inp.aim_scores)
        win_loss = self.win_loss(inp.aim_scores)
        profits = self.average_profits(inp.shot_scores, inp.shot_details)

        alpha = pnl["total_pnl_percent"] - inp.market_return_percent

        score = TargetScore(
            target_id=inp.target_id,
            user_id=inp.user_id,
            prediction_score=prediction,
            prediction_grade=score_to_grade(prediction) if prediction is not None else None,
            performance_score=performance,
            performance_grade=score_to_grade(performance) if performance is not None else None,
            market_return_percent=inp.market_return_percent,
            alpha_vs_market=alpha,
            **pnl,
            **time_metrics,
            **accuracy,
            **win_loss,
            **profits,
        )

        logger.info(
            "target_scored",
            scoring_version=SCORING_VERSION,
            target_id=inp.target_id,
            user_id=inp.user_id,
            aims=len(inp.aim_scores),
            shots=len(inp.shot_scores),
            prediction_score=float(prediction) if prediction is not None else None,
            performance_score=float(performance) if performance is not None else None,
            total_pnl_dollars=float(pnl["total_pnl_dollars"]),
            alpha_vs_market=float(alpha),
        )
        return score

from decimal import Decimal
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from tradegrade.models.aim import AimScore
from tradegrade.models.base import ScoringModel, utc_now
from tradegrade.models.enumerations import LetterGrade
from tradegrade.models.shot import ShotScore


class ShotDetail(ScoringModel):
    """Financial facts for one shot, used for P&L and capital-time weights."""

    shot_id: str
    entry_price: Decimal = Field(..., gt=0)
    exit_price: Decimal = Field(..., ge=0)
    position_size: Decimal = Field(..., ge=0)
    days_held: int = Field(..., ge=0)
    peak_price: Decimal = Field(..., ge=0)


class TargetScoringInput(ScoringModel):
    """Already-computed child scores for one Target plus its financial facts."""

    target_id: str
    user_id: str

    aim_scores: List[AimScore] = Field(default_factory=list)
    shot_scores: List[ShotScore] = Field(default_factory=list)
    shot_details: List[ShotDetail] = Field(default_factory=list)

    first_aim_date: datetime
    close_date: datetime

    market_return_percent: Decimal


class TargetScore(ScoringModel):
    """
    Target score aggregated from its Aims and Shots.

    prediction_* and performance_* are None when the target has no scored
    aims / shots respectively.
    """

    target_id: str
    user_id: str

    # Dual scores
    prediction_score: Optional[Decimal] = Field(default=None, ge=-50, le=50)
    prediction_grade: Optional[LetterGrade] = None
    performance_score: Optional[Decimal] = Field(default=None, ge=-50, le=50)
    performance_grade: Optional[LetterGrade] = None

    # Financial results
    total_pnl_dollars: Decimal
    total_pnl_percent: Decimal
    max_possible_return_percent: Decimal

    # Capital
    total_capital_invested: Decimal
    peak_capital_at_once: Decimal
    capital_efficiency: Decimal

    # Time
    target_duration_days: int
    held_until_end: bool
    avg_holding_period_days: Decimal

    # Prediction accuracy (annualized)
    predicted_return_percent: Decimal
    actual_return_percent: Decimal
    prediction_accuracy_ratio: Decimal

    # Win / loss
    winning_aims_count: int
    total_aims_count: int
    win_ratio: Decimal

    # Market comparison
    market_return_percent: Decimal
    alpha_vs_market: Decimal

    # Time-normalized returns
    avg_profit_per_day: Decimal
    avg_profit_per_month: Decimal
    avg_profit_per_year: Decimal

    calculated_at: datetime = Field(default_factory=utc_now)

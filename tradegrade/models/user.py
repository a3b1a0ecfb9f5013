from decimal import Decimal
from datetime import datetime
from typing import List

from pydantic import Field

from tradegrade.models.base import ScoringModel, utc_now
from tradegrade.models.enumerations import LetterGrade, Trend
from tradegrade.models.target import TargetScore


class CareerLevel(ScoringModel):
    level: str
    description: str


class ScoreTrend(ScoringModel):
    """Change in both career scores between an older and a recent cohort."""

    prediction_trend: Trend
    performance_trend: Trend
    prediction_delta: Decimal
    performance_delta: Decimal


class UserCareerScoringInput(ScoringModel):
    user_id: str
    target_scores: List[TargetScore] = Field(default_factory=list)
    total_aims_scored: int = Field(default=0, ge=0)
    total_shots_scored: int = Field(default=0, ge=0)


class UserCareerScore(ScoringModel):
    """
    Career scores aggregated from all of a user's Targets.

    Scores default to 0 (grade C) when no target contributes.
    """

    user_id: str

    prediction_quality_score: Decimal = Field(..., ge=-50, le=50)
    prediction_grade: LetterGrade
    performance_score: Decimal = Field(..., ge=-50, le=50)
    performance_grade: LetterGrade

    total_aims_scored: int = Field(..., ge=0)
    total_shots_scored: int = Field(..., ge=0)
    total_pnl_dollars: Decimal

    career_level: CareerLevel

    calculated_at: datetime = Field(default_factory=utc_now)

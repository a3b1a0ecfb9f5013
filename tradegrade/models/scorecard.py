from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from tradegrade.models.base import ScoringModel
from tradegrade.models.enumerations import LetterGrade, Trend


class CompactScorecard(ScoringModel):
    """Grade-only view."""

    grade: LetterGrade
    score: Decimal
    description: str
    trend: Optional[Trend] = None


class MetricRow(ScoringModel):
    name: str
    score: Decimal
    grade: LetterGrade
    description: str
    weight: Decimal = Field(..., ge=0, le=1)


class MultiplierRow(ScoringModel):
    name: str
    value: Decimal
    description: str


class BonusRow(ScoringModel):
    name: str
    value: Decimal
    locked: bool


class DetailScorecard(ScoringModel):
    """Full metric breakdown for an Aim or Shot."""

    metrics: List[MetricRow]
    final_score: Decimal
    final_grade: LetterGrade
    multipliers: List[MultiplierRow] = Field(default_factory=list)
    bonuses: List[BonusRow] = Field(default_factory=list)

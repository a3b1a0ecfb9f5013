from decimal import Decimal
from datetime import datetime
from typing import Optional

from pydantic import Field

from tradegrade.models.base import ScoringModel, utc_now
from tradegrade.models.enumerations import LetterGrade, PriceReaction


class CatalystOutcome(ScoringModel):
    """
    What the thesis catalyst actually did. Absence of this object means the
    trader supplied no catalyst data, which is different from "did not occur".
    """

    occurred: bool = Field(..., description="Did the catalyst event occur?")
    price_reaction: PriceReaction = Field(
        default=PriceReaction.MUTED,
        description="How price reacted relative to the thesis"
    )


class AimScoringInput(ScoringModel):
    """
    Raw facts about a closed Aim (one price prediction).
    """

    aim_id: str = Field(..., min_length=1, description="Aim identifier")
    symbol: Optional[str] = Field(default=None, max_length=20, description="Ticker symbol")

    entry_price: Decimal = Field(..., gt=0, description="Price when the aim was created")
    target_price: Decimal = Field(..., ge=0, description="Predicted target price")
    actual_price: Decimal = Field(..., ge=0, description="Price at close")

    start_date: datetime = Field(..., description="When the aim was created")
    target_date: datetime = Field(..., description="Predicted target date")
    close_date: datetime = Field(..., description="When the aim was closed")

    market_return_percent: Decimal = Field(
        ...,
        description="Benchmark return over the aim period (0.05 = 5%)"
    )

    catalyst_type: Optional[str] = Field(default=None, description="Primary catalyst category")
    catalyst_occurred: Optional[bool] = Field(default=None, description="Did the event occur?")
    price_reaction_aligned: Optional[bool] = Field(
        default=None,
        description="Did price react as expected? None = muted / unknown"
    )

    risks_documented: bool = Field(..., description="Were risks documented at creation?")

    self_rating: Optional[int] = Field(default=None, ge=1, le=5)
    self_reflection_notes: Optional[str] = Field(default=None, max_length=5000)

    @property
    def catalyst(self) -> Optional[CatalystOutcome]:
        """Catalyst outcome, or None when no catalyst data was supplied."""
        if self.catalyst_occurred is None:
            return None
        if self.price_reaction_aligned is None:
            reaction = PriceReaction.MUTED
        elif self.price_reaction_aligned:
            reaction = PriceReaction.EXPECTED
        else:
            reaction = PriceReaction.OPPOSITE
        return CatalystOutcome(occurred=self.catalyst_occurred, price_reaction=reaction)


class AimMetricScores(ScoringModel):
    """The four Aim metrics, each on the -50..+50 scale."""

    directional_accuracy: Decimal = Field(..., ge=-50, le=50)
    magnitude_accuracy: Decimal = Field(..., ge=-50, le=50)
    forecast_edge: Decimal = Field(..., ge=-50, le=50)
    thesis_validity: Decimal = Field(..., ge=-50, le=50)


class AimScore(ScoringModel):
    """
    Complete Aim score.

    final_score is the weighted AVERAGE of the metrics. The difficulty
    multiplier is reported alongside it and never scales it.
    """

    aim_id: str
    metrics: AimMetricScores

    difficulty_multiplier: Decimal = Field(..., ge=1, le=5)

    final_score: Decimal = Field(..., ge=-50, le=50)
    letter_grade: LetterGrade

    predicted_profit_per_day: Decimal
    predicted_profit_per_month: Decimal
    predicted_profit_per_year: Decimal
    actual_profit_per_day: Decimal
    actual_profit_per_month: Decimal
    actual_profit_per_year: Decimal

    risks_documented: bool
    thesis_validity_capped: bool
    self_rating: Optional[int] = Field(default=None, ge=1, le=5)
    self_reflection_notes: Optional[str] = None

    calculated_at: datetime = Field(
        default_factory=utc_now,
        description="Calculation timestamp (UTC), informational only"
    )

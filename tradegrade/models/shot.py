from decimal import Decimal
from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from tradegrade.models.base import ScoringModel, utc_now
from tradegrade.models.enumerations import (
    ExecutionDiscipline,
    LetterGrade,
    RiskGrade,
    RiskPlanQuality,
)


class RiskPlanFlags(ScoringModel):
    """Risk controls the trader put in place before entering."""

    has_stop_loss: bool = False
    has_risk_percentage: bool = False
    has_exit_conditions: bool = False
    stop_loss_reasonable: bool = Field(
        default=False,
        description="Stop sits at a sensible distance, e.g. within 20% of entry"
    )


class ExecutionFlags(ScoringModel):
    """How the trader behaved while the position was open."""

    stop_loss_triggered: bool = False
    stop_loss_respected: bool = True
    exited_early_with_reason: bool = False
    held_through_major_drawdown: bool = Field(
        default=False,
        description="e.g. sat through -30% without acting"
    )
    added_to_losing_position: bool = False


class ShotScoringInput(ScoringModel):
    """
    Raw facts about a closed Shot (one executed trade).

    Risk plan quality and execution discipline may be given directly or
    derived from the corresponding flags.
    """

    shot_id: str = Field(..., min_length=1)
    aim_id: str = Field(default="", description="Parent aim, lookup only")

    entry_price: Decimal = Field(..., gt=0)
    entry_date: datetime
    exit_price: Decimal = Field(..., ge=0)
    exit_date: datetime
    position_size: Decimal = Field(..., ge=0, description="Dollar amount deployed")
    peak_price: Decimal = Field(..., ge=0, description="Highest price during the hold")

    market_return_percent: Decimal = Field(..., description="Benchmark return over the hold")

    risk_plan_quality: Optional[RiskPlanQuality] = None
    risk_plan_flags: Optional[RiskPlanFlags] = None
    execution_discipline: Optional[ExecutionDiscipline] = None
    execution_flags: Optional[ExecutionFlags] = None

    adaptability_score: Optional[Decimal] = Field(
        default=None,
        description="Raw Pro adaptability rating; the bonus is raw / 10 bounded to ±5"
    )
    is_pro: bool = False

    @model_validator(mode="after")
    def validate_risk_inputs(self):
        """Each risk dimension needs either a classification or its flags."""
        if self.risk_plan_quality is None and self.risk_plan_flags is None:
            raise ValueError("risk_plan_quality or risk_plan_flags is required")
        if self.execution_discipline is None and self.execution_flags is None:
            raise ValueError("execution_discipline or execution_flags is required")
        return self


class ShotMetricScores(ScoringModel):
    """The four Shot metrics, each on the -50..+50 scale."""

    performance_score: Decimal = Field(..., ge=-50, le=50)
    shot_forecast_edge: Decimal = Field(..., ge=-50, le=50)
    perfect_shot_capture: Decimal = Field(..., ge=-50, le=50)
    risk_mitigation_score: Decimal = Field(..., ge=-50, le=50)


class ShotScore(ScoringModel):
    """
    Complete Shot score.

    final_score = clamp(base_score × risk_multiplier + adaptability_bonus)
    """

    shot_id: str
    aim_id: str

    metrics: ShotMetricScores

    risk_grade: RiskGrade
    risk_multiplier: Decimal = Field(..., ge=Decimal("0.70"), le=Decimal("1.10"))

    adaptability_score: Decimal
    adaptability_bonus: Decimal = Field(..., ge=-5, le=5)
    adaptability_locked: bool

    base_score: Decimal
    final_score: Decimal = Field(..., ge=-50, le=50)
    letter_grade: LetterGrade

    profit_per_day: Decimal
    profit_per_month: Decimal
    profit_per_year: Decimal

    capital_time_weight: Decimal

    calculated_at: datetime = Field(default_factory=utc_now)

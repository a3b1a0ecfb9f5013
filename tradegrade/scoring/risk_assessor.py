"""
scoring/risk_assessor.py — Risk Mitigation Assessment

Evaluates how well a trade's risk was planned and then managed:
- Plan quality (-20 to +15), from the controls set up before entry
- Execution discipline (-30 to +20), from behaviour while the trade was open

Formula:
    risk_score = clamp(plan_base + execution_adjustment)    [-50, 50]
    risk_grade = A/B/C/D/F by threshold
    risk_multiplier = 1.10 / 1.05 / 1.00 / 0.85 / 0.70

Also holds the Pro-only adaptability bonus.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

import structlog

from tradegrade.models.enumerations import (
    ExecutionDiscipline,
    RiskGrade,
    RiskPlanQuality,
)
from tradegrade.models.shot import ExecutionFlags, RiskPlanFlags
from tradegrade.scoring.constants import (
    ADAPTABILITY_BONUS_MAX,
    ADAPTABILITY_BONUS_MIN,
    ADAPTABILITY_SCORE_DIVISOR,
    EXECUTION_DISCIPLINE_ADJUSTMENTS,
    RISK_GRADE_DESCRIPTIONS,
    RISK_MULTIPLIERS,
    RISK_PLAN_BASE_SCORES,
)
from tradegrade.scoring.grade_mapper import as_risk_grade, clamp_score, risk_score_to_grade
from tradegrade.scoring.utils import Number, clamp, to_decimal

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RiskAssessmentResult:
    """Risk assessment with breakdown."""
    plan_base_score: Decimal
    execution_adjustment: Decimal
    risk_score: Decimal          # -50 to +50
    risk_grade: RiskGrade
    risk_multiplier: Decimal     # 0.70 to 1.10


@dataclass(frozen=True)
class AdaptabilityBonus:
    bonus: Decimal               # -5 to +5, always 0 for non-Pro
    locked: bool


def determine_plan_quality(flags: RiskPlanFlags) -> RiskPlanQuality:
    """
    Classify the pre-trade risk plan.

    structured:   stop loss, risk %, exit conditions, and the stop is sensible
    reasonable:   stop loss plus risk % or exit conditions
    very_liberal: stop loss or exit conditions alone
    none:         nothing defined
    """
    if (
        flags.has_stop_loss
        and flags.has_risk_percentage
        and flags.has_exit_conditions
        and flags.stop_loss_reasonable
    ):
        return RiskPlanQuality.STRUCTURED

    if flags.has_stop_loss and (flags.has_risk_percentage or flags.has_exit_conditions):
        return RiskPlanQuality.REASONABLE

    if flags.has_stop_loss or flags.has_exit_conditions:
        return RiskPlanQuality.VERY_LIBERAL

    return RiskPlanQuality.NONE


def determine_execution_discipline(flags: ExecutionFlags) -> ExecutionDiscipline:
    """Classify in-trade behaviour, worst case first."""
    if (flags.stop_loss_triggered and not flags.stop_loss_respected) or flags.added_to_losing_position:
        return ExecutionDiscipline.SEVERE_NEGLECT

    if flags.held_through_major_drawdown:
        return ExecutionDiscipline.CLEAR_VIOLATION

    if (flags.stop_loss_triggered and flags.stop_loss_respected) or flags.exited_early_with_reason:
        return ExecutionDiscipline.FOLLOWED_CLEANLY

    return ExecutionDiscipline.MINOR_DELAY


def assess_risk(
    plan_quality: RiskPlanQuality,
    execution_discipline: ExecutionDiscipline,
) -> RiskAssessmentResult:
    """
    Combine plan quality and execution discipline into a risk grade.

    Examples:
        >>> r = assess_risk(RiskPlanQuality.STRUCTURED, ExecutionDiscipline.FOLLOWED_CLEANLY)
        >>> r.risk_score, r.risk_grade, r.risk_multiplier
        (Decimal('35'), <RiskGrade.A: 'A'>, Decimal('1.10'))
    """
    plan_base = RISK_PLAN_BASE_SCORES[RiskPlanQuality(plan_quality)]
    adjustment = EXECUTION_DISCIPLINE_ADJUSTMENTS[ExecutionDiscipline(execution_discipline)]

    risk_score = clamp_score(plan_base + adjustment)
    risk_grade = risk_score_to_grade(risk_score)
    multiplier = RISK_MULTIPLIERS[risk_grade]

    logger.debug(
        "risk_assessed",
        plan_quality=RiskPlanQuality(plan_quality).value,
        execution_discipline=ExecutionDiscipline(execution_discipline).value,
        risk_score=float(risk_score),
        risk_grade=risk_grade.value,
        risk_multiplier=float(multiplier),
    )

    return RiskAssessmentResult(
        plan_base_score=plan_base,
        execution_adjustment=adjustment,
        risk_score=risk_score,
        risk_grade=risk_grade,
        risk_multiplier=multiplier,
    )


def calculate_adaptability_bonus(
    adaptability_score: Optional[Number],
    is_pro: bool,
) -> AdaptabilityBonus:
    """
    Pro-only bonus: raw adaptability (-50..+50) / 10, bounded to ±5.
    Non-Pro users always get a locked zero bonus.
    """
    if not is_pro:
        return AdaptabilityBonus(bonus=Decimal("0"), locked=True)

    raw = to_decimal(adaptability_score) if adaptability_score is not None else Decimal("0")
    bonus = clamp(
        raw / ADAPTABILITY_SCORE_DIVISOR,
        ADAPTABILITY_BONUS_MIN,
        ADAPTABILITY_BONUS_MAX,
    )
    return AdaptabilityBonus(bonus=bonus, locked=False)


def get_risk_grade_description(grade: Union[RiskGrade, str]) -> str:
    return RISK_GRADE_DESCRIPTIONS[as_risk_grade(grade)]

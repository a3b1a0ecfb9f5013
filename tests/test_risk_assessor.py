# tests/test_risk_assessor.py

"""
Risk Assessor Tests - plan quality, execution discipline, risk grade, adaptability
"""

import pytest
from decimal import Decimal

from tradegrade.core.exceptions import InvalidGradeException
from tradegrade.models.enumerations import ExecutionDiscipline, RiskGrade, RiskPlanQuality
from tradegrade.models.shot import ExecutionFlags, RiskPlanFlags
from tradegrade.scoring.risk_assessor import (
    assess_risk,
    calculate_adaptability_bonus,
    determine_execution_discipline,
    determine_plan_quality,
    get_risk_grade_description,
)


class TestDeterminePlanQuality:

    def test_structured(self):
        flags = RiskPlanFlags(
            has_stop_loss=True,
            has_risk_percentage=True,
            has_exit_conditions=True,
            stop_loss_reasonable=True,
        )
        assert determine_plan_quality(flags) == RiskPlanQuality.STRUCTURED

    def test_all_components_but_unreasonable_stop_is_reasonable(self):
        flags = RiskPlanFlags(has_stop_loss=True, has_risk_percentage=True, has_exit_conditions=True)
        assert determine_plan_quality(flags) == RiskPlanQuality.REASONABLE

    def test_stop_plus_exit_conditions(self):
        flags = RiskPlanFlags(has_stop_loss=True, has_exit_conditions=True)
        assert determine_plan_quality(flags) == RiskPlanQuality.REASONABLE

    def test_stop_only(self):
        assert determine_plan_quality(RiskPlanFlags(has_stop_loss=True)) == RiskPlanQuality.VERY_LIBERAL

    def test_exit_conditions_only(self):
        flags = RiskPlanFlags(has_exit_conditions=True, has_risk_percentage=True)
        assert determine_plan_quality(flags) == RiskPlanQuality.VERY_LIBERAL

    def test_nothing(self):
        assert determine_plan_quality(RiskPlanFlags(has_risk_percentage=True)) == RiskPlanQuality.NONE


class TestDetermineExecutionDiscipline:

    def test_ignored_stop_is_severe(self):
        flags = ExecutionFlags(stop_loss_triggered=True, stop_loss_respected=False)
        assert determine_execution_discipline(flags) == ExecutionDiscipline.SEVERE_NEGLECT

    def test_adding_to_loser_is_severe(self):
        flags = ExecutionFlags(added_to_losing_position=True, exited_early_with_reason=True)
        assert determine_execution_discipline(flags) == ExecutionDiscipline.SEVERE_NEGLECT

    def test_major_drawdown_is_clear_violation(self):
        flags = ExecutionFlags(held_through_major_drawdown=True, exited_early_with_reason=True)
        assert determine_execution_discipline(flags) == ExecutionDiscipline.CLEAR_VIOLATION

    def test_respected_stop_is_clean(self):
        flags = ExecutionFlags(stop_loss_triggered=True, stop_loss_respected=True)
        assert determine_execution_discipline(flags) == ExecutionDiscipline.FOLLOWED_CLEANLY

    def test_reasoned_early_exit_is_clean(self):
        flags = ExecutionFlags(exited_early_with_reason=True)
        assert determine_execution_discipline(flags) == ExecutionDiscipline.FOLLOWED_CLEANLY

    def test_default_is_minor_delay(self):
        assert determine_execution_discipline(ExecutionFlags()) == ExecutionDiscipline.MINOR_DELAY


class TestAssessRisk:

    @pytest.mark.parametrize("plan,discipline,score,grade,multiplier", [
        (RiskPlanQuality.STRUCTURED, ExecutionDiscipline.FOLLOWED_CLEANLY, "35", RiskGrade.A, "1.10"),
        (RiskPlanQuality.REASONABLE, ExecutionDiscipline.FOLLOWED_CLEANLY, "20", RiskGrade.B, "1.05"),
        (RiskPlanQuality.REASONABLE, ExecutionDiscipline.MINOR_DELAY, "0", RiskGrade.C, "1.00"),
        (RiskPlanQuality.VERY_LIBERAL, ExecutionDiscipline.MINOR_DELAY, "-5", RiskGrade.C, "1.00"),
        (RiskPlanQuality.STRUCTURED, ExecutionDiscipline.SEVERE_NEGLECT, "-15", RiskGrade.D, "0.85"),
        (RiskPlanQuality.VERY_LIBERAL, ExecutionDiscipline.CLEAR_VIOLATION, "-20", RiskGrade.D, "0.85"),
        (RiskPlanQuality.NONE, ExecutionDiscipline.CLEAR_VIOLATION, "-35", RiskGrade.F, "0.70"),
        (RiskPlanQuality.NONE, ExecutionDiscipline.SEVERE_NEGLECT, "-50", RiskGrade.F, "0.70"),
    ])
    def test_combinations(self, plan, discipline, score, grade, multiplier):
        result = assess_risk(plan, discipline)
        assert result.risk_score == Decimal(score)
        assert result.risk_grade == grade
        assert result.risk_multiplier == Decimal(multiplier)

    def test_breakdown(self):
        result = assess_risk(RiskPlanQuality.NONE, ExecutionDiscipline.FOLLOWED_CLEANLY)
        assert result.plan_base_score == Decimal("-20")
        assert result.execution_adjustment == Decimal("20")
        assert result.risk_score == Decimal("0")

    def test_accepts_string_values(self):
        result = assess_risk("structured", "followed_cleanly")
        assert result.risk_grade == RiskGrade.A


class TestAdaptabilityBonus:

    def test_non_pro_is_locked_zero(self):
        bonus = calculate_adaptability_bonus(40, is_pro=False)
        assert bonus.bonus == Decimal("0")
        assert bonus.locked is True

    def test_pro_scales_by_ten(self):
        bonus = calculate_adaptability_bonus(30, is_pro=True)
        assert bonus.bonus == Decimal("3")
        assert bonus.locked is False

    def test_pro_bounds(self):
        assert calculate_adaptability_bonus(80, is_pro=True).bonus == Decimal("5")
        assert calculate_adaptability_bonus(-70, is_pro=True).bonus == Decimal("-5")

    def test_pro_without_score(self):
        bonus = calculate_adaptability_bonus(None, is_pro=True)
        assert bonus.bonus == Decimal("0")
        assert bonus.locked is False


class TestRiskGradeDescription:

    def test_descriptions(self):
        assert get_risk_grade_description(RiskGrade.A) == "Excellent risk management"
        assert get_risk_grade_description("F") == "Poor risk management"

    def test_unknown_risk_grade_raises(self):
        with pytest.raises(InvalidGradeException) as exc_info:
            get_risk_grade_description("E")
        assert exc_info.value.grade == "E"
        assert exc_info.value.scale == "risk"
        assert isinstance(exc_info.value, ValueError)

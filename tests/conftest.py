# tests/conftest.py

"""
Pytest Fixtures - Shared inputs and score builders for the scoring engine

SCENARIO REFERENCE:
- Scenario A: strong aim (entry 100, target 150, actual 140, market +20%)
- Scenario B: losing shot with no risk plan and severe neglect (entry 100, exit 90)
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from tradegrade.models.aim import AimMetricScores, AimScore, AimScoringInput
from tradegrade.models.enumerations import (
    ExecutionDiscipline,
    LetterGrade,
    RiskGrade,
    RiskPlanQuality,
)
from tradegrade.models.shot import ShotMetricScores, ShotScore, ShotScoringInput
from tradegrade.models.target import ShotDetail, TargetScore
from tradegrade.scoring.grade_mapper import score_to_grade

BASE_DATE = datetime(2025, 1, 1, 14, 30, tzinfo=timezone.utc)


def days_after(days: int) -> datetime:
    return BASE_DATE + timedelta(days=days)


# =============================================================================
# SCORE BUILDERS (for aggregation tests that don't need real metrics)
# =============================================================================

def make_aim_score(
    aim_id: str,
    final_score,
    directional_accuracy="0",
    predicted_profit_per_year="0",
    actual_profit_per_year="0",
) -> AimScore:
    final = Decimal(str(final_score))
    return AimScore(
        aim_id=aim_id,
        metrics=AimMetricScores(
            directional_accuracy=Decimal(str(directional_accuracy)),
            magnitude_accuracy=Decimal("0"),
            forecast_edge=Decimal("0"),
            thesis_validity=Decimal("0"),
        ),
        difficulty_multiplier=Decimal("1"),
        final_score=final,
        letter_grade=score_to_grade(final),
        predicted_profit_per_day=Decimal("0"),
        predicted_profit_per_month=Decimal("0"),
        predicted_profit_per_year=Decimal(str(predicted_profit_per_year)),
        actual_profit_per_day=Decimal("0"),
        actual_profit_per_month=Decimal("0"),
        actual_profit_per_year=Decimal(str(actual_profit_per_year)),
        risks_documented=True,
        thesis_validity_capped=False,
    )


def make_shot_score(shot_id: str, final_score, profit_per_day="0") -> ShotScore:
    final = Decimal(str(final_score))
    return ShotScore(
        shot_id=shot_id,
        aim_id="aim-1",
        metrics=ShotMetricScores(
            performance_score=Decimal("0"),
            shot_forecast_edge=Decimal("0"),
            perfect_shot_capture=Decimal("0"),
            risk_mitigation_score=Decimal("0"),
        ),
        risk_grade=RiskGrade.C,
        risk_multiplier=Decimal("1.00"),
        adaptability_score=Decimal("0"),
        adaptability_bonus=Decimal("0"),
        adaptability_locked=True,
        base_score=final,
        final_score=final,
        letter_grade=score_to_grade(final),
        profit_per_day=Decimal(str(profit_per_day)),
        profit_per_month=Decimal("0"),
        profit_per_year=Decimal("0"),
        capital_time_weight=Decimal("0"),
    )


def make_shot_detail(shot_id: str, position_size, days_held: int,
                     entry="100", exit_="100", peak="100") -> ShotDetail:
    return ShotDetail(
        shot_id=shot_id,
        entry_price=Decimal(str(entry)),
        exit_price=Decimal(str(exit_)),
        position_size=Decimal(str(position_size)),
        days_held=days_held,
        peak_price=Decimal(str(peak)),
    )


def make_target_score(
    target_id: str,
    prediction_score=None,
    performance_score=None,
    total_capital_invested="0",
    total_pnl_dollars="0",
) -> TargetScore:
    prediction = Decimal(str(prediction_score)) if prediction_score is not None else None
    performance = Decimal(str(performance_score)) if performance_score is not None else None
    zero = Decimal("0")
    return TargetScore(
        target_id=target_id,
        user_id="user-1",
        prediction_score=prediction,
        prediction_grade=score_to_grade(prediction) if prediction is not None else None,
        performance_score=performance,
        performance_grade=score_to_grade(performance) if performance is not None else None,
        total_pnl_dollars=Decimal(str(total_pnl_dollars)),
        total_pnl_percent=zero,
        max_possible_return_percent=zero,
        total_capital_invested=Decimal(str(total_capital_invested)),
        peak_capital_at_once=Decimal(str(total_capital_invested)),
        capital_efficiency=zero,
        target_duration_days=0,
        held_until_end=False,
        avg_holding_period_days=zero,
        predicted_return_percent=zero,
        actual_return_percent=zero,
        prediction_accuracy_ratio=zero,
        winning_aims_count=0,
        total_aims_count=0,
        win_ratio=zero,
        market_return_percent=zero,
        alpha_vs_market=zero,
        avg_profit_per_day=zero,
        avg_profit_per_month=zero,
        avg_profit_per_year=zero,
    )


# =============================================================================
# AIM FIXTURES
# =============================================================================

@pytest.fixture
def scenario_a_aim_data():
    """Strong aim: +50% predicted, +40% realized, market +20%, no catalyst data."""
    return {
        "aim_id": "aim-a",
        "symbol": "NVDA",
        "entry_price": "100",
        "target_price": "150",
        "actual_price": "140",
        "start_date": BASE_DATE,
        "target_date": days_after(180),
        "close_date": days_after(190),
        "market_return_percent": "0.20",
        "risks_documented": True,
    }


@pytest.fixture
def scenario_a_aim(scenario_a_aim_data):
    return AimScoringInput(**scenario_a_aim_data)


# =============================================================================
# SHOT FIXTURES
# =============================================================================

@pytest.fixture
def scenario_b_shot_data():
    """Losing shot held 30 days, no risk plan, stop ignored."""
    return {
        "shot_id": "shot-b",
        "aim_id": "aim-a",
        "entry_price": "100",
        "entry_date": BASE_DATE,
        "exit_price": "90",
        "exit_date": days_after(30),
        "position_size": "5000",
        "peak_price": "105",
        "market_return_percent": "0",
        "risk_plan_quality": RiskPlanQuality.NONE,
        "execution_discipline": ExecutionDiscipline.SEVERE_NEGLECT,
    }


@pytest.fixture
def scenario_b_shot(scenario_b_shot_data):
    return ShotScoringInput(**scenario_b_shot_data)


@pytest.fixture
def winning_shot_data():
    """Clean winning shot: +20% in 60 days vs market +5%, structured plan."""
    return {
        "shot_id": "shot-w",
        "aim_id": "aim-a",
        "entry_price": "100",
        "entry_date": BASE_DATE,
        "exit_price": "120",
        "exit_date": days_after(60),
        "position_size": "10000",
        "peak_price": "125",
        "market_return_percent": "0.05",
        "risk_plan_quality": RiskPlanQuality.STRUCTURED,
        "execution_discipline": ExecutionDiscipline.FOLLOWED_CLEANLY,
    }


@pytest.fixture
def winning_shot(winning_shot_data):
    return ShotScoringInput(**winning_shot_data)


@pytest.fixture
def expected_letter_grades():
    """Best → worst."""
    return [
        LetterGrade.AAA, LetterGrade.AA_PLUS, LetterGrade.AA, LetterGrade.A_PLUS,
        LetterGrade.A, LetterGrade.A_MINUS, LetterGrade.B_PLUS, LetterGrade.B,
        LetterGrade.B_MINUS, LetterGrade.C_PLUS, LetterGrade.C, LetterGrade.C_MINUS,
        LetterGrade.D, LetterGrade.F, LetterGrade.FF, LetterGrade.FFF,
    ]


# =============================================================================
# BUILDER FIXTURES
# =============================================================================

@pytest.fixture
def aim_score_factory():
    return make_aim_score


@pytest.fixture
def shot_score_factory():
    return make_shot_score


@pytest.fixture
def shot_detail_factory():
    return make_shot_detail


@pytest.fixture
def target_score_factory():
    return make_target_score

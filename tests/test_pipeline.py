# tests/test_pipeline.py

"""
Career Scoring Pipeline Tests - bottom-up scoring of aims, shots, targets, career
"""

import pytest
from decimal import Decimal

from tradegrade.models.enumerations import LetterGrade
from tradegrade.scoring.pipeline import CareerScoringPipeline, TargetFacts, shot_detail_from_input

from conftest import BASE_DATE, days_after


@pytest.fixture
def target_facts(scenario_a_aim, scenario_b_shot, winning_shot):
    return TargetFacts(
        target_id="target-1",
        close_date=days_after(190),
        market_return_percent=Decimal("0.20"),
        aims=[scenario_a_aim],
        shots=[scenario_b_shot, winning_shot],
    )


class TestShotDetail:

    def test_detail_from_input(self, scenario_b_shot):
        detail = shot_detail_from_input(scenario_b_shot)
        assert detail.shot_id == "shot-b"
        assert detail.days_held == 30
        assert detail.position_size == Decimal("5000")
        assert detail.peak_price == Decimal("105")


class TestScoreCareer:

    def test_every_level_scored(self, target_facts):
        result = CareerScoringPipeline().score_career("user-1", [target_facts])
        assert result.user_id == "user-1"
        assert len(result.targets) == 1
        assert set(result.aim_scores_by_id()) == {"aim-a"}
        assert set(result.shot_scores_by_id()) == {"shot-b", "shot-w"}

    def test_target_scores(self, target_facts):
        result = CareerScoringPipeline().score_career("user-1", [target_facts])
        target = result.target_scores[0]
        assert target.user_id == "user-1"
        assert target.prediction_score == Decimal("31.25")
        assert target.prediction_grade == LetterGrade.A
        # (-28.875 × 150,000 + 50 × 600,000) / 750,000
        assert target.performance_score == Decimal("34.225")
        assert target.performance_grade == LetterGrade.A
        assert target.target_duration_days == 190

    def test_first_aim_date_defaults_to_earliest_aim(self, target_facts):
        result = CareerScoringPipeline().score_career("user-1", [target_facts])
        assert result.target_scores[0].target_duration_days == 190

    def test_career_totals(self, target_facts):
        result = CareerScoringPipeline().score_career("user-1", [target_facts])
        career = result.career_score
        assert career.total_aims_scored == 1
        assert career.total_shots_scored == 2
        assert career.prediction_quality_score == Decimal("31.25")
        assert career.performance_score == Decimal("34.225")
        # shot-b: 50 shares × -10; shot-w: 100 shares × +20
        assert career.total_pnl_dollars == Decimal("1500")

    def test_no_targets(self):
        result = CareerScoringPipeline().score_career("user-2", [])
        assert result.targets == []
        assert result.career_score.prediction_grade == LetterGrade.C

    def test_shots_only_target_needs_first_aim_date(self, winning_shot):
        facts = TargetFacts(
            target_id="t",
            close_date=days_after(60),
            market_return_percent=Decimal("0.05"),
            shots=[winning_shot],
        )
        with pytest.raises(ValueError):
            CareerScoringPipeline().score_career("user-1", [facts])

    def test_shots_only_target_with_first_aim_date(self, winning_shot):
        facts = TargetFacts(
            target_id="t",
            close_date=days_after(60),
            market_return_percent=Decimal("0.05"),
            shots=[winning_shot],
            first_aim_date=BASE_DATE,
        )
        result = CareerScoringPipeline().score_career("user-1", [facts])
        target = result.target_scores[0]
        assert target.prediction_score is None
        assert target.performance_score == Decimal("50")
        assert result.career_score.prediction_quality_score == Decimal("0")

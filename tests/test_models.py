# tests/test_models.py

"""
Model Validation Tests - Pydantic input validation and score-object behaviour
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from tradegrade.models.aim import AimScoringInput
from tradegrade.models.enumerations import (
    ExecutionDiscipline,
    LetterGrade,
    PriceReaction,
    RiskGrade,
    RiskPlanQuality,
    Trend,
)
from tradegrade.models.shot import ShotScoringInput
from tradegrade.models.target import ShotDetail
from tradegrade.scoring.aim_scorer import AimScorer


# ENUMERATION TESTS


class TestLetterGradeEnum:

    def test_grade_count(self):
        assert len(LetterGrade) == 16

    def test_values_are_strings(self):
        assert LetterGrade.AA_PLUS == "AA+"
        assert LetterGrade("B-") is LetterGrade.B_MINUS


class TestRiskEnums:

    def test_risk_grades(self):
        assert [g.value for g in RiskGrade] == ["A", "B", "C", "D", "F"]

    def test_plan_quality(self):
        assert [q.value for q in RiskPlanQuality] == ["none", "very_liberal", "reasonable", "structured"]

    def test_execution_discipline(self):
        assert [d.value for d in ExecutionDiscipline] == [
            "followed_cleanly", "minor_delay", "clear_violation", "severe_neglect",
        ]

    def test_other_enums(self):
        assert [r.value for r in PriceReaction] == ["expected", "muted", "opposite"]
        assert [t.value for t in Trend] == ["up", "down", "stable"]


# AIM INPUT TESTS


class TestAimScoringInput:

    def test_valid(self, scenario_a_aim):
        assert scenario_a_aim.entry_price == Decimal("100")
        assert scenario_a_aim.catalyst is None

    def test_floats_converted_via_string(self, scenario_a_aim_data):
        aim = AimScoringInput(**{**scenario_a_aim_data, "market_return_percent": 0.1})
        assert aim.market_return_percent == Decimal("0.1")

    @pytest.mark.parametrize("price", ["0", "-5"])
    def test_entry_price_must_be_positive(self, scenario_a_aim_data, price):
        with pytest.raises(ValidationError):
            AimScoringInput(**{**scenario_a_aim_data, "entry_price": price})

    def test_negative_target_price_rejected(self, scenario_a_aim_data):
        with pytest.raises(ValidationError):
            AimScoringInput(**{**scenario_a_aim_data, "target_price": "-1"})

    @pytest.mark.parametrize("rating", [0, 6])
    def test_self_rating_range(self, scenario_a_aim_data, rating):
        with pytest.raises(ValidationError):
            AimScoringInput(**{**scenario_a_aim_data, "self_rating": rating})

    def test_risks_documented_required(self, scenario_a_aim_data):
        data = dict(scenario_a_aim_data)
        del data["risks_documented"]
        with pytest.raises(ValidationError):
            AimScoringInput(**data)

    def test_empty_aim_id_rejected(self, scenario_a_aim_data):
        with pytest.raises(ValidationError):
            AimScoringInput(**{**scenario_a_aim_data, "aim_id": ""})


class TestCatalystOutcome:

    @pytest.mark.parametrize("aligned,reaction", [
        (True, PriceReaction.EXPECTED),
        (False, PriceReaction.OPPOSITE),
        (None, PriceReaction.MUTED),
    ])
    def test_reaction_mapping(self, scenario_a_aim_data, aligned, reaction):
        aim = AimScoringInput(**{
            **scenario_a_aim_data,
            "catalyst_occurred": True,
            "price_reaction_aligned": aligned,
        })
        assert aim.catalyst.occurred is True
        assert aim.catalyst.price_reaction == reaction

    def test_reaction_without_occurrence_is_no_data(self, scenario_a_aim_data):
        aim = AimScoringInput(**{**scenario_a_aim_data, "price_reaction_aligned": True})
        assert aim.catalyst is None


# SHOT INPUT TESTS


class TestShotScoringInput:

    def test_valid(self, scenario_b_shot):
        assert scenario_b_shot.is_pro is False
        assert scenario_b_shot.adaptability_score is None

    def test_string_enums_accepted(self, scenario_b_shot_data):
        shot = ShotScoringInput(**{
            **scenario_b_shot_data,
            "risk_plan_quality": "structured",
            "execution_discipline": "minor_delay",
        })
        assert shot.risk_plan_quality == RiskPlanQuality.STRUCTURED

    def test_negative_position_size_rejected(self, scenario_b_shot_data):
        with pytest.raises(ValidationError):
            ShotScoringInput(**{**scenario_b_shot_data, "position_size": "-100"})

    def test_missing_execution_inputs_rejected(self, scenario_b_shot_data):
        with pytest.raises(ValidationError):
            ShotScoringInput(**{**scenario_b_shot_data, "execution_discipline": None})

    def test_adaptability_not_range_limited(self, scenario_b_shot_data):
        shot = ShotScoringInput(**{**scenario_b_shot_data, "adaptability_score": "80"})
        assert shot.adaptability_score == Decimal("80")


class TestShotDetail:

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError):
            ShotDetail(
                shot_id="s", entry_price="100", exit_price="100",
                position_size="100", days_held=-1, peak_price="100",
            )


# SCORE OBJECT TESTS


class TestScoreObjects:

    def test_scores_are_frozen(self, scenario_a_aim):
        score = AimScorer().calculate(scenario_a_aim)
        with pytest.raises(ValidationError):
            score.final_score = Decimal("0")

    def test_calculated_at_is_utc(self, scenario_a_aim):
        score = AimScorer().calculate(scenario_a_aim)
        assert score.calculated_at.utcoffset().total_seconds() == 0

    def test_json_round_trip_keeps_grade_symbol(self, scenario_a_aim):
        dumped = AimScorer().calculate(scenario_a_aim).model_dump(mode="json")
        assert dumped["letter_grade"] == "A"

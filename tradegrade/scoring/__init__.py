"""
scoring/ — TradeGrade Scoring Engine

Modules:
    constants.py      - Versioned weights, thresholds and curve anchors
    utils.py          - Decimal utilities
    grade_mapper.py   - Score → letter grade / risk grade
    interpolators.py  - Magnitude, forecast-edge and directional curves
    risk_assessor.py  - Risk plan + execution discipline → risk grade
    aim_scorer.py     - Aim (prediction) scoring
    shot_scorer.py    - Shot (execution) scoring
    target_scorer.py  - Target aggregation
    user_scorer.py    - Career aggregation
    scorecards.py     - Compact and detailed scorecards
    pipeline.py       - Bottom-up career scoring pipeline
"""

from tradegrade.scoring.aim_scorer import AimScorer, apply_self_reflection, get_difficulty_level
from tradegrade.scoring.constants import SCORING_VERSION
from tradegrade.scoring.grade_mapper import clamp_score, risk_score_to_grade, score_to_grade
from tradegrade.scoring.pipeline import CareerScoringPipeline, CareerScoringResult, TargetFacts
from tradegrade.scoring.risk_assessor import assess_risk, calculate_adaptability_bonus
from tradegrade.scoring.scorecards import (
    build_aim_detail_scorecard,
    build_compact_scorecard,
    build_shot_detail_scorecard,
)
from tradegrade.scoring.shot_scorer import ShotScorer
from tradegrade.scoring.target_scorer import TargetScorer
from tradegrade.scoring.user_scorer import UserCareerScorer, calculate_score_trend, get_career_level

__all__ = [
    "AimScorer",
    "CareerScoringPipeline",
    "CareerScoringResult",
    "SCORING_VERSION",
    "ShotScorer",
    "TargetFacts",
    "TargetScorer",
    "UserCareerScorer",
    "apply_self_reflection",
    "assess_risk",
    "build_aim_detail_scorecard",
    "build_compact_scorecard",
    "build_shot_detail_scorecard",
    "calculate_adaptability_bonus",
    "calculate_score_trend",
    "clamp_score",
    "get_career_level",
    "get_difficulty_level",
    "risk_score_to_grade",
    "score_to_grade",
]

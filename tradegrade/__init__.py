"""TradeGrade: grades trade predictions (Aims), executions (Shots), Targets and careers."""

from tradegrade.scoring import (
    AimScorer,
    CareerScoringPipeline,
    SCORING_VERSION,
    ShotScorer,
    TargetScorer,
    UserCareerScorer,
)

__version__ = "1.0.0"

__all__ = [
    "AimScorer",
    "CareerScoringPipeline",
    "SCORING_VERSION",
    "ShotScorer",
    "TargetScorer",
    "UserCareerScorer",
]

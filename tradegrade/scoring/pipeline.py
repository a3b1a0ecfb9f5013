"""
scoring/pipeline.py — Career Scoring Pipeline

Bottom-up batch scoring of already-loaded trade facts.

Class: CareerScoringPipeline
Method: score_career(user_id, targets) → CareerScoringResult

Pipeline steps:
  1. AimScorer    → AimScore per aim
  2. ShotScorer   → ShotScore per shot
  3. ShotDetail   derived from each shot (days held = shot duration)
  4. TargetScorer → TargetScore per target
  5. UserCareerScorer → UserCareerScore

No I/O: loading facts and persisting results belong to the caller.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from tradegrade.models.aim import AimScore, AimScoringInput
from tradegrade.models.shot import ShotScore, ShotScoringInput
from tradegrade.models.target import ShotDetail, TargetScore, TargetScoringInput
from tradegrade.models.user import UserCareerScore, UserCareerScoringInput
from tradegrade.scoring.aim_scorer import AimScorer
from tradegrade.scoring.shot_scorer import ShotScorer
from tradegrade.scoring.target_scorer import TargetScorer
from tradegrade.scoring.user_scorer import UserCareerScorer
from tradegrade.scoring.utils import days_between, to_decimal

logger = logging.getLogger(__name__)


@dataclass
class TargetFacts:
    """Everything needed to score one closed target."""
    target_id: str
    close_date: datetime
    market_return_percent: Decimal
    aims: List[AimScoringInput] = field(default_factory=list)
    shots: List[ShotScoringInput] = field(default_factory=list)
    first_aim_date: Optional[datetime] = None   # defaults to earliest aim start


@dataclass
class TargetScoringResult:
    target_score: TargetScore
    aim_scores: List[AimScore]
    shot_scores: List[ShotScore]


@dataclass
class CareerScoringResult:
    """Output of CareerScoringPipeline.score_career()."""
    user_id: str
    career_score: UserCareerScore
    targets: List[TargetScoringResult]

    @property
    def target_scores(self) -> List[TargetScore]:
        return [t.target_score for t in self.targets]

    def aim_scores_by_id(self) -> Dict[str, AimScore]:
        return {a.aim_id: a for t in self.targets for a in t.aim_scores}

    def shot_scores_by_id(self) -> Dict[str, ShotScore]:
        return {s.shot_id: s for t in self.targets for s in t.shot_scores}


def shot_detail_from_input(shot: ShotScoringInput) -> ShotDetail:
    return ShotDetail(
        shot_id=shot.shot_id,
        entry_price=shot.entry_price,
        exit_price=shot.exit_price,
        position_size=shot.position_size,
        days_held=max(0, days_between(shot.entry_date, shot.exit_date)),
        peak_price=shot.peak_price,
    )


class CareerScoringPipeline:
    """Score a user's closed targets from the bottom up."""

    def __init__(self):
        self.aim_scorer = AimScorer()
        self.shot_scorer = ShotScorer()
        self.target_scorer = TargetScorer()
        self.user_scorer = UserCareerScorer()

    def score_target(self, user_id: str, facts: TargetFacts) -> TargetScoringResult:
        """
        Score one target and everything under it.

        Raises:
            ValueError: if neither first_aim_date nor any aim is given.
        """
        aim_scores = [self.aim_scorer.calculate(a) for a in facts.aims]
        shot_scores = [self.shot_scorer.calculate(s) for s in facts.shots]
        details = [shot_detail_from_input(s) for s in facts.shots]

        first_aim_date = facts.first_aim_date
        if first_aim_date is None:
            if not facts.aims:
                raise ValueError(
                    f"target {facts.target_id}: first_aim_date is required when there are no aims"
                )
            first_aim_date = min(a.start_date for a in facts.aims)

        target_score = self.target_scorer.calculate(
            TargetScoringInput(
                target_id=facts.target_id,
                user_id=user_id,
                aim_scores=aim_scores,
                shot_scores=shot_scores,
                shot_details=details,
                first_aim_date=first_aim_date,
                close_date=facts.close_date,
                market_return_percent=to_decimal(facts.market_return_percent),
            )
        )
        return TargetScoringResult(
            target_score=target_score,
            aim_scores=aim_scores,
            shot_scores=shot_scores,
        )

    def score_career(self, user_id: str, targets: Sequence[TargetFacts]) -> CareerScoringResult:
        """
        Run the full pipeline for one user.

        Args:
            user_id: User identifier.
            targets: Closed targets with their aims and shots.

        Returns:
            CareerScoringResult with every aim, shot, target and career score.
        """
        logger.info(f"CareerScoringPipeline: scoring {len(targets)} targets for user {user_id}")

        results = [self.score_target(user_id, t) for t in targets]

        career = self.user_scorer.calculate(
            UserCareerScoringInput(
                user_id=user_id,
                target_scores=[r.target_score for r in results],
                total_aims_scored=sum(len(r.aim_scores) for r in results),
                total_shots_scored=sum(len(r.shot_scores) for r in results),
            )
        )

        logger.info(
            f"[{user_id}] career prediction={career.prediction_quality_score} "
            f"({career.prediction_grade.value}), performance={career.performance_score} "
            f"({career.performance_grade.value})"
        )
        return CareerScoringResult(user_id=user_id, career_score=career, targets=results)

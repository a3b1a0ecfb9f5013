"""
Grade Mapper
tradegrade/scoring/grade_mapper.py

Score → letter grade and risk score → risk grade conversion, plus
helpers for ranking and comparing letter grades.

Centered scale: -50 to +50, 0 = C (market baseline). Lookups clamp first,
then take the best grade whose inclusive minimum the score meets.
"""

from bisect import bisect_right
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple, Union

from tradegrade.core.exceptions import InvalidGradeException
from tradegrade.models.enumerations import LetterGrade, RiskGrade
from tradegrade.scoring.constants import (
    GRADE_DESCRIPTIONS,
    GradeThreshold,
    LETTER_GRADE_THRESHOLDS,
    RISK_GRADE_THRESHOLDS,
    SCORE_MAX,
    SCORE_MIN,
)
from tradegrade.scoring.utils import Number, clamp, to_decimal

GradeLike = Union[LetterGrade, str]


def _ascending(thresholds: Sequence[GradeThreshold]) -> Tuple[List[Decimal], List[str]]:
    ordered = sorted(thresholds, key=lambda t: t.min)
    return [t.min for t in ordered], [t.grade for t in ordered]


# Binary-search views over the descending threshold tables
_LETTER_MINS, _LETTER_GRADES = _ascending(LETTER_GRADE_THRESHOLDS)
_RISK_MINS, _RISK_GRADES = _ascending(RISK_GRADE_THRESHOLDS)

# Higher = better (AAA = 16 ... FFF = 1)
_GRADE_RANKS: Dict[LetterGrade, int] = {
    LetterGrade(t.grade): len(LETTER_GRADE_THRESHOLDS) - i
    for i, t in enumerate(LETTER_GRADE_THRESHOLDS)
}

_TIERS: Dict[LetterGrade, str] = {
    LetterGrade.AAA: "AAA",
    LetterGrade.AA_PLUS: "AA",
    LetterGrade.AA: "AA",
    LetterGrade.A_PLUS: "A",
    LetterGrade.A: "A",
    LetterGrade.A_MINUS: "A",
    LetterGrade.B_PLUS: "B",
    LetterGrade.B: "B",
    LetterGrade.B_MINUS: "B",
    LetterGrade.C_PLUS: "C",
    LetterGrade.C: "C",
    LetterGrade.C_MINUS: "C",
    LetterGrade.D: "D",
    LetterGrade.F: "F",
    LetterGrade.FF: "F",
    LetterGrade.FFF: "F",
}


def clamp_score(value: Number) -> Decimal:
    """Clamp a value to the score range [-50, 50]."""
    return clamp(to_decimal(value), SCORE_MIN, SCORE_MAX)


def score_to_grade(score: Number) -> LetterGrade:
    """Convert a numeric score (-50 to +50) to a letter grade."""
    idx = bisect_right(_LETTER_MINS, clamp_score(score)) - 1
    return LetterGrade(_LETTER_GRADES[idx])


def risk_score_to_grade(score: Number) -> RiskGrade:
    """Convert a risk score (-50 to +50) to a risk grade (A-F)."""
    idx = bisect_right(_RISK_MINS, clamp_score(score)) - 1
    return RiskGrade(_RISK_GRADES[idx])


def _as_letter_grade(grade: GradeLike) -> LetterGrade:
    if isinstance(grade, LetterGrade):
        return grade
    try:
        return LetterGrade(grade)
    except ValueError:
        raise InvalidGradeException(str(grade), scale="letter") from None


def as_risk_grade(grade: Union[RiskGrade, str]) -> RiskGrade:
    """Coerce a risk grade symbol, rejecting anything outside A-F."""
    if isinstance(grade, RiskGrade):
        return grade
    try:
        return RiskGrade(grade)
    except ValueError:
        raise InvalidGradeException(str(grade), scale="risk") from None


def grade_to_rank(grade: GradeLike) -> int:
    """Numeric rank of a grade (higher = better), used for sorting."""
    return _GRADE_RANKS[_as_letter_grade(grade)]


def compare_grades(a: GradeLike, b: GradeLike) -> int:
    """Positive if a is better than b, negative if worse, 0 if equal."""
    return grade_to_rank(a) - grade_to_rank(b)


def is_passing_grade(grade: GradeLike) -> bool:
    """C or better passes."""
    return grade_to_rank(grade) >= _GRADE_RANKS[LetterGrade.C]


def get_grade_tier(grade: GradeLike) -> str:
    """Collapse +/- variants to their family (AAA/AA/A/B/C/D/F)."""
    return _TIERS[_as_letter_grade(grade)]


def get_grade_description(grade: GradeLike) -> str:
    return GRADE_DESCRIPTIONS[_as_letter_grade(grade)]

"""
Scoring Constants
tradegrade/scoring/constants.py

All weights, grade thresholds and interpolation anchors used by the
scoring engine. Tables are versioned with SCORING_VERSION and exposed
read-only (tuples of frozen dataclasses / MappingProxyType) so they can be
shared freely between threads.

Score scale (centered):
    -50 ........ 0 ........ +50
    FFF     C (market)      AAA
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Tuple

from tradegrade.models.enumerations import (
    ExecutionDiscipline,
    LetterGrade,
    PriceReaction,
    RiskGrade,
    RiskPlanQuality,
)

SCORING_VERSION = "v1.0"


@dataclass(frozen=True)
class InterpolationPoint:
    """One anchor of a piecewise-linear curve: x-value → score."""
    x: Decimal
    score: Decimal


@dataclass(frozen=True)
class GradeThreshold:
    """Inclusive minimum score for a grade."""
    min: Decimal
    grade: str


def _points(*pairs: Tuple[str, str]) -> Tuple[InterpolationPoint, ...]:
    return tuple(InterpolationPoint(Decimal(x), Decimal(s)) for x, s in pairs)


# ---------------------------------------------------------------------------
# Score scale
# ---------------------------------------------------------------------------

SCORE_MIN = Decimal("-50")
SCORE_MAX = Decimal("50")
SCORE_BASELINE = Decimal("0")

# ---------------------------------------------------------------------------
# Aim weights (sum = 1.0). Final Aim score is a weighted AVERAGE.
# ---------------------------------------------------------------------------

AIM_WEIGHTS: Mapping[str, Decimal] = MappingProxyType({
    "directional_accuracy": Decimal("0.20"),
    "magnitude_accuracy":   Decimal("0.30"),
    "forecast_edge":        Decimal("0.35"),
    "thesis_validity":      Decimal("0.15"),
})

# Difficulty = 1.0 + (annualized_alpha / DIVISOR), clamped to [MIN, MAX]
# e.g. 50% annualized prediction vs 10% EMR → alpha 0.40 → 1.20×
DIFFICULTY_MIN = Decimal("1.0")
DIFFICULTY_MAX = Decimal("5.0")
DIFFICULTY_DIVISOR = Decimal("2.0")
EMR_BASELINE = Decimal("0.10")  # Expected market return, 10% CAGR

DIFFICULTY_LEVELS: Tuple[Tuple[Decimal, str], ...] = (
    (Decimal("4.0"), "Legendary"),
    (Decimal("3.0"), "Epic"),
    (Decimal("2.0"), "Hard"),
    (Decimal("1.5"), "Medium"),
    (Decimal("1.25"), "Normal"),
)
DIFFICULTY_LEVEL_DEFAULT = "Easy"

# ---------------------------------------------------------------------------
# Shot weights (sum = 1.0). Risk mitigation is NOT in this average; it
# becomes the risk multiplier instead.
# ---------------------------------------------------------------------------

SHOT_WEIGHTS: Mapping[str, Decimal] = MappingProxyType({
    "performance_score":    Decimal("0.45"),
    "shot_forecast_edge":   Decimal("0.35"),
    "perfect_shot_capture": Decimal("0.20"),
})

PERFORMANCE_ALPHA_SCALE = Decimal("100")  # 1% annualized alpha ≈ 1 point

ADAPTABILITY_BONUS_MIN = Decimal("-5")
ADAPTABILITY_BONUS_MAX = Decimal("5")
ADAPTABILITY_SCORE_DIVISOR = Decimal("10")

# ---------------------------------------------------------------------------
# Risk assessment
# ---------------------------------------------------------------------------

RISK_PLAN_BASE_SCORES: Mapping[RiskPlanQuality, Decimal] = MappingProxyType({
    RiskPlanQuality.NONE:         Decimal("-20"),
    RiskPlanQuality.VERY_LIBERAL: Decimal("-5"),
    RiskPlanQuality.REASONABLE:   Decimal("0"),
    RiskPlanQuality.STRUCTURED:   Decimal("15"),
})

EXECUTION_DISCIPLINE_ADJUSTMENTS: Mapping[ExecutionDiscipline, Decimal] = MappingProxyType({
    ExecutionDiscipline.FOLLOWED_CLEANLY: Decimal("20"),
    ExecutionDiscipline.MINOR_DELAY:      Decimal("0"),
    ExecutionDiscipline.CLEAR_VIOLATION:  Decimal("-15"),
    ExecutionDiscipline.SEVERE_NEGLECT:   Decimal("-30"),
})

RISK_GRADE_THRESHOLDS: Tuple[GradeThreshold, ...] = (
    GradeThreshold(Decimal("30"), RiskGrade.A.value),
    GradeThreshold(Decimal("15"), RiskGrade.B.value),
    GradeThreshold(Decimal("-5"), RiskGrade.C.value),
    GradeThreshold(Decimal("-20"), RiskGrade.D.value),
    GradeThreshold(Decimal("-50"), RiskGrade.F.value),
)

RISK_MULTIPLIERS: Mapping[RiskGrade, Decimal] = MappingProxyType({
    RiskGrade.A: Decimal("1.10"),
    RiskGrade.B: Decimal("1.05"),
    RiskGrade.C: Decimal("1.00"),
    RiskGrade.D: Decimal("0.85"),
    RiskGrade.F: Decimal("0.70"),
})

RISK_GRADE_DESCRIPTIONS: Mapping[RiskGrade, str] = MappingProxyType({
    RiskGrade.A: "Excellent risk management",
    RiskGrade.B: "Good risk awareness",
    RiskGrade.C: "Average discipline",
    RiskGrade.D: "Below average control",
    RiskGrade.F: "Poor risk management",
})

# ---------------------------------------------------------------------------
# Letter grades (FFF → AAA), descending minimums
# ---------------------------------------------------------------------------

LETTER_GRADE_THRESHOLDS: Tuple[GradeThreshold, ...] = (
    GradeThreshold(Decimal("50"), LetterGrade.AAA.value),
    GradeThreshold(Decimal("45"), LetterGrade.AA_PLUS.value),
    GradeThreshold(Decimal("40"), LetterGrade.AA.value),
    GradeThreshold(Decimal("35"), LetterGrade.A_PLUS.value),
    GradeThreshold(Decimal("30"), LetterGrade.A.value),
    GradeThreshold(Decimal("25"), LetterGrade.A_MINUS.value),
    GradeThreshold(Decimal("20"), LetterGrade.B_PLUS.value),
    GradeThreshold(Decimal("15"), LetterGrade.B.value),
    GradeThreshold(Decimal("10"), LetterGrade.B_MINUS.value),
    GradeThreshold(Decimal("5"), LetterGrade.C_PLUS.value),
    GradeThreshold(Decimal("-4"), LetterGrade.C.value),
    GradeThreshold(Decimal("-9"), LetterGrade.C_MINUS.value),
    GradeThreshold(Decimal("-19"), LetterGrade.D.value),
    GradeThreshold(Decimal("-29"), LetterGrade.F.value),
    GradeThreshold(Decimal("-39"), LetterGrade.FF.value),
    GradeThreshold(Decimal("-50"), LetterGrade.FFF.value),
)

GRADE_DESCRIPTIONS: Mapping[LetterGrade, str] = MappingProxyType({
    LetterGrade.AAA:     "Legendary - Perfect execution",
    LetterGrade.AA_PLUS: "Exceptional - Outstanding performance",
    LetterGrade.AA:      "Outstanding - Excellent results",
    LetterGrade.A_PLUS:  "Excellent - Very strong",
    LetterGrade.A:       "Very Good - Solid performance",
    LetterGrade.A_MINUS: "Good - Above average",
    LetterGrade.B_PLUS:  "Above Average - Better than baseline",
    LetterGrade.B:       "Solid - Respectable performance",
    LetterGrade.B_MINUS: "Decent - Slight edge over baseline",
    LetterGrade.C_PLUS:  "Slightly Above Baseline",
    LetterGrade.C:       "Baseline - Market average",
    LetterGrade.C_MINUS: "Slightly Below Baseline",
    LetterGrade.D:       "Below Average - Underperformed",
    LetterGrade.F:       "Poor - Significant underperformance",
    LetterGrade.FF:      "Very Poor - Major losses",
    LetterGrade.FFF:     "Failing - Catastrophic results",
})

# ---------------------------------------------------------------------------
# Magnitude accuracy curves
#
# Overestimate (too aggressive):   ratio = |actual| / |predicted|
# Underestimate (too conservative): ratio = |predicted| / |actual|, softer,
# floored at -25.
# ---------------------------------------------------------------------------

MAGNITUDE_OVERESTIMATE_POINTS = _points(
    ("1.0", "50"),
    ("0.9", "40"),
    ("0.8", "30"),
    ("0.7", "20"),
    ("0.6", "10"),
    ("0.5", "0"),
    ("0.4", "-10"),
    ("0.3", "-20"),
    ("0.2", "-35"),
    ("0.1", "-50"),
    ("0.0", "-50"),
)

MAGNITUDE_UNDERESTIMATE_POINTS = _points(
    ("1.0", "50"),
    ("0.9", "40"),
    ("0.8", "35"),
    ("0.7", "30"),
    ("0.6", "25"),
    ("0.5", "15"),
    ("0.4", "5"),
    ("0.3", "-5"),
    ("0.2", "-15"),
    ("0.1", "-25"),
    ("0.0", "-25"),
)

MAGNITUDE_BOTH_FLAT_SCORE = Decimal("50")         # no move predicted, none happened
MAGNITUDE_PREDICTED_FLAT_SCORE = Decimal("-25")   # predicted no move, it moved
MAGNITUDE_ACTUAL_FLAT_SCORE = Decimal("-10")      # predicted a move, it stayed flat

# ---------------------------------------------------------------------------
# Forecast edge: relative multiple (asset / market) → score
# ---------------------------------------------------------------------------

FORECAST_EDGE_POINTS = _points(
    ("4.0", "50"),
    ("3.0", "42"),
    ("2.0", "35"),
    ("1.5", "20"),
    ("1.2", "10"),
    ("1.0", "0"),
    ("0.8", "-25"),
    ("0.6", "-35"),
    ("0.4", "-45"),
    ("0.2", "-50"),
    ("0.0", "-50"),
)

# Flat market: absolute asset return bands (minimum, score), descending
FLAT_MARKET_BANDS: Tuple[Tuple[Decimal, Decimal], ...] = (
    (Decimal("0.20"), Decimal("50")),
    (Decimal("0.10"), Decimal("35")),
    (Decimal("0.05"), Decimal("20")),
    (Decimal("0"), Decimal("10")),
    (Decimal("-0.05"), Decimal("-10")),
    (Decimal("-0.10"), Decimal("-25")),
)
FLAT_MARKET_FLOOR = Decimal("-50")

# Down market, asset up: 30 + loss_avoidance × 20, capped at 50
LOSS_AVOIDANCE_BASE = Decimal("30")
LOSS_AVOIDANCE_SCALE = Decimal("20")

# ---------------------------------------------------------------------------
# Directional accuracy
# ---------------------------------------------------------------------------

DIRECTIONAL_THRESHOLDS: Mapping[str, Decimal] = MappingProxyType({
    "strong_move": Decimal("0.10"),
    "modest_move": Decimal("0.03"),
    "noise":       Decimal("0.01"),
})

DIRECTIONAL_SCORES: Mapping[str, Decimal] = MappingProxyType({
    "strongly_wrong":   Decimal("-50"),
    "wrong":            Decimal("-25"),
    "flat":             Decimal("0"),
    "correct":          Decimal("25"),
    "strongly_correct": Decimal("50"),
})

# ---------------------------------------------------------------------------
# Thesis validity: (catalyst occurred, price reaction) → score
# ---------------------------------------------------------------------------

THESIS_VALIDITY_SCORES: Mapping[Tuple[bool, PriceReaction], Decimal] = MappingProxyType({
    (True, PriceReaction.EXPECTED):  Decimal("50"),
    (True, PriceReaction.MUTED):     Decimal("25"),
    (False, PriceReaction.EXPECTED): Decimal("15"),   # right move, wrong reason
    (True, PriceReaction.OPPOSITE):  Decimal("-15"),
    (False, PriceReaction.MUTED):    Decimal("-25"),
    (False, PriceReaction.OPPOSITE): Decimal("-50"),
})

# ---------------------------------------------------------------------------
# Time normalization / aggregation
# ---------------------------------------------------------------------------

DAYS_PER_MONTH = Decimal("30")
DAYS_PER_YEAR = Decimal("365")

HELD_UNTIL_END_FRACTION = Decimal("0.8")

TREND_STABLE_BAND = Decimal("3")

# (minimum combined aims + shots, level, description), descending
CAREER_LEVELS: Tuple[Tuple[int, str, str], ...] = (
    (500, "Elite", "Seasoned market veteran"),
    (200, "Expert", "Experienced trader"),
    (100, "Advanced", "Skilled investor"),
    (50, "Intermediate", "Growing experience"),
    (20, "Beginner", "Learning the ropes"),
    (0, "Novice", "Just getting started"),
)

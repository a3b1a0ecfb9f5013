from enum import Enum


class LetterGrade(str, Enum):
    """16-step letter scale, best first. C is the market baseline."""
    AAA = "AAA"
    AA_PLUS = "AA+"
    AA = "AA"
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"
    FF = "FF"
    FFF = "FFF"


class RiskGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class RiskPlanQuality(str, Enum):
    NONE = "none"
    VERY_LIBERAL = "very_liberal"
    REASONABLE = "reasonable"
    STRUCTURED = "structured"


class ExecutionDiscipline(str, Enum):
    FOLLOWED_CLEANLY = "followed_cleanly"
    MINOR_DELAY = "minor_delay"
    CLEAR_VIOLATION = "clear_violation"
    SEVERE_NEGLECT = "severe_neglect"


class PriceReaction(str, Enum):
    EXPECTED = "expected"    # Price moved the way the thesis said
    MUTED = "muted"          # No clear reaction / not reported
    OPPOSITE = "opposite"    # Price moved against the thesis


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"

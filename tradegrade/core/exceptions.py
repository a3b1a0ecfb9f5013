"""
Custom Exceptions - tradegrade
tradegrade/core/exceptions.py

Custom exception classes for scoring-engine misuse.
"""


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidGradeException(ScoringException, ValueError):
    """Grade symbol is not part of the grade scale."""

    def __init__(self, grade: str, scale: str = "letter"):
        self.grade = grade
        self.scale = scale
        super().__init__(f"'{grade}' is not a valid {scale} grade")


class WeightMismatchException(ScoringException, ValueError):
    """Values and weights passed to an aggregation differ in length."""

    def __init__(self, values_count: int, weights_count: int):
        self.values_count = values_count
        self.weights_count = weights_count
        super().__init__(
            f"values and weights must have same length "
            f"(got {values_count} values, {weights_count} weights)"
        )


class InvalidSelfRatingException(ScoringException, ValueError):
    """Self-reflection rating outside the 1-5 range."""

    def __init__(self, rating: int):
        self.rating = rating
        super().__init__(f"self rating must be between 1 and 5, got {rating}")

"""
Core Package - tradegrade
tradegrade/core/__init__.py

Core infrastructure: exceptions.
"""

from tradegrade.core.exceptions import (
    InvalidGradeException,
    InvalidSelfRatingException,
    ScoringException,
    WeightMismatchException,
)

__all__ = [
    "InvalidGradeException",
    "InvalidSelfRatingException",
    "ScoringException",
    "WeightMismatchException",
]

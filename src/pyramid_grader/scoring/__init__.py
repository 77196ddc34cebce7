"""Scoring domain exports."""

from .score_models import ScoreBreakdown
from .score_policy import (
    FUNCTIONAL_WEIGHT,
    QUALITY_WEIGHT,
    ROBUSTNESS_WEIGHT,
    compute_breakdown,
    has_hardcoded_rows,
    has_loop_construct,
    score,
)

__all__ = [
    "ScoreBreakdown",
    "FUNCTIONAL_WEIGHT",
    "ROBUSTNESS_WEIGHT",
    "QUALITY_WEIGHT",
    "compute_breakdown",
    "has_loop_construct",
    "has_hardcoded_rows",
    "score",
]

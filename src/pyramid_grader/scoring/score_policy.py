"""Weighted scoring policy for graded runs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .score_models import ScoreBreakdown

if TYPE_CHECKING:
    from pyramid_grader.grading_run.run_contracts import TestVerdict

FUNCTIONAL_WEIGHT = 70
ROBUSTNESS_WEIGHT = 20
QUALITY_WEIGHT = 10
QUALITY_PENALTY = 5

_LOOP_KEYWORD = re.compile(r"\b(for|while|do)\b")
_HARDCODED_DOUBLE_QUOTED = re.compile(r'"[^"\n]*\*[^"\n]*\*[^"\n]*"')
_HARDCODED_SINGLE_QUOTED = re.compile(r"'[^'\n]*\*[^'\n]*\*[^'\n]*'")


def score(verdicts: Sequence[TestVerdict], program_source: str) -> int:
    """Return the run score in [0, 100]."""
    return compute_breakdown(verdicts, program_source).total


def compute_breakdown(verdicts: Sequence[TestVerdict], program_source: str) -> ScoreBreakdown:
    """Split a run into functional, robustness and quality sub-scores.

    A run whose first case could not execute scores zero on every component.
    """
    if verdicts and verdicts[0].execution_failed:
        return ScoreBreakdown.zero()
    return ScoreBreakdown(
        functional=_functional_score(verdicts),
        robustness=_robustness_score(verdicts),
        quality=_quality_score(program_source),
    )


def has_loop_construct(program_source: str) -> bool:
    return bool(_LOOP_KEYWORD.search(program_source))


def has_hardcoded_rows(program_source: str) -> bool:
    """True when a quoted literal holds two or more stars, e.g. a printed row."""
    return bool(
        _HARDCODED_DOUBLE_QUOTED.search(program_source)
        or _HARDCODED_SINGLE_QUOTED.search(program_source)
    )


def _functional_score(verdicts: Sequence[TestVerdict]) -> float:
    total_points = sum(verdict.case.points for verdict in verdicts)
    if total_points <= 0:
        return 0.0
    earned_points = sum(verdict.case.points for verdict in verdicts if verdict.passed)
    return earned_points / total_points * FUNCTIONAL_WEIGHT


def _robustness_score(verdicts: Sequence[TestVerdict]) -> float:
    robustness_verdicts = [verdict for verdict in verdicts if verdict.case.is_robustness_case]
    if not robustness_verdicts:
        return 0.0
    passed = sum(1 for verdict in robustness_verdicts if verdict.passed)
    return passed / len(robustness_verdicts) * ROBUSTNESS_WEIGHT


def _quality_score(program_source: str) -> float:
    quality = QUALITY_WEIGHT
    if not has_loop_construct(program_source):
        quality -= QUALITY_PENALTY
    if has_hardcoded_rows(program_source):
        quality -= QUALITY_PENALTY
    return float(quality)

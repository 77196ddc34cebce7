"""Grading run entities."""

from __future__ import annotations

from dataclasses import dataclass

from pyramid_grader.case_catalog.testcase_models import TestCase
from pyramid_grader.shape_comparison.comparison_outcomes import MismatchKind


@dataclass(frozen=True)
class TestVerdict:
    """Outcome of grading one case."""

    __test__ = False  # not a pytest test class

    case: TestCase
    passed: bool
    actual_shape: tuple[str, ...]
    diagnostic: str
    execution_failed: bool = False
    mismatch_kind: MismatchKind | None = None


@dataclass(frozen=True)
class GradingRequest:
    """Input contract for grading one submission."""

    program_source: str
    cases: tuple[TestCase, ...]


@dataclass(frozen=True)
class GradingOutcome:
    """Output contract for one graded submission.

    `error_message` is set only when grading itself broke down; the score is
    then 0 and `verdicts` is empty.
    """

    verdicts: tuple[TestVerdict, ...]
    score: int
    feedback: str
    error_message: str | None = None

    @property
    def passed_count(self) -> int:
        return sum(1 for verdict in self.verdicts if verdict.passed)

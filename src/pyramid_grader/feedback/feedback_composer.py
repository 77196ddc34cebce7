"""Student-facing feedback for a graded run."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pyramid_grader.shape_comparison import MismatchKind

if TYPE_CHECKING:
    from pyramid_grader.grading_run.run_contracts import TestVerdict

COMPILATION_FAILED_MESSAGE = (
    "The code does not compile or run. Fix the compilation errors and try again."
)
PERFECT_SCORE_MESSAGE = "Excellent! Your solution is perfect. All tests passed."
ALIGNMENT_ISSUE_MESSAGE = (
    "There are problems with the number of leading spaces (pyramid alignment)."
)
STAR_ISSUE_MESSAGE = "There are problems with the number or placement of stars in each row."
INPUT_VALIDATION_MESSAGE = (
    "The program does not seem to fully handle non-positive input (0 or negative). "
    "Make sure it asks for a number again until it gets a positive one."
)
MINOR_ISSUES_MESSAGE = (
    "Good work! There are a few small issues to fix; check the per-test details."
)
PARTIAL_PROGRESS_MESSAGE = (
    "Nice progress, but some tests failed. Check the pyramid alignment and the number "
    "of stars in each row."
)
NEEDS_WORK_MESSAGE = (
    "The code needs more work. Review the loop logic, the handling of invalid input "
    "and the structure of the pyramid."
)

_STAR_MISMATCHES = frozenset({MismatchKind.CONTENT, MismatchKind.GLYPH_COUNT})


def compose_feedback(verdicts: Sequence[TestVerdict], score: int) -> str:
    """Pick the most useful message for a run, most severe condition first."""
    if verdicts and verdicts[0].execution_failed:
        return COMPILATION_FAILED_MESSAGE
    if score == 100:
        return PERFECT_SCORE_MESSAGE

    failed = [verdict for verdict in verdicts if not verdict.passed]
    messages: list[str] = []
    if any(verdict.mismatch_kind == MismatchKind.LEADING_SPACES for verdict in failed):
        messages.append(ALIGNMENT_ISSUE_MESSAGE)
    if any(verdict.mismatch_kind in _STAR_MISMATCHES for verdict in failed):
        messages.append(STAR_ISSUE_MESSAGE)
    if any(verdict.case.is_robustness_case for verdict in failed):
        messages.append(INPUT_VALIDATION_MESSAGE)
    if messages:
        return " ".join(messages)

    if score >= 80:
        return MINOR_ISSUES_MESSAGE
    if score >= 60:
        return PARTIAL_PROGRESS_MESSAGE
    return NEEDS_WORK_MESSAGE

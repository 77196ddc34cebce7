"""Expected-vs-actual shape comparison service."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pyramid_grader.shape_normalization import GLYPH, leading_space_count

from .comparison_outcomes import ComparisonResult, MismatchKind

SUCCESS_DIAGNOSTIC = "Passed"

_WHITESPACE_RUN = re.compile(r"\s+")


def compare(
    expected: Sequence[str],
    actual: Sequence[str],
    size: int | None = None,
) -> ComparisonResult:
    """Compare two shapes and report the first, most specific discrepancy.

    Checks run in a fixed order: line count, then for each line its leading
    spaces, its star content and its star count. The first failing check
    decides the diagnostic. `size` is the pyramid size the case was built for;
    it is carried as context and does not change the verdict.
    """
    if len(actual) != len(expected):
        return ComparisonResult(
            passed=False,
            diagnostic=f"Wrong number of lines: expected {len(expected)}, got {len(actual)}",
            mismatch_kind=MismatchKind.LINE_COUNT,
        )

    for index, (expected_line, actual_line) in enumerate(zip(expected, actual, strict=True)):
        mismatch = _compare_line(index + 1, expected_line, actual_line)
        if mismatch is not None:
            return mismatch

    return ComparisonResult(passed=True, diagnostic=SUCCESS_DIAGNOSTIC)


def _compare_line(
    line_number: int, expected_line: str, actual_line: str
) -> ComparisonResult | None:
    expected_leading = leading_space_count(expected_line)
    actual_leading = leading_space_count(actual_line)
    if expected_leading != actual_leading:
        return ComparisonResult(
            passed=False,
            diagnostic=(
                f"Line {line_number}: wrong number of leading spaces "
                f"(expected {expected_leading}, got {actual_leading})"
            ),
            mismatch_kind=MismatchKind.LEADING_SPACES,
        )

    expected_stars = expected_line.strip()
    actual_stars = actual_line.strip()
    if not _same_content(expected_stars, actual_stars):
        return ComparisonResult(
            passed=False,
            diagnostic=f"Line {line_number}: wrong star content",
            mismatch_kind=MismatchKind.CONTENT,
        )

    expected_count = expected_stars.count(GLYPH)
    actual_count = actual_stars.count(GLYPH)
    if expected_count != actual_count:
        return ComparisonResult(
            passed=False,
            diagnostic=(
                f"Line {line_number}: wrong number of stars "
                f"(expected {expected_count}, got {actual_count})"
            ),
            mismatch_kind=MismatchKind.GLYPH_COUNT,
        )
    return None


def _same_content(expected: str, actual: str) -> bool:
    if expected == actual:
        return True
    return _WHITESPACE_RUN.sub(" ", expected) == _WHITESPACE_RUN.sub(" ", actual)

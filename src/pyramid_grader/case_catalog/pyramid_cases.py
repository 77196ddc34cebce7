"""Built-in pyramid grading cases."""

from __future__ import annotations

from pyramid_grader.shape_normalization import GLYPH

from .testcase_models import TestCase


def build_pyramid(size: int) -> tuple[str, ...]:
    """Return the centered pyramid of `size` rows, stars separated by one space."""
    if size < 1:
        raise ValueError("Pyramid size must be at least 1.")
    return tuple(
        " " * (size - row) + " ".join(GLYPH * row) for row in range(1, size + 1)
    )


def default_pyramid_cases() -> tuple[TestCase, ...]:
    """Standard cases: three plain sizes, then three invalid-input retries."""
    return (
        _case("Test 1: n=1", ("1",), size=1, points=10),
        _case("Test 2: n=4", ("4",), size=4, points=20),
        _case("Test 3: n=5", ("5",), size=5, points=20),
        _case("Test 4: invalid input then 4", ("0", "4"), size=4, points=10, robustness=True),
        _case("Test 5: negative input then 3", ("-2", "3"), size=3, points=10, robustness=True),
        _case(
            "Test 6: several invalid inputs",
            ("0", "-5", "0", "4"),
            size=4,
            points=5,
            robustness=True,
        ),
    )


def _case(
    name: str,
    stdin_tokens: tuple[str, ...],
    *,
    size: int,
    points: float,
    robustness: bool = False,
) -> TestCase:
    return TestCase(
        name=name,
        stdin_tokens=stdin_tokens,
        expected_shape=build_pyramid(size),
        points=points,
        is_robustness_case=robustness,
        size=size,
    )

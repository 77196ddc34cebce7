"""Built-in pyramid case tests."""

from __future__ import annotations

import pytest
from pyramid_grader.case_catalog import TestCase, build_pyramid, default_pyramid_cases


def test_build_pyramid_for_four_rows() -> None:
    assert build_pyramid(4) == ("   *", "  * *", " * * *", "* * * *")


def test_build_pyramid_single_row() -> None:
    assert build_pyramid(1) == ("*",)


def test_build_pyramid_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError, match="at least 1"):
        build_pyramid(0)


def test_default_cases_cover_sizes_and_invalid_input_retries() -> None:
    cases = default_pyramid_cases()

    assert [case.name for case in cases] == [
        "Test 1: n=1",
        "Test 2: n=4",
        "Test 3: n=5",
        "Test 4: invalid input then 4",
        "Test 5: negative input then 3",
        "Test 6: several invalid inputs",
    ]
    assert [case.points for case in cases] == [10, 20, 20, 10, 10, 5]
    assert [case.is_robustness_case for case in cases] == [False, False, False, True, True, True]
    assert cases[5].stdin_tokens == ("0", "-5", "0", "4")
    assert cases[4].expected_shape == build_pyramid(3)


def test_stdin_text_puts_one_token_per_line() -> None:
    case = TestCase(name="t", stdin_tokens=("0", "4"), expected_shape=("*",), points=1)

    assert case.stdin_text == "0\n4\n"


def test_stdin_text_is_empty_without_tokens() -> None:
    case = TestCase(name="t", stdin_tokens=(), expected_shape=("*",), points=1)

    assert case.stdin_text == ""

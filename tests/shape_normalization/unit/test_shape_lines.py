"""Shape normalization tests."""

from __future__ import annotations

import pytest
from pyramid_grader.shape_normalization import leading_space_count, normalize


@pytest.mark.parametrize("raw_output", ["", None])
def test_empty_or_missing_output_normalizes_to_no_lines(raw_output) -> None:
    assert normalize(raw_output) == ()


def test_keeps_leading_spaces_and_strips_trailing_whitespace() -> None:
    raw_output = "   *   \n  * *\t\n * * *\n* * * *\n"

    assert normalize(raw_output) == ("   *", "  * *", " * * *", "* * * *")


def test_drops_prompts_and_lines_mixing_text_with_stars() -> None:
    raw_output = (
        "Enter a positive number: \nInvalid input!\n"
        "Enter a positive number: *\n  *\n * *\n"
    )

    assert normalize(raw_output) == ("  *", " * *")


def test_removes_carriage_returns_and_expands_tabs_to_single_spaces() -> None:
    raw_output = "\t*\r\n*\t*\r\n"

    assert normalize(raw_output) == (" *", "* *")


def test_drops_blank_and_whitespace_only_lines() -> None:
    raw_output = "\n   \n\t\n*\n\n"

    assert normalize(raw_output) == ("*",)


def test_never_returns_characters_outside_star_and_space() -> None:
    raw_output = "**x\n* - *\n#*#\n 1 *\n***\n"

    lines = normalize(raw_output)

    assert lines == ("***",)
    for line in lines:
        assert set(line) <= {"*", " "}
        assert line.strip()


@pytest.mark.parametrize(
    "raw_output",
    [
        "\x0b*\n\x0c* *\n\x1c*\n",
        "\xa0 *\n",
        "  *\x0b*\n",
        "\u2003* *\n",
    ],
)
def test_drops_rows_with_whitespace_other_than_spaces(raw_output: str) -> None:
    assert normalize(raw_output) == ()


def test_rows_beside_exotic_whitespace_rows_are_still_kept() -> None:
    raw_output = "\xa0 *\n *\n* *\n"

    lines = normalize(raw_output)

    assert lines == (" *", "* *")
    assert leading_space_count(lines[0]) == 1


@pytest.mark.parametrize(
    ("line", "expected"),
    [("*", 0), ("   *", 3), (" * *", 1), ("\t*", 0)],
)
def test_leading_space_count_measures_run_of_spaces_only(line: str, expected: int) -> None:
    assert leading_space_count(line) == expected

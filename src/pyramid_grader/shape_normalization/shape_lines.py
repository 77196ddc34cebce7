"""Raw program output to canonical shape lines."""

from __future__ import annotations

import re

GLYPH = "*"

_SHAPE_ROW_PATTERN = re.compile(r"^[* ]+$")
_LEADING_SPACES_PATTERN = re.compile(r"^ *")


def normalize(raw_output: str | None) -> tuple[str, ...]:
    """Return the lines of `raw_output` that are unambiguously shape rows.

    Prompts, diagnostics and blank lines are dropped, as is any row holding a
    character other than a star or a space (vertical tabs, form feeds and
    non-breaking spaces included). Leading spaces are kept because they carry
    the alignment being graded; trailing spaces are stripped.
    """
    if not raw_output:
        return ()

    shape_lines: list[str] = []
    for raw_line in raw_output.split("\n"):
        line = raw_line.replace("\r", "").replace("\t", " ")
        if GLYPH not in line:
            continue
        trimmed = line.strip(" ")
        if not trimmed:
            continue
        if not _SHAPE_ROW_PATTERN.match(trimmed):
            continue
        shape_lines.append(line.rstrip())
    return tuple(shape_lines)


def leading_space_count(line: str) -> int:
    """Length of the run of space characters starting at position 0."""
    match = _LEADING_SPACES_PATTERN.match(line)
    return len(match.group(0)) if match else 0

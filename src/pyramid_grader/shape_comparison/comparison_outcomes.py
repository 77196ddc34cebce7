"""Shape comparison entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MismatchKind(str, Enum):
    """First discrepancy found between an expected and an actual shape."""

    LINE_COUNT = "line_count"
    LEADING_SPACES = "leading_spaces"
    CONTENT = "content"
    GLYPH_COUNT = "glyph_count"


@dataclass(frozen=True)
class ComparisonResult:
    """Verdict of comparing one actual shape against one expected shape."""

    passed: bool
    diagnostic: str
    mismatch_kind: MismatchKind | None = None

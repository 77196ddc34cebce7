"""Shape normalization domain exports."""

from .shape_lines import GLYPH, leading_space_count, normalize

__all__ = [
    "GLYPH",
    "leading_space_count",
    "normalize",
]

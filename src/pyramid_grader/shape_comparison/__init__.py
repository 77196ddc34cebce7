"""Shape comparison domain exports."""

from .comparison_outcomes import ComparisonResult, MismatchKind
from .shape_comparator import SUCCESS_DIAGNOSTIC, compare

__all__ = [
    "ComparisonResult",
    "MismatchKind",
    "SUCCESS_DIAGNOSTIC",
    "compare",
]

"""Feedback domain exports."""

from .feedback_composer import (
    ALIGNMENT_ISSUE_MESSAGE,
    COMPILATION_FAILED_MESSAGE,
    INPUT_VALIDATION_MESSAGE,
    MINOR_ISSUES_MESSAGE,
    NEEDS_WORK_MESSAGE,
    PARTIAL_PROGRESS_MESSAGE,
    PERFECT_SCORE_MESSAGE,
    STAR_ISSUE_MESSAGE,
    compose_feedback,
)

__all__ = [
    "ALIGNMENT_ISSUE_MESSAGE",
    "COMPILATION_FAILED_MESSAGE",
    "INPUT_VALIDATION_MESSAGE",
    "MINOR_ISSUES_MESSAGE",
    "NEEDS_WORK_MESSAGE",
    "PARTIAL_PROGRESS_MESSAGE",
    "PERFECT_SCORE_MESSAGE",
    "STAR_ISSUE_MESSAGE",
    "compose_feedback",
]

"""Grading run domain exports."""

from .grading_run_use_case import (
    EXECUTION_SUCCEEDED_SUMMARY,
    GRADING_ERROR_FEEDBACK,
    execution_summary,
    grade_submission,
)
from .run_contracts import GradingOutcome, GradingRequest, TestVerdict
from .run_orchestrator import EXECUTION_FAILED_FALLBACK, run_test_cases

__all__ = [
    "TestVerdict",
    "GradingRequest",
    "GradingOutcome",
    "EXECUTION_FAILED_FALLBACK",
    "run_test_cases",
    "EXECUTION_SUCCEEDED_SUMMARY",
    "GRADING_ERROR_FEEDBACK",
    "execution_summary",
    "grade_submission",
]

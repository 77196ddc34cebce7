"""Grading run use-case service."""

from __future__ import annotations

import logging

from pyramid_grader.feedback import compose_feedback
from pyramid_grader.program_execution import ProgramExecutor
from pyramid_grader.scoring import score

from .run_contracts import GradingOutcome, GradingRequest
from .run_orchestrator import run_test_cases

logger = logging.getLogger(__name__)

GRADING_ERROR_FEEDBACK = "An error occurred while grading."
EXECUTION_SUCCEEDED_SUMMARY = "Program compiled and ran successfully"


def grade_submission(request: GradingRequest, executor: ProgramExecutor) -> GradingOutcome:
    """Run every case, then score the run and compose its feedback.

    Always returns an outcome: a fault anywhere in the pipeline becomes a
    zero-score outcome carrying a general error message.
    """
    try:
        verdicts = run_test_cases(request.program_source, request.cases, executor)
        run_score = score(verdicts, request.program_source)
        feedback = compose_feedback(verdicts, run_score)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Grading run failed")
        return GradingOutcome(
            verdicts=(),
            score=0,
            feedback=GRADING_ERROR_FEEDBACK,
            error_message=f"General error while running the tests: {exc}",
        )

    logger.info("Graded %d case(s), score %d", len(verdicts), run_score)
    return GradingOutcome(verdicts=verdicts, score=run_score, feedback=feedback)


def execution_summary(outcome: GradingOutcome) -> str:
    """One-line compile/run status shown above the per-case results."""
    if outcome.error_message:
        return outcome.error_message
    if outcome.verdicts and outcome.verdicts[0].execution_failed:
        return outcome.verdicts[0].diagnostic
    return EXECUTION_SUCCEEDED_SUMMARY

"""Sequential case runner."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyramid_grader.case_catalog.testcase_models import TestCase
from pyramid_grader.program_execution import ExecutionResult, ProgramExecutor
from pyramid_grader.shape_comparison import compare
from pyramid_grader.shape_normalization import normalize

from .run_contracts import TestVerdict

logger = logging.getLogger(__name__)

EXECUTION_FAILED_FALLBACK = "The program failed to compile or run."


def run_test_cases(
    program_source: str,
    cases: Sequence[TestCase],
    executor: ProgramExecutor,
) -> tuple[TestVerdict, ...]:
    """Grade `program_source` against each case in order.

    The first execution failure ends the run: its verdict is recorded and no
    later case is executed.
    """
    verdicts: list[TestVerdict] = []
    for case in cases:
        logger.debug("Running: %s", case.name)
        result = _execute_case(executor, program_source, case)
        if not result.succeeded:
            logger.info("Execution failed on %s; skipping remaining cases", case.name)
            verdicts.append(
                TestVerdict(
                    case=case,
                    passed=False,
                    actual_shape=(),
                    diagnostic=result.diagnostic or EXECUTION_FAILED_FALLBACK,
                    execution_failed=True,
                )
            )
            break

        actual_shape = normalize(result.raw_output)
        comparison = compare(case.expected_shape, actual_shape, case.size)
        verdicts.append(
            TestVerdict(
                case=case,
                passed=comparison.passed,
                actual_shape=actual_shape,
                diagnostic=comparison.diagnostic,
                mismatch_kind=comparison.mismatch_kind,
            )
        )
    return tuple(verdicts)


def _execute_case(
    executor: ProgramExecutor, program_source: str, case: TestCase
) -> ExecutionResult:
    try:
        return executor.execute(program_source, case.stdin_text)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Executor raised while running %s: %s", case.name, exc)
        return ExecutionResult.failed(str(exc) or type(exc).__name__)

"""Program execution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of running a submitted program once with one stdin script."""

    succeeded: bool
    stdout: str
    stderr: str
    diagnostic: str

    @property
    def raw_output(self) -> str:
        return self.stdout

    @staticmethod
    def completed(stdout: str, stderr: str = "", diagnostic: str = "") -> ExecutionResult:
        return ExecutionResult(succeeded=True, stdout=stdout, stderr=stderr, diagnostic=diagnostic)

    @staticmethod
    def failed(diagnostic: str, *, stdout: str = "", stderr: str = "") -> ExecutionResult:
        return ExecutionResult(
            succeeded=False,
            stdout=stdout,
            stderr=stderr or diagnostic,
            diagnostic=diagnostic,
        )

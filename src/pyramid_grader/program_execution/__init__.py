"""Program execution domain exports."""

from .execution_outcomes import ExecutionResult
from .program_executor import CompiledProgramExecutor, ProgramExecutor

__all__ = [
    "ExecutionResult",
    "ProgramExecutor",
    "CompiledProgramExecutor",
]

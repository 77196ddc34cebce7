"""Compile-and-run service for submitted C programs."""

from __future__ import annotations

import hashlib
import logging
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

from pyramid_grader.configuration.runtime_settings import ExecutionSettings

from .execution_outcomes import ExecutionResult

logger = logging.getLogger(__name__)

_SOURCE_FILENAME = "main.c"


class ProgramExecutor(Protocol):  # pylint: disable=too-few-public-methods
    """Capability that runs submitted source with a stdin script."""

    def execute(self, source_text: str, stdin_text: str) -> ExecutionResult: ...


class CompiledProgramExecutor:
    """Compiles submissions with a native C compiler and runs the binary.

    Binaries are cached per source digest, so grading one submission against
    many cases compiles it once. The executor owns a temporary workspace;
    use it as a context manager or call `close()`.
    """

    def __init__(self, settings: ExecutionSettings) -> None:
        self._settings = settings
        self._workspace = tempfile.TemporaryDirectory(prefix="pyramid-grader-")
        self._binaries: dict[str, Path] = {}

    def __enter__(self) -> CompiledProgramExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._binaries.clear()
        self._workspace.cleanup()

    def execute(self, source_text: str, stdin_text: str) -> ExecutionResult:
        binary_or_failure = self._compile(source_text)
        if isinstance(binary_or_failure, ExecutionResult):
            return binary_or_failure
        return self._run(binary_or_failure, stdin_text)

    def _compile(self, source_text: str) -> Path | ExecutionResult:
        digest = hashlib.sha256(source_text.encode("utf-8")).hexdigest()
        cached = self._binaries.get(digest)
        if cached is not None:
            return cached

        build_dir = Path(self._workspace.name) / digest[:16]
        build_dir.mkdir(parents=True, exist_ok=True)
        source_path = build_dir / _SOURCE_FILENAME
        source_path.write_text(source_text, encoding="utf-8")
        binary_path = build_dir / "program"

        command = (
            self._settings.compiler,
            *self._settings.compile_flags,
            str(source_path),
            "-o",
            str(binary_path),
        )
        logger.debug("Compiling submission: %s", shlex.join(command))
        try:
            completed = subprocess.run(
                list(command),
                cwd=build_dir,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._settings.compile_timeout_seconds,
                check=False,
            )
        except FileNotFoundError:
            return ExecutionResult.failed(f"Compiler not found: {self._settings.compiler}")
        except subprocess.TimeoutExpired:
            return ExecutionResult.failed(
                f"Compilation timed out after {self._settings.compile_timeout_seconds} seconds"
            )

        if completed.returncode != 0:
            message = completed.stderr.strip() or completed.stdout.strip()
            return ExecutionResult.failed(
                message or f"Compilation failed with exit code {completed.returncode}",
                stdout=completed.stdout,
                stderr=completed.stderr,
            )

        self._binaries[digest] = binary_path
        return binary_path

    def _run(self, binary_path: Path, stdin_text: str) -> ExecutionResult:
        try:
            completed = subprocess.run(
                [str(binary_path)],
                cwd=binary_path.parent,
                input=stdin_text,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._settings.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            return ExecutionResult.failed(
                f"Execution timed out after {self._settings.timeout_seconds} seconds",
                stdout=_decode_partial(exc.stdout),
            )
        except OSError as exc:
            return ExecutionResult.failed(f"Program could not be started: {exc}")

        if completed.returncode < 0:
            return ExecutionResult.failed(
                f"Program terminated by signal {-completed.returncode}",
                stdout=completed.stdout,
                stderr=completed.stderr,
            )
        return ExecutionResult.completed(
            stdout=completed.stdout,
            stderr=completed.stderr,
            diagnostic=(
                f"Compilation/execution successful (exit code {completed.returncode})"
            ),
        )


def _decode_partial(output: bytes | str | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output

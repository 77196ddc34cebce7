"""Compile-and-run executor tests with a scripted subprocess."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pyramid_grader.configuration import ExecutionSettings
from pyramid_grader.program_execution import CompiledProgramExecutor, ExecutionResult
from pyramid_grader.program_execution import program_executor as executor_module


class _ScriptedRun:
    """Stands in for subprocess.run, answering compile and run calls in turn."""

    def __init__(self, *, compile_result=None, run_result=None) -> None:
        self.compile_result = compile_result or _completed(0)
        self.run_result = run_result or _completed(0, stdout="*\n")
        self.calls: list[list[str]] = []

    def __call__(self, command, **kwargs):
        self.calls.append(list(command))
        is_compile = "-o" in command
        outcome = self.compile_result if is_compile else self.run_result
        if isinstance(outcome, BaseException):
            raise outcome
        if is_compile and outcome.returncode == 0:
            Path(command[command.index("-o") + 1]).write_text("binary", encoding="utf-8")
        return outcome


def _completed(returncode: int, *, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


@pytest.fixture
def settings() -> ExecutionSettings:
    return ExecutionSettings(compiler="cc", compile_flags=("-std=c99",), timeout_seconds=3)


def _install(monkeypatch, scripted: _ScriptedRun) -> _ScriptedRun:
    monkeypatch.setattr(executor_module.subprocess, "run", scripted)
    return scripted


def test_successful_run_returns_stdout_and_exit_code(monkeypatch, settings) -> None:
    scripted = _install(monkeypatch, _ScriptedRun(run_result=_completed(0, stdout="  *\n")))

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("int main(void){return 0;}", "1\n")

    assert result == ExecutionResult(
        succeeded=True,
        stdout="  *\n",
        stderr="",
        diagnostic="Compilation/execution successful (exit code 0)",
    )
    assert scripted.calls[0][:2] == ["cc", "-std=c99"]


def test_non_zero_exit_code_still_counts_as_executed(monkeypatch, settings) -> None:
    _install(monkeypatch, _ScriptedRun(run_result=_completed(1, stdout="*\n")))

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("src", "")

    assert result.succeeded is True
    assert "exit code 1" in result.diagnostic


def test_compile_error_is_reported_as_failed_execution(monkeypatch, settings) -> None:
    _install(
        monkeypatch,
        _ScriptedRun(compile_result=_completed(1, stderr="main.c:1: error: expected ';'\n")),
    )

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("int main(void){return 0}", "")

    assert result.succeeded is False
    assert result.diagnostic == "main.c:1: error: expected ';'"


def test_missing_compiler_is_reported_as_failed_execution(monkeypatch, settings) -> None:
    _install(monkeypatch, _ScriptedRun(compile_result=FileNotFoundError("cc")))

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("src", "")

    assert result.succeeded is False
    assert result.diagnostic == "Compiler not found: cc"


def test_timeout_keeps_partial_output(monkeypatch, settings) -> None:
    timeout = subprocess.TimeoutExpired(cmd=["program"], timeout=3, output=b"*\n")
    _install(monkeypatch, _ScriptedRun(run_result=timeout))

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("src", "")

    assert result.succeeded is False
    assert result.diagnostic == "Execution timed out after 3 seconds"
    assert result.stdout == "*\n"


def test_signal_termination_is_a_failed_execution(monkeypatch, settings) -> None:
    _install(monkeypatch, _ScriptedRun(run_result=_completed(-11)))

    with CompiledProgramExecutor(settings) as executor:
        result = executor.execute("src", "")

    assert result.succeeded is False
    assert result.diagnostic == "Program terminated by signal 11"


def test_same_source_is_compiled_once(monkeypatch, settings) -> None:
    scripted = _install(monkeypatch, _ScriptedRun())

    with CompiledProgramExecutor(settings) as executor:
        executor.execute("src", "1\n")
        executor.execute("src", "4\n")
        executor.execute("other", "4\n")

    compile_calls = [call for call in scripted.calls if "-o" in call]
    assert len(compile_calls) == 2
    assert len(scripted.calls) == 5

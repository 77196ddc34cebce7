"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_COMPILER = "cc"
DEFAULT_COMPILE_FLAGS: tuple[str, ...] = ("-std=c99", "-O0")
DEFAULT_TIMEOUT_SECONDS = 3
DEFAULT_COMPILE_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class ExecutionSettings:
    """How submissions are compiled and run."""

    compiler: str = DEFAULT_COMPILER
    compile_flags: tuple[str, ...] = DEFAULT_COMPILE_FLAGS
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    compile_timeout_seconds: int = DEFAULT_COMPILE_TIMEOUT_SECONDS


@dataclass(frozen=True)
class CaseSettings:
    """Where grading cases come from; built-in cases when no path is set."""

    path: Path | None = None


@dataclass(frozen=True)
class ReportSettings:
    """Results workbook destination; no workbook when no directory is set."""

    output_dir: Path | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    execution: ExecutionSettings
    cases: CaseSettings
    report: ReportSettings

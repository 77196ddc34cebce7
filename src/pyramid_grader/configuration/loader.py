"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_COMPILE_FLAGS,
    DEFAULT_COMPILE_TIMEOUT_SECONDS,
    DEFAULT_COMPILER,
    DEFAULT_TIMEOUT_SECONDS,
    CaseSettings,
    Configuration,
    ExecutionSettings,
    ReportSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(
        path=None,
        execution=ExecutionSettings(),
        cases=CaseSettings(),
        report=ReportSettings(),
    )


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    return Configuration(
        path=path,
        execution=_parse_execution_section(parsed.get("execution")),
        cases=_parse_cases_section(parsed.get("cases"), base_path),
        report=_parse_report_section(parsed.get("report"), base_path),
    )


def _parse_execution_section(value: Any) -> ExecutionSettings:
    section = _optional_mapping(value, "execution")
    compiler = _require_non_empty_string(
        section.get("compiler", DEFAULT_COMPILER), "execution.compiler"
    )
    compile_flags = _normalize_string_sequence(
        section.get("compile_flags", list(DEFAULT_COMPILE_FLAGS)), "execution.compile_flags"
    )
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "execution.timeout_seconds"
    )
    compile_timeout_seconds = _require_positive_int(
        section.get("compile_timeout_seconds", DEFAULT_COMPILE_TIMEOUT_SECONDS),
        "execution.compile_timeout_seconds",
    )
    return ExecutionSettings(
        compiler=compiler,
        compile_flags=compile_flags,
        timeout_seconds=timeout_seconds,
        compile_timeout_seconds=compile_timeout_seconds,
    )


def _parse_cases_section(value: Any, base_path: Path) -> CaseSettings:
    section = _optional_mapping(value, "cases")
    path_value = _optional_string(section.get("path"), "cases.path")
    if path_value is None:
        return CaseSettings()
    return CaseSettings(path=_resolve_path(base_path, path_value))


def _parse_report_section(value: Any, base_path: Path) -> ReportSettings:
    section = _optional_mapping(value, "report")
    output_dir = _optional_string(section.get("output_dir"), "report.output_dir")
    if output_dir is None:
        return ReportSettings()
    return ReportSettings(output_dir=_resolve_path(base_path, output_dir))


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value

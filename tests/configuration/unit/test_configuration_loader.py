"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pyramid_grader.configuration import (
    ConfigurationError,
    ExecutionSettings,
    default_configuration,
    load_configuration,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_and_resolves_relative_paths(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "grader.yaml",
        """
execution:
  compiler: gcc
  compile_flags: ["-std=c11", "-Wall"]
  timeout_seconds: 5
cases:
  path: fixtures/cases.yaml
report:
  output_dir: results
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.execution.compiler == "gcc"
    assert configuration.execution.compile_flags == ("-std=c11", "-Wall")
    assert configuration.execution.timeout_seconds == 5
    assert configuration.execution.compile_timeout_seconds == 30
    assert configuration.cases.path == (tmp_path / "fixtures" / "cases.yaml").resolve()
    assert configuration.report.output_dir == (tmp_path / "results").resolve()


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "grader.yaml", ""))

    assert configuration.execution == ExecutionSettings()
    assert configuration.cases.path is None
    assert configuration.report.output_dir is None


def test_default_configuration_matches_empty_file_settings() -> None:
    configuration = default_configuration()

    assert configuration.path is None
    assert configuration.execution.compiler == "cc"
    assert configuration.execution.timeout_seconds == 3


def test_compile_flags_may_be_a_single_string(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "grader.yaml",
        "execution:\n  compile_flags: '-std=c99 -O2'\n",
    )

    assert load_configuration(config_path).execution.compile_flags == ("-std=c99", "-O2")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- a\n- b\n", "root must be a mapping"),
        ("execution: 3\n", "'execution' must be a mapping"),
        ("execution:\n  timeout_seconds: 0\n", "greater than zero"),
        ("execution:\n  timeout_seconds: true\n", "must be an integer"),
        ("execution:\n  compiler: '  '\n", "must not be empty"),
        ("execution:\n  compile_flags: [1]\n", "entries must be strings"),
        ("cases:\n  path: 7\n", "cases.path must be a string"),
        ("execution: [unclosed\n", "Failed to parse"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "grader.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)

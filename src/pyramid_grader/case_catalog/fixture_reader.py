"""Case fixture ingestion and validation service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .pyramid_cases import build_pyramid
from .testcase_models import TestCase


class CaseFixtureError(Exception):
    """Raised when a case fixture file is invalid."""


def read_case_fixture(fixture_path: Path | str) -> tuple[TestCase, ...]:
    """Read a YAML case fixture and return its cases in file order."""
    path = Path(fixture_path)
    if not path.exists():
        raise CaseFixtureError(f"Case fixture file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise CaseFixtureError(f"Failed to parse case fixture file: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise CaseFixtureError("Case fixture root must be a mapping with a 'cases' list.")
    entries = parsed.get("cases")
    if not isinstance(entries, Sequence) or isinstance(entries, str) or not entries:
        raise CaseFixtureError("Case fixture must define a non-empty 'cases' list.")

    cases = [_parse_case(entry, index) for index, entry in enumerate(entries, start=1)]
    _ensure_unique_names(cases)
    return tuple(cases)


def _parse_case(entry: Any, index: int) -> TestCase:
    label = f"cases[{index}]"
    if not isinstance(entry, Mapping):
        raise CaseFixtureError(f"{label} must be a mapping.")

    name = _require_non_empty_string(entry.get("name"), f"{label}.name")
    stdin_tokens = _parse_stdin(entry.get("stdin"), f"{label}.stdin")
    size = _optional_positive_int(entry.get("size"), f"{label}.size")
    expected_shape = _parse_expected_shape(entry.get("expected"), size, label)
    points = _require_non_negative_number(entry.get("points", 0), f"{label}.points")
    robustness = entry.get("robustness", False)
    if not isinstance(robustness, bool):
        raise CaseFixtureError(f"{label}.robustness must be a boolean.")

    return TestCase(
        name=name,
        stdin_tokens=stdin_tokens,
        expected_shape=expected_shape,
        points=points,
        is_robustness_case=robustness,
        size=size,
    )


def _parse_stdin(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(token for token in value.splitlines() if token.strip())
    if isinstance(value, int) and not isinstance(value, bool):
        return (str(value),)
    if isinstance(value, Sequence):
        tokens: list[str] = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, str | int):
                raise CaseFixtureError(f"{field_name} entries must be strings or integers.")
            tokens.append(str(item))
        return tuple(tokens)
    raise CaseFixtureError(f"{field_name} must be a string or a list of tokens.")


def _parse_expected_shape(value: Any, size: int | None, label: str) -> tuple[str, ...]:
    if value is None:
        if size is None:
            raise CaseFixtureError(f"{label} requires either 'expected' lines or a 'size'.")
        return build_pyramid(size)
    if isinstance(value, str):
        lines = value.splitlines()
    elif isinstance(value, Sequence):
        lines = list(value)
    else:
        raise CaseFixtureError(f"{label}.expected must be a list of lines.")

    shape: list[str] = []
    for line in lines:
        if not isinstance(line, str):
            raise CaseFixtureError(f"{label}.expected entries must be strings.")
        stripped = line.rstrip()
        if not stripped.strip():
            raise CaseFixtureError(f"{label}.expected must not contain blank lines.")
        if set(stripped) - {"*", " "}:
            raise CaseFixtureError(f"{label}.expected lines may only contain '*' and spaces.")
        shape.append(stripped)
    if not shape:
        raise CaseFixtureError(f"{label}.expected must not be empty.")
    return tuple(shape)


def _ensure_unique_names(cases: Sequence[TestCase]) -> None:
    seen: set[str] = set()
    for case in cases:
        if case.name in seen:
            raise CaseFixtureError(f"Duplicate case name: {case.name}")
        seen.add(case.name)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise CaseFixtureError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise CaseFixtureError(f"{field_name} must not be empty.")
    return stripped


def _optional_positive_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise CaseFixtureError(f"{field_name} must be an integer.")
    if value <= 0:
        raise CaseFixtureError(f"{field_name} must be greater than zero.")
    return value


def _require_non_negative_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise CaseFixtureError(f"{field_name} must be a number.")
    if value < 0:
        raise CaseFixtureError(f"{field_name} must not be negative.")
    return float(value)

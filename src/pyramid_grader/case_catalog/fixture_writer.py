"""Case fixture generation helpers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import yaml

from .testcase_models import TestCase

DEFAULT_CASES_FILENAME = "cases.yaml"

_FIXTURE_HEADER = """# Grading cases for pyramid-grader.
# stdin: tokens fed to the program, one per line.
# expected: rows the program must print; omit it to use the standard pyramid for `size`.
# robustness: true marks cases that start with invalid input.
"""


def build_case_fixture(cases: Sequence[TestCase]) -> str:
    """Render cases as YAML fixture text."""
    document = {
        "cases": [
            {
                "name": case.name,
                "stdin": list(case.stdin_tokens),
                "size": case.size,
                "expected": list(case.expected_shape),
                "points": case.points,
                "robustness": case.is_robustness_case,
            }
            for case in cases
        ]
    }
    body = yaml.safe_dump(document, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return _FIXTURE_HEADER + body


def write_case_fixture(cases: Sequence[TestCase], output_path: Path | str) -> Path:
    """Write cases to a YAML fixture file.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the fixture fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Case fixture file already exists: {destination}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_case_fixture(cases), encoding="utf-8")
    return destination.resolve()

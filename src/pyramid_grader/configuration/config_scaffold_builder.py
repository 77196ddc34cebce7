"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "grader.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Grader configuration for pyramid-grader.
# Every section is optional; remove a key to fall back to its default.

execution:
  # C compiler used to build each submission.
  compiler: "cc"
  compile_flags:
    - "-std=c99"
    - "-O0"
  # Per-case run time ceiling. A program still running after it fails the run.
  timeout_seconds: 3
  compile_timeout_seconds: 30

cases:
  # YAML case fixture, relative to this file. Omit to use the built-in pyramid cases.
  # path: "cases.yaml"

report:
  # Directory for results workbooks. Omit to skip writing a workbook.
  # output_dir: "results"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML grader configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the grader configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Grader configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

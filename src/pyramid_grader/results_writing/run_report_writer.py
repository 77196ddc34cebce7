"""Results workbook writer service."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from pyramid_grader.grading_run import GradingOutcome, TestVerdict, execution_summary

from .report_models import RunMetadata, ScoreTier

RESULTS_SHEET_NAME = "Results"
SUMMARY_SHEET_NAME = "Summary"

RESULT_COLUMNS: tuple[str, ...] = ("#", "Name", "Input", "Status", "Notes", "Actual Output")
_COLUMN_WIDTHS: tuple[int, ...] = (6, 36, 18, 8, 60, 30)

PASS_MARK = "✓"
FAIL_MARK = "✗"


def resolve_output_path(source_path: Path | str, output_dir: Path | str, now: datetime) -> Path:
    """Timestamped workbook path for one graded source file."""
    source_file = Path(source_path)
    timestamp = now.strftime("%Y%m%d-%H%M%S")
    return Path(output_dir) / f"{source_file.stem}-results-{timestamp}.xlsx"


def write_results_workbook(outcome: GradingOutcome, run_metadata: RunMetadata) -> Path:
    """Write per-case results and the run summary to a new workbook."""
    workbook = Workbook()
    results_sheet = workbook.active
    results_sheet.title = RESULTS_SHEET_NAME
    _write_results_sheet(results_sheet, outcome.verdicts)
    _write_summary_sheet(workbook.create_sheet(SUMMARY_SHEET_NAME), outcome, run_metadata)

    output_path = run_metadata.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _write_results_sheet(sheet, verdicts: tuple[TestVerdict, ...]) -> None:
    for column, (label, width) in enumerate(zip(RESULT_COLUMNS, _COLUMN_WIDTHS, strict=True), 1):
        cell = sheet.cell(row=1, column=column, value=label)
        cell.font = Font(bold=True)
        sheet.column_dimensions[get_column_letter(column)].width = width

    for index, verdict in enumerate(verdicts, start=1):
        row = index + 1
        values = (
            index,
            verdict.case.name,
            _display_input(verdict.case.stdin_text),
            PASS_MARK if verdict.passed else FAIL_MARK,
            verdict.diagnostic,
            "\n".join(verdict.actual_shape),
        )
        for column, value in enumerate(values, start=1):
            sheet.cell(row=row, column=column, value=value)
        sheet.cell(row=row, column=len(values)).alignment = Alignment(wrap_text=True)
    sheet.freeze_panes = "A2"


def _write_summary_sheet(sheet, outcome: GradingOutcome, run_metadata: RunMetadata) -> None:
    entries = (
        ("score", outcome.score),
        ("tier", ScoreTier.for_score(outcome.score).value),
        ("feedback", outcome.feedback),
        ("execution", execution_summary(outcome)),
        ("cases_run", len(outcome.verdicts)),
        ("cases_passed", outcome.passed_count),
        ("run_start", run_metadata.run_start.isoformat()),
        ("source_path", str(run_metadata.source_path)),
        ("output_path", str(run_metadata.output_path)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key).font = Font(bold=True)
        sheet.cell(row=row, column=2, value=value)
    sheet.column_dimensions["A"].width = 16
    sheet.column_dimensions["B"].width = 80


def _display_input(stdin_text: str) -> str:
    return stdin_text.replace("\n", "\\n")

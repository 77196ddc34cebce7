"""Results writing domain exports."""

from .report_models import RunMetadata, ScoreTier
from .run_report_writer import (
    RESULTS_SHEET_NAME,
    SUMMARY_SHEET_NAME,
    resolve_output_path,
    write_results_workbook,
)

__all__ = [
    "RunMetadata",
    "ScoreTier",
    "RESULTS_SHEET_NAME",
    "SUMMARY_SHEET_NAME",
    "resolve_output_path",
    "write_results_workbook",
]

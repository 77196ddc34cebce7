"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ScoreTier(str, Enum):
    """Band a score falls into when rendered."""

    EXCELLENT = "excellent"
    GOOD = "good"
    POOR = "poor"

    @staticmethod
    def for_score(score: int) -> ScoreTier:
        if score >= 85:
            return ScoreTier.EXCELLENT
        if score >= 60:
            return ScoreTier.GOOD
        return ScoreTier.POOR


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the Summary sheet."""

    run_start: datetime
    source_path: Path
    output_path: Path

"""Scoring entities."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class ScoreBreakdown:
    """The three independent sub-scores of one graded run."""

    functional: float
    robustness: float
    quality: float

    @property
    def total(self) -> int:
        """Sum of the sub-scores, clamped to [0, 100] and rounded half-up."""
        raw = Decimal(str(self.functional)) + Decimal(str(self.robustness))
        raw += Decimal(str(self.quality))
        clamped = max(Decimal(0), min(Decimal(100), raw))
        return int(clamped.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    @staticmethod
    def zero() -> ScoreBreakdown:
        return ScoreBreakdown(functional=0.0, robustness=0.0, quality=0.0)

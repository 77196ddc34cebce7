"""Case catalog entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TestCase:
    """One fixed grading case: what to feed the program and what it must print."""

    __test__ = False  # not a pytest test class

    name: str
    stdin_tokens: tuple[str, ...]
    expected_shape: tuple[str, ...]
    points: float
    is_robustness_case: bool = False
    size: int | None = None

    @property
    def stdin_text(self) -> str:
        """Input tokens as the program reads them, one per line."""
        if not self.stdin_tokens:
            return ""
        return "\n".join(self.stdin_tokens) + "\n"

from __future__ import annotations

from dataclasses import dataclass, field


def percentage(part: int, whole: int) -> float:
    return round((part / whole) * 100, 2) if whole > 0 else 0


@dataclass(frozen=True)
class StrandStats:
    attempted: int = 0
    correct: int = 0

    @property
    def percentage(self) -> float:
        return percentage(self.correct, self.attempted)


@dataclass(frozen=True)
class PerformanceSummary:
    strands: dict[str, StrandStats] = field(default_factory=dict)  # first-seen order
    total_questions: int = 0
    total_correct: int = 0

    @property
    def overall_percentage(self) -> float:
        return percentage(self.total_correct, self.total_questions)

    @property
    def is_empty(self) -> bool:
        return not self.strands and self.total_questions == 0


@dataclass(frozen=True)
class ProgressEntry:
    date: str
    raw_score: int
    total_questions: int
    completion_percentage: float
    assessment_id: str

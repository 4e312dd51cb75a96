from __future__ import annotations

from enum import Enum


class ReportKind(str, Enum):
    diagnostic = "diagnostic"
    progress = "progress"
    feedback = "feedback"

    @property
    def code(self) -> str:
        return _CODES[self]

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Report"

    @classmethod
    def parse(cls, value: str | None) -> "ReportKind | None":
        """Resolve an operator code ("1".."3") or kind name; None if neither."""
        normalized = (value or "").strip().lower()
        for kind, code in _CODES.items():
            if normalized in (code, kind.value):
                return kind
        return None


_CODES = {
    ReportKind.diagnostic: "1",
    ReportKind.progress: "2",
    ReportKind.feedback: "3",
}

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Tuple

from assessment_reports.domain.entities.student import Student, require_id, require_text
from assessment_reports.domain.exceptions import RecordValidationError

# e.g. "14/12/2019 10:31:00"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a dataset timestamp. Returns None for empty or malformed input."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), TIMESTAMP_FORMAT)
    except ValueError:
        return None


@dataclass(frozen=True)
class Answer:
    question_id: str
    response: str


@dataclass(frozen=True)
class StudentResponse:
    id: str
    assessment_id: str
    assigned: str
    started: str | None
    completed: str | None
    student: Student
    answers: Tuple[Answer, ...]
    raw_score: int = 0

    @staticmethod
    def from_payload(data: Any, student: Student) -> "StudentResponse":
        if not isinstance(data, dict):
            raise RecordValidationError("Student response record must be an object")

        for field in ("id", "assessmentId", "assigned", "responses"):
            if data.get(field) is None:
                raise RecordValidationError(f"Missing required field: '{field}'")

        raw_answers = data["responses"]
        if not isinstance(raw_answers, list) or not raw_answers:
            raise RecordValidationError("Responses must be a non-empty array")

        answers: list[Answer] = []
        for raw in raw_answers:
            if not isinstance(raw, dict) or raw.get("questionId") is None or raw.get("response") is None:
                raise RecordValidationError("Each response must have a questionId and response")
            answers.append(Answer(question_id=str(raw["questionId"]).strip(), response=str(raw["response"]).strip()))

        return StudentResponse(
            id=require_id(data, "id"),
            assessment_id=require_id(data, "assessmentId"),
            assigned=require_text(data, "assigned"),
            started=_optional_text(data, "started"),
            completed=_optional_text(data, "completed"),
            student=student,
            answers=tuple(answers),
            raw_score=_parse_raw_score(data.get("results")),
        )

    @property
    def is_completed(self) -> bool:
        return bool(self.completed)

    @property
    def total_questions(self) -> int:
        return len(self.answers)

    @property
    def completion_percentage(self) -> float:
        total = self.total_questions
        return (self.raw_score / total) * 100 if total > 0 else 0

    @property
    def completed_at(self) -> datetime | None:
        return parse_timestamp(self.completed)

    @property
    def completed_timestamp(self) -> float:
        """Completion time as epoch seconds; 0 when missing or unparsable."""
        completed_at = self.completed_at
        return completed_at.replace(tzinfo=timezone.utc).timestamp() if completed_at else 0

    def response_for_question(self, question_id: str) -> str | None:
        for answer in self.answers:
            if answer.question_id == question_id:
                return answer.response
        return None


def _optional_text(data: dict[str, Any], field: str) -> str | None:
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordValidationError(f"Field '{field}' must be a string")
    return value.strip()


def _parse_raw_score(results: Any) -> int:
    if results is None:
        return 0
    if not isinstance(results, dict):
        raise RecordValidationError("Field 'results' must be an object")
    raw_score = results.get("rawScore")
    if raw_score is None:
        return 0
    if isinstance(raw_score, bool) or not isinstance(raw_score, int):
        raise RecordValidationError("Field 'results.rawScore' must be an integer")
    return raw_score

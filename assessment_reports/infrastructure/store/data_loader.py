from __future__ import annotations

import logging
import threading
from typing import Any, Callable, TypeVar

from assessment_reports.application.exceptions import DataSourceError, DatasetValidationError, RecordError
from assessment_reports.application.ports.assessment_repository import AssessmentRepositoryPort
from assessment_reports.application.ports.record_source import (
    ASSESSMENTS,
    QUESTIONS,
    STUDENT_RESPONSES,
    STUDENTS,
    RecordSourcePort,
)
from assessment_reports.domain.entities.performance import PerformanceSummary, ProgressEntry, StrandStats
from assessment_reports.domain.entities.question import Question
from assessment_reports.domain.entities.student import Student
from assessment_reports.domain.entities.student_response import StudentResponse
from assessment_reports.domain.exceptions import RecordValidationError

T = TypeVar("T")
O = TypeVar("O")

DEFAULT_ASSESSMENT_NAME = "Assessment"


class DataLoader(AssessmentRepositoryPort):
    """
    Read-through cache over the assessment datasets.

    Each collection is read from the record source at most once and never
    reset. Loads are guarded by a re-entrant lock so a loader shared between
    callers performs every read and parse exactly once; after that the
    collections are read without locking.
    """

    def __init__(self, source: RecordSourcePort, fallback_assessment_name: str = DEFAULT_ASSESSMENT_NAME) -> None:
        self._source = source
        self._fallback_assessment_name = fallback_assessment_name
        self._students: dict[str, Student] | None = None
        self._questions: dict[str, Question] | None = None
        self._responses: list[StudentResponse] | None = None
        self._assessment_names: dict[str, str | None] | None = None
        self._loaded = False
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_all(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            # responses resolve student ids, so students go first
            self.load_students()
            self.load_questions()
            self.load_responses()
            self._loaded = True

    def load_students(self) -> dict[str, Student]:
        if self._students is not None:
            return self._students
        with self._lock:
            if self._students is None:
                students = self.load_strict(STUDENTS, Student.from_payload)
                self._students = {student.id: student for student in students}
                self._logger.info("Students loaded", extra={"dataset": STUDENTS, "count": len(self._students)})
        return self._students

    def load_questions(self) -> dict[str, Question]:
        if self._questions is not None:
            return self._questions
        with self._lock:
            if self._questions is None:
                questions = self.load_strict(QUESTIONS, Question.from_payload)
                self._questions = {question.id: question for question in questions}
                self._logger.info("Questions loaded", extra={"dataset": QUESTIONS, "count": len(self._questions)})
        return self._questions

    def load_responses(self) -> list[StudentResponse]:
        if self._responses is not None:
            return self._responses
        with self._lock:
            if self._responses is None:
                students = self.load_students()
                self._responses = self.load_lenient(
                    STUDENT_RESPONSES,
                    resolve=lambda raw: students.get(_student_ref(raw) or ""),
                    build=StudentResponse.from_payload,
                )
                self._logger.info(
                    "Student responses loaded",
                    extra={"dataset": STUDENT_RESPONSES, "count": len(self._responses)},
                )
        return self._responses

    def load_strict(self, dataset: str, build: Callable[[Any], T]) -> list[T]:
        """
        Build every record of ``dataset``; fail if any record is invalid.
        All failures are collected first so the error lists each bad index.
        """
        records = self._source.read_records(dataset)
        entities: list[T] = []
        errors: list[RecordError] = []
        for index, raw in enumerate(records):
            try:
                entities.append(build(raw))
            except RecordValidationError as e:
                self._record_failure(dataset, index, e, errors)

        if errors:
            raise DatasetValidationError(dataset, errors)
        return entities

    def load_lenient(
        self,
        dataset: str,
        resolve: Callable[[Any], O | None],
        build: Callable[[Any, O], T],
    ) -> list[T]:
        """
        Like ``load_strict`` but records whose owner cannot be resolved are
        skipped with a warning instead of failing the load.
        """
        records = self._source.read_records(dataset)
        entities: list[T] = []
        errors: list[RecordError] = []
        for index, raw in enumerate(records):
            owner = resolve(raw)
            if owner is None:
                self._logger.warning(
                    "Skipping record with unknown student",
                    extra={"dataset": dataset, "index": index, "student_id": _student_ref(raw)},
                )
                continue
            try:
                entities.append(build(raw, owner))
            except RecordValidationError as e:
                self._record_failure(dataset, index, e, errors)

        if errors:
            raise DatasetValidationError(dataset, errors)
        return entities

    def _record_failure(self, dataset: str, index: int, error: Exception, errors: list[RecordError]) -> None:
        self._logger.error("Invalid record", extra={"dataset": dataset, "index": index, "error": str(error)})
        errors.append(RecordError(index=index, reason=str(error)))

    def get_student(self, student_id: str) -> Student | None:
        self.load_all()
        return self._students.get(student_id)

    def get_question(self, question_id: str) -> Question | None:
        self.load_all()
        return self._questions.get(question_id)

    def get_completed_responses_for_student(self, student_id: str) -> list[StudentResponse]:
        self.load_all()
        return [r for r in self._responses if r.student.id == student_id and r.is_completed]

    def get_most_recent_completed_response(self, student_id: str) -> StudentResponse | None:
        completed = self.get_completed_responses_for_student(student_id)
        if not completed:
            return None
        # stable sort: equal timestamps keep load order
        return sorted(completed, key=lambda r: r.completed_timestamp, reverse=True)[0]

    def get_student_progress(self, student_id: str) -> list[ProgressEntry]:
        completed = sorted(
            self.get_completed_responses_for_student(student_id),
            key=lambda r: r.completed_timestamp,
        )
        return [
            ProgressEntry(
                date=response.completed or "",
                raw_score=response.raw_score,
                total_questions=response.total_questions,
                completion_percentage=response.completion_percentage,
                assessment_id=response.assessment_id,
            )
            for response in completed
        ]

    def get_student_performance_by_strand(self, student_id: str) -> PerformanceSummary:
        recent = self.get_most_recent_completed_response(student_id)
        if recent is None:
            return PerformanceSummary()

        counts: dict[str, list[int]] = {}
        total_questions = 0
        total_correct = 0
        for answer in recent.answers:
            question = self.get_question(answer.question_id)
            if question is None:
                continue

            is_correct = question.is_correct_answer(answer.response)
            bucket = counts.setdefault(question.strand, [0, 0])
            bucket[0] += 1
            bucket[1] += 1 if is_correct else 0

            total_questions += 1
            total_correct += 1 if is_correct else 0

        return PerformanceSummary(
            strands={strand: StrandStats(attempted=a, correct=c) for strand, (a, c) in counts.items()},
            total_questions=total_questions,
            total_correct=total_correct,
        )

    def get_assessment_name(self, assessment_id: str) -> str:
        name = self._load_assessment_names().get(assessment_id)
        if not name:
            self._logger.warning("Assessment name not found", extra={"assessment_id": assessment_id})
            return self._fallback_assessment_name
        return name

    def _load_assessment_names(self) -> dict[str, str | None]:
        if self._assessment_names is not None:
            return self._assessment_names
        with self._lock:
            if self._assessment_names is None:
                names: dict[str, str | None] = {}
                try:
                    records = self._source.read_records(ASSESSMENTS)
                except DataSourceError as e:
                    self._logger.warning(
                        "Assessment metadata unavailable, using fallback names",
                        extra={"dataset": ASSESSMENTS, "error": str(e)},
                    )
                    records = []
                for record in records:
                    if not isinstance(record, dict) or record.get("id") is None:
                        continue
                    name = record.get("name")
                    # first record for an id wins
                    names.setdefault(str(record["id"]).strip(), str(name).strip() if name is not None else None)
                self._assessment_names = names
        return self._assessment_names


def _student_ref(raw: Any) -> str | None:
    if not isinstance(raw, dict):
        return None
    student = raw.get("student")
    if not isinstance(student, dict) or student.get("id") is None:
        return None
    return str(student["id"]).strip()

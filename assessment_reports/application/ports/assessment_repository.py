from __future__ import annotations

from abc import ABC, abstractmethod

from assessment_reports.domain.entities.performance import PerformanceSummary, ProgressEntry
from assessment_reports.domain.entities.question import Question
from assessment_reports.domain.entities.student import Student
from assessment_reports.domain.entities.student_response import StudentResponse


class AssessmentRepositoryPort(ABC):
    @abstractmethod
    def get_student(self, student_id: str) -> Student | None:
        raise NotImplementedError

    @abstractmethod
    def get_question(self, question_id: str) -> Question | None:
        raise NotImplementedError

    @abstractmethod
    def get_completed_responses_for_student(self, student_id: str) -> list[StudentResponse]:
        raise NotImplementedError

    @abstractmethod
    def get_most_recent_completed_response(self, student_id: str) -> StudentResponse | None:
        """Latest completed response by completion time, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_student_progress(self, student_id: str) -> list[ProgressEntry]:
        """Completed responses, oldest first."""
        raise NotImplementedError

    @abstractmethod
    def get_student_performance_by_strand(self, student_id: str) -> PerformanceSummary:
        """
        Per-strand results of the most recent completed response.
        Returns an empty summary when the student has no completed response.
        """
        raise NotImplementedError

    @abstractmethod
    def get_assessment_name(self, assessment_id: str) -> str:
        """Display name of an assessment. Never raises; falls back to a default label."""
        raise NotImplementedError

from __future__ import annotations

import logging
from typing import Callable

from assessment_reports.application.ports.assessment_repository import AssessmentRepositoryPort
from assessment_reports.application.use_cases.report_formatters import (
    WrongAnswer,
    format_diagnostic_report,
    format_feedback_report,
    format_progress_report,
    no_completed_assessments,
    student_not_found,
)
from assessment_reports.domain.entities.report_kind import ReportKind
from assessment_reports.domain.entities.student_response import StudentResponse


class ReportGenerator:
    """
    Builds the textual student reports.

    Missing students and students without completed assessments produce a
    descriptive sentence, never an exception. Data source failures raised by
    the repository propagate to the caller.
    """

    def __init__(self, repository: AssessmentRepositoryPort) -> None:
        self._repository = repository
        self._logger = logging.getLogger(__name__)
        self._handlers: dict[ReportKind, Callable[[str], str]] = {
            ReportKind.diagnostic: self.generate_diagnostic_report,
            ReportKind.progress: self.generate_progress_report,
            ReportKind.feedback: self.generate_feedback_report,
        }

    def generate(self, kind: ReportKind, student_id: str) -> str:
        self._logger.info("Generating report", extra={"report_kind": kind.value, "student_id": student_id})
        return self._handlers[kind](student_id)

    def generate_diagnostic_report(self, student_id: str) -> str:
        student = self._repository.get_student(student_id)
        if student is None:
            return student_not_found(student_id)

        response = self._repository.get_most_recent_completed_response(student_id)
        if response is None:
            return no_completed_assessments(student)

        return format_diagnostic_report(
            student,
            response,
            self._repository.get_assessment_name(response.assessment_id),
            self._repository.get_student_performance_by_strand(student_id),
        )

    def generate_progress_report(self, student_id: str) -> str:
        student = self._repository.get_student(student_id)
        if student is None:
            return student_not_found(student_id)

        progress = self._repository.get_student_progress(student_id)
        if not progress:
            return no_completed_assessments(student)

        assessment_name = self._repository.get_assessment_name(progress[0].assessment_id)
        return format_progress_report(student, progress, assessment_name)

    def generate_feedback_report(self, student_id: str) -> str:
        student = self._repository.get_student(student_id)
        if student is None:
            return student_not_found(student_id)

        response = self._repository.get_most_recent_completed_response(student_id)
        if response is None:
            return no_completed_assessments(student)

        return format_feedback_report(
            student,
            response,
            self._repository.get_assessment_name(response.assessment_id),
            self._repository.get_student_performance_by_strand(student_id),
            self._wrong_answers(response),
        )

    def _wrong_answers(self, response: StudentResponse) -> list[WrongAnswer]:
        wrong: list[WrongAnswer] = []
        for answer in response.answers:
            question = self._repository.get_question(answer.question_id)
            if question is None or question.is_correct_answer(answer.response):
                continue
            wrong.append(
                WrongAnswer(
                    stem=question.stem,
                    response=answer.response,
                    response_value=question.option_value(answer.response),
                    correct_answer=question.correct_answer,
                    correct_value=question.option_value(question.correct_answer),
                    hint=question.hint,
                )
            )
        return wrong

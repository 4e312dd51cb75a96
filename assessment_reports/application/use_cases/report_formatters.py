from __future__ import annotations

from dataclasses import dataclass

from assessment_reports.application.utils.date_format import display_date
from assessment_reports.domain.entities.performance import PerformanceSummary, ProgressEntry
from assessment_reports.domain.entities.student import Student
from assessment_reports.domain.entities.student_response import StudentResponse

UNKNOWN_VALUE = "Unknown"
NO_WRONG_ANSWERS = "No wrong answers found! Excellent work!"


@dataclass(frozen=True)
class WrongAnswer:
    stem: str
    response: str
    response_value: str | None
    correct_answer: str
    correct_value: str | None
    hint: str = ""


def student_not_found(student_id: str) -> str:
    return f"Student not found with ID: {student_id}"


def no_completed_assessments(student: Student) -> str:
    return f"No completed assessments found for student: {student.full_name}"


def format_diagnostic_report(
    student: Student,
    response: StudentResponse,
    assessment_name: str,
    performance: PerformanceSummary,
) -> str:
    blocks = [
        _completion_header(student, response, assessment_name),
        _score_line(student, performance, "Details by strand given below:"),
        "",
    ]
    for strand, stats in performance.strands.items():
        blocks.append(f"{strand}: {stats.correct} out of {stats.attempted} correct")
    return _join_lines(blocks)


def format_progress_report(student: Student, progress: list[ProgressEntry], assessment_name: str) -> str:
    attempts = len(progress)
    blocks = [
        f"{student.full_name} has completed {assessment_name} assessment {attempts} times in total. "
        "Date and raw score given below:",
        "",
    ]
    for entry in progress:
        blocks.append(f"Date: {display_date(entry.date)}, Raw Score: {entry.raw_score} out of {entry.total_questions}")

    if attempts >= 2:
        improvement = progress[-1].raw_score - progress[0].raw_score
        blocks.append("")
        blocks.append(
            f"{student.full_name} got {improvement} more correct in the recent completed assessment than the oldest"
        )
    return _join_lines(blocks)


def format_feedback_report(
    student: Student,
    response: StudentResponse,
    assessment_name: str,
    performance: PerformanceSummary,
    wrong_answers: list[WrongAnswer],
) -> str:
    blocks = [
        _completion_header(student, response, assessment_name),
        _score_line(student, performance, "Feedback for wrong answers given below"),
        "",
    ]
    if not wrong_answers:
        blocks.append(NO_WRONG_ANSWERS)
        return _join_lines(blocks)

    for item in wrong_answers:
        blocks.append(f"Question: {item.stem}")
        blocks.append(f"Your answer: {item.response} with value {_display_value(item.response_value)}")
        blocks.append(f"Right answer: {item.correct_answer} with value {_display_value(item.correct_value)}")
        if item.hint:
            blocks.append(f"Hint: {item.hint}")
        blocks.append("")
    return _join_lines(blocks)


def _completion_header(student: Student, response: StudentResponse, assessment_name: str) -> str:
    completed_on = display_date(response.completed, with_time=True)
    return f"{student.full_name} recently completed {assessment_name} assessment on {completed_on}"


def _score_line(student: Student, performance: PerformanceSummary, trailer: str) -> str:
    return (
        f"{student.first_name} got {performance.total_correct} questions right "
        f"out of {performance.total_questions}. {trailer}"
    )


def _join_lines(lines: list[str]) -> str:
    return "\n".join(lines).rstrip("\n") + "\n"


def _display_value(value: str | None) -> str:
    # only an unresolvable option is unknown; "" and "0" are real values
    return UNKNOWN_VALUE if value is None else value

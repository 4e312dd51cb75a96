"""
Tests for validated construction of the domain entities.
"""

from __future__ import annotations

import pytest

from assessment_reports.domain.entities.question import Question
from assessment_reports.domain.entities.report_kind import ReportKind
from assessment_reports.domain.entities.student import Student
from assessment_reports.domain.entities.student_response import StudentResponse, parse_timestamp
from assessment_reports.domain.exceptions import RecordValidationError

from factories import question_record, response_record, student_record


def test_student_fields_are_trimmed():
    student = Student.from_payload(student_record(" student1 ", "  Tony", "Stark  ", 6))

    assert student.id == "student1"
    assert student.first_name == "Tony"
    assert student.last_name == "Stark"
    assert student.year_level == 6
    assert student.full_name == "Tony Stark"


@pytest.mark.parametrize("raw, expected", [(6, 6), ("7", 7), (" 8 ", 8), ("-1", -1)])
def test_student_year_level_accepts_integers_and_integer_text(raw, expected):
    assert Student.from_payload(student_record(year_level=raw)).year_level == expected


@pytest.mark.parametrize("raw", ["seven", "6.5", 6.5, True, "", [6]])
def test_student_year_level_rejects_non_integers(raw):
    with pytest.raises(RecordValidationError, match="yearLevel"):
        Student.from_payload(student_record(year_level=raw))


@pytest.mark.parametrize("field", ["id", "firstName", "lastName", "yearLevel"])
def test_student_missing_field_is_named(field):
    record = student_record()
    del record[field]
    with pytest.raises(RecordValidationError, match=f"'{field}'"):
        Student.from_payload(record)


def test_student_null_field_counts_as_missing():
    record = student_record()
    record["lastName"] = None
    with pytest.raises(RecordValidationError, match="'lastName'"):
        Student.from_payload(record)


def test_student_rejects_non_object_record():
    with pytest.raises(RecordValidationError):
        Student.from_payload(["student1", "Tony"])


def test_question_parses_config():
    question = Question.from_payload(question_record(" q1 ", strand=" Number ", key="option2", hint="Count again"))

    assert question.id == "q1"
    assert question.strand == "Number"
    assert question.correct_answer == "option2"
    assert question.hint == "Count again"
    assert [o.id for o in question.options] == ["option1", "option2", "option3"]
    assert question.is_correct_answer("option2") is True
    assert question.is_correct_answer("option1") is False
    assert question.option_value("option3") == "3"
    assert question.option_value("option9") is None


def test_question_hint_defaults_to_empty():
    assert Question.from_payload(question_record("q1", hint=None)).hint == ""


@pytest.mark.parametrize("missing", ["options", "key"])
def test_question_config_requires_options_and_key(missing):
    record = question_record("q1")
    del record["config"][missing]
    with pytest.raises(RecordValidationError, match="options and key"):
        Question.from_payload(record)


def test_question_config_rejects_empty_options():
    record = question_record("q1")
    record["config"]["options"] = []
    with pytest.raises(RecordValidationError, match="non-empty"):
        Question.from_payload(record)


def test_question_option_requires_id():
    record = question_record("q1")
    record["config"]["options"][1] = {"value": "2"}
    with pytest.raises(RecordValidationError, match="position 1"):
        Question.from_payload(record)


def test_question_missing_strand_is_named():
    record = question_record("q1")
    del record["strand"]
    with pytest.raises(RecordValidationError, match="'strand'"):
        Question.from_payload(record)


def test_student_response_queries():
    student = Student.from_payload(student_record())
    response = StudentResponse.from_payload(
        response_record("r1", [("q1", "option1"), ("q2", "option3"), ("q3", "option2"), ("q4", "option1")], raw_score=3),
        student,
    )

    assert response.student is student
    assert response.is_completed is True
    assert response.raw_score == 3
    assert response.total_questions == 4
    assert response.completion_percentage == 75
    assert response.response_for_question("q2") == "option3"
    assert response.response_for_question("q9") is None
    assert response.completed_at is not None
    assert response.completed_at.year == 2021 and response.completed_at.hour == 10


def test_student_response_defaults():
    student = Student.from_payload(student_record())
    response = StudentResponse.from_payload(response_record("r1", [("q1", "option1")], completed=None), student)

    assert response.is_completed is False
    assert response.raw_score == 0
    assert response.started == "16/12/2021 10:00:00"
    assert response.completed_timestamp == 0


def test_empty_completed_is_not_completed():
    student = Student.from_payload(student_record())
    response = StudentResponse.from_payload(response_record("r1", [("q1", "option1")], completed=""), student)

    assert response.is_completed is False


def test_unparsable_completed_sorts_as_epoch():
    student = Student.from_payload(student_record())
    response = StudentResponse.from_payload(response_record("r1", [("q1", "option1")], completed="yesterday"), student)

    assert response.is_completed is True
    assert response.completed_at is None
    assert response.completed_timestamp == 0


def test_student_response_requires_answers():
    student = Student.from_payload(student_record())
    with pytest.raises(RecordValidationError, match="non-empty"):
        StudentResponse.from_payload(response_record("r1", []), student)


@pytest.mark.parametrize("answer", [{"questionId": "q1"}, {"response": "option1"}, {"questionId": "q1", "response": None}])
def test_student_response_answers_need_question_and_response(answer):
    student = Student.from_payload(student_record())
    record = response_record("r1", [("q1", "option1")])
    record["responses"].append(answer)
    with pytest.raises(RecordValidationError, match="questionId and response"):
        StudentResponse.from_payload(record, student)


def test_student_response_rejects_non_integer_raw_score():
    student = Student.from_payload(student_record())
    record = response_record("r1", [("q1", "option1")])
    record["results"] = {"rawScore": "8"}
    with pytest.raises(RecordValidationError, match="rawScore"):
        StudentResponse.from_payload(record, student)


def test_parse_timestamp_uses_day_first_format():
    parsed = parse_timestamp("02/03/2021 14:05:09")

    assert (parsed.day, parsed.month, parsed.year) == (2, 3, 2021)
    assert (parsed.hour, parsed.minute, parsed.second) == (14, 5, 9)
    assert parse_timestamp("2021-03-02T14:05:09") is None
    assert parse_timestamp(None) is None


def test_report_kind_parse():
    assert ReportKind.parse("1") is ReportKind.diagnostic
    assert ReportKind.parse(" 2 ") is ReportKind.progress
    assert ReportKind.parse("Feedback") is ReportKind.feedback
    assert ReportKind.parse("99") is None
    assert ReportKind.parse(None) is None
    assert ReportKind.progress.label == "Progress Report"
    assert [kind.code for kind in ReportKind] == ["1", "2", "3"]


def test_numeric_ids_become_text():
    student = Student.from_payload(student_record(7))
    question = Question.from_payload(question_record(12))
    record = response_record(3, [("q1", "option1")])
    record["assessmentId"] = 40
    response = StudentResponse.from_payload(record, student)

    assert student.id == "7"
    assert question.id == "12"
    assert (response.id, response.assessment_id) == ("3", "40")


@pytest.mark.parametrize("raw", [True, 7.5, ["student1"], {"id": "student1"}])
def test_non_text_ids_are_rejected(raw):
    with pytest.raises(RecordValidationError, match="'id' must be a string or integer"):
        Student.from_payload(student_record(raw))


def test_option_values_are_kept_as_text():
    record = question_record("q1")
    record["config"]["options"] = [{"id": 1, "value": 0}, {"id": "option2", "value": None}]
    question = Question.from_payload(record)

    assert question.option_value("1") == "0"
    assert question.option_value("option2") == ""

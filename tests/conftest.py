from __future__ import annotations

import json
from pathlib import Path

import pytest

from factories import assessment_record, datasets, question_record, response_record, student_record


@pytest.fixture
def sample_datasets() -> dict:
    """Two students; Tony has two completed attempts, Steve none."""
    questions = [
        question_record("q1", strand="Number", key="option1"),
        question_record("q2", strand="Number", key="option2", hint=None),
        question_record("q3", strand="Geometry", key="option3"),
    ]
    responses = [
        response_record(
            "r2",
            [("q1", "option1"), ("q2", "option2"), ("q3", "option1")],
            completed="16/12/2021 10:46:00",
            raw_score=2,
        ),
        response_record(
            "r1",
            [("q1", "option2"), ("q2", "option2"), ("q3", "option1")],
            completed="16/12/2020 09:05:00",
            raw_score=1,
        ),
        response_record("r3", [("q1", "option1")], student_id="student2", completed=None),
    ]
    return datasets(
        students=[student_record(), student_record("student2", "Steve", "Rogers", 5)],
        questions=questions,
        responses=responses,
        assessments=[assessment_record()],
    )


@pytest.fixture
def data_dir(tmp_path: Path, sample_datasets: dict) -> Path:
    """Sample datasets written as JSON files, the layout JsonRecordSource reads."""
    for name, records in sample_datasets.items():
        (tmp_path / f"{name}.json").write_text(json.dumps(records), encoding="utf-8")
    return tmp_path

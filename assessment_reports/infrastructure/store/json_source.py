from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from assessment_reports.application.exceptions import DataSourceUnavailableError, DataSourceUnparsableError
from assessment_reports.application.ports.record_source import (
    ASSESSMENTS,
    QUESTIONS,
    STUDENT_RESPONSES,
    STUDENTS,
    RecordSourcePort,
)

DEFAULT_FILENAMES = {
    STUDENTS: "students.json",
    QUESTIONS: "questions.json",
    STUDENT_RESPONSES: "student-responses.json",
    ASSESSMENTS: "assessments.json",
}


class JsonRecordSource(RecordSourcePort):
    def __init__(self, data_dir: str | Path = "./data", filenames: dict[str, str] | None = None) -> None:
        self._data_dir = Path(data_dir)
        self._filenames = {**DEFAULT_FILENAMES, **(filenames or {})}
        self._logger = logging.getLogger(__name__)

    def _get_file_path(self, dataset: str) -> Path:
        """Get the file path for a dataset name."""
        return self._data_dir / self._filenames.get(dataset, f"{dataset}.json")

    def read_records(self, dataset: str) -> list[Any]:
        file_path = self._get_file_path(dataset)
        if not file_path.is_file():
            self._logger.error("Dataset file not found", extra={"dataset": dataset, "path": str(file_path)})
            raise DataSourceUnavailableError(f"{dataset} data file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._logger.error(
                "Dataset file could not be decoded",
                extra={"dataset": dataset, "path": str(file_path), "error": str(e)},
            )
            raise DataSourceUnparsableError(f"Failed to decode {dataset} JSON: {e}") from e
        except OSError as e:
            self._logger.error("Dataset file could not be read", extra={"dataset": dataset, "error": str(e)})
            raise DataSourceUnavailableError(f"{dataset} data file could not be read: {file_path}") from e

        if not isinstance(data, list):
            self._logger.error("Dataset is not a JSON array", extra={"dataset": dataset, "path": str(file_path)})
            raise DataSourceUnparsableError(f"Failed to decode {dataset} JSON: expected an array of records")
        return data

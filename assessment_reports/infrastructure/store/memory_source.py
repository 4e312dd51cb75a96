from __future__ import annotations

import copy
from typing import Any

from assessment_reports.application.exceptions import DataSourceUnavailableError, DataSourceUnparsableError
from assessment_reports.application.ports.record_source import RecordSourcePort


class MemoryRecordSource(RecordSourcePort):
    def __init__(self, datasets: dict[str, Any] | None = None) -> None:
        self._datasets: dict[str, Any] = dict(datasets or {})
        self.read_counts: dict[str, int] = {}

    def read_records(self, dataset: str) -> list[Any]:
        self.read_counts[dataset] = self.read_counts.get(dataset, 0) + 1
        if dataset not in self._datasets:
            raise DataSourceUnavailableError(f"{dataset} data file not found: <memory>")
        records = self._datasets[dataset]
        if not isinstance(records, list):
            raise DataSourceUnparsableError(f"Failed to decode {dataset} JSON: expected an array of records")
        return copy.deepcopy(records)

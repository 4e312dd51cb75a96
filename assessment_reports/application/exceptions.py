from __future__ import annotations

from dataclasses import dataclass


class DataSourceError(RuntimeError):
    """Raised when a dataset cannot be loaded; fatal for the whole process."""
    pass


class DataSourceUnavailableError(DataSourceError):
    """Raised when a dataset file does not exist."""
    pass


class DataSourceUnparsableError(DataSourceError):
    """Raised when a dataset is not a valid JSON array of records."""
    pass


@dataclass(frozen=True)
class RecordError:
    index: int
    reason: str


class DatasetValidationError(DataSourceError):
    """Raised when one or more records of a dataset fail validation."""

    def __init__(self, dataset: str, errors: list[RecordError]) -> None:
        self.dataset = dataset
        self.errors = list(errors)
        lines = [f"Invalid {dataset} record at index {e.index}: {e.reason}" for e in self.errors]
        super().__init__(f"Some {dataset} records failed to load:\n" + "\n".join(lines))

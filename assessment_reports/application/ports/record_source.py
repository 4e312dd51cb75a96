from abc import ABC, abstractmethod
from typing import Any

STUDENTS = "students"
QUESTIONS = "questions"
STUDENT_RESPONSES = "student-responses"
ASSESSMENTS = "assessments"


class RecordSourcePort(ABC):
    @abstractmethod
    def read_records(self, dataset: str) -> list[Any]:
        """
        Read every raw record of a named dataset.
        Raises DataSourceUnavailableError if the dataset does not exist and
        DataSourceUnparsableError if it is not a list of records.
        """
        raise NotImplementedError

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from assessment_reports.domain.exceptions import RecordValidationError

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Student:
    id: str
    first_name: str
    last_name: str
    year_level: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @staticmethod
    def from_payload(data: Any) -> "Student":
        if not isinstance(data, dict):
            raise RecordValidationError("Student record must be an object")

        for field in ("id", "firstName", "lastName", "yearLevel"):
            if data.get(field) is None:
                raise RecordValidationError(f"Missing required field: '{field}'")

        return Student(
            id=require_id(data, "id"),
            first_name=require_text(data, "firstName"),
            last_name=require_text(data, "lastName"),
            year_level=_parse_year_level(data["yearLevel"]),
        )


def require_text(data: dict[str, Any], field: str) -> str:
    """Return the trimmed string under ``field`` or raise if absent or not text."""
    value = data.get(field)
    if value is None:
        raise RecordValidationError(f"Missing required field: '{field}'")
    if not isinstance(value, str):
        raise RecordValidationError(f"Field '{field}' must be a string")
    return value.strip()


def require_id(data: dict[str, Any], field: str) -> str:
    """Identifiers may be JSON strings or integers; both become trimmed text."""
    value = data.get(field)
    if value is None:
        raise RecordValidationError(f"Missing required field: '{field}'")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise RecordValidationError(f"Field '{field}' must be a string or integer")
    return str(value).strip()


def _parse_year_level(value: Any) -> int:
    # bool is an int subclass; True is not a year level
    if isinstance(value, bool):
        raise RecordValidationError("Field 'yearLevel' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    raise RecordValidationError("Field 'yearLevel' must be an integer")

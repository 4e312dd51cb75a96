from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from assessment_reports.domain.entities.student import require_id, require_text
from assessment_reports.domain.exceptions import RecordValidationError


@dataclass(frozen=True)
class QuestionOption:
    id: str
    value: str


@dataclass(frozen=True)
class QuestionConfig:
    options: Tuple[QuestionOption, ...]
    key: str
    hint: str = ""

    @staticmethod
    def from_payload(data: Any) -> "QuestionConfig":
        if not isinstance(data, dict):
            raise RecordValidationError("Question config must be an object")
        if "options" not in data or data.get("key") is None:
            raise RecordValidationError("Question config must contain options and key")

        raw_options = data["options"]
        if not isinstance(raw_options, list) or not raw_options:
            raise RecordValidationError("Question config options must be a non-empty array")

        options: list[QuestionOption] = []
        for position, raw in enumerate(raw_options):
            if not isinstance(raw, dict) or raw.get("id") is None or "value" not in raw:
                raise RecordValidationError(f"Question option at position {position} must have an id and value")
            value = raw["value"]
            options.append(
                QuestionOption(id=str(raw["id"]).strip(), value=str(value).strip() if value is not None else "")
            )

        hint = data.get("hint")
        return QuestionConfig(
            options=tuple(options),
            key=str(data["key"]).strip(),
            hint=str(hint).strip() if hint is not None else "",
        )


@dataclass(frozen=True)
class Question:
    id: str
    stem: str
    type: str
    strand: str
    config: QuestionConfig

    @staticmethod
    def from_payload(data: Any) -> "Question":
        if not isinstance(data, dict):
            raise RecordValidationError("Question record must be an object")

        for field in ("id", "stem", "type", "strand", "config"):
            if data.get(field) is None:
                raise RecordValidationError(f"Missing required field: '{field}'")

        config = QuestionConfig.from_payload(data["config"])

        return Question(
            id=require_id(data, "id"),
            stem=require_text(data, "stem"),
            type=require_text(data, "type"),
            strand=require_text(data, "strand"),
            config=config,
        )

    @property
    def correct_answer(self) -> str:
        return self.config.key

    @property
    def hint(self) -> str:
        return self.config.hint

    @property
    def options(self) -> Tuple[QuestionOption, ...]:
        return self.config.options

    def is_correct_answer(self, response_id: str) -> bool:
        return response_id == self.config.key

    def option_value(self, option_id: str) -> str | None:
        """Display value of ``option_id``, or None if the question has no such option."""
        for option in self.config.options:
            if option.id == option_id:
                return option.value
        return None

# src/tasktracker/domain/dtos.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from . import messages

TITLE_MAX_LENGTH = 255

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


class CreateTaskDto:
    """
    Input for task creation.

    Both fields are trimmed on construction; `validate()` reports every
    violated rule, in order, rather than stopping at the first one.
    """

    def __init__(self, title: str, description: str) -> None:
        self.title = title.strip()
        self.description = description.strip()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CreateTaskDto:
        """
        Builds a DTO from a decoded JSON body.

        Non-string values become "" so they are reported by `validate()`.
        """
        title = payload.get("title")
        description = payload.get("description")
        return cls(
            title if isinstance(title, str) else "",
            description if isinstance(description, str) else "",
        )

    def validate(self) -> ValidationResult:
        errors: list[str] = []

        if not self.title:
            errors.append(messages.TASK_TITLE_REQUIRED)

        if len(self.title) > TITLE_MAX_LENGTH:
            errors.append(messages.TASK_TITLE_TOO_LONG)

        if not self.description:
            errors.append(messages.TASK_DESCRIPTION_REQUIRED)

        return ValidationResult(is_valid=not errors, errors=errors)

    def __repr__(self) -> str:
        return f"CreateTaskDto(title={self.title!r}, description={self.description!r})"


def parse_int(raw: str) -> Optional[int]:
    """
    Base-10 leading-integer parse: "-123" -> -123, "12abc" -> 12, "abc" -> None.
    """
    m = _LEADING_INT_RE.match(raw)
    if not m:
        return None
    return int(m.group(1))


class CompleteTaskDto:
    """
    Identifies the task addressed by a path parameter.

    `id` is None when the input does not parse as a number.
    """

    def __init__(self, id: Union[str, int, float]) -> None:
        self.id: Optional[Union[int, float]] = parse_int(id) if isinstance(id, str) else id

    def validate(self) -> ValidationResult:
        errors: list[str] = []

        if not self._is_positive_integer(self.id):
            errors.append(messages.INVALID_TASK_ID)

        return ValidationResult(is_valid=not errors, errors=errors)

    @staticmethod
    def _is_positive_integer(value: Optional[Union[int, float]]) -> bool:
        if value is None or isinstance(value, bool):
            return False
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value) or not value.is_integer():
                return False
        return value > 0

    def __repr__(self) -> str:
        return f"CompleteTaskDto(id={self.id!r})"

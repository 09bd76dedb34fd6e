# src/tasktracker/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ErrorKind(StrEnum):
    """
    Failure categories understood by the API error mapping.

    Operational kinds carry a fixed HTTP status. INTERNAL marks a defect:
    its message is never shown to clients.
    """

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    DATABASE = "DATABASE"
    INTERNAL = "INTERNAL"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DATABASE: 500,
    ErrorKind.INTERNAL: 500,
}


@dataclass(eq=False)
class AppError(Exception):
    """
    Single domain error type, tagged by kind.

    The API layer maps these to HTTP responses by looking at `kind`,
    `status_code` and `is_operational`; there is no subclass hierarchy.
    """
    message: str
    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = field(default=0)
    is_operational: bool = field(default=True)

    def __post_init__(self) -> None:
        if not self.status_code:
            self.status_code = STATUS_BY_KIND[self.kind]
        if self.kind is ErrorKind.INTERNAL:
            self.is_operational = False

    def __str__(self) -> str:
        return self.message

    @classmethod
    def validation(cls, message: str) -> AppError:
        return cls(message, ErrorKind.VALIDATION)

    @classmethod
    def not_found(cls, message: str) -> AppError:
        return cls(message, ErrorKind.NOT_FOUND)

    @classmethod
    def database(cls, message: str) -> AppError:
        return cls(message, ErrorKind.DATABASE)

    @classmethod
    def internal(cls, message: str) -> AppError:
        return cls(message, ErrorKind.INTERNAL)

"""
Domain layer for tasktracker.

- dtos: input normalization + validation
- models: Pydantic models for the task record and API envelopes
- errors: the tagged AppError
- messages: user-facing strings
"""

from .dtos import CompleteTaskDto, CreateTaskDto, ValidationResult
from .errors import AppError, ErrorKind
from .models import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    Task,
    TaskListResponse,
    TaskResponse,
)

__all__ = [
    "CreateTaskDto",
    "CompleteTaskDto",
    "ValidationResult",
    "AppError",
    "ErrorKind",
    "Task",
    "TaskResponse",
    "TaskListResponse",
    "HealthResponse",
    "ErrorDetail",
    "ErrorResponse",
]

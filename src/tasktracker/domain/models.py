from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Task(BaseModel):
    """
    A persisted task, as returned by the repository and rendered by the API.

    Serialized with camelCase keys: id, title, description, isCompleted, createdAt.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    title: str
    description: str
    is_completed: bool = False
    created_at: datetime

    @property
    def status(self) -> str:
        return "Completed" if self.is_completed else "Pending"

    def __str__(self) -> str:
        return f"Task #{self.id}: {self.title} [{self.status}]"


class TaskResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    success: bool = True
    message: Optional[str] = None
    data: Task


class TaskListResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    success: bool = True
    data: list[Task]
    count: int


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


class ErrorDetail(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    status_code: int
    stack: Optional[str] = None


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    success: bool = False
    error: ErrorDetail

# src/tasktracker/api/routes.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from tasktracker.domain import messages
from tasktracker.domain.dtos import CompleteTaskDto, CreateTaskDto
from tasktracker.domain.errors import AppError
from tasktracker.domain.models import HealthResponse, TaskListResponse, TaskResponse
from tasktracker.logging import get_logger
from tasktracker.services import TaskService

from .deps import get_task_service

_LOG = get_logger(__name__)
router = APIRouter()


def _parse_task_id(raw: str) -> int:
    dto = CompleteTaskDto(raw)
    validation = dto.validate()
    if not validation.is_valid:
        raise AppError.validation(", ".join(validation.errors))
    return int(dto.id)  # type: ignore[arg-type]


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(message=messages.SERVER_RUNNING, timestamp=datetime.now(timezone.utc))


@router.post(
    "/tasks",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    payload: Optional[dict[str, Any]] = Body(default=None),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Create a task from {title, description}; both are checked by the DTO.
    """
    dto = CreateTaskDto.from_payload(payload or {})
    task = service.create_task(dto)
    return TaskResponse(message=messages.TASK_CREATED, data=task)


@router.get("/tasks", response_model=TaskListResponse)
def get_recent_tasks(
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    """
    The five most recent tasks that are not completed yet, newest first.
    """
    tasks = service.get_recent_tasks()
    return TaskListResponse(data=tasks, count=len(tasks))


@router.get("/tasks/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
def get_task_by_id(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return TaskResponse(data=service.get_task_by_id(_parse_task_id(task_id)))


@router.patch("/tasks/{task_id}/complete", response_model=TaskResponse, response_model_exclude_none=True)
def complete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    task = service.complete_task(_parse_task_id(task_id))
    return TaskResponse(message=messages.TASK_COMPLETED, data=task)

# src/tasktracker/services/task_service.py
from __future__ import annotations

import sqlite3
from typing import Optional, Protocol

from tasktracker.domain import messages
from tasktracker.domain.dtos import CreateTaskDto
from tasktracker.domain.errors import AppError
from tasktracker.domain.models import Task
from tasktracker.logging import get_logger
from tasktracker.storage.repo import RECENT_TASKS_LIMIT

_LOG = get_logger(__name__)


class TaskStore(Protocol):
    def create(self, title: str, description: str) -> Task: ...
    def find_by_id(self, task_id: int) -> Optional[Task]: ...
    def find_recent_incomplete(self, limit: int = ...) -> list[Task]: ...
    def find_all_ordered_by_date(self) -> list[Task]: ...
    def mark_completed(self, task_id: int) -> Optional[Task]: ...
    def update(self, task_id: int, *, title: Optional[str] = ..., description: Optional[str] = ...) -> Optional[Task]: ...
    def delete(self, task_id: int) -> bool: ...


class TaskService:
    """
    Business rules for tasks.

    - DTOs are re-validated here; callers are not trusted to have done it.
    - Completion is one-way and rejects a second attempt.
    - Store constraint violations surface as validation errors; any other
      store failure propagates unchanged.
    """

    def __init__(self, repo: TaskStore) -> None:
        self._repo = repo

    def create_task(self, dto: CreateTaskDto) -> Task:
        validation = dto.validate()
        if not validation.is_valid:
            raise AppError.validation(", ".join(validation.errors))

        try:
            task = self._repo.create(title=dto.title, description=dto.description)
        except sqlite3.IntegrityError as e:
            raise AppError.validation(f"{messages.VALIDATION_ERROR}: {e}") from e

        _LOG.info("Created task %d", task.id)
        return task

    def get_recent_tasks(self) -> list[Task]:
        return self._repo.find_recent_incomplete(limit=RECENT_TASKS_LIMIT)

    def get_all_tasks(self) -> list[Task]:
        return self._repo.find_all_ordered_by_date()

    def get_task_by_id(self, task_id: int) -> Task:
        task = self._repo.find_by_id(task_id)
        if task is None:
            raise AppError.not_found(messages.TASK_NOT_FOUND)
        return task

    def complete_task(self, task_id: int) -> Task:
        task = self.get_task_by_id(task_id)
        if task.is_completed:
            raise AppError.validation(messages.TASK_ALREADY_COMPLETED)

        completed = self._repo.mark_completed(task_id)
        if completed is None:
            # Another request completed it between the read and the update.
            raise AppError.validation(messages.TASK_ALREADY_COMPLETED)

        _LOG.info("Completed task %d", task_id)
        return completed

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Task:
        current = self.get_task_by_id(task_id)

        dto = CreateTaskDto(
            title if title is not None else current.title,
            description if description is not None else current.description,
        )
        validation = dto.validate()
        if not validation.is_valid:
            raise AppError.validation(", ".join(validation.errors))

        try:
            updated = self._repo.update(
                task_id,
                title=dto.title if title is not None else None,
                description=dto.description if description is not None else None,
            )
        except sqlite3.IntegrityError as e:
            raise AppError.validation(f"{messages.VALIDATION_ERROR}: {e}") from e

        if updated is None:
            raise AppError.not_found(messages.TASK_NOT_FOUND)
        return updated

    def delete_task(self, task_id: int) -> None:
        if not self._repo.delete(task_id):
            raise AppError.not_found(messages.TASK_NOT_FOUND)
        _LOG.info("Deleted task %d", task_id)

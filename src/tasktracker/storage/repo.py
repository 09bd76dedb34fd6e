# src/tasktracker/storage/repo.py
from __future__ import annotations

import sqlite3
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from tasktracker.domain.models import Task
from tasktracker.logging import get_logger

from .db import SQLITE_MAX_INTEGER, transaction

_LOG = get_logger(__name__)

RECENT_TASKS_LIMIT = 5

_COLUMNS = "id, title, description, is_completed, created_at"


def now_ms() -> int:
    return int(time.time() * 1000)


def _storable_id(task_id: int) -> bool:
    # Ids past the INTEGER range cannot be bound (OverflowError) and cannot exist.
    return -SQLITE_MAX_INTEGER - 1 <= task_id <= SQLITE_MAX_INTEGER


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        is_completed=bool(row["is_completed"]),
        created_at=datetime.fromtimestamp(row["created_at"] / 1000, tz=timezone.utc),
    )


@dataclass
class TaskRepo:
    """
    Repository encapsulating all SQL access for the task table.

    Methods return Task records or None; they never raise domain errors.
    sqlite3 exceptions propagate to the caller untouched.
    """
    conn: sqlite3.Connection

    # -------------------------
    # Read operations
    # -------------------------

    def find_by_id(self, task_id: int) -> Optional[Task]:
        if not _storable_id(task_id):
            return None
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM task WHERE id = ?;",
            (task_id,),
        ).fetchone()
        return _row_to_task(row) if row else None

    def find_recent_incomplete(self, limit: int = RECENT_TASKS_LIMIT) -> list[Task]:
        rows = self.conn.execute(
            f"""
            SELECT {_COLUMNS}
            FROM task
            WHERE is_completed = 0
            ORDER BY created_at DESC, id DESC
            LIMIT ?;
            """,
            (limit,),
        ).fetchall()
        return [_row_to_task(r) for r in rows]

    def find_all_ordered_by_date(self) -> list[Task]:
        rows = self.conn.execute(
            f"SELECT {_COLUMNS} FROM task ORDER BY created_at DESC, id DESC;"
        ).fetchall()
        return [_row_to_task(r) for r in rows]

    # -------------------------
    # Write operations
    # -------------------------

    def create(self, title: str, description: str, created_at_ms: Optional[int] = None) -> Task:
        """
        Inserts a task and reads it back in one transaction.

        Schema CHECK constraints raise sqlite3.IntegrityError on empty or
        oversized values.
        """
        created = created_at_ms if created_at_ms is not None else now_ms()
        with transaction(self.conn):
            cur = self.conn.execute(
                "INSERT INTO task(title, description, is_completed, created_at) VALUES (?, ?, 0, ?);",
                (title, description, created),
            )
            task = self.find_by_id(int(cur.lastrowid))

        _LOG.debug("Created %s", task)
        return task  # type: ignore[return-value]

    def mark_completed(self, task_id: int) -> Optional[Task]:
        """
        Flips is_completed to true only if it is currently false.

        Returns the updated task, or None when no row changed (missing or
        already completed). The guard makes concurrent completions of the
        same task resolve to exactly one winner.
        """
        if not _storable_id(task_id):
            return None
        updated = self.conn.execute(
            "UPDATE task SET is_completed = 1 WHERE id = ? AND is_completed = 0;",
            (task_id,),
        ).rowcount
        if updated == 0:
            return None
        return self.find_by_id(task_id)

    def update(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[Task]:
        assignments: list[str] = []
        params: list[object] = []
        if title is not None:
            assignments.append("title = ?")
            params.append(title)
        if description is not None:
            assignments.append("description = ?")
            params.append(description)
        if not assignments or not _storable_id(task_id):
            return self.find_by_id(task_id)

        updated = self.conn.execute(
            f"UPDATE task SET {', '.join(assignments)} WHERE id = ?;",
            (*params, task_id),
        ).rowcount
        if updated == 0:
            return None
        return self.find_by_id(task_id)

    def delete(self, task_id: int) -> bool:
        if not _storable_id(task_id):
            return False
        deleted = self.conn.execute("DELETE FROM task WHERE id = ?;", (task_id,)).rowcount
        return deleted > 0

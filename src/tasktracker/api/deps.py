# src/tasktracker/api/deps.py
from __future__ import annotations

import sqlite3
from typing import Generator

from fastapi import Depends, Request

from tasktracker.domain import messages
from tasktracker.domain.errors import AppError
from tasktracker.logging import get_logger
from tasktracker.services import TaskService
from tasktracker.storage import SQLiteDB, TaskRepo

_LOG = get_logger(__name__)


def get_db(request: Request) -> SQLiteDB:
    """
    Per-request access to SQLiteDB stored on app.state during startup.
    """
    return request.app.state.db  # type: ignore[attr-defined]


def get_conn(
    db: SQLiteDB = Depends(get_db),
) -> Generator[sqlite3.Connection, None, None]:
    """
    Provides a per-request SQLite connection.

    Failing to open the database (sqlite or filesystem) is reported as a
    DATABASE error.
    """
    try:
        conn = db.connect()
    except (sqlite3.Error, OSError) as e:
        _LOG.exception("Could not open database at %s", db.db_path)
        raise AppError.database(messages.DATABASE_ERROR) from e
    try:
        yield conn
    finally:
        conn.close()


def get_repo(
    conn: sqlite3.Connection = Depends(get_conn),
) -> TaskRepo:
    """
    Provides a TaskRepo bound to the request connection.
    """
    return TaskRepo(conn)


def get_task_service(
    repo: TaskRepo = Depends(get_repo),
) -> TaskService:
    return TaskService(repo)

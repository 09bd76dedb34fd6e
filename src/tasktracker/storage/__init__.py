# src/tasktracker/storage/__init__.py
"""
Storage layer for tasktracker (SQLite).

- db: connection factory + transaction helper
- schema: creates the task table, versioned through PRAGMA user_version
- repo: data access operations for the task table
"""

from .db import SQLiteDB
from .repo import RECENT_TASKS_LIMIT, TaskRepo
from .schema import ensure_schema

__all__ = ["SQLiteDB", "ensure_schema", "TaskRepo", "RECENT_TASKS_LIMIT"]

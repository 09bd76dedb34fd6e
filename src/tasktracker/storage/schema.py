# src/tasktracker/storage/schema.py
from __future__ import annotations

import sqlite3
from pathlib import Path

from tasktracker.logging import get_logger

_LOG = get_logger(__name__)

SCHEMA_FILE = Path(__file__).resolve().parent / "schema.sql"

# Bump together with schema.sql; tracked in PRAGMA user_version.
SCHEMA_VERSION = 1


def ensure_schema(conn: sqlite3.Connection) -> bool:
    """
    Creates the task table when the database predates SCHEMA_VERSION.

    Returns True when the schema was (re)applied, False when it was current.
    """
    current = conn.execute("PRAGMA user_version;").fetchone()[0]
    if current >= SCHEMA_VERSION:
        _LOG.debug("Schema at version %d; nothing to do.", current)
        return False

    conn.executescript(SCHEMA_FILE.read_text(encoding="utf-8"))
    conn.execute(f"PRAGMA user_version={SCHEMA_VERSION};")
    _LOG.info("Schema upgraded from version %d to %d.", current, SCHEMA_VERSION)
    return True

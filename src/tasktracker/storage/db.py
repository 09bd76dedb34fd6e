# src/tasktracker/storage/db.py
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

# Largest value an SQLite INTEGER column can hold.
SQLITE_MAX_INTEGER = 2**63 - 1


@dataclass(frozen=True)
class SQLiteDB:
    """
    Opens connections to the task database file.

    Connections run in autocommit mode; multi-statement writes go through
    `transaction()`. They are not pinned to the opening thread because
    FastAPI may resolve a dependency and run its route on different
    threadpool workers.
    """
    db_path: Path
    timeout_s: float = 5.0

    def connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(
            str(self.db_path),
            timeout=self.timeout_s,
            isolation_level=None,
            check_same_thread=False,
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute(f"PRAGMA busy_timeout={int(self.timeout_s * 1000)};")
        return conn


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """
    BEGIN IMMEDIATE ... COMMIT, rolling back on error.

    A failure of BEGIN itself (e.g. "database is locked") leaves no
    transaction open, so it propagates without a rollback attempt.
    """
    conn.execute("BEGIN IMMEDIATE;")
    try:
        yield conn
    except BaseException:
        if conn.in_transaction:
            conn.execute("ROLLBACK;")
        raise
    conn.execute("COMMIT;")

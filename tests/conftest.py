# tests/conftest.py
import importlib
import itertools
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from tasktracker.storage import SQLiteDB, TaskRepo, ensure_schema

_counter = itertools.count(1)

DEFAULT_ENV = {
    "TASKTRACKER_ENV": "test",
    "TASKTRACKER_LOG_LEVEL": "warning",
    "TASKTRACKER_API_PREFIX": "/api",
    # server host/port are irrelevant for TestClient, but harmless if set elsewhere
}


def _apply_env(monkeypatch: pytest.MonkeyPatch, db_path: Path, overrides: Optional[dict[str, str]] = None) -> None:
    monkeypatch.setenv("TASKTRACKER_DB_PATH", str(db_path))
    for k, v in DEFAULT_ENV.items():
        monkeypatch.setenv(k, v)
    if overrides:
        for k, v in overrides.items():
            monkeypatch.setenv(k, v)


@contextmanager
def _client_ctx(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, *, overrides: Optional[dict[str, str]] = None,
                db_path: Optional[Path] = None) -> Iterator[TestClient]:
    # Unique DB per client instance unless one is provided
    if db_path is None:
        n = next(_counter)
        db_path = tmp_path / f"tasks_{n}.db"

    _apply_env(monkeypatch, db_path, overrides)

    # Import after env is set; reload to avoid cross-test state
    app_mod = importlib.import_module("tasktracker.api.app")
    importlib.reload(app_mod)

    with TestClient(app_mod.app) as client:
        yield client


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """
    Default integration test client.
    Uses DEFAULT_ENV and a fresh sqlite db per test.
    """
    with _client_ctx(monkeypatch, tmp_path) as c:
        yield c


@pytest.fixture()
def client_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Factory for tests that need custom settings or a pre-populated DB.

    Usage:
      with client_factory(overrides={"TASKTRACKER_ENV": "development"}) as client:
          ...
    """

    def _make(*, overrides: Optional[dict[str, str]] = None, db_path: Optional[Path] = None):
        return _client_ctx(monkeypatch, tmp_path, overrides=overrides, db_path=db_path)

    return _make


@pytest.fixture()
def repo(tmp_path: Path) -> Iterator[TaskRepo]:
    """
    TaskRepo over a fresh sqlite file with the schema in place.
    """
    db = SQLiteDB(tmp_path / "repo.db")
    conn = db.connect()
    try:
        ensure_schema(conn)
        yield TaskRepo(conn)
    finally:
        conn.close()

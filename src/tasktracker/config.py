from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENVIRONMENTS = ("development", "production", "test")


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an int, got: {raw!r}") from e
    return value


def _get_env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    # Database
    db_path: Path

    # Server (used by tasktracker.main when starting uvicorn programmatically)
    host: str
    port: int
    log_level: str

    # HTTP surface
    env: str = "production"
    api_prefix: str = "/api"
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def is_development(self) -> bool:
        return self.env == "development"


def load_settings() -> Settings:
    """
    Loads settings from env vars with sane defaults.

    Env vars:
      - TASKTRACKER_DB_PATH (default: ./var/tasks.db)
      - TASKTRACKER_HOST (default: 127.0.0.1)
      - TASKTRACKER_PORT (default: 3000)
      - TASKTRACKER_LOG_LEVEL (default: info)
      - TASKTRACKER_ENV (default: production; one of development, production, test)
      - TASKTRACKER_API_PREFIX (default: /api)
      - TASKTRACKER_CORS_ORIGIN (default: *; comma-separated for several origins)
    """
    db_path = Path(_get_env_str("TASKTRACKER_DB_PATH", "./var/tasks.db")).expanduser()

    host = _get_env_str("TASKTRACKER_HOST", "127.0.0.1")
    port = _get_env_int("TASKTRACKER_PORT", 3000)
    if not (1 <= port <= 65535):
        raise ValueError("TASKTRACKER_PORT must be between 1 and 65535")

    log_level = _get_env_str("TASKTRACKER_LOG_LEVEL", "info").lower()

    env = _get_env_str("TASKTRACKER_ENV", "production").lower()
    if env not in ENVIRONMENTS:
        raise ValueError(f"TASKTRACKER_ENV must be one of {', '.join(ENVIRONMENTS)}, got: {env!r}")

    api_prefix = "/" + _get_env_str("TASKTRACKER_API_PREFIX", "/api").strip("/")
    if api_prefix == "/":
        api_prefix = ""

    cors_raw = _get_env_str("TASKTRACKER_CORS_ORIGIN", "*")
    cors_origins = tuple(o.strip() for o in cors_raw.split(",") if o.strip())

    return Settings(
        db_path=db_path,
        host=host,
        port=port,
        log_level=log_level,
        env=env,
        api_prefix=api_prefix,
        cors_origins=cors_origins or ("*",),
    )

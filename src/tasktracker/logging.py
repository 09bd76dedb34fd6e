# src/tasktracker/logging.py
"""
Process-wide logging setup for tasktracker.

All records go to stdout through one handler owned by this module; calling
`configure_logging` again (app reloads, test fixtures) swaps that handler
instead of stacking another one.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "tasktracker"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Level names accepted from TASKTRACKER_LOG_LEVEL beyond the stdlib ones.
_LEVEL_ALIASES = {"warn": "WARNING", "trace": "DEBUG", "fatal": "CRITICAL"}


class _ServiceHandler(logging.StreamHandler):
    """Marker type so reconfiguration only replaces our own handler."""


def configure_logging(log_level: str = "info") -> int:
    level = resolve_level(log_level)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _ServiceHandler)]:
        root.removeHandler(existing)
        existing.close()

    handler = _ServiceHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    # uvicorn's access log is noisy at DEBUG; never go below INFO there.
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.INFO))
    logging.getLogger("uvicorn.error").setLevel(level)
    return level


def resolve_level(log_level: str) -> int:
    """Maps a case-insensitive level name to its numeric level, INFO if unknown."""
    name = log_level.strip().upper()
    name = _LEVEL_ALIASES.get(name.lower(), name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER_NAME)

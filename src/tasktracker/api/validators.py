# src/tasktracker/api/validators.py
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from fastapi import Body

from tasktracker.domain.errors import AppError


def missing_fields(body: Optional[dict[str, Any]], required_fields: Sequence[str]) -> list[str]:
    """
    Returns the required fields that are absent or falsy, in declared order.

    Falsy values (0, False, "", None, empty containers) count as missing.
    """
    data = body or {}
    return [f for f in required_fields if not data.get(f)]


def validate_request_body(required_fields: Sequence[str]) -> Callable[..., dict[str, Any]]:
    """
    Builds a FastAPI dependency that checks the JSON body for required fields
    and hands the body on to the route.

    Usage:
      payload: dict = Depends(validate_request_body(["title", "description"]))
    """
    fields = list(required_fields)

    def _validator(body: Optional[dict[str, Any]] = Body(default=None)) -> dict[str, Any]:
        missing = missing_fields(body, fields)
        if missing:
            raise AppError.validation(f"Missing required fields: {', '.join(missing)}")
        return body or {}

    return _validator

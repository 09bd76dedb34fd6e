# src/tasktracker/api/errors.py
"""
Terminal error mapping for the HTTP layer.

Every failure, whether raised by a route, a dependency or the framework
itself, is rendered here as

    {"success": false, "error": {"message": ..., "statusCode": ..., "stack"?: ...}}

No other component writes an error response.
"""
from __future__ import annotations

import traceback
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.domain import messages
from tasktracker.domain.errors import AppError
from tasktracker.domain.models import ErrorDetail, ErrorResponse
from tasktracker.logging import get_logger

_LOG = get_logger(__name__)


def resolve_status_and_message(exc: BaseException) -> tuple[int, str]:
    """
    Operational AppErrors keep their status and message; anything else is
    reported as a generic 500 and its message stays in the logs.
    """
    if isinstance(exc, AppError) and exc.is_operational:
        return exc.status_code, exc.message
    return status.HTTP_500_INTERNAL_SERVER_ERROR, messages.INTERNAL_SERVER_ERROR


def build_error_response(
    exc: BaseException,
    *,
    path: str,
    method: str,
    include_stack: bool = False,
) -> JSONResponse:
    stack = "".join(traceback.format_exception(exc))

    _LOG.error(
        "Error: %s (path=%s method=%s)\n%s",
        exc,
        path,
        method,
        stack,
    )

    status_code, message = resolve_status_and_message(exc)
    return _envelope(status_code, message, stack if include_stack else None)


def _envelope(status_code: int, message: str, stack: Optional[str] = None) -> JSONResponse:
    payload = ErrorResponse(
        error=ErrorDetail(message=message, status_code=status_code, stack=stack),
    ).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=payload)


def _include_stack(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings is not None and settings.is_development)


async def app_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return build_error_response(
        exc,
        path=request.url.path,
        method=request.method,
        include_stack=_include_stack(request),
    )


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    # Body/param parsing failures are client errors; keep FastAPI's detail in the log only.
    wrapped = AppError.validation(messages.INVALID_REQUEST)
    _LOG.warning("Invalid request %s %s: %s", request.method, request.url.path, exc)
    return _envelope(
        wrapped.status_code,
        wrapped.message,
        "".join(traceback.format_exception(exc)) if _include_stack(request) else None,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _envelope(
            status.HTTP_404_NOT_FOUND,
            f"Route {request.method} {request.url.path} not found",
        )
    return _envelope(exc.status_code, str(exc.detail))


async def catch_unhandled(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Last stop for exceptions no handler claimed.

    Runs as an http middleware inside CORS, so the 500 envelope carries the
    CORS headers and nothing is re-raised to the server.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return build_error_response(
            exc,
            path=request.url.path,
            method=request.method,
            include_stack=_include_stack(request),
        )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(catch_unhandled)

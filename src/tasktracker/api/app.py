# src/tasktracker/api/app.py
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.config import Settings, load_settings
from tasktracker.logging import configure_logging, get_logger
from tasktracker.storage import SQLiteDB, ensure_schema

from .errors import register_error_handlers
from .routes import router

_LOG = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan handler.

    Responsible for:
    - configuring logging
    - creating the schema if the database is new
    - exposing the DB factory on app.state for DI
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    db = SQLiteDB(settings.db_path)

    # Idempotent; a no-op once user_version is current.
    conn = db.connect()
    try:
        ensure_schema(conn)
    finally:
        conn.close()

    app.state.db = db

    _LOG.info(
        "Startup complete: env=%s prefix=%s db=%s",
        settings.env,
        settings.api_prefix or "/",
        settings.db_path,
    )

    try:
        yield
    finally:
        _LOG.info("Shutdown complete.")


async def _log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    start = time.perf_counter()
    _LOG.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    _LOG.info("%s %s %d - %.0fms", request.method, request.url.path, response.status_code, duration_ms)
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the FastAPI application.

    Settings default to the environment (see tasktracker.config).
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Task Tracker",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware added last runs outermost: CORS wraps the request logger,
    # which wraps the unhandled-error catcher.
    register_error_handlers(app)

    if settings.is_development:
        app.middleware("http")(_log_requests)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()

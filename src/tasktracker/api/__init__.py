# src/tasktracker/api/__init__.py
"""
API layer for tasktracker (FastAPI).

- app: app factory + lifecycle hooks
- routes: REST endpoints
- deps: dependency injection helpers
- errors: terminal error-to-envelope mapping
- validators: reusable request-body guards
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

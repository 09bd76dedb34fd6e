"""Task tracking HTTP backend: FastAPI over a single SQLite table."""

__version__ = "0.1.0"

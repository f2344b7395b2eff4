"""codejudge package initializer.

Expose the FastAPI application as ``app`` lazily so library callers that only
need ``execute_code`` can import without building the web app."""

from __future__ import annotations

from codejudge.core.config import Settings, get_settings
from codejudge.features.execution import ExecutionResult, Judge0Client, execute_code

__all__ = ["app", "ExecutionResult", "Judge0Client", "Settings", "execute_code", "get_settings"]


def __getattr__(name: str):
    if name == "app":
        from .main import app as fastapi_app
        return fastapi_app
    raise AttributeError(f"module {__name__} has no attribute {name!r}")

# src/logging/context.py — v2
"""Contextual logging support: attach request_id and content path to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per request / per load.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_content_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "content_path", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    content_path: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        request_id=_request_id.get(),
        content_path=_content_path.get(),
    )


def set_request_context(request_id: str) -> None:
    """Set request-level context (called once per incoming request)."""
    _request_id.set(request_id)


def set_content_context(path: str | None) -> contextvars.Token[str | None]:
    """Set the content path being loaded. Returns a token for reset_content_context()."""
    return _content_path.set(path)


def reset_content_context(token: contextvars.Token[str | None]) -> None:
    """Restore the content path that was active before set_content_context()."""
    _content_path.reset(token)


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _content_path.set(None)

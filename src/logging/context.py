# src/logging/context.py — v1
"""Contextual logging support: attach run_id and document_id to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per check run; document_id is set while a document is being extracted.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_document_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document_id", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    document_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(run_id=_run_id.get(), document_id=_document_id.get())


def set_run_context(run_id: str) -> contextvars.Token[str | None]:
    """Set run-level context; pass the returned token to reset_run_context()."""
    return _run_id.set(run_id)


def reset_run_context(token: contextvars.Token[str | None]) -> None:
    """Restore the run_id that was active before set_run_context()."""
    _run_id.reset(token)


def set_document_context(document_id: str | None) -> None:
    """Set the document currently being processed."""
    _document_id.set(document_id)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _document_id.set(None)

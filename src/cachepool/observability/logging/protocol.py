"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """Structured logger a pool reports through – satisfied by structlog bound loggers.

    Only the levels a pool emits are required: ``warning`` for invalid
    arguments, ``critical`` for failed operations and ``error`` for a failed
    commit on close. Events are short dotted names (``cache.operation_failed``);
    context goes into keyword arguments.
    """

    def warning(self, event: str, **kw: Any) -> None: ...
    def error(self, event: str, **kw: Any) -> None: ...
    def critical(self, event: str, **kw: Any) -> None: ...


__all__ = ["Logger"]

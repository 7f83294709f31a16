"""Cache errors – the two kinds every pool operation may raise.

``InvalidArgumentError`` means the caller's input was wrong,
``CachePoolError`` means the backend (or anything else) failed while the
operation ran. Each kind carries the severity it is logged with.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from cachepool.kernel.errors.base import BaseError

Severity = Literal["warning", "alert"]


class CacheError(BaseError):
    """Base class for every error raised by a cache pool."""

    default_code = "cache_error"
    severity: ClassVar[Severity] = "alert"

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.reported = False


class InvalidArgumentError(CacheError):
    """A key, tag, item or bulk input violates a documented constraint."""

    default_code = "invalid_argument"
    severity: ClassVar[Severity] = "warning"


class CachePoolError(CacheError):
    """A pool operation failed while talking to the storage backend."""

    default_code = "cache_pool_error"
    severity: ClassVar[Severity] = "alert"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f'Exception thrown when executing "{operation}".',
            **kwargs,
        )
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["operation"] = self.operation
        return base


__all__ = ["CacheError", "CachePoolError", "InvalidArgumentError", "Severity"]

"""Application cache – translation of failures into the cache error kinds."""
from __future__ import annotations

from typing import NoReturn

from cachepool.kernel.errors import CacheError, CachePoolError
from cachepool.observability.logging import Logger

__all__ = ["handle_exception", "translate"]


def translate(exc: BaseException, operation: str) -> CacheError:
    """Keep cache errors as they are; wrap anything else in :class:`CachePoolError`."""
    if isinstance(exc, CacheError):
        return exc
    return CachePoolError(operation, cause=exc)


def handle_exception(
    exc: BaseException,
    operation: str,
    logger: Logger | None = None,
) -> NoReturn:
    """Log *exc* once at its kind's severity, then raise it as a cache error.

    ``warning`` is used for invalid arguments, ``alert`` (``critical``) for
    everything else. Without a logger nothing is logged.
    """
    error = translate(exc, operation)
    if not error.reported:
        error.reported = True
        if logger is not None:
            emit = logger.warning if error.severity == "warning" else logger.critical
            emit(
                "cache.operation_failed",
                operation=operation,
                severity=error.severity,
                error=error.to_dict(),
                exc_info=exc,
            )
    raise error

"""Kernel – 100% framework-agnostic building blocks."""

from cachepool.kernel.errors import (
    BaseError,
    CacheError,
    CachePoolError,
    InvalidArgumentError,
)

__all__ = [
    "BaseError",
    "CacheError",
    "CachePoolError",
    "InvalidArgumentError",
]

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── CacheError               (cache.py)
        ├── InvalidArgumentError   logged at "warning"
        └── CachePoolError         logged at "alert"
"""

from cachepool.kernel.errors.base import BaseError
from cachepool.kernel.errors.cache import (
    CacheError,
    CachePoolError,
    InvalidArgumentError,
    Severity,
)

__all__ = [
    "BaseError",
    "CacheError",
    "CachePoolError",
    "InvalidArgumentError",
    "Severity",
]

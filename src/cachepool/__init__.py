"""
cachepool – tagged, deferred-write cache pools over pluggable storage.

Import path convention::

    from cachepool.application.cache import CachePool, CacheItem, InMemoryStorageBackend
    from cachepool.kernel.errors import CachePoolError, InvalidArgumentError
    from cachepool.adapters.redis import RedisStorageBackend
    from cachepool.adapters import open_pool
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

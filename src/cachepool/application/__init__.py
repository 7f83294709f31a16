"""Application – the cache pool and its collaborators (framework-agnostic)."""

from cachepool.application.cache import CacheItem, CachePool, InMemoryStorageBackend, StorageBackend

__all__ = ["CacheItem", "CachePool", "InMemoryStorageBackend", "StorageBackend"]

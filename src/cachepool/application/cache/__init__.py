"""Application cache – items, deferred writes and tag invalidation."""
from cachepool.application.cache.keys import (
    RESERVED_CHARACTERS,
    check_key,
    check_tag,
    validate_key,
    validate_tag,
)
from cachepool.application.cache.ports import Fetched, StorageBackend
from cachepool.application.cache.item import CacheItem, to_timedelta
from cachepool.application.cache.deferred import DeferredBuffer
from cachepool.application.cache.tags import TAG_SEPARATOR, TagIndex, get_tag_key
from cachepool.application.cache.errors import handle_exception, translate
from cachepool.application.cache.pool import CachePool
from cachepool.application.cache.in_memory import InMemoryStorageBackend

__all__ = [
    "RESERVED_CHARACTERS",
    "TAG_SEPARATOR",
    "CacheItem",
    "CachePool",
    "DeferredBuffer",
    "Fetched",
    "InMemoryStorageBackend",
    "StorageBackend",
    "TagIndex",
    "check_key",
    "check_tag",
    "get_tag_key",
    "handle_exception",
    "to_timedelta",
    "translate",
    "validate_key",
    "validate_tag",
]

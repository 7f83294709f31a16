"""Adapters – build a backend (and a pool) from :class:`CachePoolSettings`."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator

from cachepool.application.cache import CachePool, InMemoryStorageBackend, StorageBackend
from cachepool.config.settings import CachePoolSettings, EnvSettingsLoader
from cachepool.kernel.time import Clock
from cachepool.observability.logging import Logger


def create_backend(settings: CachePoolSettings, *, clock: Clock | None = None) -> StorageBackend:
    if settings.backend == "redis":
        from cachepool.adapters.redis import RedisStorageBackend

        return RedisStorageBackend(url=settings.redis_url, namespace=settings.namespace, clock=clock)
    if settings.backend == "disk":
        from cachepool.adapters.disk import DiskStorageBackend

        return DiskStorageBackend(settings.directory, clock=clock)
    return InMemoryStorageBackend(clock=clock)


@contextlib.contextmanager
def open_pool(
    settings: CachePoolSettings | None = None,
    *,
    logger: Logger | None = None,
    clock: Clock | None = None,
) -> Iterator[CachePool]:
    """Yield a pool on a freshly built backend.

    On exit deferred items are committed (best effort) and the backend is
    closed. Settings default to the ``CACHEPOOL_*`` environment.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(CachePoolSettings)
    backend = create_backend(settings, clock=clock)
    try:
        with CachePool(backend, logger=logger, clock=clock) as pool:
            yield pool
    finally:
        backend.close()


__all__ = ["create_backend", "open_pool"]

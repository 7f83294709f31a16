"""Application cache – CachePool facade.

Usage::

    from cachepool.application.cache import CachePool, InMemoryStorageBackend

    with CachePool(InMemoryStorageBackend()) as pool:
        item = pool.get_item("user.42").set({"name": "Ada"}).set_tags(["users"])
        pool.save(item)
        pool.invalidate_tag("users")

Leaving the ``with`` block commits whatever is still deferred.
"""
from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping
from datetime import timedelta
from typing import Any, NoReturn

from cachepool.application.cache.deferred import DeferredBuffer
from cachepool.application.cache.errors import handle_exception
from cachepool.application.cache.item import CacheItem, to_timedelta
from cachepool.application.cache.keys import check_key, check_tag
from cachepool.application.cache.ports import Fetched, StorageBackend
from cachepool.application.cache.tags import TagIndex, get_tag_key
from cachepool.kernel.errors import CacheError, InvalidArgumentError
from cachepool.kernel.time import Clock, SystemClock
from cachepool.observability.logging import Logger

__all__ = ["CachePool"]

_NOT_TRANSFERABLE = "Cache items are not transferable between pools. Item MUST be a CacheItem."


class CachePool:
    """Items, deferred writes and tag invalidation on top of a :class:`StorageBackend`.

    Every public operation returns its documented boolean or raises either
    :class:`~cachepool.kernel.errors.InvalidArgumentError` (bad input) or
    :class:`~cachepool.kernel.errors.CachePoolError` (backend failure).
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        logger: Logger | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._backend = backend
        self._logger = logger
        self._clock: Clock = clock or SystemClock()
        self._deferred = DeferredBuffer()
        self._tags = TagIndex(backend)

    def set_logger(self, logger: Logger | None) -> None:
        self._logger = logger

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def deferred(self) -> DeferredBuffer:
        return self._deferred

    def __enter__(self) -> CachePool:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        """Best-effort commit of deferred items; failures are logged, not raised."""
        try:
            self.commit()
        except Exception as exc:  # noqa: BLE001 – nobody left to report to
            if self._logger is not None:
                self._logger.error(
                    "cache.close_commit_failed",
                    pending=len(self._deferred),
                    error=str(exc),
                    exc_info=exc,
                )
            self._deferred.clear()

    # ------------------------------------------------------------------
    # validation helpers
    # ------------------------------------------------------------------

    def _invalid(self, message: str, operation: str) -> NoReturn:
        handle_exception(InvalidArgumentError(message), operation, self._logger)

    def _validate_key(self, key: Any, operation: str) -> str:
        result = check_key(key)
        if result.is_err():
            handle_exception(result.error, operation, self._logger)
        return result.value

    def _iterable(self, values: Any, name: str, operation: str) -> list[Any]:
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            self._invalid(f"{name} is neither a list nor an iterable", operation)
        return list(values)

    def _validate_keys(self, keys: Any, operation: str) -> list[str]:
        # every key is checked before the buffer or the backend is touched
        return [self._validate_key(key, operation) for key in self._iterable(keys, "keys", operation)]

    # ------------------------------------------------------------------
    # items
    # ------------------------------------------------------------------

    def get_item(self, key: str) -> CacheItem:
        key = self._validate_key(key, "get_item")
        pending = self._deferred.get(key)
        if pending is not None:
            item = copy.copy(pending)
            item.move_tags_to_previous()
            return item

        def load() -> Fetched:
            try:
                return self._backend.fetch(key)
            except Exception as exc:
                handle_exception(exc, "get_item", self._logger)

        return CacheItem(key, load, clock=self._clock)

    def get_items(self, keys: Iterable[str]) -> dict[str, CacheItem]:
        return {key: self.get_item(key) for key in self._validate_keys(keys, "get_items")}

    def has_item(self, key: str) -> bool:
        try:
            return self.get_item(key).is_hit
        except Exception as exc:
            handle_exception(exc, "has_item", self._logger)

    def clear(self) -> bool:
        self._deferred.clear()
        try:
            return bool(self._backend.clear_all())
        except Exception as exc:
            handle_exception(exc, "clear", self._logger)

    def delete_item(self, key: str) -> bool:
        try:
            return self.delete_items([key])
        except Exception as exc:
            handle_exception(exc, "delete_item", self._logger)

    def delete_items(self, keys: Iterable[str]) -> bool:
        """Delete every key; ``False`` if any backend delete reported failure."""
        keys = self._validate_keys(keys, "delete_items")
        deleted = True
        try:
            for key in keys:
                self._deferred.discard(key)
                # other deferred items may touch the same tag lists
                self.commit()
                self._tags.forget(self.get_item(key))
                if not self._backend.remove(key):
                    deleted = False
        except Exception as exc:
            handle_exception(exc, "delete_items", self._logger)
        return deleted

    def save(self, item: CacheItem) -> bool:
        if not isinstance(item, CacheItem):
            self._invalid(_NOT_TRANSFERABLE, "save")
        try:
            pending = self._deferred.get(item.key)
            if pending is not None:
                # flush the older pending write so it cannot land after this one
                self._deferred.discard(item.key)
                if pending is not item:
                    self.save(pending)

            ttl: timedelta | None = None
            expiration = item.expiration
            if expiration is not None:
                ttl = expiration - self._clock.now()
                if ttl <= timedelta(0):
                    return self.delete_item(item.key)

            self._tags.reconcile(item)
            stored = bool(self._backend.store(item.key, item.get(), item.tags, ttl))
            if stored:
                item.move_tags_to_previous()
            return stored
        except Exception as exc:
            handle_exception(exc, "save", self._logger)

    def save_deferred(self, item: CacheItem) -> bool:
        if not isinstance(item, CacheItem):
            self._invalid(_NOT_TRANSFERABLE, "save_deferred")
        self._deferred.put(item)
        return True

    def commit(self) -> bool:
        """Save every deferred item; the buffer ends up empty either way.

        A save that raises does not stop the others: every item gets its
        attempt, then the first error is raised.
        """
        saved = True
        failure: CacheError | None = None
        for item in self._deferred.drain():
            try:
                if not self.save(item):
                    saved = False
            except CacheError as exc:
                saved = False
                if failure is None:
                    failure = exc
        if failure is not None:
            raise failure
        return saved

    # ------------------------------------------------------------------
    # tags
    # ------------------------------------------------------------------

    def get_tag_key(self, tag: str) -> str:
        return get_tag_key(tag)

    def invalidate_tag(self, tag: str) -> bool:
        return self.invalidate_tags([tag])

    def invalidate_tags(self, tags: Iterable[str]) -> bool:
        """Delete every item carrying any of *tags*, then drop the tag lists.

        The lists are only dropped when every delete succeeded, so a failed
        invalidation can be retried against the same members.
        """
        tags = self._iterable(tags, "tags", "invalidate_tags")
        for tag in tags:
            result = check_tag(tag)
            if result.is_err():
                handle_exception(result.error, "invalidate_tags", self._logger)

        try:
            success = self.delete_items(self._tags.members(tags))
            if success:
                self._tags.drop(tags)
            return success
        except Exception as exc:
            handle_exception(exc, "invalidate_tags", self._logger)

    # ------------------------------------------------------------------
    # key/value interface
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        item = self.get_item(key)
        return item.get() if item.is_hit else default

    def set(self, key: str, value: Any, ttl: int | timedelta | None = None) -> bool:
        item = self.get_item(key)
        try:
            item.set(value).expires_after(ttl)
        except Exception as exc:
            handle_exception(exc, "set", self._logger)
        return self.save(item)

    def delete(self, key: str) -> bool:
        return self.delete_item(key)

    def has(self, key: str) -> bool:
        return self.has_item(key)

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> Iterator[tuple[str, Any]]:
        """Return ``(key, value)`` pairs in key order; misses yield *default*.

        Items are loaded before this returns, so iterating the result never
        reaches the backend.
        """
        items = self.get_items(keys)
        for item in items.values():
            item.is_hit  # noqa: B018 – load now
        return self._generate_values(items, default)

    @staticmethod
    def _generate_values(items: dict[str, CacheItem], default: Any) -> Iterator[tuple[str, Any]]:
        for key, item in items.items():
            yield key, (item.get() if item.is_hit else default)

    def set_multiple(
        self,
        values: Mapping[str | int, Any] | Iterable[tuple[str | int, Any]],
        ttl: int | timedelta | None = None,
    ) -> bool:
        """Defer one item per key/value pair, then commit once."""
        if isinstance(values, Mapping):
            pairs = list(values.items())
        else:
            pairs = self._iterable(values, "values", "set_multiple")
        try:
            to_timedelta(ttl)
        except Exception as exc:
            handle_exception(exc, "set_multiple", self._logger)

        normalized: dict[str, Any] = {}
        for pair in pairs:
            try:
                key, value = pair
            except (TypeError, ValueError):
                self._invalid(f"Expected a (key, value) pair, got {pair!r}", "set_multiple")
            if isinstance(key, int) and not isinstance(key, bool):
                key = str(key)
            normalized[self._validate_key(key, "set_multiple")] = value

        items = self.get_items(list(normalized))
        try:
            for key, item in items.items():
                self.save_deferred(item.set(normalized[key]).expires_after(ttl))
        except Exception as exc:
            handle_exception(exc, "set_multiple", self._logger)
        return self.commit()

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        return self.delete_items(keys)

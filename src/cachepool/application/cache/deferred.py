"""Application cache – DeferredBuffer."""
from __future__ import annotations

from collections.abc import Iterator

from cachepool.application.cache.item import CacheItem

__all__ = ["DeferredBuffer"]


class DeferredBuffer:
    """Pending writes keyed by item key; the last deferred item for a key wins.

    Iteration follows insertion order so commits are deterministic. Not
    thread-safe: one buffer belongs to one pool.
    """

    def __init__(self) -> None:
        self._items: dict[str, CacheItem] = {}

    def put(self, item: CacheItem) -> None:
        self._items[item.key] = item

    def get(self, key: str) -> CacheItem | None:
        return self._items.get(key)

    def discard(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def drain(self) -> list[CacheItem]:
        """Empty the buffer and return what it held, oldest first."""
        items = list(self._items.values())
        self._items.clear()
        return items

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CacheItem]:
        return iter(list(self._items.values()))

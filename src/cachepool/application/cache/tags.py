"""Application cache – TagIndex over the backend's list primitives.

Each tag owns one backend list (``tag!<name>``) holding the keys of the items
currently tagged with it. Index writes and data writes are separate backend
calls; nothing here makes them atomic.
"""
from __future__ import annotations

from collections.abc import Iterable

from cachepool.application.cache.item import CacheItem
from cachepool.application.cache.ports import StorageBackend

__all__ = ["TAG_SEPARATOR", "TagIndex", "get_tag_key"]

TAG_SEPARATOR = "!"


def get_tag_key(tag: str) -> str:
    """Name of the backend list that indexes *tag*."""
    return f"tag{TAG_SEPARATOR}{tag}"


class TagIndex:
    """Maintains ``tag -> keys`` membership lists in a :class:`StorageBackend`."""

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend

    def members(self, tags: Iterable[str]) -> list[str]:
        """Union of the keys listed under *tags*, first-seen order, no duplicates."""
        keys: dict[str, None] = {}
        for tag in tags:
            for key in self._backend.list_members(get_tag_key(tag)):
                keys.setdefault(key, None)
        return list(keys)

    def reconcile(self, item: CacheItem) -> None:
        """Drop the key from tags it lost, then list it under every current tag."""
        current = item.tags
        for tag in sorted(item.previous_tags - current):
            self._backend.remove_member(get_tag_key(tag), item.key)
        for tag in sorted(current):
            self._backend.append_member(get_tag_key(tag), item.key)

    def forget(self, item: CacheItem) -> None:
        """Remove the key from every tag list its persisted entry belongs to."""
        for tag in sorted(item.previous_tags):
            self._backend.remove_member(get_tag_key(tag), item.key)

    def drop(self, tags: Iterable[str]) -> None:
        # an absent list is not an error
        for tag in tags:
            self._backend.remove_list(get_tag_key(tag))

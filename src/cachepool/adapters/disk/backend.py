"""Disk adapter – DiskStorageBackend on top of diskcache."""
from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any

from cachepool.application.cache.ports import Fetched, StorageBackend
from cachepool.kernel.time import Clock, SystemClock


def _require_diskcache() -> Any:
    try:
        import diskcache
        return diskcache
    except ImportError as exc:
        raise ImportError("Install 'cachepool[disk]' to use the disk backend") from exc


class DiskStorageBackend(StorageBackend):
    """Items and tag lists in two diskcache directories under *directory*.

    Entries are ``(value, tags, expires_at)`` tuples pickled by diskcache,
    which also enforces the time-to-live.
    """

    def __init__(self, directory: str | Path, *, clock: Clock | None = None, **settings: Any) -> None:
        diskcache = _require_diskcache()
        root = Path(directory).expanduser()
        self._items = diskcache.Cache(str(root / "items"), **settings)
        self._lists = diskcache.Cache(str(root / "lists"), **settings)
        self._clock: Clock = clock or SystemClock()

    def fetch(self, key: str) -> Fetched:
        entry = self._items.get(key)
        if entry is None:
            return Fetched.miss()
        value, tags, expires_at = entry
        return Fetched(True, value, frozenset(tags), expires_at)

    def store(
        self,
        key: str,
        value: Any,
        tags: frozenset[str],
        ttl: timedelta | None,
    ) -> bool:
        expires_at = self._clock.now() + ttl if ttl is not None else None
        expire = ttl.total_seconds() if ttl is not None else None
        return bool(self._items.set(key, (value, tuple(sorted(tags)), expires_at), expire=expire))

    def remove(self, key: str) -> bool:
        self._items.delete(key)
        return True

    def clear_all(self) -> bool:
        self._items.clear()
        self._lists.clear()
        return True

    def list_members(self, name: str) -> list[str]:
        return list(self._lists.get(name, ()))

    def remove_list(self, name: str) -> bool:
        return bool(self._lists.delete(name))

    def append_member(self, name: str, member: str) -> None:
        with self._lists.transact():
            members = list(self._lists.get(name, ()))
            if member not in members:
                members.append(member)
                self._lists.set(name, members)

    def remove_member(self, name: str, member: str) -> None:
        with self._lists.transact():
            members = list(self._lists.get(name, ()))
            if member in members:
                members.remove(member)
                self._lists.set(name, members)

    def close(self) -> None:
        self._items.close()
        self._lists.close()


__all__ = ["DiskStorageBackend"]

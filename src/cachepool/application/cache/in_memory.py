"""Application cache – InMemoryStorageBackend."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from cachepool.application.cache.ports import Fetched, StorageBackend
from cachepool.kernel.time import Clock, SystemClock

__all__ = ["InMemoryStorageBackend"]


@dataclass(frozen=True)
class _Entry:
    value: Any
    tags: frozenset[str]
    expires_at: datetime | None


class InMemoryStorageBackend(StorageBackend):
    """Process-local backend; entries expire lazily when read."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._entries: dict[str, _Entry] = {}
        self._lists: dict[str, list[str]] = {}

    def fetch(self, key: str) -> Fetched:
        entry = self._entries.get(key)
        if entry is None:
            return Fetched.miss()
        if entry.expires_at is not None and entry.expires_at <= self._clock.now():
            del self._entries[key]
            return Fetched.miss()
        return Fetched(True, entry.value, entry.tags, entry.expires_at)

    def store(
        self,
        key: str,
        value: Any,
        tags: frozenset[str],
        ttl: timedelta | None,
    ) -> bool:
        expires_at = self._clock.now() + ttl if ttl is not None else None
        self._entries[key] = _Entry(value, frozenset(tags), expires_at)
        return True

    def remove(self, key: str) -> bool:
        self._entries.pop(key, None)
        return True

    def clear_all(self) -> bool:
        self._entries.clear()
        self._lists.clear()
        return True

    def list_members(self, name: str) -> list[str]:
        return list(self._lists.get(name, ()))

    def remove_list(self, name: str) -> bool:
        return self._lists.pop(name, None) is not None

    def append_member(self, name: str, member: str) -> None:
        members = self._lists.setdefault(name, [])
        if member not in members:
            members.append(member)

    def remove_member(self, name: str, member: str) -> None:
        members = self._lists.get(name)
        if members is not None and member in members:
            members.remove(member)

    def __len__(self) -> int:
        return len(self._entries)

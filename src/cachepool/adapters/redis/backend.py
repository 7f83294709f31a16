"""Redis adapter – RedisStorageBackend.

Items are JSON documents stored under ``<namespace>item:<key>``; tag lists are
Redis sets under ``<namespace>list:<name>``, so the two never collide.
"""
from __future__ import annotations

import json
import math
from datetime import datetime, timedelta
from typing import Any

from cachepool.application.cache.ports import Fetched, StorageBackend
from cachepool.kernel.time import Clock, SystemClock


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'cachepool[redis]' to use the Redis backend") from exc


def _text(raw: bytes | str) -> str:
    return raw.decode() if isinstance(raw, bytes) else raw


def _glob_escape(pattern: str) -> str:
    return "".join(f"\\{ch}" if ch in "*?[]\\" else ch for ch in pattern)


class RedisStorageBackend(StorageBackend):
    """Synchronous Redis backend.

    Values must be JSON serialisable. With an empty *namespace*,
    ``clear_all`` flushes the whole database.
    """

    def __init__(
        self,
        client: Any = None,
        *,
        url: str = "redis://localhost:6379/0",
        namespace: str = "",
        clock: Clock | None = None,
        **kwargs: Any,
    ) -> None:
        if client is None:
            client = _require_redis().Redis.from_url(url, **kwargs)
        self._client = client
        self._namespace = namespace
        self._clock: Clock = clock or SystemClock()

    def _item_key(self, key: str) -> str:
        return f"{self._namespace}item:{key}"

    def _list_key(self, name: str) -> str:
        return f"{self._namespace}list:{name}"

    def fetch(self, key: str) -> Fetched:
        raw = self._client.get(self._item_key(key))
        if raw is None:
            return Fetched.miss()
        document = json.loads(raw)
        expires_at = document.get("expires_at")
        return Fetched(
            True,
            document.get("value"),
            frozenset(document.get("tags", ())),
            datetime.fromisoformat(expires_at) if expires_at else None,
        )

    def store(
        self,
        key: str,
        value: Any,
        tags: frozenset[str],
        ttl: timedelta | None,
    ) -> bool:
        expires_at = self._clock.now() + ttl if ttl is not None else None
        payload = json.dumps({
            "value": value,
            "tags": sorted(tags),
            "expires_at": expires_at.isoformat() if expires_at else None,
        })
        px = max(1, math.ceil(ttl.total_seconds() * 1000)) if ttl is not None else None
        return bool(self._client.set(self._item_key(key), payload, px=px))

    def remove(self, key: str) -> bool:
        # deleting an absent key is still a successful delete
        self._client.delete(self._item_key(key))
        return True

    def clear_all(self) -> bool:
        if not self._namespace:
            return bool(self._client.flushdb())
        pattern = f"{_glob_escape(self._namespace)}*"
        batch: list[Any] = []
        for name in self._client.scan_iter(match=pattern, count=500):
            batch.append(name)
            if len(batch) >= 500:
                self._client.delete(*batch)
                batch.clear()
        if batch:
            self._client.delete(*batch)
        return True

    def list_members(self, name: str) -> list[str]:
        return sorted(_text(member) for member in self._client.smembers(self._list_key(name)))

    def remove_list(self, name: str) -> bool:
        return bool(self._client.delete(self._list_key(name)))

    def append_member(self, name: str, member: str) -> None:
        self._client.sadd(self._list_key(name), member)

    def remove_member(self, name: str, member: str) -> None:
        self._client.srem(self._list_key(name), member)

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisStorageBackend"]

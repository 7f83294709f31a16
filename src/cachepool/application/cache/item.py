"""Application cache – CacheItem.

An item is created with a *loader* that performs the backend read. The
loader runs at most once, the first time any of the item's state is
dereferenced, and its result is kept for the lifetime of the item.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from typing import Any

from cachepool.application.cache.keys import validate_tag
from cachepool.application.cache.ports import Fetched
from cachepool.kernel.errors import InvalidArgumentError
from cachepool.kernel.time import Clock, SystemClock, as_utc

__all__ = ["CacheItem", "Loader", "to_timedelta"]

Loader = Callable[[], Fetched]


def to_timedelta(ttl: int | timedelta | None) -> timedelta | None:
    """Normalise a time-to-live given as seconds or ``timedelta``."""
    if ttl is None or isinstance(ttl, timedelta):
        return ttl
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        raise InvalidArgumentError(
            f'Invalid time-to-live: "{type(ttl).__name__}" given, '
            "expected int seconds, timedelta or None",
        )
    return timedelta(seconds=ttl)


class CacheItem:
    """One cache entry: value, hit state, expiration and tags.

    ``previous_tags`` are the tags of the persisted entry. They are captured
    when the item is loaded and only change when the pool moves the current
    tags over (deferred clone) or after a successful save.
    """

    def __init__(
        self,
        key: str,
        loader: Loader | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._key = key
        self._loader = loader
        self._clock: Clock = clock or SystemClock()
        self._value: Any = None
        self._hit = False
        self._expiration: datetime | None = None
        self._tags: set[str] = set()
        self._previous_tags: set[str] = set()

    def _initialize(self) -> None:
        if self._loader is None:
            return
        fetched = self._loader()
        self._loader = None
        self._hit = bool(fetched.is_hit)
        self._value = fetched.value if fetched.is_hit else None
        self._tags = set(fetched.tags or ())
        self._previous_tags = set(self._tags)
        self._expiration = as_utc(fetched.expires_at) if fetched.expires_at else None

    def __copy__(self) -> CacheItem:
        self._initialize()
        clone = CacheItem(self._key, clock=self._clock)
        clone._value = self._value
        clone._hit = self._hit
        clone._expiration = self._expiration
        clone._tags = set(self._tags)
        clone._previous_tags = set(self._previous_tags)
        return clone

    def __repr__(self) -> str:
        state = "unloaded" if self._loader is not None else ("hit" if self._hit else "miss")
        return f"CacheItem(key={self._key!r}, state={state})"

    # ------------------------------------------------------------------
    # value
    # ------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def is_hit(self) -> bool:
        self._initialize()
        return self._hit

    def get(self) -> Any:
        """Return the value, or ``None`` on a miss."""
        self._initialize()
        return self._value if self._hit else None

    def set(self, value: Any) -> CacheItem:
        self._initialize()
        self._value = value
        self._hit = True
        return self

    # ------------------------------------------------------------------
    # expiration
    # ------------------------------------------------------------------

    @property
    def expiration(self) -> datetime | None:
        self._initialize()
        return self._expiration

    def expires_at(self, when: datetime | None) -> CacheItem:
        if when is not None and not isinstance(when, datetime):
            raise InvalidArgumentError(
                f'Expiration must be a datetime or None, "{type(when).__name__}" given',
            )
        self._initialize()
        self._expiration = as_utc(when) if when is not None else None
        return self

    def expires_after(self, ttl: int | timedelta | None) -> CacheItem:
        """Expire *ttl* from now (seconds or ``timedelta``); ``None`` never expires."""
        delta = to_timedelta(ttl)
        if delta is None:
            return self.expires_at(None)
        return self.expires_at(self._clock.now() + delta)

    # ------------------------------------------------------------------
    # tags
    # ------------------------------------------------------------------

    @property
    def tags(self) -> frozenset[str]:
        self._initialize()
        return frozenset(self._tags)

    @property
    def previous_tags(self) -> frozenset[str]:
        self._initialize()
        return frozenset(self._previous_tags)

    def set_tags(self, tags: Iterable[str]) -> CacheItem:
        """Replace the current tags."""
        if isinstance(tags, str):
            raise InvalidArgumentError("Tags must be an iterable of strings, not a string")
        validated = {validate_tag(tag) for tag in tags}
        self._initialize()
        self._tags = validated
        return self

    def add_tag(self, tag: str) -> CacheItem:
        validate_tag(tag)
        self._initialize()
        self._tags.add(tag)
        return self

    def add_tags(self, tags: Iterable[str]) -> CacheItem:
        for tag in tags:
            self.add_tag(tag)
        return self

    def move_tags_to_previous(self) -> None:
        """Treat the current tags as the persisted ones.

        Called on clones of deferred items and after a successful save.
        """
        self._initialize()
        self._previous_tags = set(self._tags)

"""Application cache – StorageBackend port.

A backend is any key-value store that can also keep named lists of strings.
The pool never assumes atomicity across two calls: a data write followed by a
tag-list write may be interrupted in between.
"""
from __future__ import annotations

import abc
from datetime import datetime, timedelta
from typing import Any, NamedTuple

__all__ = ["Fetched", "StorageBackend"]


class Fetched(NamedTuple):
    """Result of a point read."""

    is_hit: bool
    value: Any = None
    tags: frozenset[str] = frozenset()
    expires_at: datetime | None = None

    @classmethod
    def miss(cls) -> Fetched:
        return cls(False, None, frozenset(), None)


class StorageBackend(abc.ABC):
    """Port: key-value storage plus named-list primitives."""

    @abc.abstractmethod
    def fetch(self, key: str) -> Fetched:
        """Return the stored entry, or ``Fetched.miss()``."""

    @abc.abstractmethod
    def store(
        self,
        key: str,
        value: Any,
        tags: frozenset[str],
        ttl: timedelta | None,
    ) -> bool:
        """Write an entry; ``ttl=None`` means it never expires."""

    @abc.abstractmethod
    def remove(self, key: str) -> bool: ...

    @abc.abstractmethod
    def clear_all(self) -> bool: ...

    @abc.abstractmethod
    def list_members(self, name: str) -> list[str]: ...

    @abc.abstractmethod
    def remove_list(self, name: str) -> bool: ...

    @abc.abstractmethod
    def append_member(self, name: str, member: str) -> None:
        """Add *member* to list *name*; appending twice keeps one copy."""

    @abc.abstractmethod
    def remove_member(self, name: str, member: str) -> None: ...

    def close(self) -> None:
        """Release connections / file handles. Default: nothing to release."""

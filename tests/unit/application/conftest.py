"""Shared fixtures for cache pool tests."""

from __future__ import annotations

from typing import Any

import pytest

from cachepool.application.cache import CachePool, InMemoryStorageBackend
from cachepool.kernel.time import FrozenClock
from cachepool.testing.fakes import FakeClock, FaultyStorageBackend


class RecordingLogger:
    """Logger double collecting ``(level, event, fields)`` tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.records.append((level, event, kw))

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def critical(self, event: str, **kw: Any) -> None:
        self._record("critical", event, **kw)


@pytest.fixture
def clock() -> FrozenClock:
    return FakeClock()


@pytest.fixture
def backend(clock: FrozenClock) -> FaultyStorageBackend:
    return FaultyStorageBackend(InMemoryStorageBackend(clock=clock))


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def pool(backend: FaultyStorageBackend, clock: FrozenClock, logger: RecordingLogger) -> CachePool:
    return CachePool(backend, logger=logger, clock=clock)

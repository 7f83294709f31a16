"""Unit tests for the diskcache storage backend."""
from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from cachepool.adapters.disk import DiskStorageBackend
from cachepool.application.cache import CachePool
from cachepool.testing.fakes import FakeClock


@pytest.fixture
def backend(tmp_path: Path):  # type: ignore[no-untyped-def]
    backend = DiskStorageBackend(tmp_path / "cache", clock=FakeClock())
    yield backend
    backend.close()


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


class TestItems:
    def test_miss(self, backend: DiskStorageBackend) -> None:
        assert not backend.fetch("k").is_hit

    def test_round_trip_keeps_python_values(self, backend: DiskStorageBackend) -> None:
        backend.store("k", {"when": (1, 2)}, frozenset({"t"}), None)
        fetched = backend.fetch("k")
        assert fetched.value == {"when": (1, 2)}
        assert fetched.tags == {"t"}
        assert fetched.expires_at is None

    def test_ttl_recorded(self, backend: DiskStorageBackend) -> None:
        backend.store("k", "v", frozenset(), timedelta(hours=1))
        assert backend.fetch("k").expires_at == FakeClock().now() + timedelta(hours=1)

    def test_remove(self, backend: DiskStorageBackend) -> None:
        backend.store("k", "v", frozenset(), None)
        assert backend.remove("k") is True
        assert backend.remove("k") is True
        assert not backend.fetch("k").is_hit

    def test_survives_reopen(self, tmp_path: Path) -> None:
        first = DiskStorageBackend(tmp_path)
        first.store("k", "v", frozenset(), None)
        first.append_member("tag!t", "k")
        first.close()

        second = DiskStorageBackend(tmp_path)
        try:
            assert second.fetch("k").value == "v"
            assert second.list_members("tag!t") == ["k"]
        finally:
            second.close()

    def test_clear_all(self, backend: DiskStorageBackend) -> None:
        backend.store("k", "v", frozenset(), None)
        backend.append_member("tag!t", "k")
        assert backend.clear_all() is True
        assert not backend.fetch("k").is_hit
        assert backend.list_members("tag!t") == []


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class TestLists:
    def test_append_is_idempotent(self, backend: DiskStorageBackend) -> None:
        backend.append_member("l", "a")
        backend.append_member("l", "b")
        backend.append_member("l", "a")
        assert backend.list_members("l") == ["a", "b"]

    def test_remove_member_and_list(self, backend: DiskStorageBackend) -> None:
        backend.append_member("l", "a")
        backend.remove_member("l", "a")
        assert backend.list_members("l") == []
        assert backend.remove_list("l") is True
        assert backend.remove_list("l") is False

    def test_lists_and_items_do_not_collide(self, backend: DiskStorageBackend) -> None:
        backend.store("tag!t", "value", frozenset(), None)
        backend.append_member("tag!t", "k")
        assert backend.fetch("tag!t").value == "value"
        assert backend.list_members("tag!t") == ["k"]


# ---------------------------------------------------------------------------
# Through the pool
# ---------------------------------------------------------------------------


class TestWithPool:
    def test_tag_invalidation(self, backend: DiskStorageBackend) -> None:
        pool = CachePool(backend, clock=FakeClock())
        pool.save(pool.get_item("a").set(1).set_tags(["T"]))
        pool.save(pool.get_item("b").set(2).set_tags(["U"]))

        assert pool.invalidate_tag("T") is True

        assert not pool.has("a")
        assert pool.get("b") == 2


def test_missing_package_raises_helpful_error() -> None:
    import cachepool.adapters.disk.backend as backend_mod

    with patch.dict("sys.modules", {"diskcache": None}):
        with pytest.raises(ImportError, match=r"cachepool\[disk\]"):
            backend_mod._require_diskcache()

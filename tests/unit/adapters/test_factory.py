"""Unit tests for backend selection and open_pool."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cachepool.adapters import create_backend, open_pool
from cachepool.application.cache import CachePool, InMemoryStorageBackend
from cachepool.config import CachePoolSettings


class TestCreateBackend:
    def test_memory_is_default(self) -> None:
        assert isinstance(create_backend(CachePoolSettings()), InMemoryStorageBackend)

    def test_disk(self, tmp_path: Path) -> None:
        from cachepool.adapters.disk import DiskStorageBackend

        backend = create_backend(CachePoolSettings(backend="disk", directory=str(tmp_path)))
        try:
            assert isinstance(backend, DiskStorageBackend)
        finally:
            backend.close()

    def test_redis_uses_url_and_namespace(self) -> None:
        import cachepool.adapters.redis.backend as backend_mod

        mock_redis = MagicMock()
        settings = CachePoolSettings(backend="redis", redis_url="redis://cache:6379/1", namespace="app:")
        with patch.object(backend_mod, "_require_redis", return_value=mock_redis):
            backend = create_backend(settings)

        mock_redis.Redis.from_url.assert_called_once_with("redis://cache:6379/1")
        assert isinstance(backend, backend_mod.RedisStorageBackend)
        assert backend._namespace == "app:"


class TestOpenPool:
    def test_yields_pool_and_commits_on_exit(self) -> None:
        backend = InMemoryStorageBackend()
        with patch("cachepool.adapters.factory.create_backend", return_value=backend):
            with open_pool(CachePoolSettings()) as pool:
                assert isinstance(pool, CachePool)
                pool.save_deferred(pool.get_item("k").set("v"))
        assert backend.fetch("k").value == "v"

    def test_closes_backend_even_on_error(self) -> None:
        backend = MagicMock(wraps=InMemoryStorageBackend())
        with patch("cachepool.adapters.factory.create_backend", return_value=backend):
            with pytest.raises(RuntimeError):
                with open_pool(CachePoolSettings()):
                    raise RuntimeError("boom")
        backend.close.assert_called_once_with()

    def test_reads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("CACHEPOOL_BACKEND", "disk")
        monkeypatch.setenv("CACHEPOOL_DIRECTORY", str(tmp_path))
        with open_pool() as pool:
            pool.set("k", "v")
        with open_pool() as pool:
            assert pool.get("k") == "v"

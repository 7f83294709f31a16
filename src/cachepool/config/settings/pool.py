"""Config settings – CachePoolSettings."""
from __future__ import annotations

import dataclasses

from cachepool.config.settings.base import Settings
from cachepool.config.validation import InvalidSettingValueError

BACKENDS = ("memory", "redis", "disk")


@dataclasses.dataclass
class CachePoolSettings(Settings):
    """Which backend a pool runs on and how to reach it.

    Environment: ``CACHEPOOL_BACKEND``, ``CACHEPOOL_REDIS_URL``,
    ``CACHEPOOL_NAMESPACE``, ``CACHEPOOL_DIRECTORY``.
    """

    _prefix: dataclasses.ClassVar[str] = "CACHEPOOL"

    backend: str = "memory"
    redis_url: str = "redis://localhost:6379/0"
    namespace: str = ""
    directory: str = ".cache/cachepool"

    def _validate(self) -> None:
        self.backend = self.backend.strip().lower()
        if self.backend not in BACKENDS:
            raise InvalidSettingValueError(
                "backend", self.backend, f"expected one of {', '.join(BACKENDS)}"
            )


__all__ = ["BACKENDS", "CachePoolSettings"]

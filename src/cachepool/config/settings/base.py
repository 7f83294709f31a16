"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override ``_validate`` to normalise or
    reject values; it runs after every construction, loader or not.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name* (``CACHEPOOL_REDIS_URL``)."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]

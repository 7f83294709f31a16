"""Application cache – key and tag validation."""
from __future__ import annotations

import re
from typing import Any

from cachepool.kernel.errors import InvalidArgumentError
from cachepool.kernel.types import Err, Ok, Result

__all__ = ["RESERVED_CHARACTERS", "check_key", "check_tag", "validate_key", "validate_tag"]

# reserved for future hierarchy / namespace syntax
RESERVED_CHARACTERS = "{}()/\\@:"

_RESERVED_RE = re.compile(r"[{}()/\\@:]")


def _check(value: Any, kind: str) -> Result[str, InvalidArgumentError]:
    if not isinstance(value, str):
        return Err(InvalidArgumentError(
            f'Cache {kind} must be string, "{type(value).__name__}" given',
        ))
    if not value:
        return Err(InvalidArgumentError(f"Cache {kind} cannot be an empty string"))
    if _RESERVED_RE.search(value):
        return Err(InvalidArgumentError(
            f'Invalid {kind}: "{value}". The {kind} contains one or more characters '
            f"reserved for future extension: {RESERVED_CHARACTERS}",
            detail={kind: value},
        ))
    return Ok(value)


def check_key(key: Any) -> Result[str, InvalidArgumentError]:
    """Validate *key* without raising.

    Rules, first failure wins: must be a ``str``, must be non-empty, must not
    contain any of ``{}()/\\@:``.
    """
    return _check(key, "key")


def check_tag(tag: Any) -> Result[str, InvalidArgumentError]:
    """Validate *tag* with the same rules as keys."""
    return _check(tag, "tag")


def validate_key(key: Any) -> str:
    """Return *key* unchanged or raise :class:`InvalidArgumentError`."""
    return check_key(key).unwrap()


def validate_tag(tag: Any) -> str:
    return check_tag(tag).unwrap()

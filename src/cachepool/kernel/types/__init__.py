"""Kernel types – small framework-agnostic value types."""

from cachepool.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]

"""Adapters – concrete storage backends.

Backends with third-party dependencies are imported from their own
subpackage (``cachepool.adapters.redis``, ``cachepool.adapters.disk``).
"""
from cachepool.adapters.factory import create_backend, open_pool

__all__ = ["create_backend", "open_pool"]

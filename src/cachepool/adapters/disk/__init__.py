"""Disk adapter – storage backend on local files (diskcache)."""
from cachepool.adapters.disk.backend import DiskStorageBackend

__all__ = ["DiskStorageBackend"]

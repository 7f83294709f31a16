"""Redis adapter – storage backend on a remote Redis server."""
from cachepool.adapters.redis.backend import RedisStorageBackend

__all__ = ["RedisStorageBackend"]

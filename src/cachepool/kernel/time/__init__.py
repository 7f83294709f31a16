"""Kernel time – clock port for expiration arithmetic."""
from cachepool.kernel.time.clock import Clock, FrozenClock, SystemClock, as_utc, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "as_utc", "utc_now"]

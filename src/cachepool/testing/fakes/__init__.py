"""Testing fakes – in-memory doubles for the pool's ports."""
from cachepool.testing.fakes.clock import FakeClock
from cachepool.testing.fakes.backend import FaultyStorageBackend, InjectedFailure
from cachepool.kernel.time import FrozenClock

__all__ = ["FakeClock", "FaultyStorageBackend", "FrozenClock", "InjectedFailure"]

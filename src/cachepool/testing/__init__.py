"""Testing support – fakes for exercising pools without real infrastructure."""

from cachepool.testing.fakes import FakeClock, FaultyStorageBackend, FrozenClock, InjectedFailure

__all__ = ["FakeClock", "FaultyStorageBackend", "FrozenClock", "InjectedFailure"]

"""Testing fakes – in-memory doubles for the platform ports."""
from mp_devconfig.testing.fakes.config_store import FakeConfigStore
from mp_devconfig.testing.fakes.context import FakeContext
from mp_devconfig.testing.fakes.packages import FakePackageManager
from mp_devconfig.testing.fakes.resources import FakeResources

__all__ = ["FakeConfigStore", "FakeContext", "FakePackageManager", "FakeResources"]

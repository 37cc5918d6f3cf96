"""Testing support – in-memory doubles for every port.

Usage in a test module::

    from mp_devconfig.testing.fakes import FakeConfigStore, FakeContext
"""

from mp_devconfig.testing.fakes import (
    FakeConfigStore,
    FakeContext,
    FakePackageManager,
    FakeResources,
)

__all__ = ["FakeConfigStore", "FakeContext", "FakePackageManager", "FakeResources"]

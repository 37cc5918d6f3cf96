"""
mp_devconfig – device-side feature flags and version gates.

Import path convention::

    from mp_devconfig.flags import FlagResolver, GatePolicy
    from mp_devconfig.adapters import EnvConfigStore, InMemoryConfigStore
    from mp_devconfig.kernel.errors import PackageNotFoundError
    from mp_devconfig.testing.fakes import FakeContext, FakePackageManager
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

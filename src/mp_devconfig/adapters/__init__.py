"""Adapters – concrete config stores and a plain-data Context."""
from mp_devconfig.adapters.context import SimpleContext
from mp_devconfig.adapters.env import EnvConfigStore
from mp_devconfig.adapters.memory import InMemoryConfigStore

__all__ = ["EnvConfigStore", "InMemoryConfigStore", "SimpleContext"]

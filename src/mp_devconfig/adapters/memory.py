"""Adapters – InMemoryConfigStore."""
from __future__ import annotations

import threading
from typing import Mapping

from mp_devconfig.ports.config_store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """Dict-backed :class:`ConfigStore`, safe to update from another thread."""

    def __init__(self, properties: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._data: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()
        for namespace, values in (properties or {}).items():
            self.set_properties(namespace, values)

    def get_property(self, namespace: str, key: str) -> str | None:
        with self._lock:
            return self._data.get((namespace, key))

    def set_property(self, namespace: str, key: str, value: str) -> None:
        with self._lock:
            self._data[(namespace, key)] = value

    def set_properties(self, namespace: str, values: Mapping[str, str]) -> None:
        with self._lock:
            for key, value in values.items():
                self._data[(namespace, key)] = value

    def delete_property(self, namespace: str, key: str) -> None:
        with self._lock:
            self._data.pop((namespace, key), None)

    def namespace(self, namespace: str) -> dict[str, str]:
        """Snapshot of every key set under *namespace*."""
        with self._lock:
            return {k: v for (ns, k), v in self._data.items() if ns == namespace}


__all__ = ["InMemoryConfigStore"]

"""Flags – PackageVersionCache."""
from __future__ import annotations

import threading
from typing import Callable


class PackageVersionCache:
    """Thread-safe map of lookup identity → resolved version code.

    :meth:`get_or_load` is an atomic check-and-populate: concurrent first-time
    callers for the same identity share a single ``loader()`` call.  Loader
    exceptions propagate and leave the identity uncached, so a failed lookup
    is retried on the next request.

    Entries live until :meth:`clear`.  A load that is still running when
    :meth:`clear` is called returns its value to its caller but does not
    repopulate the cache.

    Example
    -------
    ::

        cache = PackageVersionCache()
        version = cache.get_or_load("package:com.example", lambda: 42)
    """

    def __init__(self) -> None:
        self._versions: dict[str, int] = {}
        # per-identity locks outlive clear() so loads stay serialised across it
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()
        self._generation = 0

    def get_or_load(self, identity: str, loader: Callable[[], int]) -> int:
        version = self._versions.get(identity)
        if version is not None:
            return version
        with self._guard:
            lock = self._locks.setdefault(identity, threading.Lock())
        with lock:
            with self._guard:
                version = self._versions.get(identity)
                generation = self._generation
            if version is not None:
                return version
            version = loader()
            with self._guard:
                if generation == self._generation:
                    self._versions[identity] = version
            return version

    def get(self, identity: str) -> int | None:
        return self._versions.get(identity)

    def clear(self) -> None:
        """Drop every cached version (test isolation)."""
        with self._guard:
            self._generation += 1
            self._versions.clear()

    def __contains__(self, identity: object) -> bool:
        return identity in self._versions

    def __len__(self) -> int:
        return len(self._versions)


__all__ = ["PackageVersionCache"]

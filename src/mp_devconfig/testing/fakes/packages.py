"""Testing fakes – FakePackageManager."""
from __future__ import annotations

import threading
from collections import Counter

from mp_devconfig.kernel.errors import PackageNotFoundError
from mp_devconfig.ports.packages import PackageInfo, PackageManager, ResolveInfo


class FakePackageManager(PackageManager):
    """In-memory :class:`PackageManager`.

    Unknown packages raise :class:`PackageNotFoundError`.  Intent queries
    return whatever was registered with :meth:`register_activity`; entries
    marked non-system are hidden when ``match_system_only`` is set.

    ``info_calls`` counts :meth:`get_package_info` calls per package name and
    ``query_calls`` counts intent queries, so tests can assert on caching.
    """

    def __init__(self) -> None:
        self._versions: dict[str, int] = {}
        self._activities: dict[str, list[tuple[ResolveInfo, bool]]] = {}
        self._lock = threading.Lock()
        self.info_calls: Counter[str] = Counter()
        self.info_flags: list[int] = []
        self.query_calls = 0

    # ------------------------------------------------------------------
    # PackageManager protocol
    # ------------------------------------------------------------------

    def get_package_info(self, package_name: str, flags: int = 0) -> PackageInfo:
        with self._lock:
            self.info_calls[package_name] += 1
            self.info_flags.append(flags)
        if package_name not in self._versions:
            raise PackageNotFoundError(package_name)
        return PackageInfo(package_name=package_name, version_code=self._versions[package_name])

    def query_intent_activities(
        self, action: str, *, match_system_only: bool = False
    ) -> list[ResolveInfo]:
        with self._lock:
            self.query_calls += 1
        return [
            info
            for info, system in self._activities.get(action, [])
            if system or not match_system_only
        ]

    # ------------------------------------------------------------------
    # Test-setup helpers
    # ------------------------------------------------------------------

    def install(self, package_name: str, version_code: int) -> "FakePackageManager":
        self._versions[package_name] = version_code
        return self

    def uninstall(self, package_name: str) -> "FakePackageManager":
        self._versions.pop(package_name, None)
        return self

    def register_activity(
        self,
        action: str,
        package_name: str,
        source_dir: str = "",
        *,
        system: bool = True,
    ) -> "FakePackageManager":
        self._activities.setdefault(action, []).append(
            (ResolveInfo(package_name=package_name, source_dir=source_dir), system)
        )
        return self

    @property
    def total_info_calls(self) -> int:
        return sum(self.info_calls.values())

    def reset_calls(self) -> None:
        with self._lock:
            self.info_calls.clear()
            self.info_flags.clear()
            self.query_calls = 0

    def reset(self) -> None:
        self._versions.clear()
        self._activities.clear()
        self.reset_calls()


__all__ = ["FakePackageManager"]

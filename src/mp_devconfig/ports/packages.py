"""Ports – PackageManager and its value objects."""
from __future__ import annotations

import abc
import dataclasses

MATCH_SYSTEM_ONLY = 0x00100000
MATCH_APEX = 0x40000000


@dataclasses.dataclass(frozen=True)
class PackageInfo:
    """Installed package metadata."""
    package_name: str
    version_code: int


@dataclasses.dataclass(frozen=True)
class ResolveInfo:
    """One match of an intent query: the handling package and its install path."""
    package_name: str
    source_dir: str = ""


class PackageManager(abc.ABC):
    """Port: package-metadata and package-query service."""

    @abc.abstractmethod
    def get_package_info(self, package_name: str, flags: int = 0) -> PackageInfo:
        """Raise :class:`~mp_devconfig.kernel.errors.PackageNotFoundError` if absent."""

    @abc.abstractmethod
    def query_intent_activities(
        self, action: str, *, match_system_only: bool = False
    ) -> list[ResolveInfo]: ...


__all__ = ["MATCH_APEX", "MATCH_SYSTEM_ONLY", "PackageInfo", "PackageManager", "ResolveInfo"]

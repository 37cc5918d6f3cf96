"""Adapters – SimpleContext."""
from __future__ import annotations

from mp_devconfig.ports.context import Context
from mp_devconfig.ports.packages import PackageManager
from mp_devconfig.ports.resources import Resources


class SimpleContext(Context):
    """:class:`Context` built from already-constructed port implementations."""

    def __init__(self, package_name: str, package_manager: PackageManager, resources: Resources) -> None:
        self._package_name = package_name
        self._package_manager = package_manager
        self._resources = resources

    @property
    def package_name(self) -> str:
        return self._package_name

    @property
    def package_manager(self) -> PackageManager:
        return self._package_manager

    @property
    def resources(self) -> Resources:
        return self._resources


__all__ = ["SimpleContext"]

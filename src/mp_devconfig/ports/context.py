"""Ports – Context."""
from __future__ import annotations

import abc

from mp_devconfig.ports.packages import PackageManager
from mp_devconfig.ports.resources import Resources


class Context(abc.ABC):
    """Port: the calling application's identity and platform handles."""

    @property
    @abc.abstractmethod
    def package_name(self) -> str: ...

    @property
    @abc.abstractmethod
    def package_manager(self) -> PackageManager: ...

    @property
    @abc.abstractmethod
    def resources(self) -> Resources: ...


__all__ = ["Context"]

"""Ports – ConfigStore."""
from __future__ import annotations

import abc


class ConfigStore(abc.ABC):
    """Port: namespaced key/value store of remotely configurable flags."""

    @abc.abstractmethod
    def get_property(self, namespace: str, key: str) -> str | None:
        """Return the raw value, or ``None`` when the flag is not set.

        An empty string is a set value and must not be reported as ``None``.
        """


__all__ = ["ConfigStore"]

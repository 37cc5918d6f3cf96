"""Ports – Resources."""
from __future__ import annotations

import abc


class Resources(abc.ABC):
    """Port: resource bundle addressed by integer id.

    Both getters raise :class:`~mp_devconfig.kernel.errors.ResourceNotFoundError`
    when *resource_id* is not defined.
    """

    @abc.abstractmethod
    def get_boolean(self, resource_id: int) -> bool: ...

    @abc.abstractmethod
    def get_integer(self, resource_id: int) -> int: ...


__all__ = ["Resources"]

"""Adapters – EnvConfigStore."""
from __future__ import annotations

import os
import re
from typing import Mapping

from mp_devconfig.ports.config_store import ConfigStore

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


class EnvConfigStore(ConfigStore):
    """Read flags from environment variables.

    ``("connectivity", "experiment_flag")`` maps to
    ``DEVCONFIG__CONNECTIVITY__EXPERIMENT_FLAG``: upper-cased, with every
    non-alphanumeric character replaced by ``_``.  The environment is read on
    every call, so changes are picked up without a restart.
    """

    def __init__(self, prefix: str = "DEVCONFIG", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._environ = environ

    def variable_name(self, namespace: str, key: str) -> str:
        parts = [_NON_ALNUM.sub("_", part).upper() for part in (namespace, key)]
        if self._prefix:
            parts.insert(0, self._prefix.upper())
        return "__".join(parts)

    def get_property(self, namespace: str, key: str) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(self.variable_name(namespace, key))


__all__ = ["EnvConfigStore"]

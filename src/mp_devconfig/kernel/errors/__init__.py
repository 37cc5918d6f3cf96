"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── DevConfigError           (lookup.py)
        ├── LookupFailedError
        │   ├── PackageNotFoundError
        │   └── ResourceNotFoundError
        ├── FlagParseError
        └── CompanionPackageError

Configuration errors (``ConfigError`` and friends) live in
:mod:`mp_devconfig.config.validation` and also derive from ``BaseError``.
"""

from mp_devconfig.kernel.errors.base import BaseError
from mp_devconfig.kernel.errors.lookup import (
    CompanionPackageError,
    DevConfigError,
    FlagParseError,
    LookupFailedError,
    PackageNotFoundError,
    ResourceNotFoundError,
)

__all__ = [
    "BaseError",
    "CompanionPackageError",
    "DevConfigError",
    "FlagParseError",
    "LookupFailedError",
    "PackageNotFoundError",
    "ResourceNotFoundError",
]

"""Kernel – error hierarchy shared by every layer."""

from mp_devconfig.kernel.errors import (
    BaseError,
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

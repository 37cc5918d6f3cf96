"""Lookup and parse errors raised by ports and flag helpers.

The resolver converts every one of these into the caller's default; they only
surface when a port or helper is used directly.
"""

from __future__ import annotations

from typing import Any

from mp_devconfig.kernel.errors.base import BaseError


class DevConfigError(BaseError):
    """Failure while resolving a flag, a package or a resource."""

    default_code = "devconfig_error"


class LookupFailedError(DevConfigError):
    """A collaborator could not find the requested item."""

    default_code = "lookup_failed"


class PackageNotFoundError(LookupFailedError):
    """The package-metadata service has no package with this name."""

    default_code = "package_not_found"

    def __init__(self, package_name: str, **kwargs: Any) -> None:
        super().__init__(f"Package '{package_name}' not found", **kwargs)
        self.package_name = package_name


class ResourceNotFoundError(LookupFailedError):
    """The resource bundle has no value for this id."""

    default_code = "resource_not_found"

    def __init__(self, resource_id: int, **kwargs: Any) -> None:
        super().__init__(f"Resource 0x{resource_id:08x} not found", **kwargs)
        self.resource_id = resource_id


class FlagParseError(DevConfigError):
    """A raw flag value could not be converted to the requested type."""

    default_code = "flag_parse_error"

    def __init__(self, raw: str, expected: str = "int", **kwargs: Any) -> None:
        super().__init__(f"Cannot parse {raw!r} as {expected}", **kwargs)
        self.raw = raw
        self.expected = expected


class CompanionPackageError(DevConfigError):
    """No module package name can be derived from the companion package."""

    default_code = "companion_package_error"


__all__ = [
    "CompanionPackageError",
    "DevConfigError",
    "FlagParseError",
    "LookupFailedError",
    "PackageNotFoundError",
    "ResourceNotFoundError",
]

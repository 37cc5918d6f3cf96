"""Flags – resolver, version cache, gate policies and parsing."""
from mp_devconfig.flags.cache import PackageVersionCache
from mp_devconfig.flags.parsing import parse_bool, parse_int
from mp_devconfig.flags.policy import CompanionPackagePolicy, GatePolicy
from mp_devconfig.flags.resolver import OWN_PACKAGE_IDENTITY, FlagResolver

__all__ = [
    "OWN_PACKAGE_IDENTITY",
    "CompanionPackagePolicy",
    "FlagResolver",
    "GatePolicy",
    "PackageVersionCache",
    "parse_bool",
    "parse_int",
]

"""Ports – contracts of the platform services the resolver calls."""
from mp_devconfig.ports.config_store import ConfigStore
from mp_devconfig.ports.context import Context
from mp_devconfig.ports.packages import MATCH_APEX, MATCH_SYSTEM_ONLY, PackageInfo, PackageManager, ResolveInfo
from mp_devconfig.ports.resources import Resources

__all__ = [
    "MATCH_APEX",
    "MATCH_SYSTEM_ONLY",
    "ConfigStore",
    "Context",
    "PackageInfo",
    "PackageManager",
    "ResolveInfo",
    "Resources",
]

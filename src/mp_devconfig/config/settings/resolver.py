"""Config settings – ResolverSettings."""
from __future__ import annotations

import dataclasses

from mp_devconfig.config.settings.base import Settings
from mp_devconfig.config.validation import InvalidSettingValueError

DEFAULT_RESOURCES_INTENT_ACTION = "com.android.server.connectivity.intent.action.SERVICE_CONNECTIVITY_RESOURCES_APK"
DEFAULT_RESOURCES_PACKAGE_DOMAIN = ".connectivity.resources"
DEFAULT_MODULE_DOMAIN = "com.android."
DEFAULT_VARIANT_INFIX = "go"


@dataclasses.dataclass
class ResolverSettings(Settings):
    """Knobs for companion-package discovery and version gating.

    Loaded from ``DEVCONFIG_*`` environment variables by
    :class:`~mp_devconfig.config.settings.loaders.EnvSettingsLoader`.
    An empty ``variant_infix`` disables the alternate package lookup.
    """

    _prefix: dataclasses.ClassVar[str] = "DEVCONFIG"

    resources_intent_action: str = DEFAULT_RESOURCES_INTENT_ACTION
    resources_package_domain: str = DEFAULT_RESOURCES_PACKAGE_DOMAIN
    module_domain: str = DEFAULT_MODULE_DOMAIN
    variant_infix: str = DEFAULT_VARIANT_INFIX
    zero_defers_to_default: bool = True

    def _validate(self) -> None:
        for name in ("resources_intent_action", "resources_package_domain"):
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")
        if "." in self.variant_infix.strip("."):
            raise InvalidSettingValueError(
                "variant_infix", self.variant_infix, "must be a single package segment"
            )


__all__ = [
    "DEFAULT_MODULE_DOMAIN",
    "DEFAULT_RESOURCES_INTENT_ACTION",
    "DEFAULT_RESOURCES_PACKAGE_DOMAIN",
    "DEFAULT_VARIANT_INFIX",
    "ResolverSettings",
]

"""Flags – gate and companion-package policies."""
from __future__ import annotations

import dataclasses

from mp_devconfig.config.settings.resolver import (
    DEFAULT_MODULE_DOMAIN,
    DEFAULT_RESOURCES_INTENT_ACTION,
    DEFAULT_RESOURCES_PACKAGE_DOMAIN,
    DEFAULT_VARIANT_INFIX,
    ResolverSettings,
)
from mp_devconfig.kernel.errors import CompanionPackageError


@dataclasses.dataclass(frozen=True)
class CompanionPackagePolicy:
    """How a module's package name is derived from the companion resource package.

    The companion package is the first system package handling
    ``resources_intent_action``.  Its name up to ``resources_package_domain``
    is the vendor prefix; the module name without ``module_domain`` is the
    suffix::

        prefix  = "com.prefix.android"     # from com.prefix.android.connectivity.resources
        suffix  = "tethering"              # from com.android.tethering
        primary = "com.prefix.android.tethering"
        variant = "com.prefix.android.go.tethering"
    """

    resources_intent_action: str = DEFAULT_RESOURCES_INTENT_ACTION
    resources_package_domain: str = DEFAULT_RESOURCES_PACKAGE_DOMAIN
    module_domain: str = DEFAULT_MODULE_DOMAIN
    variant_infix: str = DEFAULT_VARIANT_INFIX

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> "CompanionPackagePolicy":
        return cls(
            resources_intent_action=settings.resources_intent_action,
            resources_package_domain=settings.resources_package_domain,
            module_domain=settings.module_domain,
            variant_infix=settings.variant_infix,
        )

    def _split(self, resources_package: str, module_name: str) -> tuple[str, str]:
        cut = resources_package.find(self.resources_package_domain)
        if cut <= 0:
            raise CompanionPackageError(
                f"Companion package '{resources_package}' does not contain "
                f"'{self.resources_package_domain}'",
                detail={"resources_package": resources_package},
            )
        suffix = module_name
        if self.module_domain and module_name.startswith(self.module_domain):
            suffix = module_name[len(self.module_domain):]
        if not suffix:
            raise CompanionPackageError(
                f"Module name '{module_name}' has no package suffix",
                detail={"module_name": module_name},
            )
        return resources_package[:cut], suffix

    def module_package_name(self, resources_package: str, module_name: str) -> str:
        prefix, suffix = self._split(resources_package, module_name)
        return f"{prefix}.{suffix}"

    def variant_package_name(self, resources_package: str, module_name: str) -> str | None:
        """Alternate-build package name, or ``None`` when no variant is configured."""
        infix = self.variant_infix.strip(".")
        if not infix:
            return None
        prefix, suffix = self._split(resources_package, module_name)
        return f"{prefix}.{infix}.{suffix}"


@dataclasses.dataclass(frozen=True)
class GatePolicy:
    """Feature-gate evaluation rules.

    ``zero_defers_to_default``: a flag value of ``0`` means "not configured"
    and yields ``default_enabled``.  When ``False``, ``0`` is compared like any
    other minimum version and therefore always enables the feature.
    """

    zero_defers_to_default: bool = True
    companion: CompanionPackagePolicy = dataclasses.field(default_factory=CompanionPackagePolicy)

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> "GatePolicy":
        return cls(
            zero_defers_to_default=settings.zero_defers_to_default,
            companion=CompanionPackagePolicy.from_settings(settings),
        )


__all__ = ["CompanionPackagePolicy", "GatePolicy"]

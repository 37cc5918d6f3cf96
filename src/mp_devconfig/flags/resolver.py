"""Flags – FlagResolver.

Reads namespaced flags from a :class:`~mp_devconfig.ports.ConfigStore`,
evaluates minimum-version feature gates against installed packages and reads
resource-bundle fallbacks.  Every lookup or parse failure resolves to the
caller's default; nothing in this module raises for a missing value.
"""
from __future__ import annotations

from mp_devconfig.flags.cache import PackageVersionCache
from mp_devconfig.flags.parsing import parse_bool, parse_int
from mp_devconfig.flags.policy import GatePolicy
from mp_devconfig.kernel.errors import (
    CompanionPackageError,
    FlagParseError,
    PackageNotFoundError,
    ResourceNotFoundError,
)
from mp_devconfig.observability.logging import get_logger
from mp_devconfig.ports import MATCH_APEX, ConfigStore, Context, PackageManager

logger = get_logger(__name__)

# A resolver serves one application; its own package is cached without a name.
OWN_PACKAGE_IDENTITY = "package:<self>"


class FlagResolver:
    """Resolve flags and version gates with default substitution.

    Parameters
    ----------
    config_store:
        Source of raw flag values.
    policy:
        Gate and companion-package rules; defaults to :class:`GatePolicy`.
    cache:
        Version cache shared by :meth:`is_feature_enabled` calls.  Pass one
        explicitly to share it between resolvers.

    A resolver serves one application: the caller's own package version is
    cached under :data:`OWN_PACKAGE_IDENTITY`, so ``context.package_name`` is
    read only until the first successful lookup.

    Usage::

        resolver = FlagResolver(EnvConfigStore())
        timeout = resolver.get_int_flag("connectivity", "probe_timeout_ms", 5000, minimum=100, maximum=60000)
        if resolver.is_feature_enabled(ctx, "connectivity", "new_probe", module_name="com.android.tethering"):
            ...
    """

    def __init__(
        self,
        config_store: ConfigStore,
        *,
        policy: GatePolicy | None = None,
        cache: PackageVersionCache | None = None,
    ) -> None:
        self._store = config_store
        self._policy = policy or GatePolicy()
        self._cache = cache if cache is not None else PackageVersionCache()

    @property
    def policy(self) -> GatePolicy:
        return self._policy

    @property
    def cache(self) -> PackageVersionCache:
        return self._cache

    def clear_cache(self) -> None:
        self._cache.clear()

    # ------------------------------------------------------------------
    # Config store flags
    # ------------------------------------------------------------------

    def get_flag(self, namespace: str, key: str, default: str | None = None) -> str | None:
        value = self._store.get_property(namespace, key)
        return default if value is None else value

    def get_int_flag(
        self,
        namespace: str,
        key: str,
        default: int,
        *,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        """Return the flag as an int, or *default* if absent, malformed or out of bounds.

        Bounds are inclusive; a bound left as ``None`` is open.
        """
        raw = self._store.get_property(namespace, key)
        if raw is None:
            return default
        try:
            value = parse_int(raw)
        except FlagParseError as exc:
            logger.error(
                "flag_parse_failed",
                namespace=namespace,
                key=key,
                raw=raw,
                error=exc.message,
            )
            return default
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            logger.debug(
                "flag_out_of_bounds",
                namespace=namespace,
                key=key,
                value=value,
                minimum=minimum,
                maximum=maximum,
            )
            return default
        return value

    def get_boolean_flag(self, namespace: str, key: str, default: bool) -> bool:
        raw = self._store.get_property(namespace, key)
        if raw is None:
            return default
        return parse_bool(raw)

    # ------------------------------------------------------------------
    # Feature gates
    # ------------------------------------------------------------------

    def is_feature_enabled(
        self,
        context: Context,
        namespace: str,
        key: str,
        *,
        module_name: str | None = None,
        default_enabled: bool = False,
    ) -> bool:
        """Return whether the installed package meets the flag's minimum version.

        The package is the caller's own (``context.package_name``) unless
        *module_name* is given, in which case the module package is derived
        from the companion resource package.  A package that cannot be found
        disables the feature whatever the flag says.  An absent flag yields
        *default_enabled*, as does ``0`` under the default policy.
        """
        try:
            version = self._package_version(context, module_name)
        except (PackageNotFoundError, CompanionPackageError) as exc:
            logger.warning(
                "package_not_found",
                namespace=namespace,
                key=key,
                module_name=module_name,
                error=exc.message,
            )
            return False

        raw = self._store.get_property(namespace, key)
        if raw is None:
            return default_enabled
        try:
            minimum_version = parse_int(raw)
        except FlagParseError as exc:
            logger.error("flag_parse_failed", namespace=namespace, key=key, raw=raw, error=exc.message)
            return default_enabled
        if minimum_version == 0 and self._policy.zero_defers_to_default:
            return default_enabled
        return version >= minimum_version

    def _package_version(self, context: Context, module_name: str | None) -> int:
        if module_name is None:
            return self._cache.get_or_load(
                OWN_PACKAGE_IDENTITY,
                lambda: self._load_package_version(context.package_manager, context.package_name),
            )
        return self._cache.get_or_load(
            f"module:{module_name}",
            lambda: self._load_module_version(context.package_manager, module_name),
        )

    @staticmethod
    def _load_package_version(package_manager: PackageManager, package_name: str) -> int:
        version = package_manager.get_package_info(package_name).version_code
        logger.debug("package_version_cached", package_name=package_name, version_code=version)
        return version

    def _load_module_version(self, package_manager: PackageManager, module_name: str) -> int:
        companion = self._policy.companion
        resources_package = self._companion_package(package_manager)
        package_name = companion.module_package_name(resources_package, module_name)
        try:
            version = package_manager.get_package_info(package_name, MATCH_APEX).version_code
        except PackageNotFoundError:
            variant = companion.variant_package_name(resources_package, module_name)
            if variant is None:
                raise
            logger.debug("module_package_variant_lookup", module_name=module_name, package_name=variant)
            package_name = variant
            version = package_manager.get_package_info(package_name, MATCH_APEX).version_code
        logger.debug(
            "package_version_cached",
            module_name=module_name,
            package_name=package_name,
            version_code=version,
        )
        return version

    def _companion_package(self, package_manager: PackageManager) -> str:
        action = self._policy.companion.resources_intent_action
        matches = package_manager.query_intent_activities(action, match_system_only=True)
        if not matches:
            logger.warning("companion_package_missing", action=action)
            raise CompanionPackageError(
                f"No system package handles '{action}'",
                detail={"action": action},
            )
        return matches[0].package_name

    # ------------------------------------------------------------------
    # Resource fallbacks
    # ------------------------------------------------------------------

    def get_res_boolean_config(self, context: Context, resource_id: int, default: bool) -> bool:
        try:
            return context.resources.get_boolean(resource_id)
        except ResourceNotFoundError:
            return default

    def get_res_integer_config(self, context: Context, resource_id: int, default: int) -> int:
        try:
            return context.resources.get_integer(resource_id)
        except ResourceNotFoundError:
            return default


__all__ = ["OWN_PACKAGE_IDENTITY", "FlagResolver"]

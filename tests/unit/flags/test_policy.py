"""Unit tests for CompanionPackagePolicy and GatePolicy."""

from __future__ import annotations

import pytest

from mp_devconfig.config import ResolverSettings
from mp_devconfig.flags import CompanionPackagePolicy, GatePolicy
from mp_devconfig.kernel.errors import CompanionPackageError

RESOURCES = "com.prefix.android.connectivity.resources"


class TestCompanionPackagePolicy:
    def test_module_package_name(self) -> None:
        policy = CompanionPackagePolicy()
        assert policy.module_package_name(RESOURCES, "com.android.tethering") == (
            "com.prefix.android.tethering"
        )

    def test_variant_package_name(self) -> None:
        policy = CompanionPackagePolicy()
        assert policy.variant_package_name(RESOURCES, "com.android.tethering") == (
            "com.prefix.android.go.tethering"
        )

    def test_no_variant_when_infix_empty(self) -> None:
        policy = CompanionPackagePolicy(variant_infix="")
        assert policy.variant_package_name(RESOURCES, "com.android.tethering") is None

    def test_module_without_domain_used_verbatim(self) -> None:
        policy = CompanionPackagePolicy()
        assert policy.module_package_name(RESOURCES, "wifi") == "com.prefix.android.wifi"

    def test_custom_domains(self) -> None:
        policy = CompanionPackagePolicy(
            resources_package_domain=".overlay",
            module_domain="org.example.",
            variant_infix="lite",
        )
        assert policy.module_package_name("net.vendor.overlay", "org.example.dns") == "net.vendor.dns"
        assert policy.variant_package_name("net.vendor.overlay", "org.example.dns") == (
            "net.vendor.lite.dns"
        )

    def test_resources_package_without_domain_raises(self) -> None:
        with pytest.raises(CompanionPackageError):
            CompanionPackagePolicy().module_package_name("com.vendor.other", "com.android.tethering")

    def test_empty_module_suffix_raises(self) -> None:
        with pytest.raises(CompanionPackageError):
            CompanionPackagePolicy().module_package_name(RESOURCES, "com.android.")

    def test_frozen(self) -> None:
        policy = CompanionPackagePolicy()
        with pytest.raises((AttributeError, TypeError)):
            policy.variant_infix = "x"  # type: ignore[misc]


class TestGatePolicy:
    def test_defaults(self) -> None:
        policy = GatePolicy()
        assert policy.zero_defers_to_default is True
        assert policy.companion == CompanionPackagePolicy()

    def test_from_settings(self) -> None:
        settings = ResolverSettings(
            resources_intent_action="org.example.RESOURCES",
            variant_infix="",
            zero_defers_to_default=False,
        )
        policy = GatePolicy.from_settings(settings)
        assert policy.zero_defers_to_default is False
        assert policy.companion.resources_intent_action == "org.example.RESOURCES"
        assert policy.companion.variant_infix == ""

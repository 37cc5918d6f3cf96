"""Unit tests for config store adapters and SimpleContext."""

from __future__ import annotations

import pytest

from mp_devconfig.adapters import EnvConfigStore, InMemoryConfigStore, SimpleContext
from mp_devconfig.flags import FlagResolver
from mp_devconfig.ports import ConfigStore
from mp_devconfig.testing.fakes import FakePackageManager, FakeResources


# ---------------------------------------------------------------------------
# InMemoryConfigStore
# ---------------------------------------------------------------------------


class TestInMemoryConfigStore:
    def test_is_config_store(self) -> None:
        assert isinstance(InMemoryConfigStore(), ConfigStore)

    def test_absent_is_none(self) -> None:
        assert InMemoryConfigStore().get_property("connectivity", "flag") is None

    def test_set_and_get(self) -> None:
        store = InMemoryConfigStore()
        store.set_property("connectivity", "flag", "28")
        assert store.get_property("connectivity", "flag") == "28"

    def test_namespaces_are_isolated(self) -> None:
        store = InMemoryConfigStore({"a": {"flag": "1"}, "b": {"flag": "2"}})
        assert store.get_property("a", "flag") == "1"
        assert store.get_property("b", "flag") == "2"

    def test_delete(self) -> None:
        store = InMemoryConfigStore({"a": {"flag": "1"}})
        store.delete_property("a", "flag")
        store.delete_property("a", "never_set")
        assert store.get_property("a", "flag") is None

    def test_namespace_snapshot(self) -> None:
        store = InMemoryConfigStore({"a": {"x": "1", "y": "2"}, "b": {"z": "3"}})
        assert store.namespace("a") == {"x": "1", "y": "2"}


# ---------------------------------------------------------------------------
# EnvConfigStore
# ---------------------------------------------------------------------------


class TestEnvConfigStore:
    def test_variable_name(self) -> None:
        store = EnvConfigStore()
        assert store.variable_name("connectivity", "experiment_flag") == (
            "DEVCONFIG__CONNECTIVITY__EXPERIMENT_FLAG"
        )

    def test_variable_name_sanitises(self) -> None:
        store = EnvConfigStore(prefix="app")
        assert store.variable_name("net-stack", "probe.timeout") == "APP__NET_STACK__PROBE_TIMEOUT"

    def test_variable_name_without_prefix(self) -> None:
        assert EnvConfigStore(prefix="").variable_name("ns", "k") == "NS__K"

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCONFIG__CONNECTIVITY__EXPERIMENT_FLAG", "28")
        assert EnvConfigStore().get_property("connectivity", "experiment_flag") == "28"

    def test_absent_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DEVCONFIG__CONNECTIVITY__MISSING", raising=False)
        assert EnvConfigStore().get_property("connectivity", "missing") is None

    def test_explicit_mapping(self) -> None:
        store = EnvConfigStore(environ={"DEVCONFIG__NS__FLAG": ""})
        assert store.get_property("ns", "flag") == ""

    def test_drives_resolver(self) -> None:
        store = EnvConfigStore(environ={"DEVCONFIG__NS__TIMEOUT": "250"})
        resolver = FlagResolver(store)
        assert resolver.get_int_flag("ns", "timeout", 100, minimum=100, maximum=1000) == 250


# ---------------------------------------------------------------------------
# SimpleContext
# ---------------------------------------------------------------------------


class TestSimpleContext:
    def test_exposes_ports(self) -> None:
        pm = FakePackageManager().install("app.pkg", 5)
        res = FakeResources().set_integer(1, 9)
        ctx = SimpleContext("app.pkg", pm, res)
        assert ctx.package_name == "app.pkg"
        assert ctx.package_manager is pm
        assert ctx.resources is res

    def test_feature_gate_through_simple_context(self) -> None:
        ctx = SimpleContext("app.pkg", FakePackageManager().install("app.pkg", 5), FakeResources())
        resolver = FlagResolver(InMemoryConfigStore({"ns": {"gate": "5"}}))
        assert resolver.is_feature_enabled(ctx, "ns", "gate") is True

"""Tests for PluginManager: registration, hook relay, and variant collection."""

from __future__ import annotations

import logging

import pluggy
import pytest

from incrctl.adapters.registry import OperandRegistry, VariantSpec
from incrctl.domain.dispatch import increment
from incrctl.domain.operands import NumericOperand
from incrctl.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("incrctl")


class _HalfOperand:
    def __init__(self, raw: object) -> None:
        self.value = float(raw) / 2  # type: ignore[arg-type]

    def combine(self, increment: float) -> float:
        return self.value + increment


class _HalfPlugin:
    @hookimpl
    def register_operand_variants(self) -> list[VariantSpec]:
        return [VariantSpec("half", _HalfOperand, "Half of the input")]


class _ConflictingPlugin:
    @hookimpl
    def register_operand_variants(self) -> list[VariantSpec]:
        return [VariantSpec("numeric", _HalfOperand)]


class _RaisingPlugin:
    @hookimpl
    def register_operand_variants(self) -> list[VariantSpec]:
        raise RuntimeError("plugin exploded")


class _BadReturnPlugin:
    @hookimpl
    def register_operand_variants(self) -> dict[str, object]:
        return {"half": _HalfOperand}


class _NonePlugin:
    @hookimpl
    def register_operand_variants(self) -> None:
        return None


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "register_operand_variants")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_HalfPlugin(), name="half")
        assert "half" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_HalfPlugin())
        assert "_HalfPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _HalfPlugin()
        pm.register_plugin(plugin, name="half")
        pm.unregister(plugin)
        assert "half" not in pm.list_plugin_names()
        assert pm.get_plugins() == []

    def test_register_builtins_idempotent(self) -> None:
        pm = PluginManager()
        pm.register_builtins()
        pm.register_builtins()
        assert pm.list_plugin_names() == ["rational"]

    def test_is_loaded_after_discover(self) -> None:
        pm = PluginManager()
        assert pm.is_loaded is False
        pm.discover_and_load(entry_points=False)
        assert pm.is_loaded is True

    def test_broken_entry_point_is_warning(
        self, broken_entry_point: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_builtins()
        with caplog.at_level(logging.WARNING, logger="incrctl.plugins.manager"):
            names = pm.discover_and_load()
        assert pm.is_loaded is True
        assert broken_entry_point not in names
        assert "rational" in names
        assert "Failed to load entry-point plugins" in caplog.text

    def test_discover_with_entry_points_does_not_fail(self) -> None:
        pm = PluginManager()
        pm.discover_and_load()
        assert pm.is_loaded is True


class TestCollectVariants:
    def test_adds_plugin_variant(self, registry: OperandRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_HalfPlugin(), name="half")
        added = pm.collect_variants(registry)
        assert added == ["half"]
        assert increment(registry.adapt("half", "8")) == 5.0

    def test_builtin_rational_plugin(self, registry: OperandRegistry) -> None:
        pm = PluginManager()
        pm.register_builtins()
        assert pm.collect_variants(registry) == ["rational"]
        assert "rational" in registry

    def test_disabled_tags_skipped(self, registry: OperandRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_HalfPlugin(), name="half")
        assert pm.collect_variants(registry, disabled=["HALF"]) == []
        assert "half" not in registry

    def test_conflict_is_warning(
        self, registry: OperandRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_ConflictingPlugin(), name="conflict")
        with caplog.at_level(logging.WARNING, logger="incrctl.plugins.manager"):
            assert pm.collect_variants(registry) == []
        assert "Skipping variant registration" in caplog.text
        assert registry.adapt("numeric", 1) == NumericOperand(1)

    def test_raising_plugin_is_warning(
        self, registry: OperandRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_RaisingPlugin(), name="raising")
        pm.register_plugin(_HalfPlugin(), name="half")
        with caplog.at_level(logging.WARNING, logger="incrctl.plugins.manager"):
            added = pm.collect_variants(registry)
        assert added == ["half"]
        assert "Failed to collect operand variants" in caplog.text

    def test_non_list_return_is_warning(
        self, registry: OperandRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()
        pm.register_plugin(_BadReturnPlugin(), name="bad")
        with caplog.at_level(logging.WARNING, logger="incrctl.plugins.manager"):
            assert pm.collect_variants(registry) == []
        assert "non-list" in caplog.text

    def test_none_return_is_ignored(self, registry: OperandRegistry) -> None:
        pm = PluginManager()
        pm.register_plugin(_NonePlugin(), name="none")
        assert pm.collect_variants(registry) == []

    def test_sealed_registry_rejects_late_plugins(
        self, registry: OperandRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry.seal()
        pm = PluginManager()
        pm.register_plugin(_HalfPlugin(), name="half")
        with caplog.at_level(logging.WARNING, logger="incrctl.plugins.manager"):
            assert pm.collect_variants(registry) == []
        assert "half" not in registry

"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery (``.incrctl/plugins/`` by default).
Capabilities: contributing operand variants to the registry.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import pluggy

from incrctl.plugins.hookspecs import IncrctlHookSpec

if TYPE_CHECKING:
    from incrctl.adapters.registry import OperandRegistry

PROJECT_NAME = "incrctl"
ENTRY_POINT_GROUP = "incrctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and variant collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(IncrctlHookSpec)
        self._loaded: bool = False

    def register_builtins(self) -> None:
        """Register the plugins shipped with incrctl."""
        from incrctl.plugins.builtins.rational import RationalPlugin

        if self._pm.get_plugin("rational") is None:
            self.register_plugin(RationalPlugin(), name="rational")

    def discover_and_load(
        self,
        *,
        local_dir: Path | None = None,
        entry_points: bool = True,
    ) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Uses pluggy's native setuptools entry_point discovery for the
        ``incrctl.plugins`` group, then scans *local_dir* for single-file
        Python plugins.

        Returns a list of loaded plugin names.
        """
        if entry_points:
            try:
                self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            except Exception:
                logger.warning(
                    "Failed to load entry-point plugins from %s",
                    ENTRY_POINT_GROUP,
                    exc_info=True,
                )
            self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Variant collection
    # ------------------------------------------------------------------

    def collect_variants(
        self,
        registry: OperandRegistry,
        *,
        disabled: Iterable[str] = (),
    ) -> list[str]:
        """Register every plugin-provided variant into *registry*.

        Each plugin is asked separately so that one faulty plugin cannot
        block the others. Tags in *disabled* are skipped.

        Returns the tags that were registered.
        """
        skip = {tag.strip().lower() for tag in disabled}
        added: list[str] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            added.extend(self._collect_plugin_variants(plugin, plugin_name, registry, skip))
        return added

    @staticmethod
    def _collect_plugin_variants(
        plugin: object,
        plugin_name: str,
        registry: OperandRegistry,
        skip: set[str],
    ) -> list[str]:
        """Register the variants exposed by a single plugin instance."""
        from incrctl.adapters.registry import RegistrationError, VariantSpec

        hook = getattr(plugin, "register_operand_variants", None)
        if hook is None:
            return []

        try:
            specs = hook()
        except Exception:
            logger.warning(
                "Failed to collect operand variants from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return []

        if specs is None:
            return []
        if not isinstance(specs, list):
            logger.warning("Plugin %s returned non-list variant registrations", plugin_name)
            return []

        added: list[str] = []
        for spec in specs:
            if not isinstance(spec, VariantSpec):
                logger.warning("Plugin %s returned a non-VariantSpec entry: %r", plugin_name, spec)
                continue
            if spec.tag.strip().lower() in skip:
                logger.debug("Skipping disabled variant %s from plugin %s", spec.tag, plugin_name)
                continue
            try:
                registry.register(spec)
            except RegistrationError:
                logger.warning(
                    "Skipping variant registration %r from plugin %s",
                    spec.tag,
                    plugin_name,
                    exc_info=True,
                )
                continue
            added.append(spec.tag)
        return added

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module. Classes defined in the module that carry pluggy
        hookimpl-decorated methods are instantiated and registered.

        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"incrctl_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue  # imported, not defined here
                if not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook
        dispatch against class objects leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("incrctl")`` sets an ``incrctl_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "incrctl_impl", None):
                return True
        return False

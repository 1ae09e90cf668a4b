"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.wallclock/plugins/``.
Capabilities: extra temporal fields and units.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import Any

import pluggy

from wallclock.domain import registry
from wallclock.plugins.hookspecs import WallclockHookSpec

PROJECT_NAME = "wallclock"
ENTRY_POINT_GROUP = "wallclock.plugins"

logger = logging.getLogger(__name__)

# (hook name, registry function) pairs
_REGISTRATIONS = (
    ("register_fields", registry.register_field),
    ("register_units", registry.register_unit),
)


class PluginManager:
    """Manages plugin discovery, loading, and registry population."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(WallclockHookSpec)
        self._loaded: bool = False
        self.warnings: list[str] = []

    def discover_and_load(
        self,
        *,
        local_dir: Path | None = None,
        entry_points: bool = True,
    ) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Uses pluggy's setuptools entry_point discovery for the
        ``wallclock.plugins`` group (unless *entry_points* is False), then
        scans *local_dir* for single-file Python plugins, then registers
        every field and unit contributed by any registered plugin.

        Returns a list of loaded plugin names.
        """
        if entry_points:
            try:
                self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            except Exception:
                self._warn("Failed to load entry-point plugins", exc_info=True)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        for plugin in self._pm.get_plugins():
            self._register_extensions(plugin, self._name_of(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._register_extensions(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
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
        return [self._name_of(p) for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module.  Classes defined in the module that carry hookimpl-decorated
        methods are instantiated and registered.

        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"wallclock_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    self._warn(f"Could not create module spec for {py_file}")
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                self._warn(f"Failed to load local plugin {py_file}", exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self._pm.register(obj(), name=f"{module_name}.{obj.__name__}")
                    logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)
                except Exception:
                    self._warn(
                        f"Failed to instantiate plugin class {obj.__name__} from {py_file}",
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly; hook calls
        against a class leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._name_of(plugin)
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                self._warn(f"Failed to instantiate entry-point plugin {plugin_name}", exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    # ------------------------------------------------------------------
    # Registry population
    # ------------------------------------------------------------------

    def _register_extensions(self, plugin: object, plugin_name: str) -> None:
        """Register the fields and units exposed by a single plugin instance."""
        for hook_name, register in _REGISTRATIONS:
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue
            try:
                mapping: Any = hook()
            except Exception:
                self._warn(f"Plugin {plugin_name} failed in {hook_name}", exc_info=True)
                continue
            if mapping is None:
                continue
            if not isinstance(mapping, dict):
                self._warn(f"Plugin {plugin_name} returned a non-dict from {hook_name}")
                continue
            for name, descriptor in mapping.items():
                try:
                    register(name, descriptor)
                except ValueError as exc:
                    self._warn(f"Skipping {name!r} from plugin {plugin_name}: {exc}")

    def _warn(self, message: str, *, exc_info: bool = False) -> None:
        logger.warning(message, exc_info=exc_info)
        self.warnings.append(message)

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or getattr(plugin, "__name__", plugin.__class__.__name__)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        ``HookimplMarker("wallclock")`` sets a ``wallclock_impl`` attribute
        on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "wallclock_impl", None):
                return True
        return False

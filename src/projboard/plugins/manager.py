"""Plugin discovery, loading, and hook dispatch.

Discovery: entry points (pip-installed) via pluggy's setuptools loader,
plus single-file plugins from a local directory (``.projboard/plugins/``).
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pluggy

from projboard.plugins.hookspecs import PROJECT_NAME, BoardHookSpec

if TYPE_CHECKING:
    from projboard.domain.project import Project
    from projboard.infrastructure.store import ProjectStore

ENTRY_POINT_GROUP = "projboard.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, registration, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(BoardHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then single-file plugins from *local_dir*.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        if local_dir is not None:
            self._discover_local(local_dir)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, hook_name: str, **payload: Any) -> bool:
        """Call *hook_name* on every plugin, one at a time.

        A plugin that raises is logged and skipped; the remaining plugins
        still run. Returns False if any plugin failed.
        """
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            return True
        all_ok = True
        for impl in hook_fn.get_hookimpls():
            kwargs = {arg: payload[arg] for arg in impl.argnames if arg in payload}
            try:
                impl.function(**kwargs)
            except Exception:
                logger.warning(
                    "Plugin %s failed in hook %s", impl.plugin_name, hook_name, exc_info=True
                )
                all_ok = False
        return all_ok

    def attach(self, store: ProjectStore) -> None:
        """Subscribe to *store* so every notification reaches ``projects_changed``."""

        def _forward(projects: list[Project]) -> None:
            self.dispatch("projects_changed", projects=[p.to_dict() for p in projects])

        store.subscribe(_forward)

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load each ``*.py`` in *local_dir* and register its hook classes.

        Files starting with ``_`` are skipped. A broken plugin is logged and
        skipped; it never stops the board from starting.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"projboard_local_plugin_{py_file.stem}"
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
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
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

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """True if *cls* has a method marked with ``@hookimpl``.

        Pluggy's ``HookimplMarker("projboard")`` sets a ``projboard_impl``
        attribute on decorated functions.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False

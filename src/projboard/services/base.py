"""BaseService — shared foundation for board services.

Every service receives the application's :class:`ProjectStore` at
construction time, plus the optional :class:`PluginManager`. The store is
the single source of truth; services never keep their own copies of
project data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from projboard.infrastructure.store import ProjectStore
    from projboard.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BoardService(BaseService):
            def submit_project(self, ...) -> ServiceResult:
                project = self._store.create(...)
                ...
    """

    def __init__(self, store: ProjectStore, *, plugins: PluginManager | None = None) -> None:
        self._store = store
        self._plugins = plugins

    @property
    def store(self) -> ProjectStore:
        return self._store

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Fire a plugin hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        if not self._plugins.dispatch(hook_name, **payload):
            logger.debug("Plugin dispatch reported failures for %s", hook_name)
            warnings.append(f"Plugin hook {hook_name} failed")

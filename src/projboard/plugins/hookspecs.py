"""Pluggy hook specifications for board events.

``projects_changed`` mirrors a store notification: it fires after every
accepted mutation with the full project list. ``post_create`` and
``post_move`` fire from the board service after a successful operation.
Payloads are plain JSON-friendly dicts, never live Project objects.
"""

from __future__ import annotations

from typing import Any

import pluggy

PROJECT_NAME = "projboard"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class BoardHookSpec:
    """Hook specifications for the projboard plugin system."""

    @hookspec
    def projects_changed(self, projects: list[dict[str, Any]]) -> None:
        """Called with the full ordered project list after each mutation."""

    @hookspec
    def post_create(self, project: dict[str, Any]) -> None:
        """Called after a validated project was added to the board."""

    @hookspec
    def post_move(self, project_id: str, status: str) -> None:
        """Called after a drop changed a project's status."""

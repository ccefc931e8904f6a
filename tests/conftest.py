"""Shared pytest fixtures and test helpers for projboard tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from projboard.domain.project import Project
from projboard.infrastructure.store import ProjectStore
from projboard.services.board import BoardService


class Recorder:
    """Observer that records every notification it receives."""

    def __init__(self) -> None:
        self.calls: list[list[Project]] = []

    def __call__(self, projects: list[Project]) -> None:
        self.calls.append(projects)

    @property
    def last(self) -> list[Project]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    board = logging.getLogger("projboard")
    board_level = board.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    board.setLevel(board_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> ProjectStore:
    return ProjectStore()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def service(store: ProjectStore) -> BoardService:
    """BoardService with the default form rules."""
    return BoardService(store)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command tests.
    """
    monkeypatch.delenv("PROJBOARD_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def submit(service: BoardService, title: str, description: str, people: Any) -> dict[str, Any]:
    """Submit a project via BoardService, asserting success."""
    result = service.submit_project(title, description, people)
    assert result.ok, result.error
    return result.data

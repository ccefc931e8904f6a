"""Tests for BoardService — the validated input boundary."""

from __future__ import annotations

import pytest

from projboard.config.models import TitleRules, ValidationConfig
from projboard.domain.drag import DragTransfer
from projboard.domain.types import ProjectStatus
from projboard.infrastructure.store import ProjectStore
from projboard.services.board import INVALID_INPUT_MESSAGE, BoardService
from tests.conftest import Recorder, submit


class TestSubmitProject:
    def test_valid_submission_creates_project(
        self, service: BoardService, store: ProjectStore
    ) -> None:
        result = service.submit_project("Build API", "Design REST endpoints", "3")
        assert result.ok
        assert result.op == "create_project"
        assert result.data["status"] == "active"
        assert result.data["people_count"] == 3
        assert len(store) == 1

    def test_fields_are_trimmed(self, service: BoardService) -> None:
        data = submit(service, "  Build API  ", "  Design  ", " 2 ")
        assert data["title"] == "Build API"
        assert data["description"] == "Design"

    @pytest.mark.parametrize(
        ("title", "description", "people", "field", "constraint"),
        [
            ("API", "desc", "3", "title", "min_length"),
            ("x" * 41, "desc", "3", "title", "max_length"),
            ("", "desc", "3", "title", "required"),
            ("Write docs", "", "1", "description", "required"),
            ("Write docs", "d" * 141, "1", "description", "max_length"),
            ("Write docs", "desc", "", "people", "required"),
            ("Write docs", "desc", "0", "people", "min"),
            ("Write docs", "desc", "11", "people", "max"),
            ("Write docs", "desc", "many", "people", "required"),
        ],
    )
    def test_invalid_submission_is_rejected(
        self,
        service: BoardService,
        store: ProjectStore,
        recorder: Recorder,
        title: str,
        description: str,
        people: str,
        field: str,
        constraint: str,
    ) -> None:
        store.subscribe(recorder)
        result = service.submit_project(title, description, people)

        assert not result.ok
        assert result.op == "create_project"
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert result.error.message == INVALID_INPUT_MESSAGE
        assert constraint in result.error.detail["fields"][field]
        assert len(store) == 0
        assert recorder.calls == []

    def test_custom_rules(self, store: ProjectStore) -> None:
        rules = ValidationConfig(title=TitleRules(min_length=2))
        service = BoardService(store, rules)
        assert service.submit_project("Go", "desc", "1").ok

    def test_optional_people_without_value(self, store: ProjectStore) -> None:
        from projboard.config.models import PeopleRules

        rules = ValidationConfig(people=PeopleRules(required=False))
        service = BoardService(store, rules)
        result = service.submit_project("Write docs", "desc", "")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["fields"]["people"] == ["integer"]
        assert len(store) == 0


class TestCheckSubmission:
    def test_valid(self, service: BoardService, store: ProjectStore) -> None:
        result = service.check_submission("Build API", "Design", "3")
        assert result.ok
        assert result.data == {"valid": True}
        assert len(store) == 0

    def test_invalid_names_every_field(self, service: BoardService) -> None:
        result = service.check_submission("API", "", "0")
        assert not result.ok
        assert result.error is not None
        assert set(result.error.detail["fields"]) == {"title", "description", "people"}


class TestDropProject:
    def test_drop_moves_project(self, service: BoardService, store: ProjectStore) -> None:
        pid = submit(service, "Build API", "Design", 3)["id"]
        result = service.drop_project(DragTransfer.for_project(pid), ProjectStatus.FINISHED)
        assert result.ok
        assert result.data == {"id": pid, "status": "finished", "changed": True}
        assert store.get(pid).status is ProjectStatus.FINISHED

    def test_redundant_drop_is_unchanged(self, service: BoardService) -> None:
        pid = submit(service, "Build API", "Design", 3)["id"]
        result = service.drop_project(DragTransfer.for_project(pid), ProjectStatus.ACTIVE)
        assert result.ok
        assert result.data["changed"] is False

    def test_unknown_id_is_unchanged(self, service: BoardService) -> None:
        result = service.drop_project(
            DragTransfer.for_project("prj_missing00000"), ProjectStatus.FINISHED
        )
        assert result.ok
        assert result.data["changed"] is False

    def test_non_text_transfer_fails(self, service: BoardService) -> None:
        transfer = DragTransfer(mime_type="application/json", data="{}")
        result = service.drop_project(transfer, ProjectStatus.FINISHED)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TRANSFER"


class TestListProjects:
    def test_lists_in_insertion_order(self, service: BoardService) -> None:
        first = submit(service, "First project", "d", 1)["id"]
        second = submit(service, "Second project", "d", 2)["id"]
        service.drop_project(DragTransfer.for_project(first), ProjectStatus.FINISHED)

        everything = service.list_projects()
        assert [p["id"] for p in everything.data["items"]] == [first, second]
        assert everything.data["count"] == 2

        finished = service.list_projects(ProjectStatus.FINISHED)
        assert [p["id"] for p in finished.data["items"]] == [first]

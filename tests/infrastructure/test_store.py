"""Tests for ProjectStore — ordered storage, transitions, observer fan-out."""

from __future__ import annotations

import itertools
import logging

import pytest

from projboard.domain.ids import validate_id
from projboard.domain.project import Project
from projboard.domain.types import ProjectStatus
from projboard.infrastructure.store import ProjectStore
from tests.conftest import Recorder


class TestCreate:
    def test_appends_active_project(self, store: ProjectStore) -> None:
        project = store.create("Build API", "Design REST endpoints", 3)
        assert len(store) == 1
        assert project.status is ProjectStatus.ACTIVE
        assert validate_id(project.id)
        assert store.projects == [project]

    def test_notifies_each_observer_once_with_new_entry_last(
        self, store: ProjectStore, recorder: Recorder
    ) -> None:
        second = Recorder()
        store.create("First one", "first", 1)
        store.subscribe(recorder)
        store.subscribe(second)

        project = store.create("Second one", "second", 2)

        assert len(recorder.calls) == 1
        assert len(second.calls) == 1
        assert recorder.last[-1] is project
        assert [p.title for p in recorder.last] == ["First one", "Second one"]

    def test_subscribe_does_not_invoke(self, store: ProjectStore, recorder: Recorder) -> None:
        store.create("Build API", "x", 1)
        store.subscribe(recorder)
        assert recorder.calls == []

    def test_stores_unvalidated_values(self, store: ProjectStore) -> None:
        project = store.create("", "", 0)
        assert project.title == ""
        assert project.people_count == 0
        assert len(store) == 1

    def test_insertion_order_is_stable(self, store: ProjectStore) -> None:
        titles = [f"Project {i}" for i in range(5)]
        for title in titles:
            store.create(title, "d", 1)
        assert [p.title for p in store.projects] == titles
        assert [p.title for p in store.projects] == titles

    def test_ids_are_unique(self, store: ProjectStore) -> None:
        ids = [store.create(f"Project {i}", "d", 1).id for i in range(50)]
        assert len(set(ids)) == 50

    def test_colliding_id_is_regenerated(self) -> None:
        sequence = itertools.chain(["prj_aaaaaaaaaaaa"] * 3, ["prj_bbbbbbbbbbbb"])
        store = ProjectStore(id_factory=lambda: next(sequence))
        first = store.create("First one", "d", 1)
        second = store.create("Second one", "d", 1)
        assert first.id == "prj_aaaaaaaaaaaa"
        assert second.id == "prj_bbbbbbbbbbbb"


class TestTransition:
    def test_unknown_id_is_silent_noop(self, store: ProjectStore, recorder: Recorder) -> None:
        project = store.create("Build API", "d", 3)
        before = project.to_dict()
        store.subscribe(recorder)

        assert store.transition("prj_missing00000", ProjectStatus.FINISHED) is False

        assert recorder.calls == []
        assert len(store) == 1
        assert store.projects[0].to_dict() == before

    @pytest.mark.parametrize("status", list(ProjectStatus))
    def test_same_status_is_noop(
        self, store: ProjectStore, recorder: Recorder, status: ProjectStatus
    ) -> None:
        project = store.create("Build API", "d", 3)
        if status is not ProjectStatus.ACTIVE:
            store.transition(project.id, status)
        store.subscribe(recorder)

        assert store.transition(project.id, status) is False
        assert store.transition(project.id, status) is False

        assert recorder.calls == []
        assert project.status is status

    def test_changes_only_target_project(self, store: ProjectStore, recorder: Recorder) -> None:
        keep = store.create("Keep active", "d", 1)
        move = store.create("Move along", "d", 2)
        store.subscribe(recorder)

        assert store.transition(move.id, ProjectStatus.FINISHED) is True

        assert len(recorder.calls) == 1
        by_id = {p.id: p for p in recorder.last}
        assert by_id[move.id].status is ProjectStatus.FINISHED
        assert by_id[keep.id].status is ProjectStatus.ACTIVE
        assert [p.id for p in store.projects] == [keep.id, move.id]

    def test_move_back_to_active(self, store: ProjectStore) -> None:
        project = store.create("Build API", "d", 3)
        store.transition(project.id, ProjectStatus.FINISHED)
        assert store.transition(project.id, ProjectStatus.ACTIVE) is True
        assert project.status is ProjectStatus.ACTIVE


class TestNotification:
    def test_registration_order_is_invocation_order(self, store: ProjectStore) -> None:
        order: list[str] = []
        store.subscribe(lambda _projects: order.append("first"))
        store.subscribe(lambda _projects: order.append("second"))
        store.create("Build API", "d", 1)
        assert order == ["first", "second"]

    def test_duplicate_registration_fires_twice(
        self, store: ProjectStore, recorder: Recorder
    ) -> None:
        store.subscribe(recorder)
        store.subscribe(recorder)
        store.create("Build API", "d", 1)
        assert len(recorder.calls) == 2

    def test_observers_get_defensive_copies(self, store: ProjectStore) -> None:
        received: list[list[Project]] = []

        def clobber(projects: list[Project]) -> None:
            received.append(projects)
            projects.clear()

        store.subscribe(clobber)
        store.subscribe(lambda projects: received.append(projects))
        store.create("Build API", "d", 1)

        assert len(store) == 1
        assert len(received[1]) == 1
        assert received[0] is not received[1]

    def test_projects_property_is_a_copy(self, store: ProjectStore) -> None:
        store.create("Build API", "d", 1)
        snapshot = store.projects
        snapshot.clear()
        assert len(store) == 1

    def test_failing_observer_is_isolated(
        self,
        store: ProjectStore,
        recorder: Recorder,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def explode(_projects: list[Project]) -> None:
            msg = "observer exploded"
            raise RuntimeError(msg)

        store.subscribe(explode)
        store.subscribe(recorder)

        with caplog.at_level(logging.WARNING, logger="projboard"):
            project = store.create("Build API", "d", 1)
            store.transition(project.id, ProjectStatus.FINISHED)

        assert len(recorder.calls) == 2
        assert project.status is ProjectStatus.FINISHED
        assert len(store) == 1
        assert any("explode" in r.getMessage() for r in caplog.records)


class TestQueries:
    def test_get(self, store: ProjectStore) -> None:
        project = store.create("Build API", "d", 1)
        assert store.get(project.id) is project
        assert store.get("prj_missing00000") is None

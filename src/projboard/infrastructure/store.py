"""ProjectStore — sole owner of project data with observer fan-out.

The store is constructed once by the composition root (``AppContext``)
and passed by reference to every component that needs it. It holds the
ordered project sequence and an ordered observer list. Every accepted
mutation notifies all observers, in registration order, with a fresh
copy of the sequence.

INVARIANT: Observer failures are warnings, never errors. A failing
observer neither blocks delivery to later observers nor undoes the
mutation that triggered the notification.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from projboard.domain.ids import generate_project_id
from projboard.domain.project import Project
from projboard.domain.types import ProjectStatus

logger = logging.getLogger(__name__)

Observer = Callable[[list[Project]], None]


def _observer_name(observer: Observer) -> str:
    return getattr(observer, "__qualname__", None) or repr(observer)


class ProjectStore:
    """Ordered, observable project collection.

    Observers registered more than once are invoked once per registration.
    There is no unsubscribe: observers live as long as the store.
    """

    def __init__(self, *, id_factory: Callable[[], str] = generate_project_id) -> None:
        self._projects: list[Project] = []
        self._observers: list[Observer] = []
        self._issued_ids: set[str] = set()
        self._id_factory = id_factory

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def projects(self) -> list[Project]:
        """Snapshot of the sequence in insertion order."""
        return list(self._projects)

    def get(self, project_id: str) -> Project | None:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def __len__(self) -> int:
        return len(self._projects)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> None:
        """Register *observer*. It is not invoked until the next mutation."""
        self._observers.append(observer)

    def create(self, title: str, description: str, people_count: int) -> Project:
        """Append a new ACTIVE project and notify observers.

        No validation happens here; callers validate at the input boundary.
        """
        project = Project(
            id=self._next_id(),
            title=title,
            description=description,
            people_count=people_count,
            status=ProjectStatus.ACTIVE,
        )
        self._projects.append(project)
        logger.debug("Created project %s", project.id)
        self._notify()
        return project

    def transition(self, project_id: str, new_status: ProjectStatus) -> bool:
        """Move a project to *new_status*.

        Unknown IDs and transitions to the current status are silent
        no-ops. Returns True only when the status actually changed.
        """
        project = self.get(project_id)
        if project is None:
            logger.debug("Transition ignored, unknown project %s", project_id)
            return False
        if project.status == new_status:
            logger.debug("Transition ignored, %s already %s", project_id, new_status.value)
            return False
        project.status = new_status
        logger.debug("Project %s moved to %s", project_id, new_status.value)
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _next_id(self) -> str:
        """Draw IDs until one has never been issued by this store."""
        while True:
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
            logger.debug("Project ID collision on %s, regenerating", candidate)

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(list(self._projects))
            except Exception:
                logger.warning(
                    "Observer %s failed during notification",
                    _observer_name(observer),
                    exc_info=True,
                )

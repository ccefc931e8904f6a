"""BoardService — the input boundary in front of the project store.

Form submissions are validated field by field before anything reaches
``ProjectStore.create``; the store itself never validates. Drops decode
the drag payload and hand the ID to ``ProjectStore.transition``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from projboard.domain.validation import failed_constraints, parse_people
from projboard.services.base import BaseService
from projboard.services.result import ServiceResult

if TYPE_CHECKING:
    from projboard.config.models import ValidationConfig
    from projboard.domain.drag import DragTransfer
    from projboard.domain.types import ProjectStatus
    from projboard.infrastructure.store import ProjectStore
    from projboard.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input, please try again!"


class BoardService(BaseService):
    """Validated project creation, drop handling, and listing."""

    def __init__(
        self,
        store: ProjectStore,
        rules: ValidationConfig | None = None,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(store, plugins=plugins)
        if rules is None:
            from projboard.config.models import ValidationConfig

            rules = ValidationConfig()
        self._rules = rules

    def _field_errors(
        self,
        title: str,
        description: str,
        people: str | int | None,
    ) -> dict[str, list[str]]:
        """Return ``{field: [failed constraint names]}`` for every invalid field."""
        values = {
            "title": title,
            "description": description,
            "people": parse_people(people),
        }
        errors: dict[str, list[str]] = {}
        for field, value in values.items():
            failed = failed_constraints(value, getattr(self._rules, field))
            if failed:
                errors[field] = failed
        return errors

    def check_submission(
        self,
        title: str,
        description: str,
        people: str | int | None,
    ) -> ServiceResult:
        """Validate a form submission without touching the store."""
        op = "check_project"
        errors = self._field_errors(title, description, people)
        if errors:
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                INVALID_INPUT_MESSAGE,
                detail={"fields": errors},
            )
        return ServiceResult.success(op, {"valid": True})

    def submit_project(
        self,
        title: str,
        description: str,
        people: str | int | None,
    ) -> ServiceResult:
        """Validate a form submission and create the project if it passes."""
        op = "create_project"
        checked = self.check_submission(title, description, people)
        if not checked.ok:
            logger.info("Rejected project submission: %s", checked.error)
            return checked.model_copy(update={"op": op})

        people_count = parse_people(people)
        if people_count is None:
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                INVALID_INPUT_MESSAGE,
                detail={"fields": {"people": ["integer"]}},
            )
        project = self._store.create(title.strip(), description.strip(), people_count)
        data = project.to_dict()
        warnings: list[str] = []
        self._dispatch_event("post_create", {"project": data}, warnings)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def drop_project(self, transfer: DragTransfer, status: ProjectStatus) -> ServiceResult:
        """Apply a drop of *transfer* onto the column for *status*.

        Unknown IDs and redundant moves succeed with ``changed=False``.
        """
        op = "move_project"
        project_id = transfer.project_id()
        if project_id is None:
            return ServiceResult.failure(
                op,
                "INVALID_TRANSFER",
                f"Cannot drop a {transfer.mime_type!r} payload on a project column",
                detail={"mime_type": transfer.mime_type},
            )

        changed = self._store.transition(project_id, status)
        warnings: list[str] = []
        if changed:
            self._dispatch_event(
                "post_move", {"project_id": project_id, "status": status.value}, warnings
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": project_id, "status": status.value, "changed": changed},
            warnings=warnings,
        )

    def list_projects(self, status: ProjectStatus | None = None) -> ServiceResult:
        """List projects in insertion order, optionally for one column."""
        projects = self._store.projects
        if status is not None:
            projects = [p for p in projects if p.status == status]
        items = [p.to_dict() for p in projects]
        return ServiceResult.success("list_projects", {"items": items, "count": len(items)})

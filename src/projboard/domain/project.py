"""Project model.

Projects are created only through ``ProjectStore.create`` and mutated only
through ``ProjectStore.transition``. Identity and content fields are frozen;
``status`` is the single mutable field and the store is its only writer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from projboard.domain.types import ProjectStatus


class Project(BaseModel):
    """A unit of work shown as a card on the board.

    Attributes:
        id: Opaque unique identity (``prj_`` + 12 hex), immutable.
        title: Short title.
        description: Free-text description.
        people_count: Number of people assigned.
        status: Column the card currently sits in.
    """

    id: str = Field(frozen=True)
    title: str = Field(frozen=True)
    description: str = Field(frozen=True)
    people_count: int = Field(frozen=True)
    status: ProjectStatus = ProjectStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly dict (status as its string value)."""
        return self.model_dump(mode="json")

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Project(id={self.id}, title={self.title!r}, status={self.status.value})"

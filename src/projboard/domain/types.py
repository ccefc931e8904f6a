"""Project status enum and column naming.

A board has exactly two columns, one per status. The internal value is
the lowercase key; the column header renders as ``"<KEY> PROJECTS"``.
"""

from __future__ import annotations

from enum import StrEnum


class ProjectStatus(StrEnum):
    """Lifecycle status of a project. Mutated only by the store."""

    ACTIVE = "active"
    FINISHED = "finished"

    @property
    def column_title(self) -> str:
        """Header text for the column bound to this status."""
        return f"{self.value.upper()} PROJECTS"


STATUS_ALIASES: dict[str, ProjectStatus] = {
    "a": ProjectStatus.ACTIVE,
    "active": ProjectStatus.ACTIVE,
    "f": ProjectStatus.FINISHED,
    "finished": ProjectStatus.FINISHED,
}


def parse_status(raw: str) -> ProjectStatus | None:
    """Resolve a status name or alias (case-insensitive). Unknown -> None."""
    return STATUS_ALIASES.get(raw.strip().lower())

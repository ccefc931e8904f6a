"""Drag transfer payload between a card and a column.

A card encodes exactly its project ID as ``text/plain``. A column only
accepts ``text/plain`` transfers and decodes the ID back on drop.
"""

from __future__ import annotations

from pydantic import BaseModel

TEXT_PLAIN = "text/plain"


class DragTransfer(BaseModel):
    """Immutable ``(mime_type, data)`` pair carried by a drag."""

    model_config = {"frozen": True}

    mime_type: str = TEXT_PLAIN
    data: str = ""

    @classmethod
    def for_project(cls, project_id: str) -> DragTransfer:
        return cls(mime_type=TEXT_PLAIN, data=project_id)

    @property
    def is_text(self) -> bool:
        return self.mime_type == TEXT_PLAIN

    def project_id(self) -> str | None:
        """Decode the carried project ID, or None if the payload is unusable."""
        if not self.is_text:
            return None
        text = self.data.strip()
        return text or None

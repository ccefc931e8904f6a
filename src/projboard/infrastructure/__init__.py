"""Infrastructure layer — the in-memory project store.

Infrastructure may import from domain. It must never import from
services, commands, or output.
"""

from projboard.infrastructure.store import Observer, ProjectStore

__all__ = ["Observer", "ProjectStore"]

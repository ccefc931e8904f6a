"""Board views — project cards and status columns rendered with Rich.

Views implement the :class:`View` capability interface and are composed,
not inherited. A :class:`ProjectColumn` subscribes to the store in
``configure()`` with a closure that captures the column itself, keeps the
projects matching its status from the latest notification, and forwards
drops to the board service with its own status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from projboard.domain.drag import DragTransfer
from projboard.domain.types import ProjectStatus
from projboard.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import RenderableType

    from projboard.domain.project import Project
    from projboard.services.board import BoardService
    from projboard.services.result import ServiceResult


class View(Protocol):
    def configure(self) -> None: ...

    def render_content(self) -> RenderableType: ...


def persons_label(count: int) -> str:
    return f"{count} {'person' if count == 1 else 'people'}"


class ProjectCard:
    """A single draggable project card."""

    def __init__(self, project: Project, *, show_id: bool = True) -> None:
        self.project = project
        self.show_id = show_id

    def configure(self) -> None:
        """Cards hold no subscriptions; dragging is pull-based via drag_start()."""

    def drag_start(self) -> DragTransfer:
        return DragTransfer.for_project(self.project.id)

    def render_content(self) -> RenderableType:
        heading = Text(self.project.title, style="board.title")
        if self.show_id:
            heading.append(f"  {self.project.id}", style="board.id")
        return Group(
            heading,
            Text(f"{persons_label(self.project.people_count)} assigned", style="board.people"),
            Text(self.project.description),
        )


class ProjectColumn:
    """One column of the board, bound to a single status."""

    def __init__(
        self,
        service: BoardService,
        status: ProjectStatus,
        *,
        show_ids: bool = True,
    ) -> None:
        self.service = service
        self.status = status
        self.show_ids = show_ids
        self.assigned_projects: list[Project] = []
        self.highlighted = False
        self.renders = 0

    def configure(self) -> None:
        column = self

        def _on_projects(projects: list[Project]) -> None:
            column.assigned_projects = [p for p in projects if p.status == column.status]
            column.renders += 1

        self.service.store.subscribe(_on_projects)

    # -- drop target ----------------------------------------------------

    def drag_over(self, transfer: DragTransfer) -> bool:
        """Accept only plain-text transfers; highlights the column when accepted."""
        self.highlighted = transfer.is_text
        return self.highlighted

    def drag_leave(self) -> None:
        self.highlighted = False

    def drop(self, transfer: DragTransfer) -> ServiceResult:
        self.highlighted = False
        return self.service.drop_project(transfer, self.status)

    # -- rendering ------------------------------------------------------

    def render_content(self) -> RenderableType:
        cards: list[RenderableType] = []
        for project in self.assigned_projects:
            if cards:
                cards.append(Text(""))
            cards.append(ProjectCard(project, show_id=self.show_ids).render_content())
        body: RenderableType = Group(*cards) if cards else Text("(empty)", style="board.empty")
        border = "board.warning" if self.highlighted else style_for_status(self.status.value)
        return Panel(body, title=self.status.column_title, border_style=border)


class BoardView:
    """Both status columns side by side."""

    def __init__(self, service: BoardService, *, show_ids: bool = True, width: int = 100) -> None:
        self.width = width
        self.columns: dict[ProjectStatus, ProjectColumn] = {
            status: ProjectColumn(service, status, show_ids=show_ids) for status in ProjectStatus
        }

    def configure(self) -> None:
        for column in self.columns.values():
            column.configure()

    def column(self, status: ProjectStatus) -> ProjectColumn:
        return self.columns[status]

    def render_content(self) -> RenderableType:
        grid = Table.grid(expand=True, padding=(0, 1))
        for _ in self.columns:
            grid.add_column(ratio=1)
        grid.add_row(*(column.render_content() for column in self.columns.values()))
        return grid

    def render(self) -> str:
        """Render the board to plain text (ANSI only on a real terminal)."""
        console = create_console(width=self.width)
        console.print(self.render_content())
        return get_output(console).rstrip("\n")

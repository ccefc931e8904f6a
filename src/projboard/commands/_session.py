"""Board session command grammar, shared by ``shell`` and ``run``.

Grammar (one command per line)::

    add <title> | <description> | <people>
    mv <id> <active|finished|a|f>
    ls [active|finished]

``mv`` plays out a full drag: the card's transfer is offered to the
target column (``drag_over``) and then dropped on it.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from projboard.domain.drag import DragTransfer
from projboard.domain.types import parse_status
from projboard.services.result import ServiceResult

if TYPE_CHECKING:
    from projboard.output.views import BoardView
    from projboard.services.board import BoardService

ADD_USAGE = "Usage: add <title> | <description> | <people>"
MV_USAGE = "Usage: mv <id> <status>; statuses: active/finished (a/f)"
LS_USAGE = "Usage: ls [active|finished]"

SESSION_HELP = """\
Commands:
  add                                  Add a project (prompts for each field)
  add <title> | <description> | <n>    Add a project inline
  mv <id> <status>                     Drag a card onto a column; status: active/finished (a/f)
  ls [status]                          List projects, optionally for one column
  help                                 Show this help
  exit                                 Leave the session"""


def _usage(op: str, message: str) -> ServiceResult:
    return ServiceResult.failure(op, "USAGE", message)


class BoardSession:
    """Parses session commands and runs them against the board."""

    def __init__(self, service: BoardService, board: BoardView) -> None:
        self.service = service
        self.board = board

    def execute(self, line: str) -> ServiceResult:
        """Run one command line and return its result."""
        line = line.strip()
        cmd, _, rest = line.partition(" ")
        cmd = cmd.lower()
        if cmd == "add":
            return self.add(rest)
        if cmd == "mv":
            return self.move(rest)
        if cmd == "ls":
            return self.list_projects(rest)
        return ServiceResult.failure(
            "session",
            "UNKNOWN_COMMAND",
            f"Unknown command {cmd!r}. Type 'help' for instructions.",
        )

    def add(self, rest: str) -> ServiceResult:
        parts = rest.split("|")
        if len(parts) != 3:
            return _usage("create_project", ADD_USAGE)
        title, description, people = (part.strip() for part in parts)
        return self.service.submit_project(title, description, people)

    def move(self, rest: str) -> ServiceResult:
        try:
            tokens = shlex.split(rest)
        except ValueError:
            return _usage("move_project", MV_USAGE)
        if len(tokens) != 2:
            return _usage("move_project", MV_USAGE)
        project_id, raw_status = tokens
        status = parse_status(raw_status)
        if status is None:
            return ServiceResult.failure(
                "move_project",
                "INVALID_STATUS",
                f"Invalid status {raw_status!r}",
                detail={"allowed": ["active", "finished"]},
            )

        column = self.board.column(status)
        transfer = DragTransfer.for_project(project_id)
        column.drag_over(transfer)
        return column.drop(transfer)

    def list_projects(self, rest: str) -> ServiceResult:
        raw = rest.strip()
        if not raw:
            return self.service.list_projects()
        status = parse_status(raw)
        if status is None:
            return _usage("list_projects", LS_USAGE)
        return self.service.list_projects(status)

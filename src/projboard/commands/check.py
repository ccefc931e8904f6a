"""Command: validate a project submission without creating it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projboard.commands._base import BoardCommand

if TYPE_CHECKING:
    from projboard.commands._context import AppContext


@click.command(
    cls=BoardCommand,
    examples="""\
  projboard check "Build API" "Design REST endpoints" 3
  projboard --json check "API" "" 0""",
)
@click.argument("title")
@click.argument("description")
@click.argument("people")
@click.pass_obj
def check(app: AppContext, title: str, description: str, people: str) -> None:
    """Check TITLE, DESCRIPTION and PEOPLE against the form rules."""
    app.emit(app.service.check_submission(title, description, people))

"""Command: interactive board session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from projboard.commands._base import BoardCommand
from projboard.commands._session import SESSION_HELP, BoardSession
from projboard.output.formatters import format_result
from projboard.services.result import ServiceResult

if TYPE_CHECKING:
    from projboard.commands._context import AppContext


def _prompt_form(app: AppContext) -> ServiceResult:
    """Collect the three project fields, then submit them for validation."""
    title = click.prompt("Title", default="", show_default=False)
    description = click.prompt("Description", default="", show_default=False)
    people = click.prompt("People", default="", show_default=False)
    return app.service.submit_project(title, description, people)


def _show(app: AppContext, result: ServiceResult) -> None:
    if not result.ok:
        app.report(result)
        return
    if result.op == "list_projects":
        click.echo(format_result(result, settings=app.output_settings))
    elif result.op == "create_project" or result.data.get("changed"):
        click.echo(app.board.render())
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}", err=True)


@click.command(
    cls=BoardCommand,
    examples="""\
  projboard shell
  : add Build API | Design REST endpoints | 3
  : mv prj_1a2b3c4d5e6f finished""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Open an interactive board session (type 'help' inside)."""
    if not app.interactive:
        app.emit(
            ServiceResult.failure(
                "shell",
                "NOT_INTERACTIVE",
                "The shell needs prompts; use 'projboard run' for scripted sessions.",
            )
        )
        return

    app.load_plugins()
    session = BoardSession(app.service, app.board)
    click.echo(app.board.render())
    while True:
        try:
            line = click.prompt("", prompt_suffix=": ", default="", show_default=False).strip()
        except click.Abort:
            click.echo("\nGoodbye.")
            return
        if not line:
            continue
        lower = line.lower()
        if lower == "exit":
            click.echo("Goodbye.")
            return
        if lower == "help":
            click.echo(SESSION_HELP)
            continue
        result = _prompt_form(app) if lower == "add" else session.execute(line)
        _show(app, result)

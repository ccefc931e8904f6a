"""Command: replay a scripted board session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TextIO

import click

from projboard.commands._base import BoardCommand
from projboard.commands._session import BoardSession
from projboard.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from projboard.commands._context import AppContext


def _script_lines(script: TextIO) -> list[tuple[int, str]]:
    """Numbered command lines, skipping blanks and ``#`` comments."""
    lines: list[tuple[int, str]] = []
    for lineno, raw in enumerate(script, start=1):
        line = raw.strip()
        if line and not line.startswith("#"):
            lines.append((lineno, line))
    return lines


@click.command(
    cls=BoardCommand,
    examples="""\
  projboard run board.txt
  projboard --json run board.txt
  printf 'add Build API | Design REST endpoints | 3\\n' | projboard run -
  projboard run board.txt --keep-going""",
)
@click.argument("script", type=click.File("r"))
@click.option("--keep-going", is_flag=True, help="Continue after a failed command.")
@click.pass_obj
def run(app: AppContext, script: TextIO, keep_going: bool) -> None:
    """Run board commands from SCRIPT ('-' for stdin) and print the board."""
    app.load_plugins()
    session = BoardSession(app.service, app.board)

    executed = 0
    errors: list[dict[str, Any]] = []
    warnings: list[str] = []
    for lineno, line in _script_lines(script):
        result = session.execute(line)
        executed += 1
        warnings.extend(result.warnings)
        if result.ok:
            continue
        errors.append(
            {
                "line": lineno,
                "op": result.op,
                "code": result.error.code if result.error else "",
                "message": result.error.message if result.error else "",
            }
        )
        if not app.settings.json_output:
            click.echo(f"line {lineno}:", err=True)
            app.report(result)
        if not keep_going:
            break

    if not app.settings.json_output and not app.settings.quiet:
        click.echo(app.board.render())

    data = {
        "executed": executed,
        "failed": len(errors),
        "errors": errors,
        "projects": [p.to_dict() for p in app.store.projects],
    }
    error = None
    if errors:
        error = ServiceError(
            code="SCRIPT_FAILED",
            message=f"{len(errors)} command(s) failed",
            detail={"first_line": errors[0]["line"]},
        )
    app.emit(
        ServiceResult(ok=not errors, op="run_script", data=data, warnings=warnings, error=error)
    )

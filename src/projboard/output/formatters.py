"""Human, quiet, and JSON formatting of ServiceResult.

The CLI renders a ServiceResult for humans (Rich styling) or machines
(``--json``). ``--quiet`` reduces output to IDs.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from projboard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from projboard.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, verbose=settings.verbose)


def _extract_ids(result: ServiceResult) -> list[str]:
    data = result.data
    items = data.get("items") or data.get("projects")
    if isinstance(items, list):
        return [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
    if "id" in data:
        return [str(data["id"])]
    return []


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    ids = _extract_ids(result)
    return "\n".join(ids) if ids else f"OK: {result.op}"


def _format_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="board.ok"), Text(f"  {result.op}", style="board.op"), sep="")
        for key, value in result.data.items():
            if key in ("items", "projects") and not verbose:
                _field(console, key, f"{len(value)} project(s)")
                continue
            _field(console, key, value)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR", style="board.error"),
            Text(f"  {result.op}", style="board.op"),
            Text(f": {message}"),
            sep="",
        )
        if result.error and result.error.detail:
            for key, value in result.error.detail.items():
                _field(console, key, value)
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        rendered = _json.dumps(value, separators=(",", ":"))
    else:
        rendered = str(value)
    style = "board.id" if key == "id" else ("board.title" if key == "title" else "")
    console.print(Text(f"  {key}: ", style="board.key"), Text(rendered, style=style), sep="")

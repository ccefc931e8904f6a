"""Rich Console factory and theme for projboard output.

Consoles render into a StringIO buffer so every renderer keeps a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BOARD_THEME = Theme(
    {
        "board.ok": "bold green",
        "board.error": "bold red",
        "board.warning": "bold yellow",
        "board.op": "bold cyan",
        "board.key": "dim",
        "board.id": "bold blue",
        "board.title": "bold",
        "board.people": "italic",
        "board.empty": "dim",
        "board.status.active": "cyan",
        "board.status.finished": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width (defaults to 100 columns).
    """
    return Console(
        file=StringIO(),
        theme=BOARD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return f"board.status.{status}"

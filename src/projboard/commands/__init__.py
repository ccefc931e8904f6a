"""Subcommand modules for projboard.

``register_commands()`` defers imports so ``projboard --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from projboard.commands.check import check
    from projboard.commands.run import run
    from projboard.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(run)
    cli.add_command(check)

"""AppContext — the composition root shared by every command.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. It owns the single ProjectStore for the running
application and wires everything that needs it: the board service, the
two column views, and the plugin bridge.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from projboard.infrastructure.store import ProjectStore
from projboard.output.formatters import OutputSettings, format_result
from projboard.output.views import BoardView
from projboard.plugins.manager import PluginManager
from projboard.services.board import BoardService

if TYPE_CHECKING:
    from projboard.config.settings import BoardSettings
    from projboard.services.result import ServiceResult

LOCAL_PLUGIN_DIR = Path(".projboard") / "plugins"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered lazily (``load_plugins``) so ``--help`` and
    ``--version`` never import third-party plugin code.
    """

    def __init__(self, settings: BoardSettings) -> None:
        self.settings = settings

        from projboard.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        self.store = ProjectStore()
        self.plugins = PluginManager()
        self.service = BoardService(self.store, settings.validation, plugins=self.plugins)
        self.board = BoardView(
            self.service,
            show_ids=settings.display.show_ids,
            width=settings.display.width,
        )
        self.board.configure()
        self.plugins.attach(self.store)
        self._plugins_loaded = False

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def interactive(self) -> bool:
        """Prompts are allowed unless ``--no-interact`` or ``--json`` is set."""
        return not self.settings.no_interact and not self.settings.json_output

    def load_plugins(self) -> list[str]:
        """Discover entry-point and local plugins once."""
        if self._plugins_loaded:
            return self.plugins.list_plugin_names()
        base = self.settings.config_path.parent if self.settings.config_path else Path.cwd()
        self._plugins_loaded = True
        return self.plugins.discover_and_load(local_dir=base / LOCAL_PLUGIN_DIR)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, returns normally. Warnings go to stderr outside
          JSON mode so they never pollute piped output.
        * Failure: stderr, exit code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def report(self, result: ServiceResult) -> None:
        """Print a failed intermediate result to stderr without exiting."""
        if result.ok:
            return
        click.echo(format_result(result, settings=self.output_settings), err=True)

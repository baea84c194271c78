"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the DataRoot lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.config.logging import bind_data_root, configure_logging
from todoctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from todoctl.config.settings import TodoSettings
    from todoctl.infrastructure.data_root import DataRoot
    from todoctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TodoSettings) -> None:
        self.settings = settings
        self._data_root: DataRoot | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def data_root(self) -> DataRoot:
        """The data directory (created lazily on first access)."""
        if self._data_root is None:
            from todoctl.infrastructure.data_root import DataRoot

            self._data_root = DataRoot(self.settings)
            bind_data_root(self._data_root.root)
        return self._data_root

    def emit(self, result: ServiceResult) -> None:
        """Output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

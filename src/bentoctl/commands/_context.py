"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bentoctl.config.logging import configure_logging
from bentoctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bentoctl.config.settings import BentoSettings
    from bentoctl.services.result import ServiceResult

# Exit status when a layout has findings at or above ``[check] fail_on``.
EXIT_FINDINGS = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BentoSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

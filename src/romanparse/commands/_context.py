"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and telemetry, owns the
NumeralService, and centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanparse.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from romanparse.config.settings import RomanSettings
    from romanparse.services.numeral import NumeralService
    from romanparse.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RomanSettings) -> None:
        self.settings = settings
        self._service: NumeralService | None = None

        from romanparse.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from romanparse.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> NumeralService:
        """The numeral service (created lazily on first access)."""
        if self._service is None:
            from romanparse.services.numeral import NumeralService

            self._service = NumeralService(self.settings.parser)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Valid (``result.ok``): writes to stdout, returns normally.
        * Invalid: writes to stderr, exits with code 1.
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

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging, builds the service, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from noid.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from noid.config.settings import NoidSettings
    from noid.services.minting import NoidService
    from noid.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NoidSettings) -> None:
        self.settings = settings
        self._service: NoidService | None = None

        from noid.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.config_path is not None:
            logger.debug("Using config: %s", settings.config_path)
        for warning in settings.config_warnings:
            logger.warning("%s", warning)

    @property
    def service(self) -> NoidService:
        """The noid service, configured from the ``[noid]`` section."""
        if self._service is None:
            from noid.services.minting import NoidService

            self._service = NoidService(self.settings.noid)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

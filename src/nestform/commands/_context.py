"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the configured service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestform.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from nestform.config.settings import NestformSettings
    from nestform.services.result import ServiceResult
    from nestform.services.validate import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NestformSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from nestform.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from nestform.services.validate import ValidationService

            try:
                self._service = ValidationService(self.settings.validation_config())
            except ValueError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._service

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> bool:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns True.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1 (or returns False
          when *exit_on_error* is False, so a caller can finish a batch).
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
            return True
        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
        return False

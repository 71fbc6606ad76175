"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Shop initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from pizzeria.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pizzeria.config.settings import PizzeriaSettings
    from pizzeria.infrastructure.shop import Shop
    from pizzeria.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The shop is lazily initialized on first use so ``--help`` and
    ``--version`` never build the catalog.
    """

    def __init__(self, settings: PizzeriaSettings) -> None:
        self.settings = settings
        self._shop: Shop | None = None

        from pizzeria.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def shop(self) -> Shop:
        """The shop instance (created lazily on first access)."""
        if self._shop is None:
            from pizzeria.infrastructure.shop import Shop

            self._shop = Shop(self.settings)
        return self._shop

    @property
    def interactive(self) -> bool:
        """True when prompts should fire.

        Prompts require: no ``--no-interact``, no ``--json``, and stdin is a TTY.
        """
        return (
            not self.settings.no_interact
            and not self.settings.json_output
            and sys.stdin.isatty()
        )

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1, unless
          *exit_on_error* is False (the interactive shell keeps going).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            if exit_on_error:
                raise SystemExit(1)

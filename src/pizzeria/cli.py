"""The ``pizzeria`` entry point.

Global flags pick the output mode (Rich, ``--json``, ``-q``), logging
(``-v``, ``--log-json``), prompting (``--no-interact``) and which
``pizzeria.toml`` to read (``-c``). The menu, order, and run commands are
attached by :func:`pizzeria.commands.register_commands`.
"""

from __future__ import annotations

import click

from pizzeria import __version__
from pizzeria.commands import register_commands
from pizzeria.commands._context import AppContext
from pizzeria.config.settings import PizzeriaSettings


@click.group(name="pizzeria", invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pizzeria")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """pizzeria — restaurant point-of-sale CLI."""
    ctx.ensure_object(dict)
    settings = PizzeriaSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Click classes shared by the menu, order, and run commands.

Every pizzeria command takes an ``examples=`` string (for instance the
``--pizza N[:SIZE[:BASE[:T1,T2]]]`` forms of ``pizzeria order``). Passing
``--examples`` prints that string and exits before the shop is built, so
``--help`` can stay short.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PizzeriaCommand(click.Command):
    """A pizzeria command (``order``, ``run``, ``menu show``...) with ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class PizzeriaGroup(click.Group):
    """A pizzeria command group (``menu``) with ``--examples``.

    Sets ``command_class = PizzeriaCommand`` so subcommands accept
    ``examples`` without an explicit ``cls=``.
    """

    command_class = PizzeriaCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

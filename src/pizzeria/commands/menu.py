"""Command group: menu display (show, toppings, item)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pizzeria.commands._base import PizzeriaGroup
from pizzeria.services.menu import MenuService

if TYPE_CHECKING:
    from pizzeria.commands._context import AppContext

_MENU_EXAMPLES = """\
  pizzeria menu show
  pizzeria menu toppings
  pizzeria menu item pizza 2
  pizzeria --json menu show"""


@click.group(cls=PizzeriaGroup, examples=_MENU_EXAMPLES)
@click.pass_obj
def menu(app: AppContext) -> None:
    """Browse what the shop sells."""


@menu.command(
    examples="""\
  pizzeria menu show
  pizzeria -v menu show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show pizzas, drinks, and side dishes with prices."""
    app.emit(MenuService(app.shop).show_menu())


@menu.command(
    examples="""\
  pizzeria menu toppings"""
)
@click.pass_obj
def toppings(app: AppContext) -> None:
    """List the toppings that can be added to a pizza."""
    app.emit(MenuService(app.shop).list_toppings())


@menu.command(
    examples="""\
  pizzeria menu item pizza 1
  pizzeria menu item side-dish 2
  pizzeria --json menu item topping 3"""
)
@click.argument(
    "category",
    type=click.Choice(["pizza", "drink", "side-dish", "topping"]),
)
@click.argument("number", type=int)
@click.pass_obj
def item(app: AppContext, category: str, number: int) -> None:
    """Show one menu entry by its 1-based NUMBER."""
    svc = MenuService(app.shop)
    app.emit(svc.get_item(category.replace("-", "_"), number - 1))

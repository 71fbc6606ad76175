"""Command: interactive order-taking shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pizzeria.commands._base import PizzeriaCommand
from pizzeria.commands.order import ORDER_TYPE_CHOICES, order_type_value
from pizzeria.domain.items import BaseType, PizzaSize
from pizzeria.domain.lifecycle import OrderStatus
from pizzeria.services.menu import MenuService
from pizzeria.services.order import OrderService, PizzaSelection

if TYPE_CHECKING:
    from pizzeria.commands._context import AppContext

MAIN_MENU = """
1. Create order
2. View menu
3. List orders
4. Update order status
5. Exit"""

_CATEGORIES = {"p": "pizza", "d": "drink", "s": "side_dish"}


def _pick(app: AppContext, menu_svc: MenuService, category: str, number: int) -> int | None:
    """Validate a 1-based choice; report and return None when it is out of range."""
    result = menu_svc.get_item(category, number - 1)
    if not result.ok:
        app.emit(result, exit_on_error=False)
        return None
    return number - 1


def _customize_pizza(app: AppContext, menu_svc: MenuService, index: int) -> PizzaSelection:
    size = click.prompt(
        "Size",
        type=click.Choice([s.value for s in PizzaSize]),
        default=PizzaSize.MEDIUM.value,
    )
    base = click.prompt(
        "Base",
        type=click.Choice([b.value for b in BaseType]),
        default=BaseType.TRADITIONAL.value,
    )

    app.emit(menu_svc.list_toppings())
    toppings: list[int] = []
    while True:
        number = click.prompt("Topping number to add (-1 to stop)", type=int, default=-1)
        if number == -1:
            break
        picked = _pick(app, menu_svc, "topping", number)
        if picked is not None:
            toppings.append(picked)

    removals: list[str] = []
    if toppings:
        while True:
            name = click.prompt("Topping name to remove (empty to finish)", default="")
            if not name.strip():
                break
            removals.append(name.strip())

    return PizzaSelection(
        index=index,
        size=PizzaSize(size),
        base_type=BaseType(base),
        toppings=toppings,
        remove_toppings=removals,
    )


def _create_order(app: AppContext) -> None:
    menu_svc = MenuService(app.shop)
    customer = click.prompt("Customer name", default="")
    order_type = click.prompt(
        "Order type", type=click.Choice(ORDER_TYPE_CHOICES), default="dine-in"
    )
    address = None
    if order_type == "delivery":
        address = click.prompt("Delivery address", default="").strip() or None

    app.emit(menu_svc.show_menu())
    pizzas: list[PizzaSelection] = []
    drinks: list[int] = []
    sides: list[int] = []
    while True:
        choice = click.prompt(
            "Item category: P - Pizza, D - Drink, S - Side dish, X - Finish",
            type=click.Choice(["P", "D", "S", "X"], case_sensitive=False),
        ).lower()
        if choice == "x":
            break
        category = _CATEGORIES[choice]
        number = click.prompt("Item number (starting from 1)", type=int)
        index = _pick(app, menu_svc, category, number)
        if index is None:
            continue
        if category == "pizza":
            pizzas.append(_customize_pizza(app, menu_svc, index))
        elif category == "drink":
            drinks.append(index)
        else:
            sides.append(index)

    result = OrderService(app.shop).place_order(
        customer,
        order_type_value(order_type),
        delivery_address=address,
        pizzas=pizzas,
        drinks=drinks,
        side_dishes=sides,
    )
    app.emit(result, exit_on_error=False)


def _update_status(app: AppContext) -> None:
    order_id = click.prompt("Order ID", type=int)
    status = click.prompt("New status", type=click.Choice([s.value for s in OrderStatus]))
    app.emit(OrderService(app.shop).update_status(order_id, status), exit_on_error=False)


@click.command(
    cls=PizzeriaCommand,
    examples="""\
  pizzeria run
  pizzeria -c ./pizzeria.toml run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Take orders interactively until Exit is chosen."""
    while True:
        click.echo(MAIN_MENU)
        choice = click.prompt("Choice", type=click.IntRange(1, 5))
        if choice == 1:
            _create_order(app)
        elif choice == 2:
            app.emit(MenuService(app.shop).show_menu())
        elif choice == 3:
            app.emit(OrderService(app.shop).list_orders())
        elif choice == 4:
            _update_status(app)
        else:
            break

"""Command: one-shot order placement."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from pizzeria.commands._base import PizzeriaCommand
from pizzeria.domain.items import BaseType, PizzaSize
from pizzeria.services.order import OrderService, PizzaSelection

if TYPE_CHECKING:
    from pizzeria.commands._context import AppContext

ORDER_TYPE_CHOICES = ["dine-in", "takeaway", "delivery"]


def order_type_value(choice: str) -> str:
    """Map a CLI spelling (``dine-in``) to its stored value (``dine_in``)."""
    return choice.replace("-", "_")


def parse_pizza_selection(raw: str) -> PizzaSelection:
    """Parse ``N[:SIZE[:BASE[:T1,T2...]]]`` with 1-based numbers.

    Empty segments keep the default, so ``2::thin`` is a medium thin pizza.

    Raises:
        ValueError: On a non-numeric number or an unknown size/base.
    """
    parts = raw.split(":")
    if len(parts) > 4:
        msg = f"too many ':' segments in {raw!r}"
        raise ValueError(msg)
    number, size, base, toppings = (parts + ["", "", ""])[:4]

    fields: dict[str, Any] = {"index": _to_index(number)}
    if size:
        fields["size"] = PizzaSize(size.lower())
    if base:
        fields["base_type"] = BaseType(base.lower())
    if toppings:
        fields["toppings"] = [_to_index(t) for t in toppings.split(",") if t.strip()]
    return PizzaSelection(**fields)


def _to_index(number: str) -> int:
    try:
        return int(number.strip()) - 1
    except ValueError:
        msg = f"{number!r} is not a number"
        raise ValueError(msg) from None


def _validate_pizzas(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[PizzaSelection]:
    selections = []
    for raw in value:
        try:
            selections.append(parse_pizza_selection(raw))
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    return selections


@click.command(
    cls=PizzeriaCommand,
    examples="""\
  pizzeria order --customer Ana --type dine-in --pizza 1
  pizzeria order --customer Ana --type takeaway --pizza 1:large:thin:1,2 --drink 1
  pizzeria order --customer Bo --type delivery --address "1 Main St" --pizza 2 --side 2
  pizzeria --json order --customer Cy --type takeaway --drink 2""",
)
@click.option("--customer", default=None, help="Customer name.")
@click.option(
    "--type",
    "order_type",
    type=click.Choice(ORDER_TYPE_CHOICES),
    default=None,
    help="Order type (default: dine-in).",
)
@click.option("--address", default=None, help="Delivery address (delivery orders only).")
@click.option(
    "--pizza",
    "pizzas",
    multiple=True,
    callback=_validate_pizzas,
    help="Pizza as N[:SIZE[:BASE[:T1,T2]]] using menu numbers (repeatable).",
)
@click.option("--drink", "drinks", type=int, multiple=True, help="Drink number (repeatable).")
@click.option("--side", "sides", type=int, multiple=True, help="Side dish number (repeatable).")
@click.pass_obj
def order(
    app: AppContext,
    customer: str | None,
    order_type: str | None,
    address: str | None,
    pizzas: list[PizzaSelection],
    drinks: tuple[int, ...],
    sides: tuple[int, ...],
) -> None:
    """Place an order and print its receipt."""
    interactive = app.interactive
    if customer is None:
        customer = click.prompt("Customer name", default="") if interactive else ""
    if order_type is None:
        order_type = (
            click.prompt(
                "Order type",
                type=click.Choice(ORDER_TYPE_CHOICES),
                default="dine-in",
            )
            if interactive
            else "dine-in"
        )
    if interactive and order_type == "delivery" and not address:
        address = click.prompt("Delivery address", default="").strip() or None

    svc = OrderService(app.shop)
    result = svc.place_order(
        customer,
        order_type_value(order_type),
        delivery_address=address,
        pizzas=pizzas,
        drinks=[n - 1 for n in drinks],
        side_dishes=[n - 1 for n in sides],
    )
    app.emit(result)

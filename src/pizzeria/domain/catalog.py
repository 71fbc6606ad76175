"""Catalog — the fixed set of prototype items and toppings.

Prototypes are never handed out by reference. Listing returns copies for
display; ``get_*_copy()`` returns an independent clone for customization
and ordering. The catalog has no add/remove API and keeps its contents for
its whole lifetime.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TypeVar

from pydantic import BaseModel

from pizzeria.domain.errors import OutOfRangeError
from pizzeria.domain.items import Drink, Pizza, SideDish, Topping

_T = TypeVar("_T", bound=BaseModel)

# --- Starter set ---

STARTER_PIZZAS: tuple[Pizza, ...] = (
    Pizza(name="Margherita", base_price=Decimal("6.0")),
    Pizza(name="Pepperoni", base_price=Decimal("7.5")),
    Pizza(name="Vegetarian", base_price=Decimal("7.0")),
)

STARTER_DRINKS: tuple[Drink, ...] = (
    Drink(name="Cola", base_price=Decimal("2.0"), volume_liters=Decimal("0.5"), carbonated=True),
    Drink(name="Juice", base_price=Decimal("2.5"), volume_liters=Decimal("0.3"), carbonated=False),
)

STARTER_SIDE_DISHES: tuple[SideDish, ...] = (
    SideDish(name="Fries", base_price=Decimal("3.0"), portion_size="Medium"),
    SideDish(name="Nuggets", base_price=Decimal("4.0"), portion_size="Large"),
)

STARTER_TOPPINGS: tuple[Topping, ...] = (
    Topping(name="Mushrooms", price=Decimal("0.5")),
    Topping(name="Olives", price=Decimal("0.4")),
    Topping(name="Bacon", price=Decimal("0.8")),
)


def _freeze(items: Sequence[_T] | None, default: tuple[_T, ...]) -> tuple[_T, ...]:
    source = default if items is None else items
    return tuple(item.model_copy(deep=True) for item in source)


def _copy_at(items: tuple[_T, ...], index: int, category: str) -> _T:
    # Negative indexes are out of range, not counted from the end.
    if not 0 <= index < len(items):
        raise OutOfRangeError(category, index, len(items))
    return items[index].model_copy(deep=True)


class Catalog:
    """Read-only holder of pizza, drink, side dish, and topping prototypes.

    Any sequence left as ``None`` falls back to the starter set.
    """

    def __init__(
        self,
        *,
        pizzas: Sequence[Pizza] | None = None,
        drinks: Sequence[Drink] | None = None,
        side_dishes: Sequence[SideDish] | None = None,
        toppings: Sequence[Topping] | None = None,
    ) -> None:
        self._pizzas = _freeze(pizzas, STARTER_PIZZAS)
        self._drinks = _freeze(drinks, STARTER_DRINKS)
        self._side_dishes = _freeze(side_dishes, STARTER_SIDE_DISHES)
        self._toppings = _freeze(toppings, STARTER_TOPPINGS)

    # ------------------------------------------------------------------
    # Listing (display order == insertion order)
    # ------------------------------------------------------------------

    def list_pizzas(self) -> tuple[Pizza, ...]:
        return _freeze(self._pizzas, ())

    def list_drinks(self) -> tuple[Drink, ...]:
        return _freeze(self._drinks, ())

    def list_side_dishes(self) -> tuple[SideDish, ...]:
        return _freeze(self._side_dishes, ())

    def list_toppings(self) -> tuple[Topping, ...]:
        return _freeze(self._toppings, ())

    # ------------------------------------------------------------------
    # Copy-out by 0-based index
    # ------------------------------------------------------------------

    def get_pizza_copy(self, index: int) -> Pizza:
        return _copy_at(self._pizzas, index, "pizza")

    def get_drink_copy(self, index: int) -> Drink:
        return _copy_at(self._drinks, index, "drink")

    def get_side_dish_copy(self, index: int) -> SideDish:
        return _copy_at(self._side_dishes, index, "side dish")

    def get_topping_copy(self, index: int) -> Topping:
        return _copy_at(self._toppings, index, "topping")

"""MenuService — read-only views of the catalog for display."""

from __future__ import annotations

from typing import Any

from pizzeria.domain.errors import OutOfRangeError
from pizzeria.domain.items import MenuItem, Topping
from pizzeria.services._helpers import display_number, money
from pizzeria.services.base import BaseService
from pizzeria.services.result import ServiceResult


def _item_rows(items: tuple[MenuItem, ...], prefix: str) -> list[dict[str, Any]]:
    return [
        {
            "number": f"{prefix}{display_number(i)}",
            "name": item.name,
            "kind": item.kind,
            "base_price": money(item.base_price),
            "price": money(item.calculate_price()),
            "description": item.describe(),
        }
        for i, item in enumerate(items)
    ]


class MenuService(BaseService):
    """Lists what the shop sells."""

    def show_menu(self) -> ServiceResult:
        """Pizzas (P1..), drinks (D1..), and side dishes (S1..)."""
        catalog = self._shop.catalog
        return ServiceResult(
            ok=True,
            op="menu",
            data={
                "pizzas": _item_rows(catalog.list_pizzas(), "P"),
                "drinks": _item_rows(catalog.list_drinks(), "D"),
                "side_dishes": _item_rows(catalog.list_side_dishes(), "S"),
            },
            meta={"shop": self._shop.name},
        )

    def list_toppings(self) -> ServiceResult:
        toppings = self._shop.catalog.list_toppings()
        items = [
            {"number": display_number(i), "name": t.name, "price": money(t.price)}
            for i, t in enumerate(toppings)
        ]
        return ServiceResult(
            ok=True,
            op="toppings",
            data={"items": items, "count": len(items)},
        )

    def get_item(self, category: str, index: int) -> ServiceResult:
        """Describe one catalog entry by category and 0-based index."""
        op = "menu_item"
        catalog = self._shop.catalog
        getters = {
            "pizza": catalog.get_pizza_copy,
            "drink": catalog.get_drink_copy,
            "side_dish": catalog.get_side_dish_copy,
            "topping": catalog.get_topping_copy,
        }
        getter = getters.get(category)
        if getter is None:
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                f"Unknown category: {category!r}. Expected one of: {', '.join(getters)}",
            )
        try:
            item = getter(index)
        except OutOfRangeError as exc:
            return ServiceResult.failure(
                op,
                "OUT_OF_RANGE",
                str(exc),
                category=exc.category,
                index=exc.index,
                number=exc.number,
                size=exc.size,
            )

        data: dict[str, Any] = {
            "category": category,
            "number": display_number(index),
            "name": item.name,
        }
        if isinstance(item, Topping):
            data["price"] = money(item.price)
        else:
            data["base_price"] = money(item.base_price)
            data["price"] = money(item.calculate_price())
            data["description"] = item.describe()
        return ServiceResult(ok=True, op=op, data=data)

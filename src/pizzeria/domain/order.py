"""Order aggregate — owned item copies, fees, totals, and status.

An order exclusively owns clones of the items added to it; nothing it holds
is shared with the catalog or with other orders.

``total_amount`` is a cached value. It is only valid right after
``calculate_total()``; mutating an item afterwards (e.g. adding a topping
to one of ``pizzas``) leaves it stale until the next recomputation.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from pizzeria.domain.errors import InvalidTransitionError
from pizzeria.domain.items import AnyMenuItem, Drink, Pizza, SideDish
from pizzeria.domain.lifecycle import (
    ORDER_TRANSITIONS,
    TERMINAL_STATUSES,
    OrderStatus,
    OrderType,
    allowed_transitions,
    is_valid_transition,
)

DELIVERY_FEE = Decimal("3.0")


class Order(BaseModel):
    """One customer transaction."""

    model_config = {"validate_assignment": True}

    id: int = Field(ge=1)
    customer_name: str = ""
    order_type: OrderType = OrderType.DINE_IN
    status: OrderStatus = OrderStatus.PENDING
    delivery_address: str = ""
    pizzas: list[Pizza] = Field(default_factory=list)
    drinks: list[Drink] = Field(default_factory=list)
    side_dishes: list[SideDish] = Field(default_factory=list)
    delivery_fee: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def set_customer_name(self, name: str) -> None:
        self.customer_name = name

    def set_order_type(self, order_type: OrderType) -> None:
        self.order_type = order_type

    def set_delivery_address(self, address: str) -> None:
        """Record where to deliver. Only meaningful for delivery orders."""
        self.delivery_address = address

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_pizza(self, pizza: Pizza) -> None:
        self.pizzas.append(pizza.clone())

    def add_drink(self, drink: Drink) -> None:
        self.drinks.append(drink.clone())

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes.append(side_dish.clone())

    def items(self) -> list[AnyMenuItem]:
        """All owned items: pizzas, then drinks, then side dishes."""
        return [*self.pizzas, *self.drinks, *self.side_dishes]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def update_status(self, new_status: OrderStatus, *, strict: bool = True) -> None:
        """Move the order to *new_status*.

        With *strict* (the default) the change must be an edge of
        ``ORDER_TRANSITIONS``; otherwise any status is accepted.

        Raises:
            InvalidTransitionError: If *strict* and the edge is not allowed.
        """
        target = OrderStatus(new_status)
        if strict and not is_valid_transition(self.status, target, ORDER_TRANSITIONS):
            raise InvalidTransitionError(
                str(self.status),
                str(target),
                allowed_transitions(self.status),
                terminal=self.status in TERMINAL_STATUSES,
            )
        self.status = target

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def calculate_total(self) -> Decimal:
        """Recompute ``delivery_fee`` and ``total_amount`` from scratch."""
        subtotal = sum((item.calculate_price() for item in self.items()), Decimal("0"))
        self.delivery_fee = DELIVERY_FEE if self.order_type == OrderType.DELIVERY else Decimal("0")
        self.total_amount = subtotal + self.delivery_fee
        return self.total_amount

    def summary(self) -> dict[str, Any]:
        """Read-only rendering payload. Uses the cached total as-is."""
        data: dict[str, Any] = {
            "id": self.id,
            "customer": self.customer_name,
            "type": str(self.order_type),
            "status": str(self.status),
            "items": [
                {
                    "kind": item.kind,
                    "name": item.name,
                    "description": item.describe(),
                    "price": f"{item.calculate_price():.2f}",
                }
                for item in self.items()
            ],
            "total": f"{self.total_amount:.2f}",
        }
        if self.order_type == OrderType.DELIVERY:
            data["delivery_address"] = self.delivery_address
            data["delivery_fee"] = f"{self.delivery_fee:.2f}"
        return data

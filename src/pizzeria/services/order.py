"""OrderService — order placement, lookup, and status changes.

Placement pipeline: RESOLVE ITEMS → OPEN → FILL → TOTAL → RECORD → RESPOND

Items are resolved from the catalog before an order ID is claimed, so a
bad catalog index never burns an ID.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from pizzeria.config.logging import order_log_context
from pizzeria.domain.errors import InvalidTransitionError, OutOfRangeError
from pizzeria.domain.items import BaseType, Drink, Pizza, PizzaSize, SideDish
from pizzeria.domain.lifecycle import OrderStatus, OrderType
from pizzeria.domain.order import Order
from pizzeria.services._helpers import money
from pizzeria.services.base import BaseService
from pizzeria.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PizzaSelection(BaseModel):
    """How to customize one pizza copied from the catalog.

    ``index`` and ``toppings`` are 0-based catalog indexes.
    ``remove_toppings`` is applied after ``toppings`` are added.
    """

    model_config = {"frozen": True}

    index: int
    size: PizzaSize = PizzaSize.MEDIUM
    base_type: BaseType = BaseType.TRADITIONAL
    toppings: list[int] = Field(default_factory=list)
    remove_toppings: list[str] = Field(default_factory=list)


class OrderService(BaseService):
    """Takes orders and drives their lifecycle."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def place_order(
        self,
        customer_name: str,
        order_type: str,
        *,
        delivery_address: str | None = None,
        pizzas: list[PizzaSelection] | None = None,
        drinks: list[int] | None = None,
        side_dishes: list[int] | None = None,
    ) -> ServiceResult:
        """Build, total, and record a new order."""
        op = "place_order"
        warnings: list[str] = []

        try:
            kind = OrderType(order_type)
        except ValueError:
            allowed = ", ".join(t.value for t in OrderType)
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                f"Unknown order type: {order_type!r}. Expected one of: {allowed}",
            )

        # ── RESOLVE ITEMS ────────────────────────────────────────
        try:
            pizza_copies = [self._build_pizza(sel) for sel in pizzas or []]
            drink_copies = [self._shop.catalog.get_drink_copy(i) for i in drinks or []]
            side_copies = [self._shop.catalog.get_side_dish_copy(i) for i in side_dishes or []]
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

        # ── OPEN / FILL ──────────────────────────────────────────
        order = self._shop.open_order()
        with order_log_context(order.id):
            order.set_customer_name(customer_name)
            order.set_order_type(kind)
            if kind == OrderType.DELIVERY:
                if delivery_address:
                    order.set_delivery_address(delivery_address)
                else:
                    warnings.append("Delivery order has no address")
            elif delivery_address:
                warnings.append(f"Delivery address ignored for {kind} order")

            self._fill(order, pizza_copies, drink_copies, side_copies)
            if not order.items():
                warnings.append("Order has no items")

            # ── TOTAL / RECORD ───────────────────────────────────
            total = order.calculate_total()
            self._shop.record(order)
            logger.info("Placed order for %s: %s", customer_name or "guest", money(total))

        return ServiceResult(ok=True, op=op, data=order.summary(), warnings=warnings)

    def get_order(self, order_id: int) -> ServiceResult:
        order = self._shop.get_order(order_id)
        if order is None:
            return ServiceResult.failure(
                "get_order", "NOT_FOUND", f"No order found with ID: {order_id}"
            )
        return ServiceResult(ok=True, op="get_order", data=order.summary())

    def list_orders(self) -> ServiceResult:
        """Every order recorded in this process, oldest first."""
        items = [
            {
                "id": o.id,
                "customer": o.customer_name,
                "type": str(o.order_type),
                "status": str(o.status),
                "items": len(o.items()),
                "total": money(o.total_amount),
            }
            for o in self._shop.orders()
        ]
        return ServiceResult(ok=True, op="list_orders", data={"items": items, "count": len(items)})

    def update_status(self, order_id: int, status: str) -> ServiceResult:
        """Move an order along its lifecycle.

        Honors ``[orders] strict_transitions``: when disabled, any status
        change is accepted.
        """
        op = "update_status"
        order = self._shop.get_order(order_id)
        if order is None:
            return ServiceResult.failure(op, "NOT_FOUND", f"No order found with ID: {order_id}")

        try:
            target = OrderStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                f"Unknown status: {status!r}. Expected one of: {allowed}",
            )

        previous = order.status
        strict = self._shop.settings.orders.strict_transitions
        with order_log_context(order.id):
            try:
                order.update_status(target, strict=strict)
            except InvalidTransitionError as exc:
                return ServiceResult.failure(
                    op,
                    "INVALID_TRANSITION",
                    str(exc),
                    current=exc.current,
                    target=exc.target,
                    allowed=exc.allowed,
                    terminal=exc.terminal,
                )
            logger.info("Status %s -> %s", previous, target)

        return ServiceResult(
            ok=True,
            op=op,
            data={"id": order.id, "previous_status": str(previous), "status": str(order.status)},
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_pizza(self, selection: PizzaSelection) -> Pizza:
        catalog = self._shop.catalog
        pizza = catalog.get_pizza_copy(selection.index)
        pizza.set_size(selection.size)
        pizza.set_base_type(selection.base_type)
        for topping_index in selection.toppings:
            pizza.add_topping(catalog.get_topping_copy(topping_index))
        for name in selection.remove_toppings:
            pizza.remove_topping(name)
        return pizza

    @staticmethod
    def _fill(
        order: Order,
        pizzas: list[Pizza],
        drinks: list[Drink],
        side_dishes: list[SideDish],
    ) -> None:
        for pizza in pizzas:
            order.add_pizza(pizza)
        for drink in drinks:
            order.add_drink(drink)
        for side in side_dishes:
            order.add_side_dish(side)

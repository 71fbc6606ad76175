"""Tests for the Order aggregate."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from pizzeria.domain.catalog import Catalog
from pizzeria.domain.errors import InvalidTransitionError
from pizzeria.domain.items import PizzaSize
from pizzeria.domain.lifecycle import OrderStatus, OrderType
from pizzeria.domain.order import DELIVERY_FEE, Order


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


class TestOrderDefaults:
    def test_new_order(self) -> None:
        order = Order(id=1)
        assert order.status == OrderStatus.PENDING
        assert order.order_type == OrderType.DINE_IN
        assert order.items() == []
        assert order.total_amount == Decimal("0")
        assert order.delivery_fee == Decimal("0")

    def test_id_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Order(id=0)

    def test_setters(self) -> None:
        order = Order(id=1)
        order.set_customer_name("Ana")
        order.set_order_type(OrderType.DELIVERY)
        order.set_delivery_address("1 Main St")
        assert (order.customer_name, order.order_type, order.delivery_address) == (
            "Ana",
            OrderType.DELIVERY,
            "1 Main St",
        )

    def test_unknown_order_type_rejected(self) -> None:
        order = Order(id=1)
        with pytest.raises(ValidationError):
            order.order_type = "drive_thru"  # type: ignore[assignment]


class TestItems:
    def test_items_order_by_category(self, catalog: Catalog) -> None:
        order = Order(id=1)
        order.add_side_dish(catalog.get_side_dish_copy(0))
        order.add_drink(catalog.get_drink_copy(0))
        order.add_pizza(catalog.get_pizza_copy(0))
        assert [i.kind for i in order.items()] == ["pizza", "drink", "side_dish"]

    def test_duplicates_allowed(self, catalog: Catalog) -> None:
        order = Order(id=1)
        cola = catalog.get_drink_copy(0)
        order.add_drink(cola)
        order.add_drink(cola)
        assert len(order.drinks) == 2

    def test_added_item_is_owned_copy(self, catalog: Catalog) -> None:
        order = Order(id=1)
        pizza = catalog.get_pizza_copy(0)
        order.add_pizza(pizza)
        pizza.set_size(PizzaSize.LARGE)
        assert order.pizzas[0].size == PizzaSize.MEDIUM

    def test_mutating_order_item_leaves_catalog(self, catalog: Catalog) -> None:
        order = Order(id=1)
        order.add_pizza(catalog.get_pizza_copy(0))
        order.pizzas[0].add_topping(catalog.get_topping_copy(2))
        assert catalog.get_pizza_copy(0).toppings == []


class TestTotals:
    def test_delivery_pepperoni(self, catalog: Catalog) -> None:
        order = Order(id=1, order_type=OrderType.DELIVERY)
        order.add_pizza(catalog.get_pizza_copy(1))
        assert order.calculate_total() == Decimal("10.50")
        assert order.delivery_fee == DELIVERY_FEE

    def test_no_fee_for_takeaway(self, catalog: Catalog) -> None:
        order = Order(id=1, order_type=OrderType.TAKEAWAY)
        order.add_drink(catalog.get_drink_copy(1))
        order.add_side_dish(catalog.get_side_dish_copy(1))
        assert order.calculate_total() == Decimal("8.00")
        assert order.delivery_fee == Decimal("0")

    def test_idempotent(self, catalog: Catalog) -> None:
        order = Order(id=1, order_type=OrderType.DELIVERY)
        order.add_pizza(catalog.get_pizza_copy(0))
        order.add_drink(catalog.get_drink_copy(0))
        first = order.calculate_total()
        assert order.calculate_total() == first
        assert order.total_amount == first

    def test_fee_reset_when_type_changes(self, catalog: Catalog) -> None:
        order = Order(id=1, order_type=OrderType.DELIVERY)
        order.add_pizza(catalog.get_pizza_copy(0))
        order.calculate_total()
        order.set_order_type(OrderType.DINE_IN)
        assert order.calculate_total() == Decimal("6.0")
        assert order.delivery_fee == Decimal("0")

    def test_empty_delivery_order_is_just_the_fee(self) -> None:
        order = Order(id=1, order_type=OrderType.DELIVERY)
        assert order.calculate_total() == DELIVERY_FEE

    def test_total_goes_stale_until_recomputed(self, catalog: Catalog) -> None:
        order = Order(id=1)
        order.add_pizza(catalog.get_pizza_copy(0))
        order.calculate_total()
        order.pizzas[0].set_size(PizzaSize.LARGE)
        assert order.total_amount == Decimal("6.0")
        assert order.calculate_total() == Decimal("9.0")


class TestStatus:
    def test_forward(self) -> None:
        order = Order(id=1)
        for status in (OrderStatus.PREPARING, OrderStatus.READY, OrderStatus.DELIVERED):
            order.update_status(status)
        assert order.status == OrderStatus.DELIVERED

    def test_illegal_edge_raises_and_keeps_status(self) -> None:
        order = Order(id=1)
        with pytest.raises(InvalidTransitionError) as exc_info:
            order.update_status(OrderStatus.DELIVERED)
        assert order.status == OrderStatus.PENDING
        assert exc_info.value.current == "pending"
        assert exc_info.value.target == "delivered"
        assert exc_info.value.allowed == ["preparing", "cancelled"]

    def test_terminal_cannot_reopen(self) -> None:
        order = Order(id=1)
        order.update_status(OrderStatus.CANCELLED)
        with pytest.raises(InvalidTransitionError, match="already cancelled") as exc_info:
            order.update_status(OrderStatus.PENDING)
        assert exc_info.value.terminal is True
        assert exc_info.value.allowed == []
        assert order.status == OrderStatus.CANCELLED

    def test_non_strict_accepts_anything(self) -> None:
        order = Order(id=1)
        order.update_status(OrderStatus.DELIVERED, strict=False)
        order.update_status(OrderStatus.PENDING, strict=False)
        assert order.status == OrderStatus.PENDING

    def test_accepts_plain_string(self) -> None:
        order = Order(id=1)
        order.update_status("preparing")  # type: ignore[arg-type]
        assert order.status is OrderStatus.PREPARING


class TestSummary:
    def test_dine_in_summary(self, catalog: Catalog) -> None:
        order = Order(id=7, customer_name="Ana")
        order.add_side_dish(catalog.get_side_dish_copy(1))
        order.calculate_total()
        data = order.summary()
        assert data["id"] == 7
        assert data["customer"] == "Ana"
        assert data["type"] == "dine_in"
        assert data["status"] == "pending"
        assert data["total"] == "5.50"
        assert data["items"] == [
            {
                "kind": "side_dish",
                "name": "Nuggets",
                "description": "Side Dish: Nuggets | Portion: Large | Price: $5.50",
                "price": "5.50",
            }
        ]
        assert "delivery_fee" not in data

    def test_delivery_summary(self) -> None:
        order = Order(id=1, order_type=OrderType.DELIVERY, delivery_address="1 Main St")
        order.calculate_total()
        data = order.summary()
        assert data["delivery_address"] == "1 Main St"
        assert data["delivery_fee"] == "3.00"

    def test_summary_does_not_recompute(self, catalog: Catalog) -> None:
        order = Order(id=1)
        order.add_pizza(catalog.get_pizza_copy(0))
        assert order.summary()["total"] == "0.00"

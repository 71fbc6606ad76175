"""Tests for the prototype catalog."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pizzeria.domain.catalog import Catalog
from pizzeria.domain.errors import OutOfRangeError
from pizzeria.domain.items import Drink, Pizza, PizzaSize, Topping


class TestStarterSet:
    def test_pizzas(self) -> None:
        pizzas = Catalog().list_pizzas()
        assert [(p.name, p.base_price) for p in pizzas] == [
            ("Margherita", Decimal("6.0")),
            ("Pepperoni", Decimal("7.5")),
            ("Vegetarian", Decimal("7.0")),
        ]

    def test_drinks(self) -> None:
        drinks = Catalog().list_drinks()
        assert [(d.name, d.volume_liters, d.carbonated) for d in drinks] == [
            ("Cola", Decimal("0.5"), True),
            ("Juice", Decimal("0.3"), False),
        ]

    def test_side_dishes(self) -> None:
        sides = Catalog().list_side_dishes()
        assert [(s.name, s.portion_size) for s in sides] == [
            ("Fries", "Medium"),
            ("Nuggets", "Large"),
        ]

    def test_toppings(self) -> None:
        toppings = Catalog().list_toppings()
        assert [(t.name, t.price) for t in toppings] == [
            ("Mushrooms", Decimal("0.5")),
            ("Olives", Decimal("0.4")),
            ("Bacon", Decimal("0.8")),
        ]


class TestCustomCatalog:
    def test_replaces_only_given_category(self) -> None:
        catalog = Catalog(toppings=[Topping(name="Pineapple", price=Decimal("1.0"))])
        assert [t.name for t in catalog.list_toppings()] == ["Pineapple"]
        assert len(catalog.list_pizzas()) == 3

    def test_empty_category(self) -> None:
        catalog = Catalog(drinks=[])
        assert catalog.list_drinks() == ()
        with pytest.raises(OutOfRangeError):
            catalog.get_drink_copy(0)

    def test_constructor_input_is_copied(self) -> None:
        source = Pizza(name="Hawaii", base_price=Decimal("8"))
        catalog = Catalog(pizzas=[source])
        source.set_size(PizzaSize.LARGE)
        assert catalog.get_pizza_copy(0).size == PizzaSize.MEDIUM


class TestCopyOut:
    def test_get_pizza_copy(self) -> None:
        pizza = Catalog().get_pizza_copy(1)
        assert pizza.name == "Pepperoni"

    def test_copy_mutation_never_reaches_catalog(self) -> None:
        catalog = Catalog()
        pizza = catalog.get_pizza_copy(0)
        pizza.set_size(PizzaSize.LARGE)
        pizza.add_topping(catalog.get_topping_copy(0))
        fresh = catalog.get_pizza_copy(0)
        assert fresh.size == PizzaSize.MEDIUM
        assert fresh.toppings == []

    def test_listed_values_are_copies(self) -> None:
        catalog = Catalog()
        catalog.list_pizzas()[0].add_topping(Topping(name="Bacon", price=Decimal("0.8")))
        assert catalog.list_pizzas()[0].toppings == []

    def test_listing_order_is_stable(self) -> None:
        catalog = Catalog()
        assert [d.name for d in catalog.list_drinks()] == [
            d.name for d in catalog.list_drinks()
        ]

    def test_each_getter(self) -> None:
        catalog = Catalog()
        assert isinstance(catalog.get_drink_copy(1), Drink)
        assert catalog.get_side_dish_copy(1).name == "Nuggets"
        assert catalog.get_topping_copy(2).name == "Bacon"


class TestOutOfRange:
    def test_past_end(self) -> None:
        catalog = Catalog()
        with pytest.raises(OutOfRangeError) as exc_info:
            catalog.get_pizza_copy(5)
        assert exc_info.value.category == "pizza"
        assert exc_info.value.index == 5
        assert exc_info.value.size == 3
        assert len(catalog.list_pizzas()) == 3

    def test_negative_index(self) -> None:
        with pytest.raises(OutOfRangeError, match=r"No topping number 0 \(menu lists 3\)") as exc_info:
            Catalog().get_topping_copy(-1)
        assert exc_info.value.index == -1
        assert exc_info.value.number == 0

    def test_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            Catalog().get_side_dish_copy(2)

    def test_message(self) -> None:
        with pytest.raises(OutOfRangeError, match="No drink number 10"):
            Catalog().get_drink_copy(9)

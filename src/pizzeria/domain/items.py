"""Menu item models — toppings, pizzas, drinks, and side dishes.

Every item kind shares the same capability set (``name``, ``base_price``,
``calculate_price()``, ``describe()``, ``clone()``) and is tagged by a
``kind`` literal so a mixed collection validates as a discriminated union
(:data:`AnyMenuItem`).

Pricing rules:

- Pizza: base price + size adjustment + sum of topping prices.
- Drink: base price + 1.00 when the volume is above 0.5 L.
- Side dish: base price + 1.50 when the portion is exactly ``"Large"``.

Prices are never floored at zero: a small pizza priced under 2.00 comes out
negative.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field

# --- Enums ---


class PizzaSize(StrEnum):
    """Pizza sizes with their price adjustments in SIZE_ADJUSTMENTS."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class BaseType(StrEnum):
    """Pizza crust styles. Informational only, no price effect."""

    THIN = "thin"
    TRADITIONAL = "traditional"
    THICK = "thick"


# --- Pricing constants ---

SIZE_ADJUSTMENTS: dict[str, Decimal] = {
    PizzaSize.SMALL: Decimal("-2"),
    PizzaSize.MEDIUM: Decimal("0"),
    PizzaSize.LARGE: Decimal("3"),
}

LARGE_DRINK_THRESHOLD_LITERS = Decimal("0.5")
LARGE_DRINK_SURCHARGE = Decimal("1.0")

LARGE_PORTION = "Large"  # exact, case-sensitive match
LARGE_PORTION_SURCHARGE = Decimal("1.5")


def _money(amount: Decimal) -> str:
    return f"${amount:.2f}"


# ---------------------------------------------------------------------------
# Topping
# ---------------------------------------------------------------------------


class Topping(BaseModel):
    """An immutable topping that can be attached to a pizza."""

    model_config = {"frozen": True}

    name: str
    price: Decimal = Field(ge=0)


# ---------------------------------------------------------------------------
# Item hierarchy
# ---------------------------------------------------------------------------


class MenuItem(BaseModel):
    """Base class for every purchasable item kind."""

    model_config = {"validate_assignment": True}

    kind: str
    name: str
    base_price: Decimal = Field(ge=0)

    def calculate_price(self) -> Decimal:
        """Final price of this item from its base price and attributes."""
        raise NotImplementedError

    def describe(self) -> str:
        """One-line human summary including the computed price."""
        raise NotImplementedError

    def clone(self) -> Self:
        """Return a deep, independently owned copy of this item."""
        return self.model_copy(deep=True)


class Pizza(MenuItem):
    """A customizable pizza. Size, base, and toppings are mutable."""

    kind: Literal["pizza"] = "pizza"
    size: PizzaSize = PizzaSize.MEDIUM
    base_type: BaseType = BaseType.TRADITIONAL
    toppings: list[Topping] = Field(default_factory=list)

    def set_size(self, size: PizzaSize) -> None:
        self.size = size

    def set_base_type(self, base_type: BaseType) -> None:
        self.base_type = base_type

    def add_topping(self, topping: Topping) -> None:
        """Append a copy of *topping*. Duplicates are allowed."""
        self.toppings.append(topping.model_copy())

    def remove_topping(self, name: str) -> int:
        """Remove every topping named exactly *name*.

        Returns the number of toppings removed (0 leaves the list untouched).
        """
        kept = [t for t in self.toppings if t.name != name]
        removed = len(self.toppings) - len(kept)
        if removed:
            self.toppings[:] = kept
        return removed

    def calculate_price(self) -> Decimal:
        price = self.base_price + SIZE_ADJUSTMENTS[self.size]
        for topping in self.toppings:
            price += topping.price
        return price

    def describe(self) -> str:
        line = (
            f"Pizza: {self.name} | Size: {self.size.title()} | "
            f"Base: {self.base_type.title()} | Price: {_money(self.calculate_price())}"
        )
        if self.toppings:
            line += f" | Toppings: {', '.join(t.name for t in self.toppings)}"
        return line


class Drink(MenuItem):
    """A drink. Immutable once constructed."""

    model_config = {"frozen": True}

    kind: Literal["drink"] = "drink"
    volume_liters: Decimal = Field(gt=0)
    carbonated: bool = False

    def calculate_price(self) -> Decimal:
        if self.volume_liters > LARGE_DRINK_THRESHOLD_LITERS:
            return self.base_price + LARGE_DRINK_SURCHARGE
        return self.base_price

    def describe(self) -> str:
        fizz = "Carbonated" if self.carbonated else "Still"
        return (
            f"Drink: {self.name} | Volume: {self.volume_liters}L | {fizz} | "
            f"Price: {_money(self.calculate_price())}"
        )


class SideDish(MenuItem):
    """A side dish. Immutable once constructed."""

    model_config = {"frozen": True}

    kind: Literal["side_dish"] = "side_dish"
    portion_size: str

    def calculate_price(self) -> Decimal:
        if self.portion_size == LARGE_PORTION:
            return self.base_price + LARGE_PORTION_SURCHARGE
        return self.base_price

    def describe(self) -> str:
        return (
            f"Side Dish: {self.name} | Portion: {self.portion_size} | "
            f"Price: {_money(self.calculate_price())}"
        )


AnyMenuItem = Annotated[Pizza | Drink | SideDish, Field(discriminator="kind")]

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pizzeria.toml only contains
overrides. An empty file (or none at all) runs the shop with the starter
menu.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pizzeria.domain.items import Drink, Pizza, SideDish, Topping

# --- pizzeria.toml sections ---


class ShopConfig(BaseModel):
    """[shop] section."""

    model_config = {"frozen": True}

    name: str = "Pizzeria"


class MenuConfig(BaseModel):
    """[menu] section.

    Each list replaces the matching starter list when present; ``None``
    keeps the starter set for that category.
    """

    model_config = {"frozen": True}

    pizzas: list[Pizza] | None = None
    drinks: list[Drink] | None = None
    side_dishes: list[SideDish] | None = None
    toppings: list[Topping] | None = None


class OrdersConfig(BaseModel):
    """[orders] section."""

    model_config = {"frozen": True}

    first_order_id: int = Field(default=1, ge=1)
    strict_transitions: bool = True


"""Shop — catalog, order-id sequence, and order book for one process.

The shop is the single owner of mutable process state. Services receive a
Shop at construction time, the same way every CLI command shares the one
created lazily by ``AppContext``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pizzeria.domain.catalog import Catalog
from pizzeria.domain.ids import OrderIdSequence
from pizzeria.domain.order import Order

if TYPE_CHECKING:
    from pizzeria.config.settings import PizzeriaSettings

logger = logging.getLogger(__name__)


class Shop:
    """In-memory state of a running pizzeria."""

    def __init__(
        self,
        settings: PizzeriaSettings,
        *,
        catalog: Catalog | None = None,
        id_sequence: OrderIdSequence | None = None,
    ) -> None:
        self.settings = settings
        if catalog is None:
            menu = settings.menu
            catalog = Catalog(
                pizzas=menu.pizzas,
                drinks=menu.drinks,
                side_dishes=menu.side_dishes,
                toppings=menu.toppings,
            )
        self.catalog = catalog
        self._ids = id_sequence or OrderIdSequence(settings.orders.first_order_id)
        self._orders: dict[int, Order] = {}

    @property
    def name(self) -> str:
        return self.settings.shop.name

    def open_order(self) -> Order:
        """Create a blank order with the next ID. Not recorded until ``record()``."""
        order = Order(id=self._ids.next_id())
        logger.debug("Opened order %d", order.id)
        return order

    def record(self, order: Order) -> None:
        """Store *order* in the order book, replacing any order with the same ID."""
        self._orders[order.id] = order
        logger.debug("Recorded order %d (%d orders held)", order.id, len(self._orders))

    def get_order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def orders(self) -> list[Order]:
        """All recorded orders in ID order."""
        return [self._orders[k] for k in sorted(self._orders)]

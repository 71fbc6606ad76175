"""BaseService — foundation for all pizzeria services.

Every service receives a :class:`Shop` at construction time. The shop
provides the catalog, the order-id sequence, and the in-memory order book.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pizzeria.infrastructure.shop import Shop


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class MenuService(BaseService):
            def show_menu(self) -> ServiceResult:
                pizzas = self._shop.catalog.list_pizzas()
                ...
    """

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

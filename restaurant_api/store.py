"""
In-Memory Store

Holds the dish and order collections for the lifetime of the process.
Nothing is persisted across restarts.

One store is attached to each FastAPI application (``app.state.store``)
and handed to route handlers through the ``get_store`` dependency,
so tests can build fully isolated applications.
"""

import copy
import logging
from typing import Iterable, Optional

from fastapi import Request

from restaurant_api.schemas import Dish, Order
from restaurant_api.services.ids import BaseIdGenerator, get_id_generator

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Ordered dish and order collections plus the id generator."""

    def __init__(self, id_generator: Optional[BaseIdGenerator] = None):
        self.id_generator = id_generator or get_id_generator()
        self.dishes: list[Dish] = []
        self.orders: list[Order] = []

    def next_id(self) -> str:
        """Return a fresh id not used by any stored dish or order."""
        taken = {dish.id for dish in self.dishes} | {order.id for order in self.orders}
        new_id = self.id_generator.next_id()
        while new_id in taken:
            new_id = self.id_generator.next_id()
        return new_id

    # =========================================================================
    # DISHES
    # =========================================================================

    def find_dish(self, dish_id: str) -> Optional[Dish]:
        return next((dish for dish in self.dishes if dish.id == dish_id), None)

    def add_dish(self, dish: Dish) -> Dish:
        self.dishes.append(dish)
        return dish

    # =========================================================================
    # ORDERS
    # =========================================================================

    def find_order(self, order_id: str) -> Optional[Order]:
        return next((order for order in self.orders if order.id == order_id), None)

    def add_order(self, order: Order) -> Order:
        self.orders.append(order)
        return order

    def remove_order(self, order_id: str) -> bool:
        """Remove an order by id. Returns False if no order matched."""
        for index, order in enumerate(self.orders):
            if order.id == order_id:
                del self.orders[index]
                return True
        return False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def reset(self) -> None:
        """Drop every stored record."""
        self.dishes.clear()
        self.orders.clear()

    def load_seed(self, dishes: Iterable[dict], orders: Iterable[dict]) -> None:
        """
        Load records from plain dictionaries.

        The input is deep-copied, so later mutations of stored
        records never leak back into the seed data.
        """
        for raw in copy.deepcopy(list(dishes)):
            self.add_dish(Dish.model_validate(raw))
        for raw in copy.deepcopy(list(orders)):
            self.add_order(Order.model_validate(raw))
        logger.info(f"Seeded store with {len(self.dishes)} dishes and {len(self.orders)} orders")


def get_store(request: Request) -> InMemoryStore:
    """
    Dependency injection for FastAPI routes.
    Returns the store attached to the running application.
    """
    return request.app.state.store

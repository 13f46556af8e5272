"""
                        Services Module

Business logic for each resource, plus the id generators they share.

Services:
    - dishes: Dish validation chains and handlers
    - orders: Order validation chains and handlers
    - ids: UUID / sequential id generation
"""

from restaurant_api.services.dishes import DishService
from restaurant_api.services.orders import OrderService

__all__ = ["DishService", "OrderService"]

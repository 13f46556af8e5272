"""
Dish Service

Validation chains and handlers for the dish resource.
Dishes can be listed, created, read and updated, never deleted.
"""

import logging
from typing import TYPE_CHECKING, Any

from restaurant_api.errors import ClientError, NotFoundError
from restaurant_api.schemas import Dish
from restaurant_api.validation import (
    VALID,
    RequestContext,
    ValidationResult,
    body_has_field,
    body_id_matches_route_id,
    invalid,
    is_positive_number,
    run_chain,
)

if TYPE_CHECKING:
    from restaurant_api.store import InMemoryStore

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATORS
# =============================================================================

body_has_name = body_has_field("name", "Dish must include a name.")
body_has_description = body_has_field("description", "Dish must include a description.")
body_has_image_url = body_has_field("image_url", "Dish must include an image_url.")
dish_id_matches_route_id = body_id_matches_route_id("Dish")


def body_has_valid_price(context: RequestContext) -> ValidationResult:
    if not is_positive_number(context.body.get("price")):
        return invalid(ClientError(
            "Dish must include a price and it must be an integer greater than 0."
        ))
    return VALID


def dish_exists(context: RequestContext) -> ValidationResult:
    dish = context.store.find_dish(context.route_id)
    if dish is None:
        return invalid(NotFoundError(f"Dish does not exist: {context.route_id}."))
    context.record = dish
    return VALID


CREATE_CHAIN = [
    body_has_name,
    body_has_description,
    body_has_valid_price,
    body_has_image_url,
]

READ_CHAIN = [dish_exists]

UPDATE_CHAIN = [
    dish_exists,
    body_has_name,
    body_has_description,
    body_has_valid_price,
    body_has_image_url,
    dish_id_matches_route_id,
]


# =============================================================================
# SERVICE
# =============================================================================

class DishService:
    """Dish operations against an InMemoryStore."""

    def __init__(self, store: "InMemoryStore"):
        self.store = store

    def list(self) -> list[Dish]:
        return self.store.dishes

    def create(self, body: dict[str, Any]) -> Dish:
        run_chain(CREATE_CHAIN, RequestContext(store=self.store, body=body))

        dish = Dish(
            id=self.store.next_id(),
            name=body["name"],
            description=body["description"],
            price=body["price"],
            image_url=body["image_url"],
        )
        self.store.add_dish(dish)
        logger.info(f"Dish {dish.id} created")
        return dish

    def read(self, dish_id: str) -> Dish:
        context = run_chain(READ_CHAIN, RequestContext(store=self.store, route_id=dish_id))
        return context.record

    def update(self, dish_id: str, body: dict[str, Any]) -> Dish:
        """
        Overwrite every field of an existing dish except its id.

        Raises:
            NotFoundError: If no dish has this id
            ClientError: If a field is invalid or the body id differs from dish_id
        """
        context = run_chain(
            UPDATE_CHAIN,
            RequestContext(store=self.store, body=body, route_id=dish_id),
        )
        dish: Dish = context.record

        dish.name = body["name"]
        dish.description = body["description"]
        dish.price = body["price"]
        dish.image_url = body["image_url"]

        logger.info(f"Dish {dish.id} updated")
        return dish

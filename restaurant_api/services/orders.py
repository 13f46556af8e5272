"""
Order Service

Validation chains and handlers for the order resource.

Status workflow: pending -> preparing -> out-for-delivery -> delivered.
New orders start as pending unless the body carries a known status.
Only pending orders can be deleted.

Note on updates: the "delivered" check looks at the status submitted
in the request body, not at the status currently stored. Submitting
``delivered`` is always rejected, while an order already stored as
delivered can still be updated to another status.
"""

import logging
from typing import TYPE_CHECKING, Any

from restaurant_api.errors import ClientError, NotFoundError
from restaurant_api.schemas import Order, OrderDish, OrderStatusEnum
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

body_has_deliver_to = body_has_field("deliverTo", "Order must include a deliverTo property.")
body_has_mobile_number = body_has_field("mobileNumber", "Order must include a mobileNumber property.")
order_id_matches_route_id = body_id_matches_route_id("Order")


def body_has_dishes(context: RequestContext) -> ValidationResult:
    dishes = context.body.get("dishes")
    if not isinstance(dishes, list) or not dishes:
        return invalid(ClientError("Order must include at least one dish."))
    return VALID


def invalid_quantity_indices(dishes: list[Any]) -> list[int]:
    """Indices of order lines whose quantity is not a number greater than 0."""
    return [
        index
        for index, line in enumerate(dishes)
        if not isinstance(line, dict) or not is_positive_number(line.get("quantity"))
    ]


def body_has_dish_quantities(context: RequestContext) -> ValidationResult:
    indices = invalid_quantity_indices(context.body["dishes"])
    if not indices:
        return VALID

    if len(indices) > 1:
        listed = ", ".join(str(index) for index in indices)
        message = f"Dishes {listed} must have a quantity that is an integer greater than 0."
    else:
        message = f"Dish {indices[0]} must have a quantity that is an integer greater than 0."
    return invalid(ClientError(message))


STATUS_MESSAGE = "Order must have a status of pending, preparing, out-for-delivery, or delivered."


def body_status_is_known_if_present(context: RequestContext) -> ValidationResult:
    status = context.body.get("status")
    if status is not None and status not in OrderStatusEnum.values():
        return invalid(ClientError(STATUS_MESSAGE))
    return VALID


def body_has_valid_status(context: RequestContext) -> ValidationResult:
    status = context.body.get("status")
    if status not in OrderStatusEnum.values():
        return invalid(ClientError(STATUS_MESSAGE))
    if status == OrderStatusEnum.DELIVERED.value:
        return invalid(ClientError("A delivered order cannot be changed."))
    return VALID


def order_exists(context: RequestContext) -> ValidationResult:
    order = context.store.find_order(context.route_id)
    if order is None:
        return invalid(NotFoundError(f"No matching order found for orderId {context.route_id}."))
    context.record = order
    return VALID


def order_is_pending(context: RequestContext) -> ValidationResult:
    if context.record.status != OrderStatusEnum.PENDING:
        return invalid(ClientError("An order cannot be deleted unless it is pending."))
    return VALID


CREATE_CHAIN = [
    body_has_deliver_to,
    body_has_mobile_number,
    body_has_dishes,
    body_has_dish_quantities,
    body_status_is_known_if_present,
]

READ_CHAIN = [order_exists]

UPDATE_CHAIN = [
    order_exists,
    body_has_deliver_to,
    body_has_mobile_number,
    body_has_dishes,
    body_has_dish_quantities,
    order_id_matches_route_id,
    body_has_valid_status,
]

DELETE_CHAIN = [order_exists, order_is_pending]


# =============================================================================
# SERVICE
# =============================================================================

def _order_lines(dishes: list[dict[str, Any]]) -> list[OrderDish]:
    return [OrderDish.model_validate(line) for line in dishes]


class OrderService:
    """Order operations against an InMemoryStore."""

    def __init__(self, store: "InMemoryStore"):
        self.store = store

    def list(self) -> list[Order]:
        return self.store.orders

    def create(self, body: dict[str, Any]) -> Order:
        run_chain(CREATE_CHAIN, RequestContext(store=self.store, body=body))

        order = Order(
            id=self.store.next_id(),
            deliver_to=body["deliverTo"],
            mobile_number=body["mobileNumber"],
            status=OrderStatusEnum(body.get("status") or OrderStatusEnum.PENDING),
            dishes=_order_lines(body["dishes"]),
        )
        self.store.add_order(order)
        logger.info(f"Order {order.id} created with {len(order.dishes)} dish(es)")
        return order

    def read(self, order_id: str) -> Order:
        context = run_chain(READ_CHAIN, RequestContext(store=self.store, route_id=order_id))
        return context.record

    def update(self, order_id: str, body: dict[str, Any]) -> Order:
        """
        Overwrite deliverTo, mobileNumber, dishes and status of an order.

        Raises:
            NotFoundError: If no order has this id
            ClientError: If a field is invalid, the body id differs from
                order_id, or the submitted status is invalid or delivered
        """
        context = run_chain(
            UPDATE_CHAIN,
            RequestContext(store=self.store, body=body, route_id=order_id),
        )
        order: Order = context.record

        order.deliver_to = body["deliverTo"]
        order.mobile_number = body["mobileNumber"]
        order.dishes = _order_lines(body["dishes"])
        order.status = OrderStatusEnum(body["status"])

        logger.info(f"Order {order.id} updated (status={order.status.value})")
        return order

    def delete(self, order_id: str) -> None:
        """
        Remove a pending order.

        Raises:
            NotFoundError: If no order has this id
            ClientError: If the order is not pending
        """
        run_chain(DELETE_CHAIN, RequestContext(store=self.store, route_id=order_id))
        self.store.remove_order(order_id)
        logger.info(f"Order {order_id} deleted")

"""
Pydantic Schemas for Records and Responses

Dishes and orders are stored as these models and serialized with
their wire field names (e.g. ``deliverTo``, ``mobileNumber``).
Request bodies are NOT parsed through these models: the validation
chains check raw bodies first so that every failure carries its
own message.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Number = Union[int, float]


# =============================================================================
# ENUMS
# =============================================================================

class OrderStatusEnum(str, Enum):
    """Order status workflow. DELIVERED is terminal."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


# =============================================================================
# RECORDS
# =============================================================================

class Dish(BaseModel):
    """A menu dish."""
    id: str
    name: str = Field(..., examples=["Dolcelatte and chickpea spaghetti"])
    description: str = Field(..., examples=["Spaghetti topped with a blend of dolcelatte and fresh chickpeas"])
    price: Number = Field(..., examples=[19])
    image_url: str = Field(..., examples=["https://images.example.com/spaghetti.jpg"])


class OrderDish(BaseModel):
    """
    A single line of an order.

    Carries the quantity plus whatever dish reference fields the
    client submitted (id, name, description, price, image_url).
    """
    model_config = ConfigDict(extra="allow")

    quantity: Number = Field(..., examples=[2])


class Order(BaseModel):
    """A customer order."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: str = Field(..., alias="deliverTo", examples=["308 Negra Arroyo Lane, Albuquerque, NM"])
    mobile_number: str = Field(..., alias="mobileNumber", examples=["(505) 143-3369"])
    status: OrderStatusEnum = OrderStatusEnum.PENDING
    dishes: List[OrderDish] = Field(..., min_length=1)

    def to_wire(self) -> dict:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishResponse(BaseModel):
    """Envelope for a single dish."""
    data: Dish


class DishListResponse(BaseModel):
    """Envelope for the full dish list."""
    data: List[Dish]


class OrderResponse(BaseModel):
    """Envelope for a single order."""
    data: Order


class OrderListResponse(BaseModel):
    """Envelope for the full order list."""
    data: List[Order]


class ErrorResponse(BaseModel):
    """Standard error response."""
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    dishes: int
    orders: int
    id_generator: str
    timestamp: datetime
    environment: Optional[str] = None

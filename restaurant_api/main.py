"""
FastAPI Application Entry Point

Restaurant Ordering API - in-memory dishes and orders.

Endpoints:
    - GET    /dishes             List dishes
    - POST   /dishes             Create a dish
    - GET    /dishes/{dish_id}   Read a dish
    - PUT    /dishes/{dish_id}   Update a dish
    - GET    /orders             List orders
    - POST   /orders             Create an order
    - GET    /orders/{order_id}  Read an order
    - PUT    /orders/{order_id}  Update an order
    - DELETE /orders/{order_id}  Delete a pending order
    - GET    /health             System health check

Request bodies are wrapped as {"data": {...}}; successful responses
are wrapped the same way. Errors are returned as {"message": "..."}.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from restaurant_api.core.config import Settings, get_settings, setup_logging
from restaurant_api.data import DISHES, ORDERS
from restaurant_api.errors import register_error_handlers
from restaurant_api.schemas import (
    DishListResponse,
    DishResponse,
    ErrorResponse,
    HealthResponse,
    OrderListResponse,
    OrderResponse,
)
from restaurant_api.services import DishService, OrderService
from restaurant_api.store import InMemoryStore, get_store
from restaurant_api.validation import read_body

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_dish_service(store: InMemoryStore = Depends(get_store)) -> DishService:
    return DishService(store)


def get_order_service(store: InMemoryStore = Depends(get_store)) -> OrderService:
    return OrderService(store)


# =============================================================================
# DISH ENDPOINTS
# =============================================================================

dishes_router = APIRouter(prefix="/dishes", tags=["Dishes"])


@dishes_router.get("", response_model=DishListResponse, summary="List Dishes")
async def list_dishes(
    service: DishService = Depends(get_dish_service),
) -> DishListResponse:
    """Return every dish, in creation order."""
    return DishListResponse(data=service.list())


@dishes_router.post(
    "",
    response_model=DishResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    summary="Create Dish",
)
async def create_dish(
    body: dict[str, Any] = Depends(read_body),
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    """Create a dish. name, description, price and image_url are required."""
    return DishResponse(data=service.create(body))


@dishes_router.get(
    "/{dish_id}",
    response_model=DishResponse,
    responses=ERROR_RESPONSES,
    summary="Read Dish",
)
async def read_dish(
    dish_id: str,
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    return DishResponse(data=service.read(dish_id))


@dishes_router.put(
    "/{dish_id}",
    response_model=DishResponse,
    responses=ERROR_RESPONSES,
    summary="Update Dish",
)
async def update_dish(
    dish_id: str,
    body: dict[str, Any] = Depends(read_body),
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    """Replace every field of a dish except its id."""
    return DishResponse(data=service.update(dish_id, body))


# =============================================================================
# ORDER ENDPOINTS
# =============================================================================

orders_router = APIRouter(prefix="/orders", tags=["Orders"])


@orders_router.get("", response_model=OrderListResponse, summary="List Orders")
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> OrderListResponse:
    """Return every order, in creation order."""
    return OrderListResponse(data=service.list())


@orders_router.post(
    "",
    response_model=OrderResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    summary="Create Order",
)
async def create_order(
    body: dict[str, Any] = Depends(read_body),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Create an order, pending unless a known status is submitted.

    deliverTo, mobileNumber and a non-empty dishes list are required,
    and every dish needs a quantity greater than 0.
    """
    return OrderResponse(data=service.create(body))


@orders_router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses=ERROR_RESPONSES,
    summary="Read Order",
)
async def read_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    return OrderResponse(data=service.read(order_id))


@orders_router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses=ERROR_RESPONSES,
    summary="Update Order",
)
async def update_order(
    order_id: str,
    body: dict[str, Any] = Depends(read_body),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Replace deliverTo, mobileNumber, dishes and status of an order."""
    return OrderResponse(data=service.update(order_id, body))


@orders_router.delete(
    "/{order_id}",
    status_code=204,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete Order",
)
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> Response:
    """Delete an order. Only pending orders can be deleted."""
    service.delete(order_id)
    return Response(status_code=204)


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

system_router = APIRouter()


@system_router.get("/", tags=["Root"])
async def root(request: Request) -> dict[str, str]:
    """API root with navigation links."""
    settings: Settings = request.app.state.settings
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
    }


@system_router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> HealthResponse:
    """Report store sizes and the active id generator."""
    return HealthResponse(
        status="operational",
        dishes=len(store.dishes),
        orders=len(store.orders),
        id_generator=store.id_generator.provider_name,
        environment=request.app.state.settings.env_mode.value,
        timestamp=datetime.now(),
    )


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    settings: Settings = app.state.settings
    store: InMemoryStore = app.state.store

    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Id Generator: {store.id_generator.provider_name}")
    logger.info(f"   Records: {len(store.dishes)} dishes, {len(store.orders)} orders")
    logger.info("=" * 60)

    yield  # Application runs

    logger.info("Shutting down...")
    if app.state.owns_store:
        store.reset()
    logger.info("Cleanup complete")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(
    store: Optional[InMemoryStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve from. A new one is built when omitted,
            seeded with the sample data if SEED_DATA is enabled.
            Only a store built here is cleared on shutdown.
        settings: Settings override, mainly for tests

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or get_settings()
    owns_store = store is None

    if owns_store:
        store = InMemoryStore()
        if settings.seed_data:
            store.load_seed(DISHES, ORDERS)

    app = FastAPI(
        title=settings.app_name,
        description="REST backend for a restaurant ordering application.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.owns_store = owns_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(system_router)
    app.include_router(dishes_router)
    app.include_router(orders_router)

    return app


setup_logging()
app = create_app()

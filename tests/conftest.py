"""
Shared fixtures.

Every test gets its own store and application, so no state leaks
between tests. Ids come from a sequential generator ("1", "2", ...).
"""

import pytest
from fastapi.testclient import TestClient

from restaurant_api.main import create_app
from restaurant_api.services.ids import SequentialIdGenerator
from restaurant_api.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(id_generator=SequentialIdGenerator())


@pytest.fixture
def client(store: InMemoryStore) -> TestClient:
    return TestClient(create_app(store=store))


@pytest.fixture
def dish_payload() -> dict:
    return {
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://example.com/spaghetti.jpg",
    }


@pytest.fixture
def order_payload() -> dict:
    return {
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "dishes": [
            {
                "id": "d351db2b49b69679504652ea1cf38241",
                "name": "Dolcelatte and chickpea spaghetti",
                "price": 19,
                "quantity": 2,
            },
        ],
    }

"""
Tests for application wiring: root, health, error mapping and settings.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from restaurant_api.core.config import EnvironmentMode, IdStrategy, Settings
from restaurant_api.main import create_app
from restaurant_api.services.ids import SequentialIdGenerator
from restaurant_api.store import InMemoryStore


class TestSystemEndpoints:
    """Tests for / and /health."""

    def test_root(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == "/health"

    def test_health_reports_store(self, client: TestClient, dish_payload: dict) -> None:
        client.post("/dishes", json={"data": dish_payload})

        data = client.get("/health").json()

        assert data["status"] == "operational"
        assert data["dishes"] == 1
        assert data["orders"] == 0
        assert data["id_generator"] == "sequential"

    def test_reports_injected_settings(self, store: InMemoryStore) -> None:
        settings = Settings(env_mode="staging", seed_data=False)
        client = TestClient(create_app(store=store, settings=settings))

        assert client.get("/").json()["environment"] == "staging"
        assert client.get("/health").json()["environment"] == "staging"


class TestErrorMapping:
    """Every error uses the {"message": ...} body."""

    def test_unknown_path(self, client: TestClient) -> None:
        response = client.get("/menus")

        assert response.status_code == 404
        assert response.json() == {"message": "Path not found: /menus"}

    def test_method_not_allowed(self, client: TestClient) -> None:
        response = client.patch("/orders")

        assert response.status_code == 405
        assert response.json() == {"message": "PATCH not allowed for /orders"}

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/dishes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Request body must be valid JSON."}

    def test_body_not_utf8(self, client: TestClient) -> None:
        response = client.post(
            "/dishes",
            content=b'{"data": "\x80"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Request body must be valid JSON."}

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post("/orders")

        assert response.status_code == 400
        assert response.json() == {"message": "Order must include a deliverTo property."}

    @pytest.mark.parametrize(
        "debug, message",
        [
            (False, "Internal Server Error"),
            (True, "Internal Server Error: kitchen on fire"),
        ],
    )
    def test_unhandled_error_detail_follows_app_settings(
        self, store: InMemoryStore, debug: bool, message: str
    ) -> None:
        app = create_app(store=store, settings=Settings(debug=debug, seed_data=False))

        async def kitchen() -> None:
            raise RuntimeError("kitchen on fire")

        app.add_api_route("/kitchen", kitchen)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/kitchen")

        assert response.status_code == 500
        assert response.json() == {"message": message}


class TestCreateApp:
    """Tests for the application factory."""

    def test_explicit_store_is_served_as_given(self) -> None:
        settings = Settings(seed_data=True)
        store = InMemoryStore(id_generator=SequentialIdGenerator())

        client = TestClient(create_app(store=store, settings=settings))

        assert client.get("/dishes").json()["data"] == []

    def test_builds_seeded_store(self) -> None:
        app = create_app(settings=Settings(seed_data=True))

        assert len(app.state.store.dishes) > 0
        assert len(app.state.store.orders) > 0

    def test_builds_empty_store_without_seed(self) -> None:
        app = create_app(settings=Settings(seed_data=False))

        assert app.state.store.dishes == []

    def test_apps_do_not_share_state(self, dish_payload: dict) -> None:
        settings = Settings(seed_data=False)
        first = TestClient(create_app(settings=settings))
        second = TestClient(create_app(settings=settings))

        first.post("/dishes", json={"data": dish_payload})

        assert len(first.get("/dishes").json()["data"]) == 1
        assert second.get("/dishes").json()["data"] == []

    def test_shutdown_keeps_injected_store(
        self, store: InMemoryStore, dish_payload: dict
    ) -> None:
        with TestClient(create_app(store=store)) as client:
            client.post("/dishes", json={"data": dish_payload})

        assert len(store.dishes) == 1

    def test_shutdown_clears_built_store(self, dish_payload: dict) -> None:
        app = create_app(settings=Settings(seed_data=True))

        with TestClient(app) as client:
            client.post("/dishes", json={"data": dish_payload})

        assert app.state.store.dishes == []
        assert app.state.store.orders == []


class TestSettings:
    """Tests for Settings validators."""

    def test_env_mode_is_case_insensitive(self) -> None:
        settings = Settings(env_mode="PRODUCTION")

        assert settings.env_mode == EnvironmentMode.PRODUCTION
        assert settings.is_production

    def test_invalid_env_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(env_mode="qa")

    def test_id_strategy(self) -> None:
        assert Settings(id_strategy="Sequential").id_strategy == IdStrategy.SEQUENTIAL

        with pytest.raises(ValidationError):
            Settings(id_strategy="random")

    def test_cors_origins_list(self) -> None:
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

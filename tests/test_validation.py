"""
Tests for the validation chain primitives.
"""

import math

import pytest

from restaurant_api.errors import ClientError, NotFoundError
from restaurant_api.services.orders import invalid_quantity_indices
from restaurant_api.validation import (
    VALID,
    RequestContext,
    body_has_field,
    body_id_matches_route_id,
    extract_data,
    invalid,
    is_positive_number,
    is_present,
    run_chain,
)


class TestRunChain:
    """Tests for run_chain."""

    def test_runs_every_validator_when_all_pass(self) -> None:
        calls = []

        def first(context):
            calls.append("first")
            return VALID

        def second(context):
            calls.append("second")
            return VALID

        context = RequestContext(store=None)

        assert run_chain([first, second], context) is context
        assert calls == ["first", "second"]

    def test_stops_at_first_failure(self) -> None:
        calls = []

        def failing(context):
            calls.append("failing")
            return invalid(NotFoundError("gone"))

        def never(context):
            calls.append("never")
            return invalid(ClientError("unreachable"))

        with pytest.raises(NotFoundError) as exc_info:
            run_chain([failing, never], RequestContext(store=None))

        assert exc_info.value.message == "gone"
        assert exc_info.value.status_code == 404
        assert calls == ["failing"]

    def test_empty_chain_passes(self) -> None:
        context = RequestContext(store=None, body={"a": 1})

        assert run_chain([], context) is context


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_valid_is_ok(self) -> None:
        assert VALID.ok
        assert VALID.error is None

    def test_invalid_carries_error(self) -> None:
        result = invalid(ClientError("bad"))

        assert not result.ok
        assert result.error == ClientError("bad")


class TestFieldChecks:
    """Tests for the field predicates."""

    @pytest.mark.parametrize("value", ["x", "  ", "308 Negra Arroyo Lane"])
    def test_present(self, value) -> None:
        assert is_present(value)

    @pytest.mark.parametrize("value", [None, "", 0, 5, [], ["x"], {}])
    def test_not_present(self, value) -> None:
        assert not is_present(value)

    @pytest.mark.parametrize("value", [1, 17, 0.5, 1e9])
    def test_positive_number(self, value) -> None:
        assert is_positive_number(value)

    @pytest.mark.parametrize(
        "value", [0, -1, -0.5, True, False, "3", None, math.nan, math.inf, -math.inf, [1]]
    )
    def test_not_positive_number(self, value) -> None:
        assert not is_positive_number(value)

    def test_body_has_field(self) -> None:
        validator = body_has_field("name", "Dish must include a name.")

        assert validator(RequestContext(store=None, body={"name": "Soup"})).ok
        result = validator(RequestContext(store=None, body={}))
        assert result.error == ClientError("Dish must include a name.")
        assert validator.__name__ == "body_has_name"

    def test_body_id_matches_route_id(self) -> None:
        validator = body_id_matches_route_id("Order")

        assert validator(RequestContext(store=None, body={}, route_id="1")).ok
        assert validator(RequestContext(store=None, body={"id": "1"}, route_id="1")).ok
        assert validator(RequestContext(store=None, body={"id": None}, route_id="1")).ok
        result = validator(RequestContext(store=None, body={"id": "2"}, route_id="1"))
        assert result.error.message == "Order id does not match route id. Order: 2, Route: 1"


class TestQuantityIndices:
    """Tests for invalid_quantity_indices."""

    def test_all_valid(self) -> None:
        assert invalid_quantity_indices([{"quantity": 1}, {"quantity": 2.5}]) == []

    def test_collects_every_invalid_index(self) -> None:
        lines = [{"quantity": 1}, {}, {"quantity": 0}, "x", {"quantity": 3}]

        assert invalid_quantity_indices(lines) == [1, 2, 3]


class TestExtractData:
    """Tests for extract_data."""

    def test_returns_data_object(self) -> None:
        assert extract_data({"data": {"name": "Soup"}}) == {"name": "Soup"}

    @pytest.mark.parametrize("payload", [None, [], "text", {}, {"data": None}, {"data": [1]}])
    def test_anything_else_is_empty(self, payload) -> None:
        assert extract_data(payload) == {}

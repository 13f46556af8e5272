"""
Validation Chains

A chain is an ordered list of validators. Each validator inspects a
RequestContext and returns a ValidationResult: VALID, or an invalid
result carrying the error to report. ``run_chain`` applies them in
order and raises the first error, so later checks never run after a
failure and no mutation happens on invalid input.

Validators that look a record up (e.g. "dish exists") store it on the
context for the checks and handler that follow.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from fastapi import Request

from restaurant_api.errors import ClientError, RestaurantAPIError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validator: ``error`` is None when the check passed."""
    error: Optional[RestaurantAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


VALID = ValidationResult()


def invalid(error: RestaurantAPIError) -> ValidationResult:
    return ValidationResult(error=error)


@dataclass
class RequestContext:
    """
    Everything a validator may look at.

    Attributes:
        store: The InMemoryStore serving the request
        body: The ``data`` object of the request body
        route_id: Resource id from the request path, if any
        record: Record resolved by an "exists" validator
    """
    store: Any
    body: dict[str, Any] = field(default_factory=dict)
    route_id: Optional[str] = None
    record: Any = None


Validator = Callable[[RequestContext], ValidationResult]


def run_chain(validators: Sequence[Validator], context: RequestContext) -> RequestContext:
    """
    Apply validators in order, stopping at the first failure.

    Raises:
        RestaurantAPIError: The error carried by the first failing validator
    """
    for validator in validators:
        result = validator(context)
        if not result.ok:
            logger.debug(f"Validation failed at {validator.__name__}: {result.error.message}")
            raise result.error
    return context


# =============================================================================
# FIELD CHECKS
# =============================================================================

def is_present(value: Any) -> bool:
    """A non-empty string."""
    return isinstance(value, str) and bool(value)


def is_positive_number(value: Any) -> bool:
    """A finite int or float greater than zero. Booleans, NaN and infinity do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def body_has_field(field_name: str, message: str) -> Validator:
    """Build a validator requiring ``field_name`` to be a non-empty string."""

    def validator(context: RequestContext) -> ValidationResult:
        if not is_present(context.body.get(field_name)):
            return invalid(ClientError(message))
        return VALID

    validator.__name__ = f"body_has_{field_name}"
    return validator


def body_id_matches_route_id(kind: str) -> Validator:
    """Build a validator rejecting a body id that differs from the route id."""

    def validator(context: RequestContext) -> ValidationResult:
        body_id = context.body.get("id")
        if body_id and body_id != context.route_id:
            return invalid(ClientError(
                f"{kind} id does not match route id. {kind}: {body_id}, Route: {context.route_id}"
            ))
        return VALID

    validator.__name__ = f"{kind.lower()}_id_matches_route_id"
    return validator


# =============================================================================
# REQUEST BODY
# =============================================================================

def extract_data(payload: Any) -> dict[str, Any]:
    """Return the ``data`` object of a request payload, or an empty dict."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return {}


async def read_body(request: Request) -> dict[str, Any]:
    """
    Dependency returning the ``data`` object of the JSON request body.

    An empty body counts as ``{}`` so the first field check reports it.

    Raises:
        ClientError: If the body is not valid JSON
    """
    if not await request.body():
        return {}
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ClientError("Request body must be valid JSON.") from exc
    return extract_data(payload)

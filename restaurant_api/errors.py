"""
Domain Errors and HTTP Error Handlers

Errors raised by the validation chains carry their own HTTP status code.
The handlers registered here turn them into the standard error body:

    {"message": "..."}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


# =============================================================================
# DOMAIN ERRORS
# =============================================================================

class RestaurantAPIError(Exception):
    """Base error for every failure reported to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.status_code == other.status_code
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.status_code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ClientError(RestaurantAPIError):
    """Malformed, missing or invalid field, id mismatch, illegal state change."""

    status_code = 400


class NotFoundError(RestaurantAPIError):
    """An id that does not resolve to a record."""

    status_code = 404


# =============================================================================
# HTTP HANDLERS
# =============================================================================

def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """
    Register error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RestaurantAPIError)
    async def handle_api_error(
        request: Request, exc: RestaurantAPIError
    ) -> JSONResponse:
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            message = f"Path not found: {request.url.path}"
        elif exc.status_code == 405:
            message = f"{request.method} not allowed for {request.url.path}"
        else:
            message = str(exc.detail)
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}")
        return error_response(exc.status_code, message)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        if request.app.state.settings.debug:
            return error_response(500, f"Internal Server Error: {exc}")
        return error_response(500, "Internal Server Error")

"""
Run the API with uvicorn.

Usage:
    python -m restaurant_api
"""

import uvicorn

from restaurant_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development and settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()

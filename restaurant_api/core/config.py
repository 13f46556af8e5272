"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.

The ID_STRATEGY variable controls which id generator the store uses:
    - uuid: random 32-character hex ids (default)
    - sequential: deterministic counter ids, handy for demos and tests

Usage:
    from restaurant_api.core.config import get_settings

    settings = get_settings()
    if settings.seed_data:
        # Load the sample menu
"""

import logging
import sys
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local work, docs enabled, sample data loaded
        PRODUCTION: Live deployment
        STAGING: Pre-production deployment
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class IdStrategy(str, Enum):
    """How new record ids are generated."""
    UUID = "uuid"
    SEQUENTIAL = "sequential"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging and error details

        # API Configuration
        api_host: Host to bind the API server
        api_port: Port for the API server
        cors_origins: Comma-separated list of allowed CORS origins

        # Store
        id_strategy: Id generator used for new dishes and orders
        id_prefix: Prefix prepended to sequential ids
        seed_data: Load the sample menu and orders at startup
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Restaurant Ordering API",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API server host"
    )
    api_port: int = Field(
        default=5000,
        description="API server port"
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # ==========================================================================
    # STORE
    # ==========================================================================

    id_strategy: IdStrategy = Field(
        default=IdStrategy.UUID,
        description="Id generator for new records (uuid or sequential)"
    )
    id_prefix: str = Field(
        default="",
        description="Prefix for sequential ids"
    )
    seed_data: bool = Field(
        default=True,
        description="Load the sample menu and orders at startup"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    @field_validator("id_strategy", mode="before")
    @classmethod
    def validate_id_strategy(cls, v: str) -> IdStrategy:
        """Convert string to IdStrategy enum."""
        if isinstance(v, IdStrategy):
            return v
        try:
            return IdStrategy(v.lower())
        except ValueError:
            valid = [e.value for e in IdStrategy]
            raise ValueError(f"Invalid id_strategy. Must be one of: {valid}")

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env_mode == EnvironmentMode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env_mode == EnvironmentMode.PRODUCTION

    @property
    def cors_origins_list(self) -> list[str]:
        """Get allowed CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded only once and shared across the
    application lifecycle.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.id_strategy)
        IdStrategy.UUID
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-30s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("restaurant_api")

"""
Core module initialization.
Exports configuration and logging utilities.
"""

from restaurant_api.core.config import (
    EnvironmentMode,
    IdStrategy,
    Settings,
    get_settings,
    setup_logging,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "IdStrategy",
]

"""
Id Generator Factory

Provides a single entry point for obtaining an id generator.
Selects UUID or sequential ids based on ID_STRATEGY configuration.

Usage:
    from restaurant_api.services.ids import get_id_generator

    generator = get_id_generator()
    new_id = generator.next_id()
"""

import logging
from functools import lru_cache

from restaurant_api.core.config import IdStrategy, get_settings
from restaurant_api.services.ids.base import BaseIdGenerator
from restaurant_api.services.ids.sequential import SequentialIdGenerator
from restaurant_api.services.ids.uuid_generator import UuidIdGenerator

logger = logging.getLogger(__name__)


@lru_cache()
def get_id_generator() -> BaseIdGenerator:
    """
    Get the configured id generator instance.

    Returns:
        BaseIdGenerator: UuidIdGenerator or SequentialIdGenerator
    """
    settings = get_settings()

    if settings.id_strategy == IdStrategy.SEQUENTIAL:
        logger.info("Id Generator: Using SequentialIdGenerator")
        return SequentialIdGenerator(prefix=settings.id_prefix)

    logger.info("Id Generator: Using UuidIdGenerator")
    return UuidIdGenerator()


def reset_id_generator() -> None:
    """
    Clear the cached id generator instance.

    Useful for testing or when configuration changes at runtime.
    """
    get_id_generator.cache_clear()
    logger.debug("Id generator cache cleared")


__all__ = [
    "get_id_generator",
    "reset_id_generator",
    "BaseIdGenerator",
    "SequentialIdGenerator",
    "UuidIdGenerator",
]

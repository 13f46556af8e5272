"""
Sequential Id Generator

Deterministic counter ids ("1", "2", ...), optionally prefixed.
Used by tests and demos where predictable ids matter.
"""

import itertools
import logging

from restaurant_api.services.ids.base import BaseIdGenerator

logger = logging.getLogger(__name__)


class SequentialIdGenerator(BaseIdGenerator):
    """Generates ids from an incrementing counter."""

    def __init__(self, start: int = 1, prefix: str = ""):
        self.start = start
        self.prefix = prefix
        self._counter = itertools.count(start)
        logger.debug(f"SequentialIdGenerator initialized (start={start}, prefix={prefix!r})")

    @property
    def provider_name(self) -> str:
        return "sequential"

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"

    def reset(self) -> None:
        """Restart the counter from its initial value."""
        self._counter = itertools.count(self.start)

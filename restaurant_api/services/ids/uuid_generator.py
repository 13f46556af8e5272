"""
UUID Id Generator

Random ids for running servers. Each id is the 32-character
lowercase hex form of a version 4 UUID.
"""

import uuid

from restaurant_api.services.ids.base import BaseIdGenerator


class UuidIdGenerator(BaseIdGenerator):
    """Generates random uuid4 hex ids."""

    @property
    def provider_name(self) -> str:
        return "uuid"

    def next_id(self) -> str:
        return uuid.uuid4().hex

"""
Id Generator Abstract Base Class

Defines the interface contract for id generation.
Both UuidIdGenerator and SequentialIdGenerator implement it,
so the store never cares how ids are produced.
"""

from abc import ABC, abstractmethod


class BaseIdGenerator(ABC):
    """Abstract base class for record id generators."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the generator name."""
        pass

    @abstractmethod
    def next_id(self) -> str:
        """
        Produce a new, unused record id.

        Returns:
            The id as a string
        """
        pass

"""
Abstract repository contract.

Implementations decide their own strictness: whether ``update`` and
``delete`` on an unknown id fail or are silently accepted is part of
each store's documented policy.  Duplicate detection on ``create`` is
the service layer's job unless a store says otherwise.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

from ..schemas.base import Identifiable

T = TypeVar("T", bound=Identifiable)
ID = TypeVar("ID")


class CrudRepository(ABC, Generic[T, ID]):
    """Create/update/delete/find over identifiable entities."""

    @abstractmethod
    def create(self, entity: T) -> None:
        """Store a new entity under its id."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Replace the stored entity for its id."""

    @abstractmethod
    def delete(self, entity_id: ID) -> None:
        """Remove the entity with the given id."""

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Return the entity, or ``None`` if absent.  Never raises for a missing id."""

    @abstractmethod
    def find_all(self) -> Tuple[T, ...]:
        """Return an immutable snapshot of all entities in insertion order."""

"""
Generic in-memory repository (primary index only).

One dictionary maps id to entity.  All operations are O(1) except
``find_all``, which copies the values into a tuple.  A re-entrant lock
makes each call atomic and keeps snapshots consistent when several
threads share the store.

Policy: lenient.  ``create`` overwrites an existing entry, ``update``
inserts when the id is unknown and ``delete`` ignores unknown ids.
The service layer performs the existence and duplicate checks.
"""

import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

from ..core.exceptions import ValidationError
from .base import CrudRepository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(CrudRepository[T, str]):
    """Dictionary-backed store for any identifiable entity."""

    def __init__(self, entities: Optional[Iterable[T]] = None) -> None:
        self._entities: Dict[str, T] = {}
        self._lock = threading.RLock()
        for entity in entities or ():
            self.create(entity)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._entities

    def create(self, entity: T) -> None:
        entity_id = self._require_id(entity)
        with self._lock:
            self._entities[entity_id] = entity
        logger.debug("Stored %s %s", type(entity).__name__, entity_id)

    def update(self, entity: T) -> None:
        entity_id = self._require_id(entity)
        with self._lock:
            self._entities[entity_id] = entity
        logger.debug("Replaced %s %s", type(entity).__name__, entity_id)

    def delete(self, entity_id: str) -> None:
        if entity_id is None:
            return
        with self._lock:
            removed = self._entities.pop(entity_id, None)
        if removed is not None:
            logger.debug("Removed %s %s", type(removed).__name__, entity_id)

    def find_by_id(self, entity_id: str) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def find_all(self) -> Tuple[T, ...]:
        with self._lock:
            return tuple(self._entities.values())

    @staticmethod
    def _require_id(entity: T) -> str:
        if entity is None:
            raise ValidationError("entity must not be None")
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise ValidationError("entity id must not be None")
        return entity_id

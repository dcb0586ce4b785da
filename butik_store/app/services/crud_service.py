"""
Generic CRUD service.

``CrudService`` wraps any ``CrudRepository`` and adds the checks every
entity needs:

* ``create`` rejects a missing entity or id and an id that is already
  stored (``DuplicateError``);
* ``update`` and ``delete`` reject unknown ids (``NotFoundError``);
* lookups reject a ``None`` id but report absence as ``None``.

Entity-specific rules are plugged in through an ``EntityRules``
object rather than by overriding methods.  The base checks always run
first, then ``check_create``/``check_update`` of the rules.  After a
successful mutation the matching hook in ``ServiceHooks`` is called.

Each mutation (checks, repository call, hook) runs under a per-service
lock so two callers cannot both pass the duplicate check for the same
id.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Protocol, Tuple

from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..repositories.base import CrudRepository, T

logger = logging.getLogger(__name__)


class EntityRules(Protocol[T]):
    """Domain checks layered on top of the base existence checks."""

    def check_create(self, entity: T) -> None: ...

    def check_update(self, entity: T) -> None: ...


@dataclass(frozen=True)
class ServiceHooks(Generic[T]):
    """Optional callbacks run after a successful mutation."""

    after_create: Optional[Callable[[T], None]] = None
    after_update: Optional[Callable[[T], None]] = None
    after_delete: Optional[Callable[[str], None]] = None


def audit_hooks(label: str) -> ServiceHooks:
    """Build hooks that write an audit line for every mutation of ``label`` entities."""
    audit = logging.getLogger("butik_store.audit")
    return ServiceHooks(
        after_create=lambda e: audit.info("%s %s created", label, e.id),
        after_update=lambda e: audit.info("%s %s updated", label, e.id),
        after_delete=lambda entity_id: audit.info("%s %s deleted", label, entity_id),
    )


class CrudService(Generic[T]):
    """Validating facade over a repository."""

    def __init__(
        self,
        repository: CrudRepository[T, str],
        rules: Optional[EntityRules[T]] = None,
        hooks: Optional[ServiceHooks[T]] = None,
        label: str = "Entity",
    ) -> None:
        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository
        self._rules = rules
        self._hooks = hooks or ServiceHooks()
        self.label = label
        self._lock = threading.RLock()

    # -------------------- Commands --------------------

    def create(self, entity: T) -> None:
        """Create a new entity (fails if the id is missing or already exists)."""
        with self._lock:
            self._validate_on_create(entity)
            self._repository.create(entity)
            logger.info("%s %s created", self.label, entity.id)
            if self._hooks.after_create is not None:
                self._hooks.after_create(entity)

    def update(self, entity: T) -> None:
        """Update an existing entity (fails if the id is missing or unknown)."""
        with self._lock:
            self._validate_on_update(entity)
            self._repository.update(entity)
            logger.info("%s %s updated", self.label, entity.id)
            if self._hooks.after_update is not None:
                self._hooks.after_update(entity)

    def delete(self, entity_id: str) -> None:
        """Delete by id (fails if not found)."""
        with self._lock:
            self._validate_exists(entity_id)
            self._repository.delete(entity_id)
            logger.info("%s %s deleted", self.label, entity_id)
            if self._hooks.after_delete is not None:
                self._hooks.after_delete(entity_id)

    # -------------------- Queries --------------------

    def get_all(self) -> Tuple[T, ...]:
        return self._repository.find_all()

    def find_optional_by_id(self, entity_id: str) -> Optional[T]:
        """Return the entity or ``None``; never raises for a missing id."""
        self._require_id(entity_id)
        return self._repository.find_by_id(entity_id)

    def find_by_id_or_throw(self, entity_id: str) -> T:
        self._require_id(entity_id)
        entity = self._repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found: id={entity_id}")
        return entity

    def exists(self, entity_id: str) -> bool:
        return self.find_optional_by_id(entity_id) is not None

    # -------------------- Validation --------------------

    def _validate_on_create(self, entity: T) -> None:
        self._require_entity(entity)
        if self._repository.find_by_id(entity.id) is not None:
            raise DuplicateError(f"{self.label} already exists: id={entity.id}")
        if self._rules is not None:
            self._rules.check_create(entity)

    def _validate_on_update(self, entity: T) -> None:
        self._require_entity(entity)
        if self._repository.find_by_id(entity.id) is None:
            raise NotFoundError(f"{self.label} not found: id={entity.id}")
        if self._rules is not None:
            self._rules.check_update(entity)

    def _validate_exists(self, entity_id: str) -> None:
        self._require_id(entity_id)
        if self._repository.find_by_id(entity_id) is None:
            raise NotFoundError(f"{self.label} not found: id={entity_id}")

    def _require_entity(self, entity: T) -> None:
        if entity is None:
            raise ValidationError(f"{self.label} must not be None")
        self._require_id(getattr(entity, "id", None))

    @staticmethod
    def _require_id(entity_id: Optional[str]) -> None:
        if entity_id is None:
            raise ValidationError("ID must not be None")

"""
Identifier generation and the ``Identifiable`` contract.

Identifiers are short opaque tokens: the first eight hex characters
of a random UUID4.  They are unique for all practical shop sizes;
collisions are still caught by the duplicate checks in the service
and order store.
"""

import uuid
from typing import Protocol, runtime_checkable

ID_LENGTH = 8


def new_id() -> str:
    """Return a fresh short identifier."""
    return uuid.uuid4().hex[:ID_LENGTH]


@runtime_checkable
class Identifiable(Protocol):
    """Anything that exposes a stable unique ``id``."""

    @property
    def id(self) -> str: ...

"""
Domain exceptions raised by the repository and service layers.

There are exactly three handled failure kinds.  Callers tell them
apart by type; the console boundary (``console.safe``) turns each one
into a user-facing message and keeps the session alive.  Anything
that is not a ``ServiceError`` is treated as a programming error.

The kinds also subclass the matching built-in exception so code that
only knows about ``ValueError`` or ``LookupError`` still catches them.
"""


class ServiceError(Exception):
    """Base class for all handled store and service failures."""


class ValidationError(ServiceError, ValueError):
    """Malformed or missing input: empty id, empty item list, bad quantity."""


class NotFoundError(ServiceError, LookupError):
    """A referenced entity (the entity itself, a customer, a product) does not exist."""


class DuplicateError(ServiceError, ValueError):
    """An identifier collision on create."""

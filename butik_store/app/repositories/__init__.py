"""
Storage layer.

``CrudRepository`` is the storage-agnostic contract.  The in-memory
implementations keep everything in dictionaries guarded by a lock;
swapping them for a database-backed store would not change the
services that sit on top.
"""

from .base import CrudRepository
from .in_memory import InMemoryRepository
from .order_repository import InMemoryOrderRepository

__all__ = ["CrudRepository", "InMemoryRepository", "InMemoryOrderRepository"]

"""
In-memory order repository with a customer index.

Two mappings are kept:

* primary: ``order_id -> Order``
* secondary: ``customer_id -> [order_id, ...]`` in insertion order

Both are mutated inside one critical section, so no reader or writer
ever sees one mapping updated and the other stale.  Creating the index
entry for a new customer and dropping an entry that became empty
happen under the same lock, which means two orders created at once for
a new customer always end up in a single list.

The store also remembers which customer each order is indexed under.
Orders are edited in place by the console, so by the time ``update``
is called the stored object may already carry the new customer id;
comparing against the remembered value keeps the index correct in
that case.

Policy: strict.  Empty ids fail with ``ValidationError``, a second
``create`` for the same id fails with ``DuplicateError`` and
``update``/``delete`` of an unknown id fail with ``NotFoundError``.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..schemas.order import Order
from .base import CrudRepository

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(CrudRepository[Order, str]):
    """Order store indexed by id and by owning customer."""

    def __init__(self) -> None:
        self._by_id: Dict[str, Order] = {}
        self._by_customer: Dict[str, List[str]] = {}
        # order_id -> customer_id the order is currently indexed under
        self._indexed_under: Dict[str, Optional[str]] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, order: Order) -> None:
        order_id = self._require_id(order)
        with self._lock:
            if order_id in self._by_id:
                raise DuplicateError(f"duplicate order id: {order_id}")
            self._by_id[order_id] = order
            self._index(order.customer_id, order_id)
        logger.debug("Created order %s for customer %s", order_id, order.customer_id)

    def update(self, order: Order) -> None:
        order_id = self._require_id(order)
        with self._lock:
            if order_id not in self._by_id:
                raise NotFoundError(f"order not found: {order_id}")
            previous = self._indexed_under.get(order_id)
            if previous != order.customer_id:
                self._deindex(previous, order_id)
                self._index(order.customer_id, order_id)
                logger.debug("Order %s moved from customer %s to %s", order_id, previous, order.customer_id)
            self._by_id[order_id] = order

    def delete(self, order_id: str) -> None:
        if order_id is None:
            raise ValidationError("order id must not be None")
        with self._lock:
            removed = self._by_id.pop(order_id, None)
            if removed is None:
                raise NotFoundError(f"order not found: {order_id}")
            self._deindex(self._indexed_under.get(order_id), order_id)
        logger.debug("Deleted order %s", order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._by_id.get(order_id)

    def find_all(self) -> Tuple[Order, ...]:
        with self._lock:
            return tuple(self._by_id.values())

    def order_ids_for_customer(self, customer_id: str) -> Tuple[str, ...]:
        """Return the ids of the customer's orders, oldest first."""
        with self._lock:
            return tuple(self._by_customer.get(customer_id, ()))

    def find_by_customer(self, customer_id: str) -> Tuple[Order, ...]:
        """Return the customer's orders, oldest first."""
        with self._lock:
            return tuple(self._by_id[oid] for oid in self._by_customer.get(customer_id, ()))

    def customer_index(self) -> Dict[str, Tuple[str, ...]]:
        """Return a copy of the secondary index."""
        with self._lock:
            return {cid: tuple(ids) for cid, ids in self._by_customer.items()}

    # ------------------------------------------------------------------
    # Index maintenance (caller holds the lock)
    # ------------------------------------------------------------------

    def _index(self, customer_id: Optional[str], order_id: str) -> None:
        self._indexed_under[order_id] = customer_id
        if not customer_id:
            return
        ids = self._by_customer.setdefault(customer_id, [])
        if order_id not in ids:
            ids.append(order_id)

    def _deindex(self, customer_id: Optional[str], order_id: str) -> None:
        self._indexed_under.pop(order_id, None)
        if not customer_id:
            return
        ids = self._by_customer.get(customer_id)
        if ids is None:
            return
        if order_id in ids:
            ids.remove(order_id)
        if not ids:
            # no empty entries
            del self._by_customer[customer_id]

    @staticmethod
    def _require_id(order: Order) -> str:
        if order is None:
            raise ValidationError("order must not be None")
        order_id = getattr(order, "id", None)
        if not order_id or not str(order_id).strip():
            raise ValidationError("order id must not be None/blank")
        return order_id

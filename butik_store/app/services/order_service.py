"""
Order-specific orchestration.

``OrderRules`` adds the order domain checks to the generic service:

* the customer id must be non-empty and refer to an existing customer;
* the order must contain at least one product reference.

``OrderService`` is a ``CrudService`` wired with those rules.  It
borrows the product and customer services (they are created and owned
elsewhere) and only ever reads from them through
``find_optional_by_id``.

``place`` turns a ``product_id -> quantity`` mapping into a new order.
It validates everything itself and then goes through the ordinary
``create`` path, so the domain checks run a second time; that is
expected.
"""

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from ..core.exceptions import NotFoundError, ValidationError
from ..repositories.base import CrudRepository
from ..schemas.customer import Customer
from ..schemas.order import Order
from ..schemas.product import Product
from .crud_service import CrudService, ServiceHooks

logger = logging.getLogger(__name__)


class OrderRules:
    """Customer must exist and the order must not be empty."""

    def __init__(self, customers: CrudService[Customer]) -> None:
        self._customers = customers

    # An empty order is rejected before the customer lookup, so it
    # always reports a validation error whatever the customer id.
    def check_create(self, order: Order) -> None:
        self.ensure_products_not_empty(order.products)
        self.ensure_customer_exists(order.customer_id)

    def check_update(self, order: Order) -> None:
        self.ensure_products_not_empty(order.products)
        self.ensure_customer_exists(order.customer_id)

    def ensure_customer_exists(self, customer_id: Optional[str]) -> Customer:
        if not customer_id or not customer_id.strip():
            raise ValidationError("customerId must not be empty")
        customer = self._customers.find_optional_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer not found: {customer_id}")
        return customer

    @staticmethod
    def ensure_products_not_empty(products: Optional[Sequence[Product]]) -> None:
        if not products:
            raise ValidationError("Order must contain at least one product")


class OrderService(CrudService[Order]):
    """Service for orders: generic CRUD plus placing and per-customer listing."""

    def __init__(
        self,
        repository: CrudRepository[Order, str],
        products: CrudService[Product],
        customers: CrudService[Customer],
        hooks: Optional[ServiceHooks[Order]] = None,
    ) -> None:
        if products is None or customers is None:
            raise ValueError("product and customer services are required")
        self._order_rules = OrderRules(customers)
        super().__init__(repository, rules=self._order_rules, hooks=hooks, label="Order")
        self._products = products
        self._customers = customers

    def place(self, customer_id: str, items: Mapping[str, int]) -> Order:
        """Place a new order from ``customer_id`` and ``product_id -> qty``.

        Each quantity ``n`` becomes ``n`` references to the same product.
        The total of the new order is the sum of the referenced prices.

        Raises
        ------
        ValidationError
            Empty customer id, no items, a quantity of zero or less.
        NotFoundError
            Unknown customer or product.
        """
        if not customer_id or not customer_id.strip():
            raise ValidationError("customerId is empty")
        if self._customers.find_optional_by_id(customer_id) is None:
            raise NotFoundError(f"Customer not found: {customer_id}")
        if not items:
            raise ValidationError("Order has no items")

        product_list: List[Product] = []
        for product_id, qty in items.items():
            product = self._products.find_optional_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product not found: {product_id}")
            qty = qty or 0
            if qty <= 0:
                raise ValidationError(f"Invalid qty for {product.id}: {qty}")
            product_list.extend([product] * qty)
        if not product_list:
            raise ValidationError("Order has no items.")

        order = Order(customer_id=customer_id, products=product_list)
        self.create(order)
        logger.info(
            "Order %s placed for customer %s: %d item(s), total %.2f",
            order.id,
            customer_id,
            len(order.products),
            order.total,
        )
        return order

    def list_for_customer(self, customer_id: str) -> Tuple[Order, ...]:
        """Return the customer's orders, oldest first."""
        self._order_rules.ensure_customer_exists(customer_id)
        find_by_customer = getattr(self._repository, "find_by_customer", None)
        if find_by_customer is not None:
            return find_by_customer(customer_id)
        return tuple(o for o in self.get_all() if o.customer_id == customer_id)

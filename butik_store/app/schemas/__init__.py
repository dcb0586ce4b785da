"""
Pydantic models for the shop's entities.

Each entity assigns its own short identifier at construction time;
callers never supply one.  Models validate on assignment so editors
that mutate entities in place are held to the same rules as
constructors.
"""

from .base import Identifiable, new_id
from .customer import Customer
from .product import Category, Product
from .order import Order

__all__ = [
    "Identifiable",
    "new_id",
    "Customer",
    "Category",
    "Product",
    "Order",
]

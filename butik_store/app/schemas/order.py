"""
Pydantic model for orders.

An order belongs to one customer (by id) and holds a flat sequence of
product references.  Repeated references express quantity: a product
listed three times is ordered three times.  The ``total`` is never
stored; it is recomputed from the current product references on every
read, so edits to the sequence or to a product's price can never leave
it stale.

The editing helpers below back the interactive order editor.  They
mutate the order in place; the change becomes visible to the stores
once the order is passed to ``OrderService.update``.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

from ..core.exceptions import ValidationError
from .base import new_id
from .product import Product


class Order(BaseModel):
    id: str = Field(default_factory=new_id, frozen=True, description="Short opaque identifier")
    # Reassignable: an order can be moved to another customer.
    customer_id: Optional[str] = Field(None, description="Identifier of the owning customer")
    products: List[Product] = Field(default_factory=list, description="Product references, repeated per unit")

    model_config = {
        "validate_assignment": True,
    }

    @computed_field
    @property
    def total(self) -> float:
        """Sum of the prices of every product reference, computed on read."""
        return float(sum(p.price for p in self.products))

    def quantities(self) -> Dict[str, int]:
        """Return ``product_id -> count`` in first-seen order."""
        counts: Dict[str, int] = {}
        for p in self.products:
            counts[p.id] = counts.get(p.id, 0) + 1
        return counts

    def add_product(self, product: Product, qty: int = 1) -> None:
        """Append ``qty`` references to ``product``."""
        if qty <= 0:
            raise ValidationError(f"Invalid qty for {product.id}: {qty}")
        self.products.extend([product] * qty)

    def remove_product(self, product_id: str, qty: int) -> int:
        """Remove up to ``qty`` references to ``product_id``.

        Returns the number actually removed, which is smaller than
        ``qty`` when the order holds fewer units.
        """
        if qty <= 0:
            raise ValidationError(f"Invalid qty for {product_id}: {qty}")
        kept: List[Product] = []
        removed = 0
        for p in self.products:
            if p.id == product_id and removed < qty:
                removed += 1
                continue
            kept.append(p)
        self.products[:] = kept
        return removed

    def set_quantity(self, product: Product, qty: int) -> None:
        """Replace all references to ``product`` with exactly ``qty`` of them."""
        if qty <= 0:
            raise ValidationError(f"Invalid qty for {product.id}: {qty}")
        self.products[:] = [p for p in self.products if p.id != product.id]
        self.products.extend([product] * qty)

    def clear_products(self) -> None:
        self.products.clear()

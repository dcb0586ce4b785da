"""
Menu-driven console for customers, products and orders.

``ConsoleApp`` receives its input and output streams explicitly, so a
session can be scripted in tests with ``io.StringIO``.  Every action
that touches a service runs inside ``safe_run``; a failed action
prints a message and returns to the menu.  The session ends on
"Exit" or when the input stream is exhausted.

Entities are edited on a draft copy for orders, because an order
editor can pass through states the service would reject (for example
no items).  Customers and products are edited in place: every
assignment is validated by the model, so they are never invalid.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from ..schemas.customer import Customer
from ..schemas.order import Order
from ..schemas.product import Category, Product
from ..services.crud_service import CrudService
from ..services.order_service import OrderService
from .safe import safe_run

logger = logging.getLogger(__name__)

ITEMS_COLUMN_WIDTH = 60


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a plain-text table with left-aligned columns."""
    widths = [len(h) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def fmt_row(cols: Sequence[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(headers), sep]
    lines.extend(fmt_row(r) for r in rows)
    return "\n".join(lines)


def order_items_text(order: Order, limit: Optional[int] = None) -> str:
    """Return ``"Name xQty, ..."`` for an order, optionally truncated."""
    if not order.products:
        return "-"
    names: Dict[str, str] = {p.id: p.name for p in order.products}
    text = ", ".join(f"{names[pid]} x{qty}" for pid, qty in order.quantities().items())
    if limit is not None and len(text) > limit:
        text = text[: max(0, limit - 3)] + "..."
    return text


@dataclass
class _EntityView:
    """How one entity type is shown, created and edited in the menus."""

    label: str
    service: CrudService
    headers: Sequence[str]
    row: Callable[[object], List[str]]
    summary: Callable[[object], str]
    add: Callable[[], None]
    edit: Callable[[object], None]
    draft: Callable[[object], object] = lambda entity: entity


class ConsoleApp:
    """Interactive main loop over the three services."""

    def __init__(
        self,
        customers: CrudService[Customer],
        products: CrudService[Product],
        orders: OrderService,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.customers = customers
        self.products = products
        self.orders = orders
        self.stdin = stdin or sys.stdin
        self.out = stdout or sys.stdout
        self._views = {
            "Customer": _EntityView(
                label="Customer",
                service=customers,
                headers=["ID", "Name", "City"],
                row=lambda c: [c.id, c.name, c.city],
                summary=lambda c: f"- Name: {c.name}\n- City: {c.city}",
                add=self._add_customer,
                edit=self._edit_customer,
            ),
            "Product": _EntityView(
                label="Product",
                service=products,
                headers=["ID", "Name", "Category", "Price"],
                row=lambda p: [p.id, p.name, p.category.value, f"{p.price:.2f}"],
                summary=lambda p: f"- Name: {p.name}\n- Category: {p.category.value}\n- Price: {p.price:.2f}",
                add=self._add_product,
                edit=self._edit_product,
            ),
            "Order": _EntityView(
                label="Order",
                service=orders,
                headers=["ID", "CustomerId", "Products (qty)", "Total"],
                row=lambda o: [o.id, o.customer_id or "-", order_items_text(o, ITEMS_COLUMN_WIDTH), f"{o.total:.2f}"],
                summary=self._order_summary,
                add=self._add_order,
                edit=self._edit_order,
                draft=lambda o: o.model_copy(update={"products": list(o.products)}),
            ),
        }

    # ==================== I/O helpers ====================

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _read_line(self, prompt: str) -> str:
        self.out.write(prompt)
        self.out.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input closed")
        return line.strip()

    def _read_non_empty(self, prompt: str) -> str:
        while True:
            s = self._read_line(prompt)
            if s:
                return s
            self._print("Value cannot be empty. Try again.")

    def _read_int(self, prompt: str, low: int, high: int) -> int:
        while True:
            s = self._read_line(prompt)
            try:
                v = int(s)
            except ValueError:
                self._print("Invalid number. Try again.")
                continue
            if low <= v <= high:
                return v
            self._print(f"Out of range ({low}-{high}).")

    def _read_positive_int(self, prompt: str) -> int:
        while True:
            s = self._read_line(prompt)
            try:
                v = int(s)
                if v > 0:
                    return v
            except ValueError:
                pass
            self._print("Enter a positive number.")

    def _read_price(self, prompt: str) -> float:
        while True:
            s = self._read_line(prompt)
            try:
                v = float(s)
            except ValueError:
                self._print("Invalid number. Try again.")
                continue
            if v >= 0.0:
                return v
            self._print("Value must be >= 0.0")

    def _read_category(self) -> Category:
        cats = list(Category)
        self._print("Choose a category:")
        for i, cat in enumerate(cats, start=1):
            self._print(f"{i}) {cat.value}")
        return cats[self._read_int(f"Category [1-{len(cats)}]: ", 1, len(cats)) - 1]

    # ==================== Main loop ====================

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        try:
            while True:
                self._print("Choose an entity:\n1) Customer\n2) Product\n3) Order\n4) Exit")
                choice = self._read_line("Your choice: ")
                if choice == "1":
                    self._entity_menu(self._views["Customer"])
                elif choice == "2":
                    self._entity_menu(self._views["Product"])
                elif choice == "3":
                    self._entity_menu(self._views["Order"], extra=[("Orders by customer", self._orders_by_customer)])
                elif choice == "4":
                    logger.info("Application exit by user.")
                    break
                else:
                    self._print("Invalid selection. Please try again.")
                    logger.warning("Invalid main menu choice: %s", choice)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving the console.")
        self._print("Bye!")

    def _entity_menu(self, view: _EntityView, extra: Sequence = ()) -> None:
        label = view.label
        options = [
            (f"Add {label}", view.add),
            (f"View all {label}s", lambda: self._view_all(view)),
            (f"Update {label}", lambda: self._update(view)),
            (f"Delete {label}", lambda: self._delete(view)),
            (f"Find {label} by id", lambda: self._find(view)),
            *extra,
        ]
        back = len(options) + 1
        while True:
            for i, (text, _) in enumerate(options, start=1):
                self._print(f"{i}. {text}")
            self._print(f"{back}. Back")
            choice = self._read_int(f"Your choice [1-{back}]: ", 1, back)
            if choice == back:
                return
            text, handler = options[choice - 1]
            safe_run(handler, text.replace(" ", ""), self.out)

    # ==================== Generic flows ====================

    def _view_all(self, view: _EntityView) -> None:
        entities = view.service.get_all()
        if not entities:
            self._print(f"No {view.label.lower()}s found.")
            logger.info("%ss list requested but empty.", view.label)
            return
        self._print(format_table(view.headers, [view.row(e) for e in entities]))

    def _update(self, view: _EntityView) -> None:
        entity_id = self._read_line(f"Enter {view.label} ID to update: ")
        if not entity_id:
            self._print("ID cannot be empty.")
            return
        current = view.service.find_optional_by_id(entity_id)
        if current is None:
            self._print(f"{view.label} not found: {entity_id}")
            return
        self._print("Current values:")
        self._print(view.summary(current))
        entity = view.draft(current)
        view.edit(entity)
        view.service.update(entity)
        self._print(f"✓ {view.label} updated successfully.")

    def _delete(self, view: _EntityView) -> None:
        entity_id = self._read_line(f"Enter {view.label} ID to delete: ")
        view.service.delete(entity_id)
        self._print("✓ Deleted successfully.")

    def _find(self, view: _EntityView) -> None:
        entity_id = self._read_line(f"Enter {view.label} ID to find: ")
        entity = view.service.find_optional_by_id(entity_id)
        self._print(view.summary(entity) if entity is not None else "Not found.")

    # ==================== Customers ====================

    def _add_customer(self) -> None:
        name = self._read_non_empty("Enter name: ")
        city = self._read_non_empty("Enter city: ")
        customer = Customer(name=name, city=city)
        self.customers.create(customer)
        self._print(f"✓ Customer created successfully. ID: {customer.id}")

    def _edit_customer(self, customer: Customer) -> None:
        name = self._read_line(f"Name [{customer.name}]: ")
        if name:
            customer.name = name
        city = self._read_line(f"City [{customer.city}]: ")
        if city:
            customer.city = city

    # ==================== Products ====================

    def _add_product(self) -> None:
        name = self._read_non_empty("Enter product name: ")
        category = self._read_category()
        price = self._read_price("Enter a price: ")
        product = Product(name=name, category=category, price=price)
        self.products.create(product)
        self._print(f"✓ Product created successfully. ID: {product.id}")

    def _edit_product(self, product: Product) -> None:
        name = self._read_line(f"Name [{product.name}]: ")
        if name:
            product.name = name
        if self._read_line(f"Change category ({product.category.value})? (y/N): ").lower() == "y":
            product.category = self._read_category()
        s = self._read_line(f"Price [{product.price:.2f}]: ")
        if s:
            try:
                price = float(s)
            except ValueError:
                self._print("Invalid number. Keeping current price.")
                return
            if price < 0:
                self._print("Price must be >= 0. Keeping current.")
            else:
                product.price = price

    # ==================== Orders ====================

    def _order_summary(self, order: Order) -> str:
        return (
            f"- CustomerId: {order.customer_id}\n"
            f"- Products: {order_items_text(order)}\n"
            f"- Total: {order.total:.2f}"
        )

    def _pick_customer_id(self) -> Optional[str]:
        """List customers and return a valid id, or ``None`` if the user backs out."""
        customers = self.customers.get_all()
        if not customers:
            self._print("No customers available. Add customers first.")
            return None
        self._print(format_table(["ID", "Name", "City"], [[c.id, c.name, c.city] for c in customers]))
        while True:
            customer_id = self._read_non_empty("Enter Customer ID (or 'back' to cancel): ")
            if customer_id.lower() == "back":
                return None
            if self.customers.exists(customer_id):
                return customer_id
            self._print(f"Customer not found: {customer_id}")

    def _add_order(self) -> None:
        customer_id = self._pick_customer_id()
        if customer_id is None:
            self._print("Order creation aborted.")
            return
        self._view_all(self._views["Product"])
        items: Dict[str, int] = {}
        while True:
            product_id = self._read_non_empty("Enter Product ID (or 'done' to finish): ")
            if product_id.lower() == "done":
                break
            if not self.products.exists(product_id):
                self._print(f"Product not found: {product_id}")
                continue
            qty = self._read_positive_int("Qty: ")
            items[product_id] = items.get(product_id, 0) + qty
        if not items:
            self._print("No items selected. Order creation aborted.")
            return
        order = self.orders.place(customer_id, items)
        self._print(f"✓ Order created. ID: {order.id} | Total: {order.total:.2f}")

    def _edit_order(self, order: Order) -> None:
        if self._read_line("Change customer? (y/N): ").lower() == "y":
            customer_id = self._pick_customer_id()
            if customer_id is not None:
                order.customer_id = customer_id
                self._print(f"Customer changed to: {customer_id}")
            else:
                self._print("Keeping current customer.")

        while True:
            self._print("\nCurrent items:")
            if not order.products:
                self._print("  (empty)")
            else:
                by_id = {p.id: p for p in order.products}
                rows = [
                    [pid, by_id[pid].name, str(qty), f"{by_id[pid].price:.2f}"]
                    for pid, qty in order.quantities().items()
                ]
                self._print(format_table(["ProdID", "Name", "Qty", "Price"], rows))
            self._print(
                "\nWhat do you want to do?\n"
                "1) Add product(s)\n"
                "2) Remove product(s)\n"
                "3) Set quantity for a product\n"
                "4) Clear all items\n"
                "5) Done"
            )
            choice = self._read_int("Choice [1-5]: ", 1, 5)
            if choice == 5:
                break
            if choice == 1:
                product = self._find_product("Enter Product ID to add: ")
                if product is not None:
                    qty = self._read_positive_int("Quantity to add: ")
                    order.add_product(product, qty)
                    self._print(f"Added {qty} x {product.name}")
            elif choice == 2:
                product_id = self._read_non_empty("Enter Product ID to remove: ")
                current = order.quantities().get(product_id, 0)
                if current == 0:
                    self._print("This product is not in the order.")
                    continue
                self._print(f"Current qty = {current}")
                removed = order.remove_product(product_id, self._read_positive_int("Quantity to remove: "))
                self._print(f"Removed {removed} item(s).")
            elif choice == 3:
                product = self._find_product("Enter Product ID to set qty: ")
                if product is not None:
                    qty = self._read_positive_int("New quantity: ")
                    order.set_quantity(product, qty)
                    self._print(f"Quantity set to {qty} for {product.name}")
            else:
                order.clear_products()
                self._print("All items cleared.")
        self._print(self._order_summary(order))

    def _find_product(self, prompt: str) -> Optional[Product]:
        product_id = self._read_non_empty(prompt)
        product = self.products.find_optional_by_id(product_id)
        if product is None:
            self._print(f"Product not found: {product_id}")
        return product

    def _orders_by_customer(self) -> None:
        customer_id = self._read_line("Enter Customer ID: ")
        orders = self.orders.list_for_customer(customer_id)
        if not orders:
            self._print("No orders found.")
            return
        view = self._views["Order"]
        self._print(format_table(view.headers, [view.row(o) for o in orders]))

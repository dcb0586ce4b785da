"""
Main entrypoint for the Butik Store console.

This module is the composition root.  ``create_app`` builds the three
repositories and services, wires the order service to the customer and
product services and optionally loads demo data.  ``main`` sets up
logging, builds the application and runs the interactive menu::

    python -m butik_store.app.main --log-level INFO

Defaults come from ``Settings`` in ``core.config``; command line flags
override them.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .console.menu import ConsoleApp
from .console.seed import seed_demo_data
from .core.config import settings
from .core.logging_config import setup_logging
from .repositories.in_memory import InMemoryRepository
from .repositories.order_repository import InMemoryOrderRepository
from .schemas.customer import Customer
from .schemas.product import Product
from .services.crud_service import CrudService, audit_hooks
from .services.order_service import OrderService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """The services the console works with."""

    customers: CrudService[Customer]
    products: CrudService[Product]
    orders: OrderService


def create_app(seed: bool = False) -> AppContext:
    """Create the stores and services.

    Parameters
    ----------
    seed : bool
        Load the demo customers, products and orders.

    Returns
    -------
    AppContext
        The customer, product and order services sharing one set of
        in-memory stores.
    """
    customers: CrudService[Customer] = CrudService(
        InMemoryRepository(), hooks=audit_hooks("Customer"), label="Customer"
    )
    products: CrudService[Product] = CrudService(
        InMemoryRepository(), hooks=audit_hooks("Product"), label="Product"
    )
    orders = OrderService(
        InMemoryOrderRepository(), products, customers, hooks=audit_hooks("Order")
    )
    ctx = AppContext(customers=customers, products=products, orders=orders)
    if seed:
        seed_demo_data(ctx.customers, ctx.products, ctx.orders)
    return ctx


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=f"{settings.project_name} {settings.app_version} console.")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, WARNING, ...)")
    ap.add_argument("--log-file", default=settings.log_file or None, help="Also write logs to this file")
    ap.add_argument(
        "--no-seed",
        dest="seed",
        action="store_false",
        default=settings.seed_demo_data,
        help="Start with empty stores instead of demo data",
    )
    return ap.parse_args(argv)


def print_banner(out: TextIO) -> None:
    title = f"{settings.project_name} v{settings.app_version}"
    print("=" * (len(title) + 8), file=out)
    print(f"    {title}", file=out)
    print("=" * (len(title) + 8), file=out)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    out = stdout or sys.stdout
    print_banner(out)
    ctx = create_app(seed=args.seed)
    logger.info("Starting console (seed=%s)", args.seed)
    ConsoleApp(ctx.customers, ctx.products, ctx.orders, stdin=stdin, stdout=out).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Demo data for the console application.

Customers and products are created through their services so they go
through the usual checks.  Orders are placed through
``OrderService.place`` and handed out to customers round-robin.
"""

import logging
from typing import Dict, List, Tuple

from ..schemas.customer import Customer
from ..schemas.product import Category, Product
from ..services.crud_service import CrudService
from ..services.order_service import OrderService

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS: List[Tuple[str, str]] = [
    ("Alice", "Stockholm"),
    ("Bob", "Gothenburg"),
    ("Charlie", "Malmö"),
    ("David", "Uppsala"),
    ("Eva", "Västerås"),
    ("John", "Lund"),
    ("Grace", "Linköping"),
    ("Harry", "Örebro"),
    ("Ivy", "Gothenburg"),
    ("Jack", "Stockholm"),
]

DEMO_PRODUCTS: List[Tuple[str, Category, float]] = [
    ("Laptop 15\"", Category.COMPUTERS, 1199.00),
    ("Gaming Laptop", Category.COMPUTERS, 1599.00),
    ("Ultrabook 14\"", Category.COMPUTERS, 999.00),
    ("Desktop Tower", Category.COMPUTERS, 899.00),
    ("Chromebook 13\"", Category.COMPUTERS, 349.00),
    ("Android Smartphone", Category.SMARTPHONES, 699.00),
    ("iOS Smartphone", Category.SMARTPHONES, 999.00),
    ("Budget Smartphone", Category.SMARTPHONES, 249.00),
    ("Tablet 10\"", Category.SMARTPHONES, 329.00),
    ("27\" Monitor", Category.ELECTRONICS, 279.00),
    ("Mechanical Keyboard", Category.ACCESSORIES, 129.00),
    ("Wireless Mouse", Category.ACCESSORIES, 49.00),
    ("USB-C Hub 7-in-1", Category.ACCESSORIES, 59.00),
    ("External SSD 1TB", Category.STORAGE, 119.00),
    ("NVMe SSD 2TB", Category.STORAGE, 189.00),
    ("Over-Ear Headphones", Category.ELECTRONICS, 149.00),
    ("Bluetooth Speaker", Category.ELECTRONICS, 79.00),
    ("Mirrorless Camera", Category.PHOTOGRAPHY, 899.00),
    ("Tripod", Category.PHOTOGRAPHY, 69.00),
    ("Smartwatch", Category.WEARABLES, 249.00),
    ("Printer", Category.PRINTERS, 199.00),
    ("A4 Paper (500)", Category.OFFICE_SUPPLIES, 9.99),
    ("Desk Chair", Category.FURNITURE, 149.00),
    ("Standing Desk", Category.FURNITURE, 399.00),
    ("LED Desk Lamp", Category.LIGHTING, 29.00),
    ("Notebook Set", Category.STATIONERY, 12.00),
    ("Wi-Fi 6 Router", Category.NETWORK, 129.00),
    ("Cat6 Cable 10m", Category.NETWORK, 12.00),
    ("Espresso Machine", Category.KITCHEN, 299.00),
    ("Vacuum Cleaner", Category.HOME_APPLIANCES, 149.00),
]

# product name -> quantity
DEMO_ORDERS: List[Dict[str, int]] = [
    {"Laptop 15\"": 1, "Wireless Mouse": 1},
    {"Gaming Laptop": 1, "Mechanical Keyboard": 1, "Over-Ear Headphones": 1},
    {"Ultrabook 14\"": 1, "USB-C Hub 7-in-1": 1},
    {"Desktop Tower": 1, "27\" Monitor": 2},
    {"Chromebook 13\"": 1},
    {"Android Smartphone": 1, "Smartwatch": 1},
    {"iOS Smartphone": 1, "Bluetooth Speaker": 1},
    {"Budget Smartphone": 2},
    {"Tablet 10\"": 1, "External SSD 1TB": 1},
    {"A4 Paper (500)": 3, "Notebook Set": 2, "Printer": 1},
]


def seed_demo_data(
    customers: CrudService[Customer],
    products: CrudService[Product],
    orders: OrderService,
) -> Dict[str, int]:
    """Fill the services with demo entities and return how many of each were added."""
    customer_ids: List[str] = []
    for name, city in DEMO_CUSTOMERS:
        customer = Customer(name=name, city=city)
        customers.create(customer)
        customer_ids.append(customer.id)

    by_name: Dict[str, str] = {}
    for name, category, price in DEMO_PRODUCTS:
        product = Product(name=name, category=category, price=price)
        products.create(product)
        by_name[name] = product.id

    placed = 0
    for i, bundle in enumerate(DEMO_ORDERS):
        if not customer_ids:
            break
        items = {by_name[name]: qty for name, qty in bundle.items()}
        orders.place(customer_ids[i % len(customer_ids)], items)
        placed += 1

    counts = {"customers": len(customer_ids), "products": len(by_name), "orders": placed}
    logger.info(
        "Seeded %d customers, %d products, %d orders.",
        counts["customers"],
        counts["products"],
        counts["orders"],
    )
    return counts

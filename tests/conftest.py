import pytest

from butik_store.app.repositories.in_memory import InMemoryRepository
from butik_store.app.repositories.order_repository import InMemoryOrderRepository
from butik_store.app.schemas.customer import Customer
from butik_store.app.schemas.product import Category, Product
from butik_store.app.services.crud_service import CrudService
from butik_store.app.services.order_service import OrderService


@pytest.fixture
def customer_service():
    return CrudService(InMemoryRepository(), label="Customer")


@pytest.fixture
def product_service():
    return CrudService(InMemoryRepository(), label="Product")


@pytest.fixture
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture
def order_service(order_repo, product_service, customer_service):
    return OrderService(order_repo, product_service, customer_service)


@pytest.fixture
def alice(customer_service):
    c = Customer(name="Alice", city="Stockholm")
    customer_service.create(c)
    return c


@pytest.fixture
def bob(customer_service):
    c = Customer(name="Bob", city="Gothenburg")
    customer_service.create(c)
    return c


@pytest.fixture
def mouse(product_service):
    p = Product(name="Wireless Mouse", category=Category.ACCESSORIES, price=10.0)
    product_service.create(p)
    return p


@pytest.fixture
def cable(product_service):
    p = Product(name="Cat6 Cable 10m", category=Category.NETWORK, price=5.0)
    product_service.create(p)
    return p

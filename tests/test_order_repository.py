import threading

import pytest

from butik_store.app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from butik_store.app.repositories.order_repository import InMemoryOrderRepository
from butik_store.app.schemas.order import Order
from butik_store.app.schemas.product import Category, Product

PEN = Product(name="Pen", category=Category.STATIONERY, price=1.0)


def order_for(customer_id):
    return Order(customer_id=customer_id, products=[PEN])


def test_create_indexes_by_customer_in_insertion_order():
    repo = InMemoryOrderRepository()
    o1, o2, o3 = order_for("A"), order_for("A"), order_for("B")
    for o in (o1, o2, o3):
        repo.create(o)

    assert repo.find_by_id(o1.id) is o1
    assert repo.customer_index() == {"A": (o1.id, o2.id), "B": (o3.id,)}
    assert repo.find_by_customer("A") == (o1, o2)
    assert repo.order_ids_for_customer("nobody") == ()
    assert [o.id for o in repo.find_all()] == [o1.id, o2.id, o3.id]


def test_create_rejects_duplicate_and_blank_ids():
    repo = InMemoryOrderRepository()
    o = order_for("A")
    repo.create(o)
    with pytest.raises(DuplicateError):
        repo.create(o)
    with pytest.raises(ValidationError):
        repo.create(Order(id="", customer_id="A", products=[PEN]))
    with pytest.raises(ValidationError):
        repo.create(Order(id="   ", customer_id="A", products=[PEN]))
    with pytest.raises(ValidationError):
        repo.create(None)
    assert repo.customer_index() == {"A": (o.id,)}


def test_update_moves_order_between_customers():
    repo = InMemoryOrderRepository()
    keep = order_for("A")
    moving = order_for("A")
    repo.create(keep)
    repo.create(moving)

    moved = moving.model_copy(update={"customer_id": "B"})
    repo.update(moved)

    assert repo.order_ids_for_customer("A") == (keep.id,)
    assert repo.order_ids_for_customer("B") == (moving.id,)
    assert repo.find_by_id(moving.id) is moved


def test_update_drops_emptied_index_entry():
    repo = InMemoryOrderRepository()
    o = order_for("A")
    repo.create(o)
    repo.update(o.model_copy(update={"customer_id": "B"}))
    assert "A" not in repo.customer_index()
    assert repo.customer_index() == {"B": (o.id,)}


def test_update_reindexes_an_order_edited_in_place():
    repo = InMemoryOrderRepository()
    o = order_for("A")
    repo.create(o)

    o.customer_id = "B"
    repo.update(o)

    assert repo.customer_index() == {"B": (o.id,)}


def test_update_without_customer_change_keeps_index():
    repo = InMemoryOrderRepository()
    o = order_for("A")
    repo.create(o)
    o.add_product(PEN, 2)
    repo.update(o)
    assert repo.customer_index() == {"A": (o.id,)}


def test_update_and_delete_unknown_ids_fail():
    repo = InMemoryOrderRepository()
    with pytest.raises(NotFoundError):
        repo.update(order_for("A"))
    with pytest.raises(NotFoundError):
        repo.delete("missing")
    with pytest.raises(ValidationError):
        repo.delete(None)
    with pytest.raises(ValidationError):
        repo.update(Order(id="", customer_id="A", products=[PEN]))


def test_delete_removes_from_both_mappings():
    repo = InMemoryOrderRepository()
    o1, o2 = order_for("A"), order_for("A")
    repo.create(o1)
    repo.create(o2)

    repo.delete(o1.id)
    assert repo.find_by_id(o1.id) is None
    assert repo.customer_index() == {"A": (o2.id,)}

    repo.delete(o2.id)
    assert repo.customer_index() == {}
    assert repo.find_all() == ()


def test_orders_without_customer_are_stored_but_not_indexed():
    repo = InMemoryOrderRepository()
    o = Order(products=[PEN])
    repo.create(o)
    assert repo.find_by_id(o.id) is o
    assert repo.customer_index() == {}

    o.customer_id = "A"
    repo.update(o)
    assert repo.customer_index() == {"A": (o.id,)}


def test_concurrent_creates_for_new_customer_share_one_entry():
    for _ in range(50):
        repo = InMemoryOrderRepository()
        orders = [order_for("NEW") for _ in range(8)]
        barrier = threading.Barrier(len(orders))

        def worker(order):
            barrier.wait()
            repo.create(order)

        threads = [threading.Thread(target=worker, args=(o,)) for o in orders]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        index = repo.customer_index()
        assert list(index) == ["NEW"]
        assert sorted(index["NEW"]) == sorted(o.id for o in orders)


def test_concurrent_moves_keep_index_consistent():
    repo = InMemoryOrderRepository()
    orders = [order_for("A") for _ in range(20)]
    for o in orders:
        repo.create(o)

    def mover(chunk, target):
        for o in chunk:
            repo.update(o.model_copy(update={"customer_id": target}))

    threads = [
        threading.Thread(target=mover, args=(orders[:10], "B")),
        threading.Thread(target=mover, args=(orders[10:], "C")),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    index = repo.customer_index()
    assert set(index) == {"B", "C"}
    assert sorted(index["B"]) == sorted(o.id for o in orders[:10])
    assert sorted(index["C"]) == sorted(o.id for o in orders[10:])

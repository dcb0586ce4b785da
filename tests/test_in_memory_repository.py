import pytest

from butik_store.app.core.exceptions import ValidationError
from butik_store.app.repositories.in_memory import InMemoryRepository
from butik_store.app.schemas.customer import Customer


def test_find_by_id_after_create_returns_same_entity():
    repo = InMemoryRepository()
    c = Customer(name="Alice", city="Stockholm")
    repo.create(c)
    assert repo.find_by_id(c.id) is c
    assert c.id in repo
    assert len(repo) == 1


def test_find_by_id_missing_returns_none():
    assert InMemoryRepository().find_by_id("nope") is None


def test_find_all_is_an_insertion_ordered_snapshot():
    people = [Customer(name=n, city="Lund") for n in ("A", "B", "C")]
    repo = InMemoryRepository(people)
    snapshot = repo.find_all()
    assert isinstance(snapshot, tuple)
    assert [c.name for c in snapshot] == ["A", "B", "C"]

    repo.delete(people[0].id)
    assert len(snapshot) == 3
    assert [c.name for c in repo.find_all()] == ["B", "C"]


def test_lenient_policy_for_unknown_ids():
    repo = InMemoryRepository()
    c = Customer(name="Alice", city="Stockholm")
    # update upserts, delete of an unknown id is a no-op
    repo.update(c)
    assert repo.find_by_id(c.id) is c
    repo.delete("unknown")
    repo.delete(None)
    assert len(repo) == 1


def test_create_overwrites_on_duplicate_id():
    repo = InMemoryRepository()
    c = Customer(name="Alice", city="Stockholm")
    twin = Customer(id=c.id, name="Alice II", city="Lund")
    repo.create(c)
    repo.create(twin)
    assert repo.find_by_id(c.id) is twin
    assert len(repo) == 1


def test_create_requires_an_entity():
    with pytest.raises(ValidationError):
        InMemoryRepository().create(None)

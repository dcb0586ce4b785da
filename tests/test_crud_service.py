import logging

import pytest

from butik_store.app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from butik_store.app.repositories.in_memory import InMemoryRepository
from butik_store.app.schemas.customer import Customer
from butik_store.app.services.crud_service import CrudService, ServiceHooks, audit_hooks


def test_create_then_find(customer_service):
    c = Customer(name="Alice", city="Stockholm")
    customer_service.create(c)
    assert customer_service.find_optional_by_id(c.id) is c
    assert customer_service.find_by_id_or_throw(c.id) is c
    assert customer_service.exists(c.id)
    assert customer_service.get_all() == (c,)


def test_create_rejects_none_and_duplicates(customer_service):
    with pytest.raises(ValidationError):
        customer_service.create(None)
    c = Customer(name="Alice", city="Stockholm")
    customer_service.create(c)
    with pytest.raises(DuplicateError):
        customer_service.create(Customer(id=c.id, name="Other", city="Lund"))
    assert customer_service.find_optional_by_id(c.id).name == "Alice"


def test_update_requires_existing_entity(customer_service):
    with pytest.raises(NotFoundError):
        customer_service.update(Customer(name="Ghost", city="Nowhere"))
    with pytest.raises(ValidationError):
        customer_service.update(None)


def test_update_replaces_stored_entity(customer_service, alice):
    renamed = alice.model_copy(update={"city": "Uppsala"})
    customer_service.update(renamed)
    assert customer_service.find_by_id_or_throw(alice.id).city == "Uppsala"


def test_delete(customer_service, alice):
    with pytest.raises(ValidationError):
        customer_service.delete(None)
    with pytest.raises(NotFoundError):
        customer_service.delete("missing")
    customer_service.delete(alice.id)
    assert customer_service.find_optional_by_id(alice.id) is None
    with pytest.raises(NotFoundError):
        customer_service.delete(alice.id)


def test_lookups(customer_service):
    with pytest.raises(ValidationError):
        customer_service.find_optional_by_id(None)
    assert customer_service.find_optional_by_id("missing") is None
    with pytest.raises(NotFoundError, match="missing"):
        customer_service.find_by_id_or_throw("missing")


def test_repository_is_required():
    with pytest.raises(ValueError):
        CrudService(None)


class RecordingRules:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def check_create(self, entity):
        self.calls.append(("create", entity.id))
        if self.fail:
            raise ValidationError("rejected")

    def check_update(self, entity):
        self.calls.append(("update", entity.id))
        if self.fail:
            raise ValidationError("rejected")


def test_rules_run_after_base_checks():
    rules = RecordingRules()
    service = CrudService(InMemoryRepository(), rules=rules)
    c = Customer(name="Alice", city="Stockholm")
    service.create(c)
    # duplicate is detected before the rules are consulted
    with pytest.raises(DuplicateError):
        service.create(c)
    service.update(c)
    with pytest.raises(NotFoundError):
        service.update(Customer(name="Ghost", city="X"))
    assert rules.calls == [("create", c.id), ("update", c.id)]


def test_failing_rules_prevent_mutation():
    service = CrudService(InMemoryRepository(), rules=RecordingRules(fail=True))
    c = Customer(name="Alice", city="Stockholm")
    with pytest.raises(ValidationError):
        service.create(c)
    assert service.get_all() == ()


def test_hooks_fire_after_successful_mutations():
    events = []
    hooks = ServiceHooks(
        after_create=lambda e: events.append(("create", e.id)),
        after_update=lambda e: events.append(("update", e.id)),
        after_delete=lambda i: events.append(("delete", i)),
    )
    service = CrudService(InMemoryRepository(), hooks=hooks)
    c = Customer(name="Alice", city="Stockholm")
    service.create(c)
    with pytest.raises(DuplicateError):
        service.create(c)
    service.update(c)
    service.delete(c.id)
    assert events == [("create", c.id), ("update", c.id), ("delete", c.id)]


def test_audit_hooks_log_mutations(caplog):
    service = CrudService(InMemoryRepository(), hooks=audit_hooks("Customer"), label="Customer")
    c = Customer(name="Alice", city="Stockholm")
    with caplog.at_level(logging.INFO, logger="butik_store.audit"):
        service.create(c)
        service.delete(c.id)
    messages = [r.getMessage() for r in caplog.records if r.name == "butik_store.audit"]
    assert messages == [f"Customer {c.id} created", f"Customer {c.id} deleted"]

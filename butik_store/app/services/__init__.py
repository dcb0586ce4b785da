"""
Service layer abstraction.

Services are the only entry point the console uses.  They validate
input, enforce existence and uniqueness, apply entity-specific rules
and then delegate to a repository.  Storage internals are never
reached from here.
"""

from .crud_service import CrudService, EntityRules, ServiceHooks, audit_hooks
from .order_service import OrderRules, OrderService

__all__ = [
    "CrudService",
    "EntityRules",
    "ServiceHooks",
    "audit_hooks",
    "OrderRules",
    "OrderService",
]

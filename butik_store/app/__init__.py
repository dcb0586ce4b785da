"""
Application package initializer.

The application is organised into layers, each in its own
subpackage:

* ``schemas`` – pydantic entities (customers, products, orders);
* ``repositories`` – storage contracts and in-memory stores;
* ``services`` – validation and domain rules, the only entry point
  used by callers;
* ``console`` – the interactive menu, demo data and error boundary;
* ``core`` – settings, logging and exceptions.

``create_app`` in ``main`` wires everything together.
"""

from .main import AppContext, create_app  # noqa: F401

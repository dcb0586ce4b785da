"""
Interactive console front end.

This package is the only place that reads input or prints.  It talks
to the core exclusively through the services and turns handled
failures into messages via ``safe_run``.
"""

from .menu import ConsoleApp
from .safe import safe_run
from .seed import seed_demo_data

__all__ = ["ConsoleApp", "safe_run", "seed_demo_data"]

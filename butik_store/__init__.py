"""
Top-level package for the Butik Store.

All functionality lives in submodules under ``app``; import the
composition root with ``from butik_store.app import create_app``.
"""

__all__ = []

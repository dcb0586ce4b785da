"""Unified entry point for the Butik Store console.

Intended to be executed from the project root::

    python run.py [--log-level INFO] [--log-file butik.log] [--no-seed]

Configuration defaults are read from environment variables
(``LOG_LEVEL``, ``LOG_FILE``, ``SEED_DEMO_DATA``); see
``butik_store/app/core/config.py``.
"""

from butik_store.app.main import main


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        pass

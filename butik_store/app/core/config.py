"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
console application starts without any setup.  Command line flags
handled by ``butik_store.app.main`` take precedence over these
values.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Butik Store")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # The console menu shares stdout with the log handler, so only
    # warnings and errors are shown unless LOG_LEVEL is lowered.
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Populate the stores with demo customers, products and orders on
    # start-up.  Set SEED_DEMO_DATA=false for an empty shop.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

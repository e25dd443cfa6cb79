"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the bundled fixture data and no extra setup.
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Fixture shipped with the package; used when DATA_FILE is not set.
DEFAULT_DATA_FILE = str(Path(__file__).resolve().parent.parent.parent / "data" / "data.json")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Hub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # ``text`` or ``json``.
    log_format: str = os.getenv("LOG_FORMAT", "text")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # JSON document with ``users``, ``events``, ``locations`` and
    # ``participants`` arrays loaded into the store at startup.
    data_file: str = os.getenv("DATA_FILE", DEFAULT_DATA_FILE)
    seed_on_startup: bool = os.getenv("SEED_ON_STARTUP", "true").lower() in {"1", "true", "yes"}

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on
``localhost:8000``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contact Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs only go to the
    # console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address the HTTP listener binds to (see ``run.py``).
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

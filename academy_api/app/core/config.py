"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file out of the box.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Academy API")
    api_version: str = os.getenv("API_VERSION", "0.0.1")
    api_description: str = os.getenv(
        "API_DESCRIPTION", "API documentation for the academy trainers and courses back office"
    )
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # CI systems export the build number; it is shown next to the
    # version in the generated API docs.
    build_number: str = os.getenv("BUILD_NUMBER", "local")

    # Path to the SQLite database file.  Can be overridden via the
    # ``DATABASE_URL`` environment variable.  If a relative path is
    # provided, it will be resolved relative to the project root by the
    # ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "academy.db")

    @property
    def display_version(self) -> str:
        """Version string shown in Swagger UI, e.g. ``0.0.1 - Build #local``."""
        return f"{self.api_version} - Build #{self.build_number}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()

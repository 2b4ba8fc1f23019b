"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no configuration at all, writing its data to
``database.sqlite`` in the project root and listening on port 3000.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Social Feed API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "database.sqlite")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def allowed_origins(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a catalog API running on the same machine.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Templates ship inside the package next to this module's parent.
DEFAULT_TEMPLATES_DIR = str(Path(__file__).resolve().parent.parent / "templates")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog View Service")
    version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Base URL of the upstream data API.  Resource paths such as
    # ``/models`` are appended to it.  127.0.0.1 rather than localhost
    # avoids slow name lookups on some platforms.
    catalog_api_url: str = os.getenv("CATALOG_API_URL", "http://127.0.0.1:3000/api")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    templates_dir: str = os.getenv("TEMPLATES_DIR", DEFAULT_TEMPLATES_DIR)


# Field defaults are evaluated when the class body runs, so the
# environment is read once, at first import.
settings = Settings()

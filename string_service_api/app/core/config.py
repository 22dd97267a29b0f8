"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass


DEFAULT_NONPROFIT_API_URL = "https://projects.propublica.org/nonprofits/api/v2/search.json"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "String Service API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9090"))

    # Prefix for the JSON operations.  Empty keeps them at the root
    # (``POST /uppercase``); set e.g. ``/api/v1`` to version them.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Upstream nonprofit search endpoint.  The search term is sent as
    # the ``q`` query parameter.
    nonprofit_api_url: str = os.getenv("NONPROFIT_API_URL", DEFAULT_NONPROFIT_API_URL)

    # Seconds to wait for the upstream before giving up.
    nonprofit_api_timeout: float = float(os.getenv("NONPROFIT_API_TIMEOUT", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()

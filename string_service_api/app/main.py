"""
Main entrypoint for the String Service API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``,
so it can be served directly, e.g.::

    uvicorn string_service_api.app.main:app --port 9090

The application title, version and route prefix come from
``Settings`` in ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .api.v1.router import info_router, router as v1_router


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Logging first so that everything below can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )

    app.include_router(v1_router, prefix=app_settings.api_prefix)
    # Catch-all GET page; must come after every other route.
    app.include_router(info_router)

    logging.getLogger(__name__).info(
        "%s %s configured (prefix=%r, upstream=%s)",
        app_settings.project_name,
        app_settings.api_version,
        app_settings.api_prefix,
        app_settings.nonprofit_api_url,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""Entry point for the String Service API.

Serves ``string_service_api.app.main:app`` with uvicorn.  Host, port
and log level are read from the environment through ``Settings``
(``HOST``, ``PORT``, ``LOG_LEVEL``); defaults are ``0.0.0.0``, ``9090``
and ``INFO``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from string_service_api.app.core.config import settings
from string_service_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

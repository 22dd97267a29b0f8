"""
Application package initializer.

The application is split into a transport layer (``core.dispatch`` and
the routers under ``api/v1``), typed payloads (``schemas``) and the
business functions they invoke (``services``).  Adding an operation
means writing a service function, a request/response pair and one
``mount`` call in an endpoint module.
"""

from .main import app  # noqa: F401

"""
Top‑level package for the String Service API.

This file makes ``string_service_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``string_service_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

"""
Top‑level router for version 1 of the API.

Aggregates the JSON operations into ``router``.  The host information
page is exported separately as ``info_router`` because it catches
every ``GET`` path and therefore has to be included last, without the
API prefix.
"""

from fastapi import APIRouter

from .endpoints import info, nonprofits, strings

router = APIRouter()

router.include_router(strings.router, tags=["strings"])
router.include_router(nonprofits.router, tags=["nonprofits"])

info_router = info.router

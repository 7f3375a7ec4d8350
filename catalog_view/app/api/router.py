"""
Top‑level router for the catalog pages.

This router aggregates the page routers.  When a new page is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import catalog, compare, details

router = APIRouter()

router.include_router(catalog.router, tags=["catalog"])
router.include_router(details.router, tags=["details"])
router.include_router(compare.router, tags=["compare"])

"""
Top‑level router for the site.

The pages router ends in a catch-all route, so any router added here
later must be included before it.
"""

from fastapi import APIRouter

from .endpoints import pages

router = APIRouter()

router.include_router(pages.router, tags=["pages"])

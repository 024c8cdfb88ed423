"""
Top‑level router of the API.

Only ``/winners`` is routed here.  Everything else is answered by the
catch‑all from ``endpoints.root``, which ``create_app`` registers on
the application after including this router.
"""

from fastapi import APIRouter

from .endpoints import winners

router = APIRouter()

router.include_router(winners.router, tags=["winners"])

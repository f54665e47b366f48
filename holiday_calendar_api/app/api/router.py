"""
Top‑level API router.

Aggregates the domain routers and registers the catch‑all preflight
route.  Preflights are normally answered by the CORS middleware before
routing; the route below keeps ``OPTIONS`` on unknown paths answered
even when the app is mounted without that middleware.
"""

from fastapi import APIRouter, Response

from .endpoints import holidays

router = APIRouter()

router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])


@router.options("/{path:path}", include_in_schema=False)
async def preflight(path: str) -> Response:
    return Response(status_code=200)

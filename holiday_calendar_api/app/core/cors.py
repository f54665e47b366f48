"""
Cross‑origin middleware.

Every response, errors included, carries the configured
``Access-Control-Allow-*`` headers.  ``OPTIONS`` requests are answered
with an empty 200 before routing, so no handler runs for a preflight.

Starlette's ``CORSMiddleware`` only decorates requests that carry an
``Origin`` header and validates preflights against it; this service
answers every request with one fixed policy instead.
"""

from typing import Dict, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class FixedOriginCORSMiddleware(BaseHTTPMiddleware):
    """Attach a fixed single‑origin CORS policy to every response."""

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str,
        allow_methods: Iterable[str],
        allow_headers: Iterable[str],
    ) -> None:
        super().__init__(app)
        self.headers: Dict[str, str] = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response

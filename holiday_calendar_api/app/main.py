"""
Main entrypoint for the Holiday Calendar API.

This module assembles the FastAPI application: logging, the CORS
middleware, the request‑validation handler and the holiday routes.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with::

    uvicorn holiday_calendar_api.app.main:app

The MongoDB connection is opened in the lifespan hook.  If ``MONGO_URI``
is unset or the server cannot be reached, startup raises and uvicorn
exits instead of serving requests.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .api.router import router
from .core.config import DECODE_ERROR_MESSAGE, Settings, settings as default_settings
from .core.cors import FixedOriginCORSMiddleware
from .core.db import StorageGateway
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    gateway: Optional[StorageGateway] = app.state.gateway
    owns_gateway = gateway is None
    if owns_gateway:
        gateway = StorageGateway.connect(app.state.settings)
        app.state.gateway = gateway
        logger.info("Server running on port %s", app.state.settings.port)
    try:
        yield
    finally:
        if owns_gateway:
            gateway.close()
            app.state.gateway = None
            logger.info("MongoDB connection closed")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Report any body that does not decode into the expected shape as 400."""
    logger.info("Error decoding request: %s", exc.errors())
    return PlainTextResponse(DECODE_ERROR_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[StorageGateway] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module‑level settings
        read from the environment.
    gateway : Optional[StorageGateway]
        A pre‑built storage gateway.  When given, the application does
        not connect or close anything itself; tests pass a gateway
        around a ``mongomock`` client here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway

    app.add_middleware(
        FixedOriginCORSMiddleware,
        allow_origin=settings.cors_allow_origin,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router)

    return app


app = create_app()

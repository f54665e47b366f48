"""Process entrypoint: serve the API with uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8080``).  ``MONGO_URI`` is checked
before the server starts so a missing connection string fails fast.
uvicorn is handed the service's own logging configuration, so its
access and error logs use the same format as the application.
"""
import logging
import sys
from typing import Optional

from uvicorn import Config, Server

from holiday_calendar_api.app.core.config import ConfigurationError, Settings
from holiday_calendar_api.app.core.logging_config import build_log_config, setup_logging


logger = logging.getLogger(__name__)


def build_server(settings: Settings) -> Server:
    """Return a uvicorn ``Server`` for the application."""
    from holiday_calendar_api.app.main import create_app

    config = Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=build_log_config(settings.log_level, settings.log_file or None),
        log_level=settings.log_level.lower(),
    )
    return Server(config)


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        settings.require_mongo_uri()
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        return 1

    server = build_server(settings)
    server.run()
    # uvicorn leaves ``started`` unset when the lifespan startup fails,
    # e.g. when MongoDB is unreachable.
    return 0 if server.started else 1


if __name__ == "__main__":
    sys.exit(main())

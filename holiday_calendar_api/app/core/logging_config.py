"""
Logging configuration for the service.

``build_log_config`` returns one ``logging.config`` dictionary that is
used both by ``setup_logging`` and as uvicorn's ``log_config``, so the
application's own records and uvicorn's ``uvicorn.error`` and
``uvicorn.access`` records share a single format and set of handlers.
The uvicorn loggers get no handlers of their own and propagate to the
root logger.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_log_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return the ``dictConfig`` schema for the service.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    """
    level_name = level.upper() if isinstance(getattr(logging, level.upper(), None), int) else "INFO"

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
        "loggers": {
            name: {"level": level_name, "handlers": [], "propagate": True}
            for name in UVICORN_LOGGERS
        },
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``build_log_config`` unless the root logger is already set up.

    Repeated ``create_app`` calls in tests therefore do not stack
    handlers.
    """
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_log_config(level, logfile))

"""Package-local logging utilities.

This package is a library first. By default it emits no logs unless the host
application configures logging. Applications can opt into diagnostics via
``HALLINKS_LOG_LEVEL`` or an explicit :func:`configure_logging` call.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "hallinks"
LOG_LEVEL_ENV = "HALLINKS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_stderr_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    """Attach or detach the package stderr handler.

    ``level`` falls back to ``HALLINKS_LOG_LEVEL``. An empty level detaches
    the handler and hands log records back to the host configuration.
    Handlers added by the host are never touched.
    """
    global _stderr_handler

    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV, "")
    resolved_level = raw_level.strip()

    if _stderr_handler is not None:
        logger.removeHandler(_stderr_handler)
        _stderr_handler = None

    if not resolved_level:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return

    _stderr_handler = logging.StreamHandler()
    _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_stderr_handler)
    logger.setLevel(getattr(logging, resolved_level.upper(), logging.INFO))
    logger.propagate = False

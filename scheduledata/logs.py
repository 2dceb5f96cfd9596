"""
Logging setup.

Library modules only do ``logging.getLogger(__name__)``; nothing is
configured on import. The CLI calls ``setup_logging`` once at start-up, which
routes the package's records to a rich console handler on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from scheduledata.config import DEFAULT_LOG_LEVEL

PACKAGE_LOGGER = "scheduledata"

_LOG_FORMAT = "%(name)s | %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Attach a RichHandler to the package logger. Calling it again replaces the
    handler instead of stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
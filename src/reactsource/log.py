"""Package logger setup."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "reactsource"


def get_logger(level: str | None = None) -> logging.Logger:
    """Return the package logger, attaching a stream handler on first use.

    The level comes from ``level`` or ``REACTSOURCE_LOG_LEVEL`` (default WARNING).
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s][%(levelname)s][%(name)s] %(message)s"))
        logger.addHandler(handler)
    level_name = (level or os.getenv("REACTSOURCE_LOG_LEVEL", "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    return logger

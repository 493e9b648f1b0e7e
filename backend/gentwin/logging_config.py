from __future__ import annotations

import logging

from gentwin.config import env_str

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""
    logger = logging.getLogger("gentwin")
    level_name = (level or env_str("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger

from __future__ import annotations

import logging
import sys

# Package root logger, whichever way the package was imported
LOGGER_NAME = __name__.rsplit(".common", 1)[0]


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the package logger once.

    Calling it again only adjusts the level, so app factories and scripts can
    both call it safely.
    """
    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "gittown"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> logging.Logger:
    """Send gittown logs to stderr at ``level``; stdout stays for command output."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger

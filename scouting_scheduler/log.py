"""Logging setup shared by the CLI and library modules."""

import logging
import sys

LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stderr handler to the package logger. Safe to call twice."""
    logger = logging.getLogger("scouting_scheduler")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger

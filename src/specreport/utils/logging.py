"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "specreport"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``specreport`` logger.

    Records go to stderr so they never mix with a report written to stdout.
    Calling this again only changes the level; the handler is attached once.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if not any(getattr(h, "_specreport", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        handler._specreport = True
        logger.addHandler(handler)

    return logger

"""Logging setup for Playground Server."""

from __future__ import annotations

import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, at ``level`` or LOG_LEVEL from the environment."""
    level = (level or LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    root_logger.setLevel(level)

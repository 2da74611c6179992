"""Centralised logging configuration for ouivendor."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root ``ouivendor`` logger.

    Call once during application startup (CLI or web server). Later calls
    only adjust the level; the stderr handler is added a single time.
    """
    logger = logging.getLogger("ouivendor")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def parse_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name}")
    return level


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the ``ouivendor`` namespace."""
    return logging.getLogger(f"ouivendor.{name}")

"""Logging setup for the scoreboard.

Library modules only ask for named loggers; handlers are attached once by the
entry point (the replay CLI) through :func:`setup_logging`.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "scoreboard"

_handler: Optional[logging.Handler] = None


def setup_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``scoreboard`` logger (idempotent)."""
    global _handler
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

"""Logging helpers for the park package.

The package is silent by default (a NullHandler is installed on the ``park``
logger). Call one of these helpers to see what the simulation is doing:

    from park import enable_console_logging
    enable_console_logging(level="DEBUG")

Environment variables read by ``configure_from_env``:
    PARK_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""
from __future__ import annotations

import logging
import os
from typing import Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "park"


def _get_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def enable_console_logging(
    level: Union[str, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Attach a stderr handler to the ``park`` logger and return it."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def set_level(level: Union[str, int]) -> None:
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Drop every handler except the NullHandler and silence the logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.CRITICAL + 1)


def configure_from_env() -> None:
    """Enable console logging when PARK_LOGGING is set; otherwise do nothing."""
    level = os.environ.get("PARK_LOGGING", "").upper()
    if level:
        enable_console_logging(level=level)

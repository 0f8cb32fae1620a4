"""
Package logging helpers.

Every module logs through a child of the ``bubblebabble`` logger. The
handler is installed lazily on first use, and the level comes from the
BUBBLEBABBLE_LOG_LEVEL environment variable.
"""

import logging
import os
from typing import Optional

from bubblebabble.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "bubblebabble"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Setup logging configuration for the package logger."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    _root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return _root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``bubblebabble.stable``."""
    if not _root_logger.handlers:
        setup_logging()
    return _root_logger.getChild(name)


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)

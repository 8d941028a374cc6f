"""
qa_forum/utils/logger.py
------------------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
"""

import logging
import sys

from qa_forum.config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PACKAGE = "qa_forum"
_initialized = False


def _init_logging() -> None:
    """
    Configure the root logger once.

    When the host application (or pytest) already attached handlers to the
    root logger, those are left alone and only the forum loggers' level is set.
    """
    global _initialized
    if _initialized:
        return
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    root = logging.getLogger()
    if root.handlers:
        logging.getLogger(_PACKAGE).setLevel(level)
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.setLevel(level)
        root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)

# iplog/utils/logging.py

from __future__ import annotations
import logging
from typing import Optional

ROOT_LOGGER_NAME = "iplog"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the ``iplog`` hierarchy.

    Modules call this with ``__name__``; anything outside the package
    (e.g. tests) is nested under ``iplog`` so one handler covers it all.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a single stderr handler to the ``iplog`` logger.

    Safe to call more than once: the previous handler is replaced,
    so repeated CLI invocations in one process don't duplicate output.
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level.upper())
    return root


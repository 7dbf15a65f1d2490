"""Logging setup for the ``boggle`` package logger."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = "boggle"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger and set its level.

    Only the ``boggle`` logger is touched, so an embedding application keeps
    its own root handlers. Calling this again swaps the handler instead of
    stacking a second one.
    """

    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace.

    Names outside ``boggle`` (e.g. ``__main__``) are nested below it so they
    share the package handler.
    """

    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain package loggers.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - The library never configures handlers on import; the ``punc`` logger
      only carries a ``NullHandler``.  :func:`configure_logging` is called by
      the CLI and is idempotent.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "punc"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root for module ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    A handler left by an earlier call is replaced rather than rebound, since
    the stream it holds may already be closed.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in [h for h in logger.handlers if getattr(h, "_punc_cli", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(logger.level)
    handler._punc_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

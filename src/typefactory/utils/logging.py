"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``typefactory`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; calling :func:`configure` twice never
      installs a second handler.
    - The library itself never configures the root logger.
"""

from __future__ import annotations

import logging
import sys

_ROOT = "typefactory"
_HANDLER_FLAG = "_typefactory_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger scoped below the package logger."""

    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""

    logger = logging.getLogger(_ROOT)
    if not any(getattr(h, _HANDLER_FLAG, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


logging.getLogger(_ROOT).addHandler(logging.NullHandler())

__all__ = ["get_logger", "configure"]

"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``mutilate`` namespace.
    - Allow an optional verbose/debug mode for the CLI.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls never stack handlers.
    - Output goes to stderr so that stdout carries only the document.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "mutilate"
_HANDLER_MARKER = "_mutilate_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root for ``name``."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.  A handler left by an
    earlier call is replaced rather than re-pointed, since the stream it holds
    may already be closed.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for stale in [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

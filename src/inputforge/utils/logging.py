"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain configured loggers.
    - Allow optional verbose/debug modes.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls never stack handlers.
    - Generated credentials and seed secrets are never passed to a logger.
"""

from __future__ import annotations

import logging

__all__ = ["get_logger", "configure_logging"]

_ROOT = "inputforge"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger and set ``level``."""

    logger = logging.getLogger(_ROOT)
    if not any(getattr(h, "_inputforge", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._inputforge = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""

    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")

# navm/logging/logger.py
"""
Unified logging setup for navm.

All modules use:
    from navm.logging import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging() (called by the CLI).
Library users who never call it get the host application's logging setup.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the ``navm`` logger hierarchy.

    Safe to call multiple times: the handler is only added once, later calls
    just adjust the level. ``stream`` defaults to the current sys.stderr.
    """
    root = logging.getLogger("navm")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(_coerce_level(level))


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here; configuration happens in configure_logging().
    """
    return logging.getLogger(name)

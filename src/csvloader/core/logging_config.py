"""Structured logging configuration.

All modules log through structlog with JSON output so upload failures can be
correlated by filename and line number.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Level name such as ``"INFO"`` or ``"DEBUG"``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a module logger bound to ``name``."""
    return structlog.get_logger(name)

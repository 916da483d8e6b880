"""Structured logging configuration.

This module configures structlog with a stable processor chain.
Renderer and level come from the validated runtime config.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import MapSearchConfig


def configure_logging(config: MapSearchConfig) -> None:
    """Install the structlog processor chain for this process.

    Args:
        config: Validated runtime config.
    """
    renderer: Any
    if config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        Structlog logger writing to stderr.

    Raises:
        MapSearchConfigError: If logging is unconfigured and the environment is invalid.
    """
    if not structlog.is_configured():
        configure_logging(MapSearchConfig.from_env())
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so replaced stderr streams are honored.
    return structlog.PrintLogger(file=sys.stderr)

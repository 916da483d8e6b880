"""Runtime configuration model for mapsearch.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_FORMATS,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import MapSearchConfigError


@dataclass(frozen=True)
class MapSearchConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level emitted by structured logging.
        log_format: Renderer used for log lines, json or console.
    """

    log_level: str
    log_format: str

    @classmethod
    def from_env(cls, log_level: str | None = None) -> "MapSearchConfig":
        """Build config from process environment variables.

        Args:
            log_level: Optional level that replaces MAPSEARCH_LOG_LEVEL.

        Returns:
            A validated config object.

        Raises:
            MapSearchConfigError: If environment values are invalid.
        """
        raw_level = log_level or os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        log_format = _parse_log_format(os.getenv(LOG_FORMAT_ENV_VAR, DEFAULT_LOG_FORMAT))
        return cls(log_level=parse_log_level(raw_level), log_format=log_format)


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name from environment or CLI.

    Returns:
        Upper-case level name.

    Raises:
        MapSearchConfigError: If the level is not supported.
    """
    normalized_value = raw_value.strip().upper()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    raise MapSearchConfigError(
        f"Invalid {LOG_LEVEL_ENV_VAR} value: got '{raw_value}'. "
        f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
    )


def _parse_log_format(raw_value: str) -> str:
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_LOG_FORMATS:
        return normalized_value
    raise MapSearchConfigError(
        f"Invalid {LOG_FORMAT_ENV_VAR} value: got '{raw_value}'. "
        f"Use one of: {', '.join(SUPPORTED_LOG_FORMATS)}."
    )

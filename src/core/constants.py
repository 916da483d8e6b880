"""Core constants used across mapsearch modules.

This module centralizes environment names and supported option values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

LOG_LEVEL_ENV_VAR = "MAPSEARCH_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "MAPSEARCH_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "json"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SUPPORTED_LOG_FORMATS = ("json", "console")
JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")
SUPPORTED_SEARCH_COMMANDS = ("find", "find-key", "find-entry", "any", "all")

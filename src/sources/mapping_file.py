"""Ordered mapping loading from JSON and YAML files.

This module reads a document from disk and validates that its top-level
value is a mapping or a list. Key order from the file is preserved.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from core.constants import JSON_EXTENSIONS, YAML_EXTENSIONS
from core.errors import MapSearchSourceError
from core.logging_config import get_logger


def load_mapping(path: str) -> Mapping[Any, Any] | Sequence[Any]:
    """Load an ordered mapping or list from a JSON or YAML file.

    Args:
        path: File path with a .json, .yaml, or .yml extension.

    Returns:
        Parsed top-level mapping or list.

    Raises:
        MapSearchSourceError: If the file is missing, unreadable, not UTF-8,
            unparsable, or its top-level value is not a mapping or list.
    """
    source_file = Path(path).expanduser().resolve()
    suffix = source_file.suffix.lower()
    if suffix not in JSON_EXTENSIONS + YAML_EXTENSIONS:
        supported_rows = ", ".join(JSON_EXTENSIONS + YAML_EXTENSIONS)
        raise MapSearchSourceError(
            f"Unsupported mapping file extension '{suffix or '<none>'}' for {source_file}. "
            f"Use one of: {supported_rows}."
        )
    if not source_file.is_file():
        raise MapSearchSourceError(
            f"Mapping file does not exist at {source_file}. Provide a valid file path."
        )
    try:
        raw_text = source_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise MapSearchSourceError(
            f"Mapping file at {source_file} is not valid UTF-8: {error}. "
            "Save the file as UTF-8 and retry."
        ) from error
    except OSError as error:
        raise MapSearchSourceError(
            f"Failed to read mapping file at {source_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    if suffix in JSON_EXTENSIONS:
        payload = _parse_json(raw_text, source_file)
    else:
        payload = _parse_yaml(raw_text, source_file)
    collection = _expect_collection(payload, source_file)
    logger = get_logger(__name__)
    logger.debug("mapping_loaded", path=str(source_file), entry_count=len(collection))
    return collection


def _parse_json(raw_text: str, source_file: Path) -> object:
    """Parse JSON text into a Python payload.

    Args:
        raw_text: Decoded file contents.
        source_file: Resolved path, used in error messages.

    Returns:
        Parsed payload with object key order preserved.

    Raises:
        MapSearchSourceError: If the text is not valid JSON.
    """
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise MapSearchSourceError(
            f"Failed to parse JSON mapping at {source_file}: {error}. Fix JSON syntax and retry."
        ) from error


def _parse_yaml(raw_text: str, source_file: Path) -> object:
    """Parse YAML text with the safe loader.

    Args:
        raw_text: Decoded file contents.
        source_file: Resolved path, used in error messages.

    Returns:
        Parsed payload, or None for an empty document.

    Raises:
        MapSearchSourceError: If the text is not valid YAML.
    """
    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as error:
        raise MapSearchSourceError(
            f"Failed to parse YAML mapping at {source_file}: {error}. Fix YAML syntax and retry."
        ) from error


def _expect_collection(payload: object, source_file: Path) -> Mapping[Any, Any] | Sequence[Any]:
    """Validate that a parsed payload is searchable.

    Args:
        payload: Parsed document payload.
        source_file: Resolved path, used in error messages.

    Returns:
        The payload when it is a mapping or a non-string sequence.

    Raises:
        MapSearchSourceError: If the document is empty or a scalar.
    """
    if payload is None:
        raise MapSearchSourceError(
            f"Mapping file at {source_file} is empty. Define a mapping or a list."
        )
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        return payload
    raise MapSearchSourceError(
        f"Invalid mapping file at {source_file}: expected a mapping or list at the top level, "
        f"got {type(payload).__name__}."
    )

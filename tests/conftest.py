"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def animals() -> dict[str, str]:
    """Ordered animal mapping shared by search tests."""
    return {
        "a": "dog",
        "b": "cat",
        "c": "cow",
        "d": "duck",
        "e": "goose",
        "f": "elephant",
    }

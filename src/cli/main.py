"""mapsearch CLI entry points.
This module exposes search commands over JSON and YAML mapping files.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.search_command import add_search_commands, run_search_command
from core.config import MapSearchConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import MapSearchError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="mapsearch",
        description="Predicate search over ordered mapping files",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override MAPSEARCH_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_search_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mapsearch CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = MapSearchConfig.from_env(log_level=args.log_level)
        configure_logging(config)
        return run_search_command(args)
    except MapSearchError as error:
        print(f"error={error}")
        return 1

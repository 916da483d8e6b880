"""Search command wiring for the mapsearch CLI.

This module registers one subcommand per search operation. All of them
share the same mapping-file argument and declarative filter options.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, cast

from core.constants import SUPPORTED_SEARCH_COMMANDS
from core.logging_config import get_logger
from core.types import EntryFilter, SearchCommand
from search.entry_filter import build_entry_predicate
from search.predicate_search import all_match, any_match, find_entry, find_key, find_value
from sources.mapping_file import load_mapping

_COMMAND_HELP = {
    "find": "Print the first value whose entry matches the filters",
    "find-key": "Print the key of the first matching entry",
    "find-entry": "Print the key and value of the first matching entry",
    "any": "Report whether any entry matches the filters",
    "all": "Report whether every entry matches the filters",
}


def add_search_commands(subparsers: Any) -> None:
    """Register all search subcommands."""
    for command in SUPPORTED_SEARCH_COMMANDS:
        parser = subparsers.add_parser(command, help=_COMMAND_HELP[command])
        _add_filter_arguments(parser)


def run_search_command(args: argparse.Namespace) -> int:
    """Load the mapping, run the requested search, and print the result."""
    command = cast(SearchCommand, args.command)
    mapping = load_mapping(args.mapping_file)
    entry_filter = EntryFilter(
        longer_than=args.longer_than,
        shorter_than=args.shorter_than,
        value_prefix=args.prefix,
        value_pattern=args.value_pattern,
        key_pattern=args.key_pattern,
        key_is_value_initial=args.key_is_value_initial,
    )
    predicate = build_entry_predicate(entry_filter)
    output_lines = _run_search(command, mapping, predicate)
    logger = get_logger(__name__)
    logger.info("search_completed", command=command, mapping_file=args.mapping_file)
    for line in output_lines:
        print(line)
    return 0


def _run_search(command: SearchCommand, mapping: Any, predicate: Any) -> list[str]:
    if command == "any":
        return [f"result={_render_bool(any_match(mapping, predicate))}"]
    if command == "all":
        return [f"result={_render_bool(all_match(mapping, predicate))}"]
    if command == "find":
        result = find_value(mapping, predicate)
        lines = [f"found={_render_bool(result.found)}"]
        if result:
            lines.append(f"value={_render_json(result.value)}")
        return lines
    if command == "find-key":
        key_result = find_key(mapping, predicate)
        lines = [f"found={_render_bool(key_result.found)}"]
        if key_result:
            lines.append(f"key={_render_json(key_result.value)}")
        return lines
    entry_result = find_entry(mapping, predicate)
    lines = [f"found={_render_bool(entry_result.found)}"]
    if entry_result:
        key, value = entry_result.unwrap()
        lines.append(f"key={_render_json(key)}")
        lines.append(f"value={_render_json(value)}")
    return lines


def _render_bool(flag: bool) -> str:
    return "true" if flag else "false"


def _render_json(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Register mapping-file and filter options on one subcommand."""
    parser.add_argument("mapping_file", help="Path to a .json, .yaml, or .yml mapping file")
    parser.add_argument("--longer-than", type=int, help="Require len(value) > N")
    parser.add_argument("--shorter-than", type=int, help="Require len(value) < N")
    parser.add_argument("--prefix", help="Require the value to start with this text")
    parser.add_argument("--value-pattern", help="Regex searched in the value")
    parser.add_argument("--key-pattern", help="Regex the whole key must match")
    parser.add_argument(
        "--key-is-value-initial",
        action="store_true",
        help="Require the key to equal the first character of the value",
    )

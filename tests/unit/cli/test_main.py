"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path


def _animals_path() -> str:
    return str(fixture_path("mappings/animals.yaml"))


def test_cli_find_prints_first_long_value(capsys) -> None:
    """find should print the first matching value as JSON."""
    exit_code = main(["find", _animals_path(), "--longer-than", "4"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["found=true", 'value="goose"']


def test_cli_find_reports_absent_without_value_line(capsys) -> None:
    """Absent results should exit zero and print only found=false."""
    exit_code = main(["find", _animals_path(), "--prefix", "f"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["found=false"]


def test_cli_find_key_uses_value_initial(capsys) -> None:
    """find-key should print the matched key."""
    exit_code = main(["find-key", _animals_path(), "--key-is-value-initial"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["found=true", 'key="c"']


def test_cli_find_entry_prints_key_and_value(capsys) -> None:
    """find-entry should print both halves of the entry."""
    exit_code = main(["find-entry", _animals_path(), "--value-pattern", "^du"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output == ["found=true", 'key="d"', 'value="duck"']


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["any", "--longer-than", "5"], "result=true"),
        (["any", "--shorter-than", "3"], "result=false"),
        (["all", "--shorter-than", "12"], "result=true"),
        (["all", "--longer-than", "5"], "result=false"),
    ],
)
def test_cli_any_and_all_print_result(capsys, argv: list[str], expected: str) -> None:
    """any/all should print a single result line."""
    command, *options = argv
    exit_code = main([command, _animals_path(), *options])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == expected


def test_cli_reports_library_errors_without_traceback(capsys) -> None:
    """Invalid filter input should print a friendly error and exit one."""
    exit_code = main(["find", _animals_path(), "--key-pattern", "[a-"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_reports_invalid_environment(monkeypatch, capsys) -> None:
    """Bad environment config should fail with an error line."""
    monkeypatch.setenv("MAPSEARCH_LOG_FORMAT", "xml")

    exit_code = main(["any", _animals_path()])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and "MAPSEARCH_LOG_FORMAT" in output


def test_cli_log_level_override_beats_environment(monkeypatch, capsys) -> None:
    """--log-level should replace an invalid environment level."""
    monkeypatch.setenv("MAPSEARCH_LOG_LEVEL", "verbose")

    exit_code = main(["--log-level", "debug", "any", _animals_path()])
    captured = capsys.readouterr()

    assert exit_code == 0 and captured.out.strip() == "result=true"
    assert "mapping_loaded" in captured.err


def test_parser_requires_a_command() -> None:
    """Running without a subcommand should be a usage error."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_reports_non_utf8_mapping_without_traceback(capsys) -> None:
    """Undecodable mapping files should exit one with an error line."""
    exit_code = main(["find", str(fixture_path("mappings/latin1.yaml")), "--prefix", "c"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=") and "UTF-8" in output

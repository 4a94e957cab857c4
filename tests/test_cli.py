"""Tests for the blockscript CLI."""

import json

from click.testing import CliRunner

from blockscript import __version__
from blockscript.cli import cli
from blockscript.examples import DEFAULT_SCRIPT


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "blockscript" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


# --- run ---


def test_run_prints_events(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run", "-"], input="block.repeat-2 space-4 end nope\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "block size=1 color=#60A5FA",
        "block size=1 color=#60A5FA",
        "space size=4",
        "newline",
        'error Unknown command: "nope"',
    ]


def test_run_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run", "--json", "-"], input="block.color-red end\n")
    assert result.exit_code == 0
    events = [json.loads(line) for line in result.output.splitlines()]
    assert events == [
        {"kind": "draw_block", "size": 1.0, "color": "#EF4444"},
        {"kind": "line_break"},
    ]


def test_run_file(cli_runner: CliRunner, tmp_path) -> None:
    script = tmp_path / "demo.blocks"
    script.write_text("# only a comment\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["run", str(script)])
    assert result.exit_code == 0
    assert result.output == ""


def test_run_file_with_byte_order_mark(cli_runner: CliRunner, tmp_path) -> None:
    script = tmp_path / "bom.blocks"
    script.write_bytes("# heading\nspace-2\n".encode("utf-8-sig"))
    result = cli_runner.invoke(cli, ["run", str(script)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["space size=2"]


def test_run_missing_file(cli_runner: CliRunner, tmp_path) -> None:
    result = cli_runner.invoke(cli, ["run", str(tmp_path / "missing.blocks")])
    assert result.exit_code != 0


def test_run_with_config(cli_runner: CliRunner, write_config) -> None:
    path = write_config('default_color = "#000000"\n[colors]\nteal = "#14B8A6"\n')
    result = cli_runner.invoke(
        cli, ["-c", str(path), "run", "-"], input="block block.color-teal\n"
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "block size=1 color=#000000",
        "block size=1 color=#14B8A6",
    ]


def test_invalid_config(cli_runner: CliRunner, write_config) -> None:
    path = write_config("default_repeat = 0\n")
    result = cli_runner.invoke(cli, ["-c", str(path), "run", "-"], input="block\n")
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


# --- check ---


def test_check_ok(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["check", "-"], input=DEFAULT_SCRIPT)
    assert result.exit_code == 0
    assert result.output.strip() == "OK"


def test_check_reports_line_numbers(cli_runner: CliRunner) -> None:
    source = "# header\nblock.size-0 end\n\nspace-abc\n"
    result = cli_runner.invoke(cli, ["check", "-"], input=source)
    assert result.exit_code == 1
    assert result.output.splitlines() == [
        '2: Invalid size value: "0"',
        '4: Invalid space value: "abc"',
    ]


def test_check_file_with_byte_order_mark(cli_runner: CliRunner, tmp_path) -> None:
    script = tmp_path / "bom.blocks"
    script.write_bytes("# heading\nblock end\n".encode("utf-8-sig"))
    result = cli_runner.invoke(cli, ["check", str(script)])
    assert result.exit_code == 0
    assert result.output.strip() == "OK"


# --- example ---


def test_example(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["example"])
    assert result.exit_code == 0
    assert result.output == DEFAULT_SCRIPT

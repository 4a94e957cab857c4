"""
Shared test fixtures and utilities for the blockscript test suite.
"""

import pytest
from click.testing import CliRunner

from blockscript.config import InterpreterConfig
from blockscript.interpreter import Interpreter


@pytest.fixture
def interpreter():
    """Interpreter with the default configuration."""
    return Interpreter()


@pytest.fixture
def write_config(tmp_path):
    """Write a TOML config file and return its path.

    Usage:
        def test_something(write_config):
            path = write_config('default_color = "#000000"')
    """

    def _write(text: str, name: str = "blockscript.toml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def custom_config():
    """Configuration with a non-default palette and block defaults."""
    return InterpreterConfig(
        default_color="#111111",
        default_size=2.0,
        default_repeat=1,
        colors={"Teal": "#14B8A6"},
    )


@pytest.fixture
def cli_runner():
    """Click test runner for the blockscript CLI."""
    return CliRunner()

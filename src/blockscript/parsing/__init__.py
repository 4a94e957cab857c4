"""
BlockScript parsing components.

This package provides token parsing, property parsing and line-level script
parsing for the BlockScript language.
"""

from blockscript.parsing.parser import (
    BlockCommand,
    BlockProperty,
    Command,
    CommandParser,
    CommandType,
    NewlineCommand,
    ParseErrorCommand,
    SpaceCommand,
    parse_property,
    parse_token,
)
from blockscript.parsing.script import ScriptLine, ScriptParser, parse_script

__all__ = [
    "BlockCommand",
    "BlockProperty",
    "Command",
    "CommandParser",
    "CommandType",
    "NewlineCommand",
    "ParseErrorCommand",
    "SpaceCommand",
    "parse_property",
    "parse_token",
    "ScriptLine",
    "ScriptParser",
    "parse_script",
]

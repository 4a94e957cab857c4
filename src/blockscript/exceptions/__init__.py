"""
BlockScript exception classes.

This package provides all exception types used throughout BlockScript
for consistent error handling and reporting.
"""

from blockscript.exceptions.core import (
    BlockScriptError,
    BlockScriptParseError,
    ConfigurationError,
    InvalidPropertySyntaxError,
    InvalidRepeatValueError,
    InvalidSizeValueError,
    InvalidSpaceValueError,
    ScriptSourceError,
    UnknownColorError,
    UnknownCommandError,
    UnknownPropertyError,
)

__all__ = [
    "BlockScriptError",
    "BlockScriptParseError",
    "ConfigurationError",
    "InvalidPropertySyntaxError",
    "InvalidRepeatValueError",
    "InvalidSizeValueError",
    "InvalidSpaceValueError",
    "ScriptSourceError",
    "UnknownColorError",
    "UnknownCommandError",
    "UnknownPropertyError",
]

"""
Core building blocks shared by the BlockScript parser and executor.
"""

from blockscript.core.colors import (
    BUILTIN_COLORS,
    DEFAULT_COLOR,
    ColorResolver,
    resolve_color,
)
from blockscript.core.values import (
    format_number,
    parse_integer,
    parse_positive_integer,
    parse_positive_real,
    parse_real,
)

__all__ = [
    "BUILTIN_COLORS",
    "DEFAULT_COLOR",
    "ColorResolver",
    "resolve_color",
    "format_number",
    "parse_integer",
    "parse_positive_integer",
    "parse_positive_real",
    "parse_real",
]

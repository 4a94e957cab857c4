"""
Numeric value parsing for script literals.

Script numbers are read by their leading numeric prefix, so ``4px`` reads as 4
and ``3.7`` read as an integer is 3. Text without a numeric prefix yields None.
"""

import math
import re

REAL_PREFIX_PATTERN = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
INTEGER_PREFIX_PATTERN = re.compile(r"^\s*[+-]?\d+", re.ASCII)


def parse_real(text: str) -> float | None:
    """
    Parse the leading real number of ``text``.

    Params:
        text: Raw literal from the script

    Returns:
        The parsed value, or None if there is no numeric prefix or it is not finite
    """
    match = REAL_PREFIX_PATTERN.match(text)
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_integer(text: str) -> int | None:
    """Parse the leading base-10 integer of ``text``, or return None."""
    match = INTEGER_PREFIX_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(0))


def parse_positive_real(text: str) -> float | None:
    """Parse a real number that must be strictly greater than zero."""
    value = parse_real(text)
    if value is None or value <= 0:
        return None
    return value


def parse_positive_integer(text: str) -> int | None:
    """Parse an integer that must be at least one."""
    value = parse_integer(text)
    if value is None or value <= 0:
        return None
    return value


def format_number(value: float) -> str:
    """Format a number the way it would be written in a script, without rounding."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))

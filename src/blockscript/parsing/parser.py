"""
Parser for BlockScript command tokens.

This module turns a single whitespace-free token such as
``block.size-2.color-red.repeat-5``, ``space-4`` or ``end`` into a typed
command. Problems found while parsing a token are raised internally as
``BlockScriptParseError`` subclasses and converted into a ``ParseErrorCommand``
at the token boundary, so a malformed token never affects its neighbours.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

from attrs import frozen

from blockscript.core.colors import DEFAULT_COLOR, ColorResolver
from blockscript.core.values import (
    format_number,
    parse_positive_integer,
    parse_positive_real,
)
from blockscript.exceptions.core import (
    BlockScriptParseError,
    InvalidPropertySyntaxError,
    InvalidRepeatValueError,
    InvalidSizeValueError,
    InvalidSpaceValueError,
    UnknownColorError,
    UnknownCommandError,
    UnknownPropertyError,
)

logger = logging.getLogger(__name__)


class CommandType(Enum):
    """Type of parsed command."""

    BLOCK = "block"
    SPACE = "space"
    NEWLINE = "newline"
    ERROR = "error"


@dataclass(frozen=True)
class BlockCommand:
    """Represents a block command (block.size-2.color-red.repeat-3)."""

    size: float = 1.0
    color: str = DEFAULT_COLOR  # Always a resolved hex value
    repeat: int = 1

    command_type = CommandType.BLOCK

    def describe(self) -> str:
        """Return a tooltip-style description of the block."""
        text = f"block.size-{format_number(self.size)}.color-{self.color}"
        if self.repeat > 1:
            text += f".repeat-{self.repeat}"
        return text


@dataclass(frozen=True)
class SpaceCommand:
    """Represents a spacer command (space-4)."""

    size: float

    command_type = CommandType.SPACE

    def describe(self) -> str:
        """Return a tooltip-style description of the spacer."""
        return f"space-{format_number(self.size)}"


@dataclass(frozen=True)
class NewlineCommand:
    """Represents a line break command (end)."""

    command_type = CommandType.NEWLINE


@dataclass(frozen=True)
class ParseErrorCommand:
    """Represents a token that could not be parsed, carrying its diagnostic."""

    message: str

    command_type = CommandType.ERROR


Command = BlockCommand | SpaceCommand | NewlineCommand | ParseErrorCommand


@frozen
class BlockProperty:
    """A validated ``name-value`` property of a block command."""

    name: str
    value: float | int | str


def parse_property(
    segment: str, resolver: ColorResolver | None = None
) -> BlockProperty:
    """
    Parse a single property segment of a block token.

    Params:
        segment: Text between dots, without the leading command keyword (e.g. "size-2")
        resolver: Color resolver used for ``color`` values (built-in palette if omitted)

    Returns:
        The validated property

    Raises:
        InvalidPropertySyntaxError: If the segment is not exactly ``name-value``
        InvalidSizeValueError: If a size is not a positive number
        UnknownColorError: If a color name is not in the palette
        InvalidRepeatValueError: If a repeat count is not a positive integer
        UnknownPropertyError: If the property name is not recognized
    """
    parts = segment.split("-")
    if len(parts) != 2:
        raise InvalidPropertySyntaxError(segment)

    name, value = parts

    if name == "size":
        size = parse_positive_real(value)
        if size is None:
            raise InvalidSizeValueError(value)
        return BlockProperty(name, size)

    if name == "color":
        color = (resolver or ColorResolver()).resolve(value)
        if color is None:
            raise UnknownColorError(value)
        return BlockProperty(name, color)

    if name == "repeat":
        repeat = parse_positive_integer(value)
        if repeat is None:
            raise InvalidRepeatValueError(value)
        return BlockProperty(name, repeat)

    raise UnknownPropertyError(name)


class CommandParser:
    """Parser for individual BlockScript tokens."""

    SPACE_PREFIX = "space-"
    NEWLINE_KEYWORD = "end"
    BLOCK_KEYWORD = "block"

    def __init__(
        self,
        resolver: ColorResolver | None = None,
        default_block: BlockCommand | None = None,
    ):
        """
        Params:
            resolver: Color resolver for ``color`` properties
            default_block: Block used when a property is omitted
        """
        self.resolver = resolver or ColorResolver()
        self.default_block = default_block or BlockCommand()

    def parse_token(self, token: str) -> Command | None:
        """
        Parse one token into a command.

        Params:
            token: A single whitespace-delimited token

        Returns:
            The parsed command, a ParseErrorCommand for malformed tokens,
            or None if the token is empty
        """
        token = token.strip()
        if not token:
            return None

        try:
            return self._parse(token)
        except BlockScriptParseError as e:
            logger.debug("Token %r rejected: %s", token, e.message)
            return ParseErrorCommand(e.message)

    def _parse(self, token: str) -> Command:
        # The space- prefix is only a hint: other shapes fall through to keyword handling
        space = self._try_parse_space(token)
        if space is not None:
            return space

        keyword, *segments = token.split(".")

        if keyword == self.NEWLINE_KEYWORD:
            return NewlineCommand()

        if keyword == self.BLOCK_KEYWORD:
            return self._parse_block(segments)

        raise UnknownCommandError(keyword)

    def _try_parse_space(self, token: str) -> SpaceCommand | None:
        """
        Parse ``space-<n>`` tokens.

        Returns:
            A SpaceCommand, or None when the token does not have the exact
            ``space-<value>`` shape

        Raises:
            InvalidSpaceValueError: If the shape matches but the width is invalid
        """
        if not token.startswith(self.SPACE_PREFIX):
            return None

        parts = token.split("-")
        if len(parts) != 2 or parts[0] != "space":
            return None

        size = parse_positive_real(parts[1])
        if size is None:
            raise InvalidSpaceValueError(parts[1])
        return SpaceCommand(size)

    def _parse_block(self, segments: list[str]) -> BlockCommand:
        """Apply property segments in order; a repeated property overrides the earlier one."""
        block = self.default_block
        for segment in segments:
            prop = parse_property(segment, self.resolver)
            block = replace(block, **{prop.name: prop.value})
        return block


def parse_token(token: str) -> Command | None:
    """
    Convenience function to parse a token with the built-in palette and defaults.

    Params:
        token: The token to parse

    Returns:
        The parsed command, or None for an empty token
    """
    parser = CommandParser()
    return parser.parse_token(token)

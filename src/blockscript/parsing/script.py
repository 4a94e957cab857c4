"""
Line-level parsing of BlockScript source text.

A script is split into lines; blank lines and lines starting with ``#`` are
skipped, every other line is split on spaces and each token is handed to the
command parser from left to right.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from blockscript.parsing.parser import Command, CommandParser

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class ScriptLine:
    """
    A non-skipped line of a script together with its parsed commands.

    Params:
        number: 1-based line number in the source text
        text: The trimmed line
        commands: Commands parsed from the line, in token order
    """

    number: int
    text: str
    commands: tuple[Command, ...]


def split_tokens(line: str) -> list[str]:
    """Split a trimmed line on single spaces, dropping empty tokens."""
    return [token for token in line.split(" ") if token]


def is_skipped_line(line: str) -> bool:
    """Check whether a trimmed line is blank or a whole-line comment."""
    return not line or line.startswith(COMMENT_PREFIX)


class ScriptParser:
    """Parser for complete BlockScript sources."""

    def __init__(self, command_parser: CommandParser | None = None):
        self.command_parser = command_parser or CommandParser()

    def iter_lines(self, source: str) -> Iterator[ScriptLine]:
        """
        Parse ``source`` line by line.

        Params:
            source: Raw script text

        Yields:
            One ScriptLine per line that is neither blank nor a comment
        """
        for number, raw_line in enumerate(source.split("\n"), start=1):
            line = raw_line.strip()
            if is_skipped_line(line):
                continue

            commands = []
            for token in split_tokens(line):
                command = self.command_parser.parse_token(token)
                if command is not None:
                    commands.append(command)
            yield ScriptLine(number, line, tuple(commands))

    def parse(self, source: str) -> list[Command]:
        """
        Parse ``source`` into a flat command sequence.

        Order follows the source: line order, then token order within a line.
        """
        commands = [
            command for line in self.iter_lines(source) for command in line.commands
        ]
        logger.debug("Parsed %d commands", len(commands))
        return commands


def parse_script(source: str) -> list[Command]:
    """
    Convenience function to parse a script with the built-in palette and defaults.

    Params:
        source: Raw script text

    Returns:
        Commands in source order
    """
    return ScriptParser().parse(source)

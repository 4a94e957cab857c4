"""
Execution of parsed BlockScript commands.

The executor is a one-pass translator from commands to draw events. Block
commands are expanded into ``repeat`` identical events; parse errors become
visible error events and never stop the run.
"""

import logging
from collections.abc import Iterable, Iterator

from blockscript.execution.events import (
    DisplayError,
    DrawBlock,
    DrawEvent,
    DrawSpace,
    LineBreak,
)
from blockscript.execution.renderers import EventRecorder, Renderer, dispatch
from blockscript.parsing.parser import (
    BlockCommand,
    Command,
    NewlineCommand,
    ParseErrorCommand,
    SpaceCommand,
)

logger = logging.getLogger(__name__)


class Executor:
    """Translate commands into draw events."""

    def iter_events(self, commands: Iterable[Command]) -> Iterator[DrawEvent]:
        """
        Expand commands into draw events, preserving order.

        Params:
            commands: Parsed commands in source order

        Yields:
            Draw events in emission order
        """
        for command in commands:
            if isinstance(command, BlockCommand):
                event = DrawBlock(command.size, command.color)
                for _ in range(command.repeat):
                    yield event
            elif isinstance(command, SpaceCommand):
                yield DrawSpace(command.size)
            elif isinstance(command, NewlineCommand):
                yield LineBreak()
            elif isinstance(command, ParseErrorCommand):
                yield DisplayError(command.message)
            else:
                raise TypeError(f"Unsupported command: {command!r}")

    def execute(self, commands: Iterable[Command]) -> list[DrawEvent]:
        """Run ``commands`` and return the resulting events."""
        recorder = EventRecorder()
        self.run(commands, recorder)
        return recorder.events

    def run(self, commands: Iterable[Command], renderer: Renderer) -> int:
        """
        Run ``commands``, forwarding every event to ``renderer``.

        Params:
            commands: Parsed commands in source order
            renderer: Receiver of the draw events

        Returns:
            Number of events emitted
        """
        count = 0
        errors = 0
        for event in self.iter_events(commands):
            dispatch(event, renderer)
            count += 1
            if isinstance(event, DisplayError):
                errors += 1
        logger.debug("Emitted %d events (%d errors)", count, errors)
        return count

"""
Renderer collaborators for the executor.

A renderer receives draw events as method calls, in the order the executor
emits them. The rendering surface owns all display state.
"""

from collections.abc import Callable
from typing import Protocol

from blockscript.core.values import format_number
from blockscript.execution.events import (
    DisplayError,
    DrawBlock,
    DrawEvent,
    DrawSpace,
    LineBreak,
)


class Renderer(Protocol):
    """Receiver of draw events."""

    def draw_block(self, size: float, color: str) -> None: ...

    def draw_space(self, size: float) -> None: ...

    def line_break(self) -> None: ...

    def display_error(self, message: str) -> None: ...


class EventRecorder:
    """Renderer that records every event it receives, in order."""

    def __init__(self):
        self.events: list[DrawEvent] = []

    def draw_block(self, size: float, color: str) -> None:
        self.events.append(DrawBlock(size, color))

    def draw_space(self, size: float) -> None:
        self.events.append(DrawSpace(size))

    def line_break(self) -> None:
        self.events.append(LineBreak())

    def display_error(self, message: str) -> None:
        self.events.append(DisplayError(message))

    def clear(self) -> None:
        self.events.clear()


class TextRenderer:
    """
    Renderer writing one line of plain text per event.

    Params:
        write: Callable receiving each formatted line (e.g. ``click.echo``)
    """

    def __init__(self, write: Callable[[str], object]):
        self.write = write

    def draw_block(self, size: float, color: str) -> None:
        self.write(f"block size={format_number(size)} color={color}")

    def draw_space(self, size: float) -> None:
        self.write(f"space size={format_number(size)}")

    def line_break(self) -> None:
        self.write("newline")

    def display_error(self, message: str) -> None:
        self.write(f"error {message}")


def dispatch(event: DrawEvent, renderer: Renderer) -> None:
    """Forward a single event to the matching renderer method."""
    if isinstance(event, DrawBlock):
        renderer.draw_block(event.size, event.color)
    elif isinstance(event, DrawSpace):
        renderer.draw_space(event.size)
    elif isinstance(event, LineBreak):
        renderer.line_break()
    elif isinstance(event, DisplayError):
        renderer.display_error(event.message)
    else:
        raise TypeError(f"Unsupported draw event: {event!r}")

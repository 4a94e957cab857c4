"""
Draw events emitted by the executor.

Events are plain immutable values; they carry no reference to the command that
produced them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# A block of size 1 is 2rem wide, a space of size 4 matches it.
BLOCK_UNIT_REM = 2.0
SPACE_UNIT_REM = 0.5


class EventKind(Enum):
    """Kind of draw event."""

    DRAW_BLOCK = "draw_block"
    DRAW_SPACE = "draw_space"
    LINE_BREAK = "line_break"
    DISPLAY_ERROR = "display_error"


@dataclass(frozen=True)
class DrawBlock:
    """Draw one block of the given size and color."""

    size: float
    color: str

    kind = EventKind.DRAW_BLOCK

    @property
    def width_rem(self) -> float:
        return self.size * BLOCK_UNIT_REM

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "size": self.size, "color": self.color}


@dataclass(frozen=True)
class DrawSpace:
    """Leave a horizontal gap of the given size."""

    size: float

    kind = EventKind.DRAW_SPACE

    @property
    def width_rem(self) -> float:
        return self.size * SPACE_UNIT_REM

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "size": self.size}


@dataclass(frozen=True)
class LineBreak:
    """Start a new output row."""

    kind = EventKind.LINE_BREAK

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class DisplayError:
    """Show a diagnostic in place of a malformed token."""

    message: str

    kind = EventKind.DISPLAY_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


DrawEvent = DrawBlock | DrawSpace | LineBreak | DisplayError

"""
BlockScript execution components.

This package expands parsed commands into draw events and delivers them to
renderer collaborators.
"""

from blockscript.execution.events import (
    BLOCK_UNIT_REM,
    SPACE_UNIT_REM,
    DisplayError,
    DrawBlock,
    DrawEvent,
    DrawSpace,
    EventKind,
    LineBreak,
)
from blockscript.execution.executor import Executor
from blockscript.execution.renderers import (
    EventRecorder,
    Renderer,
    TextRenderer,
    dispatch,
)

__all__ = [
    "BLOCK_UNIT_REM",
    "SPACE_UNIT_REM",
    "DisplayError",
    "DrawBlock",
    "DrawEvent",
    "DrawSpace",
    "EventKind",
    "LineBreak",
    "Executor",
    "EventRecorder",
    "Renderer",
    "TextRenderer",
    "dispatch",
]

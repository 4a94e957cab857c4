"""
High-level entry point tying parsing and execution together.

Every run is derived from scratch from the current script text; nothing is
carried over between runs.
"""

from blockscript.config import InterpreterConfig
from blockscript.core.colors import ColorResolver
from blockscript.execution.events import DrawEvent
from blockscript.execution.executor import Executor
from blockscript.execution.renderers import Renderer
from blockscript.parsing.parser import BlockCommand, Command, CommandParser
from blockscript.parsing.script import ScriptLine, ScriptParser
from blockscript.sources import ScriptSource


class Interpreter:
    """Parse and execute BlockScript sources with a given configuration."""

    def __init__(self, config: InterpreterConfig | None = None):
        self.config = config or InterpreterConfig()
        self.resolver = ColorResolver(self.config.colors)
        command_parser = CommandParser(
            resolver=self.resolver,
            default_block=BlockCommand(
                size=self.config.default_size,
                color=self.config.default_color,
                repeat=self.config.default_repeat,
            ),
        )
        self.script_parser = ScriptParser(command_parser)
        self.executor = Executor()

    @staticmethod
    def _read(source: str | ScriptSource) -> str:
        return source if isinstance(source, str) else source.read()

    def parse(self, source: str | ScriptSource) -> list[Command]:
        """Parse a script into commands."""
        return self.script_parser.parse(self._read(source))

    def lines(self, source: str | ScriptSource) -> list[ScriptLine]:
        """Parse a script keeping the line each command came from."""
        return list(self.script_parser.iter_lines(self._read(source)))

    def execute(self, source: str | ScriptSource) -> list[DrawEvent]:
        """Interpret a script and return its draw events."""
        return self.executor.execute(self.parse(source))

    def run(self, source: str | ScriptSource, renderer: Renderer) -> int:
        """
        Interpret a script, delivering its events to ``renderer``.

        Returns:
            Number of events emitted
        """
        return self.executor.run(self.parse(source), renderer)


def interpret(source: str | ScriptSource) -> list[DrawEvent]:
    """
    Convenience function to interpret a script with the default configuration.

    Params:
        source: Script text or a source to read it from

    Returns:
        Draw events in emission order
    """
    return Interpreter().execute(source)

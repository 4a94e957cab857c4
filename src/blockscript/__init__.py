"""
BlockScript - An interpreter for a tiny line-oriented block layout language

BlockScript turns lines of ``block``, ``space-<n>`` and ``end`` tokens into an
ordered stream of draw events for a renderer.
"""

from importlib.metadata import version

from blockscript.config import InterpreterConfig
from blockscript.interpreter import Interpreter, interpret
from blockscript.parsing import parse_script, parse_token

__version__ = version("blockscript")

__all__ = [
    "__version__",
    "Interpreter",
    "InterpreterConfig",
    "interpret",
    "parse_script",
    "parse_token",
]

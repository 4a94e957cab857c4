"""
Script source accessors.

The interpreter only reads the script text; the owner of the text (an editor,
a file, a test) supplies it through a ``ScriptSource``.
"""

from pathlib import Path
from typing import Protocol

from blockscript.exceptions.core import ScriptSourceError


class ScriptSource(Protocol):
    """Read access to the current script text."""

    def read(self) -> str: ...


class TextSource:
    """Script text held in memory."""

    def __init__(self, text: str):
        self.text = text

    def read(self) -> str:
        return self.text


class FileSource:
    """Script text read from a file each time it is requested; a UTF-8 BOM is dropped."""

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig"):
        self.path = Path(path)
        self.encoding = encoding

    def read(self) -> str:
        """
        Read the script file.

        Raises:
            ScriptSourceError: If the file cannot be read or decoded
        """
        try:
            return self.path.read_text(encoding=self.encoding)
        except OSError as e:
            raise ScriptSourceError(str(self.path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ScriptSourceError(str(self.path), f"not valid {self.encoding} text") from e

"""
Interpreter configuration.

Settings are validated with pydantic and can be loaded from a TOML file, either
at the top level or under a ``[blockscript]`` table.
"""

import re
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from blockscript.core.colors import DEFAULT_COLOR
from blockscript.exceptions.core import ConfigurationError

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
CONFIG_TABLE = "blockscript"


def _validate_hex(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError(f"'{value}' is not a #RRGGBB color")
    return value.upper()


class InterpreterConfig(BaseModel):
    """Defaults and palette extensions used when interpreting a script."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_color: str = DEFAULT_COLOR
    default_size: float = Field(default=1.0, gt=0)
    default_repeat: int = Field(default=1, ge=1)
    colors: dict[str, str] = Field(default_factory=dict)

    @field_validator("default_color")
    @classmethod
    def validate_default_color(cls, value: str) -> str:
        return _validate_hex(value)

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, value: dict[str, str]) -> dict[str, str]:
        """Lowercase color names and check every value is a hex color."""
        normalized = {}
        for name, color in value.items():
            if not name or "-" in name or "." in name or " " in name:
                raise ValueError(f"'{name}' cannot be used as a color name")
            normalized[name.lower()] = _validate_hex(color)
        return normalized

    @classmethod
    def from_toml(cls, path: str | Path) -> "InterpreterConfig":
        """
        Load configuration from a TOML file.

        Params:
            path: Path to the TOML file

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If the file cannot be read, is not valid TOML,
                or holds invalid settings
        """
        path = Path(path)
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(str(path), e.strerror or str(e)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(str(path), f"invalid TOML ({e})") from e

        if CONFIG_TABLE in data:
            data = data[CONFIG_TABLE]
            if not isinstance(data, dict):
                raise ConfigurationError(str(path), f"'{CONFIG_TABLE}' must be a table")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            issues = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigurationError(str(path), issues) from e

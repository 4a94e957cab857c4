"""
Named color resolution for BlockScript.

Color names in scripts are matched case-insensitively against a fixed palette.
The palette values are hex strings; renderers decide what to do with them.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_COLOR = "#60A5FA"

BUILTIN_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "red": "#EF4444",
        "orange": "#F97316",
        "yellow": "#EAB308",
        "green": "#22C55E",
        "blue": "#3B82F6",
        "violet": "#8B5CF6",
        "purple": "#8B5CF6",
        "magenta": "#EC4899",
        "pink": "#EC4899",
        "brown": "#78350F",
        "gray": "#6B7280",
        "grey": "#6B7280",
    }
)


class ColorResolver:
    """Resolve color names to hex values.

    The built-in palette is always present. Extra colors can be layered on top,
    e.g. from configuration; an extra entry with a built-in name replaces its value.
    """

    def __init__(self, extra_colors: Mapping[str, str] | None = None):
        self._palette = dict(BUILTIN_COLORS)
        for name, value in (extra_colors or {}).items():
            self._palette[name.lower()] = value

    def resolve(self, name: str) -> str | None:
        """Return the hex value for ``name`` or None when it is not in the palette."""
        return self._palette.get(name.lower())

    def names(self) -> list[str]:
        """List known color names in alphabetical order."""
        return sorted(self._palette)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._palette


_default_resolver = ColorResolver()


def resolve_color(name: str) -> str | None:
    """Resolve ``name`` against the built-in palette."""
    return _default_resolver.resolve(name)

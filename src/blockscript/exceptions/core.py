"""
Exception classes for BlockScript parsing and configuration.

This module defines specific exception types for the error conditions that can
occur while parsing a script token, loading configuration, or reading a script
source. Token-level errors are never allowed to escape a single token: the
command parser converts them into error commands.
"""


class BlockScriptError(Exception):
    """Base exception for all BlockScript-related errors."""

    pass


class BlockScriptParseError(BlockScriptError):
    """Base exception for errors localized to a single script token."""

    def __init__(self, fragment: str, message: str):
        """
        Initialize the exception.

        Params:
            fragment: The part of the token that could not be parsed
            message: Human-readable diagnostic shown to the script author
        """
        self.fragment = fragment
        self.message = message
        super().__init__(message)


class InvalidPropertySyntaxError(BlockScriptParseError):
    """Raised when a property segment is not of the form ``name-value``."""

    def __init__(self, segment: str):
        """
        Initialize the exception.

        Params:
            segment: The property segment without its leading dot
        """
        self.segment = segment
        super().__init__(segment, f'Invalid property syntax: ".{segment}"')


class InvalidSizeValueError(BlockScriptParseError):
    """Raised when a block size is not a positive number."""

    def __init__(self, value: str):
        """
        Initialize the exception.

        Params:
            value: The raw size value as written
        """
        self.value = value
        super().__init__(value, f'Invalid size value: "{value}"')


class InvalidRepeatValueError(BlockScriptParseError):
    """Raised when a block repeat count is not a positive integer."""

    def __init__(self, value: str):
        """
        Initialize the exception.

        Params:
            value: The raw repeat value as written
        """
        self.value = value
        super().__init__(value, f'Invalid repeat value: "{value}"')


class UnknownColorError(BlockScriptParseError):
    """Raised when a color name is not in the palette."""

    def __init__(self, color_name: str):
        """
        Initialize the exception.

        Params:
            color_name: The color name with its original casing
        """
        self.color_name = color_name
        super().__init__(color_name, f'Unknown color: "{color_name}"')


class UnknownPropertyError(BlockScriptParseError):
    """Raised when a block property name is not recognized."""

    def __init__(self, property_name: str):
        """
        Initialize the exception.

        Params:
            property_name: The unrecognized property name
        """
        self.property_name = property_name
        super().__init__(property_name, f'Unknown property: "{property_name}"')


class UnknownCommandError(BlockScriptParseError):
    """Raised when a token's keyword is not a known command."""

    def __init__(self, keyword: str):
        """
        Initialize the exception.

        Params:
            keyword: The keyword part of the token (text before the first dot)
        """
        self.keyword = keyword
        super().__init__(keyword, f'Unknown command: "{keyword}"')


class InvalidSpaceValueError(BlockScriptParseError):
    """Raised when a ``space-<n>`` width is not a positive number."""

    def __init__(self, value: str):
        """
        Initialize the exception.

        Params:
            value: The raw width value following ``space-``
        """
        self.value = value
        super().__init__(value, f'Invalid space value: "{value}"')


class ConfigurationError(BlockScriptError):
    """Raised when interpreter configuration cannot be loaded or validated."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: Where the configuration came from (file path or description)
            reason: Why the configuration is invalid
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")


class ScriptSourceError(BlockScriptError):
    """Raised when the script text cannot be read from its source."""

    def __init__(self, location: str, reason: str):
        """
        Initialize the exception.

        Params:
            location: Description of the script source (usually a file path)
            reason: The underlying reason for the failure
        """
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read script '{location}': {reason}")

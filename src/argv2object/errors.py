"""Exceptions raised by argv2object."""

from __future__ import annotations


INVALID_UNIXMODE_TYPE = 'The "unixmode" parameter must be a boolean value'
INVALID_KEY_TYPE = "Key must be a string"
INVALID_CASING = "Casing must be one of: none, snake, camel"
NO_ARGUMENTS = "No command-line arguments were provided"
NO_MATCH_SIMPLE = 'Arguments must follow "key=value" format'
NO_MATCH_UNIXMODE = "Arguments must follow Unix-style format (-a, --option=value)"


class Argv2ObjectError(Exception):
    """Base class for every error raised by this package."""


class InvalidModeTypeError(Argv2ObjectError, TypeError):
    def __init__(self) -> None:
        super().__init__(INVALID_UNIXMODE_TYPE)


class InvalidKeyTypeError(Argv2ObjectError, TypeError):
    def __init__(self) -> None:
        super().__init__(INVALID_KEY_TYPE)


class InvalidCasingError(Argv2ObjectError, ValueError):
    def __init__(self) -> None:
        super().__init__(INVALID_CASING)


class EmptyArgumentsError(Argv2ObjectError, ValueError):
    def __init__(self) -> None:
        super().__init__(NO_ARGUMENTS)


class FormatMismatchError(Argv2ObjectError, ValueError):
    """A token does not follow the active grammar.

    The message is fixed per grammar; the offending token is kept on
    ``token`` for callers that want to report it.
    """

    message = ""

    def __init__(self, token: str) -> None:
        super().__init__(self.message)
        self.token = token


class FormatMismatchSimpleError(FormatMismatchError):
    message = NO_MATCH_SIMPLE


class FormatMismatchUnixError(FormatMismatchError):
    message = NO_MATCH_UNIXMODE


class ConfigError(Argv2ObjectError, ValueError):
    """An environment variable holds a value that cannot be used."""

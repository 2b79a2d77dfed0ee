"""argv2object — convert command-line arguments to a key-value dict."""

from .argv import argv2object
from .aggregate import ParsedEntry, build
from .convert import convert_value
from .errors import (
    Argv2ObjectError,
    ConfigError,
    EmptyArgumentsError,
    FormatMismatchError,
    FormatMismatchSimpleError,
    FormatMismatchUnixError,
    InvalidCasingError,
    InvalidKeyTypeError,
    InvalidModeTypeError,
)
from .grammar import validate
from .keys import Casing, format_key
from .parser import parse, parse_values
from .values import Value, VBool, VNumber, VText

__all__ = [
    "argv2object",
    "parse",
    "parse_values",
    "validate",
    "format_key",
    "convert_value",
    "build",
    "Casing",
    "ParsedEntry",
    "Value",
    "VBool",
    "VNumber",
    "VText",
    "Argv2ObjectError",
    "ConfigError",
    "EmptyArgumentsError",
    "FormatMismatchError",
    "FormatMismatchSimpleError",
    "FormatMismatchUnixError",
    "InvalidCasingError",
    "InvalidKeyTypeError",
    "InvalidModeTypeError",
]

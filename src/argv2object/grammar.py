"""Token grammars and batch validation."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import FormatMismatchSimpleError, FormatMismatchUnixError


# Both patterns are applied with fullmatch; DOTALL lets a value carry newlines.
SIMPLE_RE = re.compile(r"[a-zA-Z]+(?:-[a-zA-Z]+)*=.*", re.DOTALL)
UNIXMODE_RE = re.compile(
    r"(?:-[a-z]|--[a-zA-Z]+(?:-[a-zA-Z]+)*)(?:=.*)?",
    re.DOTALL,
)


def matches(token: str, unixmode: bool) -> bool:
    """Return True if *token* is well-formed under the selected grammar."""
    regexp = UNIXMODE_RE if unixmode else SIMPLE_RE
    return regexp.fullmatch(token) is not None


def validate(tokens: Iterable[str], unixmode: bool) -> None:
    """Reject the whole batch if any token breaks the grammar.

    Raises ``FormatMismatchUnixError`` in Unix mode and
    ``FormatMismatchSimpleError`` otherwise, carrying the first offending
    token.
    """
    error = FormatMismatchUnixError if unixmode else FormatMismatchSimpleError
    for token in tokens:
        if not isinstance(token, str) or not matches(token, unixmode):
            raise error(token)

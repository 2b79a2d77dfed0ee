"""Key normalization."""

from __future__ import annotations

import re
from enum import Enum

from .errors import InvalidCasingError, InvalidKeyTypeError


_LEADING_DASHES_RE = re.compile(r"^-{1,2}")
_CAMEL_RE = re.compile(r"-([a-zA-Z])")
_LEGACY_SPELLINGS = {"snakecase": "snake", "camelcase": "camel"}


class Casing(str, Enum):
    NONE = "none"
    SNAKE = "snake"
    CAMEL = "camel"

    @classmethod
    def coerce(cls, casing: Casing | str) -> Casing:
        """Resolve a member, member name, value or legacy spelling.

        ``snakecase`` and ``camelcase`` are accepted as aliases.
        """
        if isinstance(casing, cls):
            return casing
        if isinstance(casing, str):
            text = casing.strip().lower()
            text = _LEGACY_SPELLINGS.get(text, text)
            for member in cls:
                if member.value == text:
                    return member
        raise InvalidCasingError()


def format_key(raw_key: str, casing: Casing | str = Casing.NONE) -> str:
    """Strip up to two leading dashes and apply *casing*.

    >>> format_key("--output-format", Casing.CAMEL)
    'outputFormat'
    >>> format_key("--is-admin", Casing.SNAKE)
    'is_admin'
    """
    if not isinstance(raw_key, str):
        raise InvalidKeyTypeError()
    casing = Casing.coerce(casing)
    key = _LEADING_DASHES_RE.sub("", raw_key)

    if casing is Casing.CAMEL:
        return _CAMEL_RE.sub(lambda m: m.group(1).upper(), key)
    if casing is Casing.SNAKE:
        return key.replace("-", "_")
    return key

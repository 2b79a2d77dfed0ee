"""Raw text to typed value coercion."""

from __future__ import annotations

import math
import re

from .values import Value, VBool, VNumber, VText


_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][-+]?[0-9]+)?")


def parse_number(raw: str) -> int | float | None:
    """Return the number spelled by the whole of *raw*, or None.

    Partial prefixes (``12abc``) and non-finite results are not numbers.
    """
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        number = float(raw)
        if math.isfinite(number):
            return number
    return None


def convert_value(raw: str | None) -> Value:
    """Coerce the text after ``=`` into a value.

    - missing (flag without ``=``) → ``VBool(True)``
    - ``true`` / ``false`` → ``VBool``
    - a complete finite number → ``VNumber``
    - anything else, including ``""`` → ``VText`` unchanged
    """
    if raw is None:
        return VBool(True)
    if raw == "true":
        return VBool(True)
    if raw == "false":
        return VBool(False)
    number = parse_number(raw)
    if number is not None:
        return VNumber(number)
    return VText(raw)

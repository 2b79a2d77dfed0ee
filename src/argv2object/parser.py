"""Parsing pipeline: validation, key formatting, coercion and folding."""

from __future__ import annotations

from collections.abc import Iterable

from .aggregate import ParsedEntry, build, to_plain
from .convert import convert_value
from .errors import EmptyArgumentsError, InvalidModeTypeError
from .grammar import validate
from .keys import Casing, format_key
from .values import Scalar, Value


def split_token(token: str) -> tuple[str, str | None]:
    """Split *token* on its first ``=``.

    The value is None when the token has no ``=`` at all, which is how a
    bare flag differs from ``--flag=``.
    """
    key, sep, value = token.partition("=")
    return key, (value if sep else None)


def parse_entries(
    tokens: Iterable[str],
    unixmode: bool = False,
    casing: Casing | str = Casing.SNAKE,
) -> list[ParsedEntry]:
    """Validate *tokens* and produce one entry per token, in order."""
    if not isinstance(unixmode, bool):
        raise InvalidModeTypeError()
    casing = Casing.coerce(casing)

    snapshot = tuple(tokens)
    if not snapshot:
        raise EmptyArgumentsError()

    validate(snapshot, unixmode)

    entries: list[ParsedEntry] = []
    for token in snapshot:
        raw_key, raw_value = split_token(token)
        entries.append(ParsedEntry(format_key(raw_key, casing), convert_value(raw_value)))
    return entries


def parse_values(
    tokens: Iterable[str],
    unixmode: bool = False,
    casing: Casing | str = Casing.SNAKE,
) -> dict[str, Value]:
    """Like :func:`parse` but keeps the tagged ``VBool``/``VNumber``/``VText`` values."""
    return build(parse_entries(tokens, unixmode, casing))


def parse(
    tokens: Iterable[str],
    unixmode: bool = False,
    casing: Casing | str = Casing.SNAKE,
) -> dict[str, Scalar]:
    """Convert argument *tokens* into a dict of plain Python values.

    Usage::

        parse(["name=John", "age=30"])
        # → {"name": "John", "age": 30}

        parse(["-h", "--is-admin", "--name=John"], unixmode=True)
        # → {"h": True, "is_admin": True, "name": "John"}

    Raises ``InvalidModeTypeError`` when *unixmode* is not a bool,
    ``EmptyArgumentsError`` when *tokens* is empty, and a
    ``FormatMismatchError`` subclass when any token breaks the grammar.
    """
    return to_plain(parse_values(tokens, unixmode, casing))

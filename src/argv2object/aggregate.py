"""Folding parsed entries into the result mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .values import Scalar, Value, unwrap


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    key: str
    value: Value


def build(entries: Iterable[ParsedEntry]) -> dict[str, Value]:
    """Fold *entries* left to right; a repeated key keeps its last value."""
    result: dict[str, Value] = {}
    for entry in entries:
        result[entry.key] = entry.value
    return result


def to_plain(mapping: Mapping[str, Value]) -> dict[str, Scalar]:
    return {key: unwrap(value) for key, value in mapping.items()}

"""Value types for argv2object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)


@dataclass(frozen=True, slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


Value = Union[VBool, VNumber, VText]

Scalar = Union[bool, int, float, str]


def unwrap(value: Value) -> Scalar:
    """Return the plain Python scalar held by *value*."""
    return value.value

"""A value that holds one of a fixed set of types."""

from __future__ import annotations

import dataclasses
import enum
import struct
from collections.abc import Callable
from typing import Any

from kon.strings import ShortString, String
from kon.util import Color


class VariantType(enum.IntEnum):
    """The kinds of value a :class:`Variant` can hold."""

    NONE = 0
    INT = 1
    UINT = 2
    LUINT = 3
    FLOAT = 4
    DOUBLE = 5
    COLOR = 6
    STRING = 7
    SHORT_STRING = 8


def _integer(low: int, high: int) -> Callable[[Any], int]:
    def convert(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        if not low <= value < high:
            raise OverflowError(f"{value} is outside [{low}, {high})")
        return value

    return convert


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def _single(value: Any) -> float:
    return struct.unpack("<f", struct.pack("<f", _number(value)))[0]


def _color(value: Any) -> Color:
    if not isinstance(value, Color):
        raise TypeError(f"expected a Color, got {type(value).__name__}")
    return dataclasses.replace(value)


def _text(value: Any) -> str:
    if not isinstance(value, (str, String, ShortString)):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return str(value)


_CONVERTERS: dict[VariantType, Callable[[Any], Any]] = {
    VariantType.INT: _integer(-(1 << 31), 1 << 31),
    VariantType.UINT: _integer(0, 1 << 32),
    VariantType.LUINT: _integer(0, 1 << 64),
    VariantType.FLOAT: _single,
    VariantType.DOUBLE: _number,
    VariantType.COLOR: _color,
    VariantType.STRING: lambda value: String(_text(value)),
    VariantType.SHORT_STRING: lambda value: ShortString(_text(value)),
}

_DEFAULTS: dict[VariantType, Callable[[], Any]] = {
    VariantType.INT: int,
    VariantType.UINT: int,
    VariantType.LUINT: int,
    VariantType.FLOAT: float,
    VariantType.DOUBLE: float,
    VariantType.COLOR: Color,
    VariantType.STRING: String,
    VariantType.SHORT_STRING: ShortString,
}


class Variant:
    """Holds a single value of the kind chosen at construction."""

    def __init__(self, kind: VariantType) -> None:
        self._kind = VariantType(kind)
        default = _DEFAULTS.get(self._kind)
        self._value = default() if default is not None else None

    @property
    def kind(self) -> VariantType:
        return self._kind

    def _require_kind(self) -> None:
        if self._kind is VariantType.NONE:
            raise TypeError("variant has no value type")

    def get(self) -> Any:
        """Return the stored value."""
        self._require_kind()
        return self._value

    def set(self, value: Any) -> None:
        """Store a copy of ``value`` converted to this variant's kind."""
        self._require_kind()
        self._value = _CONVERTERS[self._kind](value)

    def __repr__(self) -> str:
        return f"Variant({self._kind.name}, {self._value!r})"


def variant_type_of(value: Any) -> VariantType:
    """The variant kind that naturally holds ``value``, or NONE."""
    if isinstance(value, bool):
        return VariantType.NONE
    if isinstance(value, int):
        return VariantType.INT
    if isinstance(value, float):
        return VariantType.DOUBLE
    if isinstance(value, Color):
        return VariantType.COLOR
    if isinstance(value, ShortString):
        return VariantType.SHORT_STRING
    if isinstance(value, (String, str)):
        return VariantType.STRING
    return VariantType.NONE
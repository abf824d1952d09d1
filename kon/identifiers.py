"""Random 64-bit identifiers used to tag types, instances and groups."""

from __future__ import annotations

import secrets

_U64_MASK = (1 << 64) - 1


class UUID:
    """A 64-bit identifier; a random one is drawn when no value is given."""

    __slots__ = ("_value",)

    def __init__(self, value: int | UUID | None = None) -> None:
        if value is None:
            self._value = secrets.randbits(64)
        else:
            self._value = int(value) & _U64_MASK

    @property
    def value(self) -> int:
        """The raw unsigned 64-bit value."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UUID):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"
"""Two-, three- and four-component vectors and the operations on them."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass, fields

_U32_MASK = 0xFFFFFFFF
_U64_MASK = (1 << 64) - 1

# Byte hashing used for float components (64-bit murmur-style mix).
_HASH_MUL = (0xC6A4A793 << 32) + 0x5BD1E995
_HASH_SEED = 0xC70F6907


class _Vector:
    """Behaviour shared by every vector size."""

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(fields(self))  # type: ignore[arg-type]

    @property
    def vec(self) -> tuple:
        """The components as a tuple, in x, y, z, w order."""
        return tuple(self)


@dataclass
class Vector2(_Vector):
    """A two-component vector."""

    x: float = 0
    y: float = 0


@dataclass
class Vector3(_Vector):
    """A three-component vector."""

    x: float = 0
    y: float = 0
    z: float = 0


@dataclass
class Vector4(_Vector):
    """A four-component vector; every component defaults to zero."""

    x: float = 0
    y: float = 0
    z: float = 0
    w: float = 0


_VECTOR_TYPES = (Vector2, Vector3, Vector4)


def _check_vector(vector: object) -> None:
    if not isinstance(vector, _VECTOR_TYPES):
        raise TypeError(f"expected a vector, got {type(vector).__name__}")


def _check_pair(a: object, b: object) -> None:
    _check_vector(a)
    _check_vector(b)
    if type(a) is not type(b):
        raise TypeError(
            f"vector sizes differ: {type(a).__name__} and {type(b).__name__}"
        )


def _shift_mix(value: int) -> int:
    return value ^ (value >> 47)


def _hash_bytes(data: bytes, seed: int = _HASH_SEED) -> int:
    length = len(data)
    aligned = length & ~7
    h = (seed ^ (length * _HASH_MUL)) & _U64_MASK
    for offset in range(0, aligned, 8):
        word = int.from_bytes(data[offset:offset + 8], "little")
        mixed = (_shift_mix((word * _HASH_MUL) & _U64_MASK) * _HASH_MUL) & _U64_MASK
        h = ((h ^ mixed) * _HASH_MUL) & _U64_MASK
    if length & 7:
        tail = int.from_bytes(data[aligned:], "little")
        h = ((h ^ tail) * _HASH_MUL) & _U64_MASK
    h = (_shift_mix(h) * _HASH_MUL) & _U64_MASK
    return _shift_mix(h)


def _hash_float(value: float) -> int:
    if value == 0.0:
        return 0
    return _hash_bytes(struct.pack("<f", value))


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def hash_vector(vector: _Vector) -> int:
    """A 32-bit hash of ``vector``.

    Integer vectors hash their components directly; any other vector hashes
    each component as a single-precision float.
    """
    _check_vector(vector)
    components = tuple(vector)
    integral = all(_is_integer(c) for c in components)
    seed = len(components)
    for component in components:
        x = (component & _U64_MASK) if integral else _hash_float(float(component))
        x = (((x >> 16) ^ x) * 0x45D9F3B) & _U64_MASK
        x = (((x >> 16) ^ x) * 0x45D9F3B) & _U64_MASK
        x = (x >> 16) ^ x
        mix = (x + 0x9E3779B9 + ((seed << 6) & _U32_MASK) + (seed >> 2)) & _U64_MASK
        seed = (seed ^ mix) & _U32_MASK
    return seed


def vector_norm(vector: _Vector) -> float:
    """The Euclidean length of ``vector``."""
    _check_vector(vector)
    return math.sqrt(sum(c * c for c in vector))


def vector_add(a: _Vector, b: _Vector) -> _Vector:
    """The component-wise sum of two vectors of the same size."""
    _check_pair(a, b)
    return type(a)(*(x + y for x, y in zip(a, b)))


def vector_dot(a: _Vector, b: _Vector) -> float:
    """The dot product of two vectors of the same size."""
    _check_pair(a, b)
    return sum(x * y for x, y in zip(a, b))


def vector_cross(a: Vector3, b: Vector3) -> Vector3:
    """The engine's cross product of two three-component vectors."""
    if not (isinstance(a, Vector3) and isinstance(b, Vector3)):
        raise TypeError("the cross product needs two Vector3 values")
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * a.z,
        a.x * b.y - a.y * b.z,
    )
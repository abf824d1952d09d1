"""Small value types shared across the engine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    if x < 0:
        raise ValueError("bit index must be non-negative")
    return 1 << x


@dataclass
class Point:
    """An integer point."""

    x: int = 0
    y: int = 0


@dataclass
class Rect:
    """An axis-aligned rectangle with an unsigned size and a signed origin."""

    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("rectangle size must be non-negative")


@dataclass
class Color:
    """An RGBA colour with float channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        """The four channels as a tuple."""
        return (self.r, self.g, self.b, self.a)
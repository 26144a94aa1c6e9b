"""Basic value types: 2D vectors, RGBA colours and particle state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector with the same direction; a zero vector has none."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector2(self.x / size, self.y / size)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Same colour with a different alpha channel."""
        return Color(self.r, self.g, self.b, alpha)


WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(slots=True)
class Particle:
    """State of a single live particle."""

    position: Vector2
    velocity: Vector2
    color: Color
    lifetime: float
    remaining: float
    scale: Vector2 = field(default=Vector2(1.0, 1.0))
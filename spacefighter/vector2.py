"""Two-component vector used for positions, velocities and directions."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(slots=True)
class Vector2:
    """A mutable vector with an ``x`` and a ``y`` component."""

    x: float = 0.0
    y: float = 0.0

    # Shared constants (ZERO, ONE, UNIT_X, UNIT_Y) are attached below the class.
    # Treat them as read-only; call copy() before mutating one.

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def set(self, x: float | Vector2, y: Optional[float] = None) -> None:
        """Set both components, either from two numbers or from another vector."""
        if isinstance(x, Vector2):
            if y is not None:
                raise TypeError("set() takes a vector or two numbers, not both")
            self.x, self.y = x.x, x.y
            return
        if y is None:
            raise TypeError("set() needs a y component")
        self.x = x
        self.y = y

    def normalize(self) -> None:
        """Scale the vector to unit length in place; the zero vector is left alone."""
        if not self.is_zero():
            length = self.length()
            self.x /= length
            self.y /= length

    def is_zero(self) -> bool:
        """Return True if both components are zero."""
        return self.x == 0 and self.y == 0

    def dot(self, other: Vector2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Return the two-dimensional cross product with another vector."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(first: Vector2, second: Vector2) -> float:
        """Return the distance between two vectors."""
        return math.sqrt(Vector2.distance_squared(first, second))

    @staticmethod
    def distance_squared(first: Vector2, second: Vector2) -> float:
        """Return the squared distance between two vectors."""
        return (second.x - first.x) ** 2 + (second.y - first.y) ** 2

    @staticmethod
    def lerp(start: Vector2, end: Vector2, value: float) -> Vector2:
        """Interpolate linearly from start to end; value is clamped to [0, 1]."""
        if value < 0:
            return start.copy()
        if value > 1:
            return end.copy()
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False, rng: Optional[_random.Random] = None) -> Vector2:
        """Return a vector with components in [-1, 1), optionally of unit length."""
        source = rng if rng is not None else _random
        result = Vector2(source.random() * 2 - 1, source.random() * 2 - 1)
        if normalize:
            result.normalize()
        return result

    def left(self) -> Vector2:
        """Return the left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> Vector2:
        """Return the right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> tuple[int, int]:
        """Return the components truncated toward zero as an integer pair."""
        return int(self.x), int(self.y)

    @staticmethod
    def parse(text: str) -> Vector2:
        """Read a vector from two whitespace-separated numbers."""
        parts = text.split()
        if len(parts) < 2:
            raise ValueError(f"expected two numbers, got {text!r}")
        try:
            return Vector2(float(parts[0]), float(parts[1]))
        except ValueError as exc:
            raise ValueError(f"expected two numbers, got {text!r}") from exc

    def copy(self) -> Vector2:
        """Return an independent copy of the vector."""
        return Vector2(self.x, self.y)

    def __str__(self) -> str:
        return f"{{ {self.x:g}, {self.y:g} }}"

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)
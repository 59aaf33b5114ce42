"""Axis-aligned integer rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from spacefighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle given by its upper-left corner and its size."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def from_position(cls, position: Sequence[int], width: int, height: int) -> Region:
        """Build a region from an upper-left (x, y) pair and a size."""
        x, y = position
        return cls(x, y, width, height)

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace all four components."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        return self.left, self.top

    @property
    def top_right(self) -> tuple[int, int]:
        return self.right, self.top

    @property
    def bottom_left(self) -> tuple[int, int]:
        return self.left, self.bottom

    @property
    def bottom_right(self) -> tuple[int, int]:
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        return Vector2(*self.top_left) + Vector2(self.width, self.height) / 2

    def translate(self, dx: int | Sequence[int], dy: Optional[int] = None) -> None:
        """Move the region by (dx, dy), or by a single (dx, dy) pair."""
        if dy is None:
            dx, dy = dx
        self.x += dx
        self.y += dy
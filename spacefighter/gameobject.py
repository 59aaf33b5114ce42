"""Base class for everything that is updated, drawn and checked for collisions."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Protocol

from spacefighter.flags import CollisionType
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class SectorTracker(Protocol):
    """Anything that keeps track of which collision sector an object is in."""

    def update_sector_position(self, game_object: GameObject) -> None: ...


class Attachable(ABC):
    """Something that items such as weapons can be attached to."""

    @abstractmethod
    def get_attachment(self, key: str | int) -> Optional[Any]:
        """Return the attachment with the given key or position, or None."""


class GameObject(ABC):
    """An object with a position, an active flag and a collision radius."""

    current_level: ClassVar[Optional[SectorTracker]] = None
    screen_width: ClassVar[int] = 1600
    screen_height: ClassVar[int] = 900

    _indices: ClassVar[itertools.count] = itertools.count()

    def __init__(self, collision_radius: float = 0.0) -> None:
        self._index = next(GameObject._indices)
        self._active = False
        self.position = Vector2()
        self.previous_position = Vector2()
        self.collision_radius = float(collision_radius)

    @property
    def index(self) -> int:
        """Unique number given to the object when it was created."""
        return self._index

    def update(self, time: FrameTime) -> None:
        """Report the object's position to the current level while it is active."""
        if not self.is_active():
            return
        level = GameObject.current_level
        if level is None:
            return
        level.update_sector_position(self)

    def is_active(self) -> bool:
        """Return True if the object takes part in the game."""
        return self._active

    def activate(self) -> None:
        """Make the object active."""
        self._active = True

    def deactivate(self) -> None:
        """Make the object inactive."""
        self._active = False

    def half_dimensions(self) -> Vector2:
        """Return half the object's extent; by default both are the collision radius."""
        return Vector2(self.collision_radius, self.collision_radius)

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """Return the kind of object this is for collision purposes."""

    def hit(self, damage: float) -> None:
        """Apply damage to the object; ignored unless a subclass overrides it."""

    def has_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type shares a bit with ``mask``."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """Return True if the object's collision type is exactly ``mask``."""
        return self.collision_type() == mask

    def set_position(self, x: float | Vector2, y: Optional[float] = None) -> None:
        """Move the object to (x, y) or to a vector, remembering the old position."""
        if y is None:
            if not isinstance(x, Vector2):
                raise TypeError("set_position() takes a vector or two numbers")
            x, y = x.x, x.y
        self.previous_position = self.position.copy()
        self.position.set(x, y)

    def translate(self, dx: float | Vector2, dy: Optional[float] = None) -> None:
        """Move the object by (dx, dy) or by a vector."""
        if dy is None:
            if not isinstance(dx, Vector2):
                raise TypeError("translate() takes a vector or two numbers")
            dx, dy = dx.x, dx.y
        self.set_position(self.position.x + dx, self.position.y + dy)

    def is_on_screen(self) -> bool:
        """Return True if any part of the object overlaps the screen."""
        half = self.half_dimensions()
        if self.position.y - half.y >= self.screen_height:
            return False
        if self.position.y + half.y <= 0:
            return False
        if self.position.x - half.x >= self.screen_width:
            return False
        if self.position.x + half.x <= 0:
            return False
        return True
"""Dispatching of collisions between pairs of game objects."""

from __future__ import annotations

from typing import Callable

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject

CollisionCallback = Callable[[GameObject, GameObject], None]


def _ordered(first: CollisionType, second: CollisionType) -> tuple[CollisionType, CollisionType]:
    return (first, second) if first <= second else (second, first)


class CollisionManager:
    """Knows which pairs of collision types interact and what happens when they do."""

    def __init__(self) -> None:
        self._non_collisions: set[tuple[CollisionType, CollisionType]] = set()
        self._collisions: dict[tuple[CollisionType, CollisionType], CollisionCallback] = {}

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: CollisionCallback
    ) -> None:
        """Call ``callback`` when objects of these two types touch.

        The callback receives the object with the lower type value first.
        The first callback registered for a pair is the one used.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: GameObject, second: GameObject) -> bool:
        """Test two objects and run the matching callback; return True if it ran.

        A pair of types with no registered callback is remembered as a
        non-colliding pair, so later registrations for it are ignored.
        """
        t1 = first.collision_type()
        t2 = second.collision_type()

        if t1 == t2 or t1 == CollisionType.NONE or t2 == CollisionType.NONE:
            return False

        swapped = t1 > t2
        key = (t2, t1) if swapped else (t1, t2)

        if key in self._non_collisions:
            return False

        callback = self._collisions.get(key)
        if callback is None:
            self.add_non_collision_type(*key)
            return False

        difference = first.position - second.position
        radii_sum = first.collision_radius + second.collision_radius
        if difference.length_squared() > radii_sum * radii_sum:
            return False

        if swapped:
            callback(second, first)
        else:
            callback(first, second)
        return True
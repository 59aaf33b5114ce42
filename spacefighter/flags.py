"""Bit-mask types for collisions and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """Kinds of collidable objects; combine with ``|`` for compound kinds."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """Return True if this mask shares at least one bit with ``other``."""
        return (int(self) & int(other)) > 0


class TriggerType(IntFlag):
    """Input triggers that can fire weapons."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """Return True if this mask shares at least one bit with ``other``."""
        return (int(self) & int(other)) > 0
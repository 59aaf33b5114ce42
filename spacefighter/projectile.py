"""Projectiles fired by weapons."""

from __future__ import annotations

from typing import ClassVar, Optional

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Projectile(GameObject):
    """A shot that flies in a straight line until it leaves the screen."""

    texture_size: ClassVar[Vector2] = Vector2()
    projectile_type: ClassVar[CollisionType] = CollisionType.PROJECTILE

    def __init__(self) -> None:
        super().__init__(collision_radius=9)
        self.direction = -Vector2.UNIT_Y
        self.speed = 500.0
        self.damage = 1.0
        self.shot_by_player = True

    def update(self, time: FrameTime) -> None:
        """Move the projectile and deactivate it once it is off the screen."""
        if self.is_active():
            self.translate(self.direction * self.speed * time.elapsed)

            position = self.position
            size = self.texture_size
            if position.y < -size.y:
                self.deactivate()
            elif position.x < -size.x:
                self.deactivate()
            elif position.y > self.screen_height + size.y:
                self.deactivate()
            elif position.x > self.screen_width + size.x:
                self.deactivate()

        super().update(time)

    def activate(self, position: Optional[Vector2] = None, shot_by_player: bool = True) -> None:
        """Launch the projectile from ``position``."""
        self.shot_by_player = shot_by_player
        if position is not None:
            self.set_position(position)
        super().activate()

    def collision_type(self) -> CollisionType:
        shooter = CollisionType.PLAYER if self.shot_by_player else CollisionType.ENEMY
        return shooter | self.projectile_type

    def __str__(self) -> str:
        return ("Player" if self.shot_by_player else "Enemy") + " Projectile"
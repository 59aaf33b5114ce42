"""Ships: the shared ship base, enemy ships and the player's ship."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Any, Collection, Optional

from spacefighter.flags import CollisionType, TriggerType
from spacefighter.gameobject import Attachable, GameObject
from spacefighter.input import Key
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Attachment, Weapon

_NORMALIZE_PI_OVER4 = math.sqrt(0.5)
_SCREEN_PADDING = 4
_PLAYER_START_LIVES = 3


def _spawn_explosion(game_object: GameObject) -> None:
    level = GameObject.current_level
    spawn = getattr(level, "spawn_explosion", None)
    if spawn is not None:
        spawn(game_object)


def _screen_center() -> Vector2:
    return Vector2(GameObject.screen_width / 2, GameObject.screen_height / 2)


class Ship(GameObject, Attachable):
    """A game object with hit points, a speed and attached items such as weapons."""

    def __init__(self, collision_radius: float = 10) -> None:
        super().__init__(collision_radius=collision_radius)
        self.set_position(0, 0)
        self.speed = 300.0
        self.max_hit_points = 1.0
        self.invulnerable = False
        self._attachments: dict[str, Attachment] = {}
        self.hit_points = self.max_hit_points

    def update(self, time: FrameTime) -> None:
        """Update every attached item, then the object itself."""
        for item in self._attachments.values():
            item.update(time)
        super().update(time)

    def hit(self, damage: float) -> None:
        """Take damage; when hit points run out the ship is destroyed."""
        if self.invulnerable:
            return
        self.hit_points -= damage
        if self.hit_points > 0:
            return
        GameObject.deactivate(self)
        _spawn_explosion(self)

    def initialize(self) -> None:
        """Restore the ship to full hit points."""
        self.hit_points = self.max_hit_points

    def attach_item(self, item: Attachment, offset: Vector2) -> None:
        """Attach ``item`` at ``offset`` from the ship's centre, keyed by its name."""
        item.attach_to(self, offset)
        self._attachments[item.key] = item

    def get_attachment(self, key: str | int) -> Optional[Attachment]:
        """Return the attachment with this name, or at this position in name order."""
        if isinstance(key, int):
            if 0 <= key < len(self._attachments):
                return self._attachments[sorted(self._attachments)[key]]
            return None
        return self._attachments.get(key)

    def get_weapon(self, key: str) -> Optional[Weapon]:
        """Return the attached weapon with this name, or None."""
        item = self._attachments.get(key)
        return item if isinstance(item, Weapon) else None

    def fire_weapons(self, trigger: TriggerType = TriggerType.ALL) -> None:
        """Pull ``trigger`` on every attached weapon, in name order."""
        for name in sorted(self._attachments):
            item = self._attachments[name]
            if item.attachment_type != "Weapon":
                continue
            item.fire(trigger)  # type: ignore[attr-defined]

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """Return the kind of ship this is for collision purposes."""

    def __str__(self) -> str:
        return "Ship"


class EnemyShip(Ship):
    """An enemy ship that becomes active after a delay and leaves once off screen."""

    def __init__(self) -> None:
        super().__init__(collision_radius=20)
        self.max_hit_points = 1.0
        self._delay_seconds = 0.0
        self._activation_seconds = 0.0

    @property
    def delay_seconds(self) -> float:
        """Seconds left before the ship activates."""
        return self._delay_seconds

    def update(self, time: FrameTime) -> None:
        """Count down the activation delay and leave once off screen for good."""
        if self._delay_seconds > 0:
            self._delay_seconds -= time.elapsed
            if self._delay_seconds <= 0:
                GameObject.activate(self)

        if self.is_active():
            self._activation_seconds += time.elapsed
            if self._activation_seconds > 2 and not self.is_on_screen():
                self.deactivate()

        super().update(time)

    def initialize(self, position: Vector2, delay_seconds: float) -> None:  # type: ignore[override]
        """Place the ship and schedule its activation ``delay_seconds`` from now."""
        self.set_position(position)
        self._delay_seconds = delay_seconds
        Ship.initialize(self)

    def fire(self) -> None:
        """Enemy ships have no default attack."""

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "Enemy Ship"


class BioEnemyShip(EnemyShip):
    """A slow biological enemy that weaves from side to side as it descends."""

    def __init__(self, texture: Any = None) -> None:
        super().__init__()
        self.speed = 150.0
        self.max_hit_points = 1.0
        self.collision_radius = 20.0
        self.texture = texture

    def update(self, time: FrameTime) -> None:
        """Weave sideways while moving down; leave once off screen."""
        if self.is_active():
            sway = math.sin(time.total * math.pi + self.index)
            sway *= self.speed * time.elapsed * 1.4
            self.translate(sway, self.speed * time.elapsed)
            if not self.is_on_screen():
                self.deactivate()

        super().update(time)


class PlayerShip(Ship):
    """The ship steered by the player, with a number of lives."""

    def __init__(self, texture_size: Optional[Vector2] = None) -> None:
        super().__init__()
        self.lives = _PLAYER_START_LIVES
        self.texture_size = texture_size
        self.desired_direction = Vector2()
        self.velocity = Vector2()
        self._responsiveness = 0.0
        self.confined_to_screen = False
        self._prepare()

    def _prepare(self) -> None:
        self.confine_to_screen()
        self.responsiveness = 0.1
        self.set_position(_screen_center() + Vector2.UNIT_Y * 300)

    @property
    def responsiveness(self) -> float:
        """How quickly the velocity follows the desired direction, from 0 to 1."""
        return self._responsiveness

    @responsiveness.setter
    def responsiveness(self, value: float) -> None:
        self._responsiveness = min(max(value, 0.0), 1.0)

    def handle_input(self, pressed_keys: Collection[Key]) -> None:
        """Steer and fire according to the keys currently held down."""
        if not self.is_active():
            return

        direction = Vector2()
        if Key.DOWN in pressed_keys:
            direction.y += 1
        if Key.UP in pressed_keys:
            direction.y -= 1
        if Key.RIGHT in pressed_keys:
            direction.x += 1
        if Key.LEFT in pressed_keys:
            direction.x -= 1

        if direction.x != 0 and direction.y != 0:
            direction = direction * _NORMALIZE_PI_OVER4

        trigger = TriggerType.NONE
        if Key.SPACE in pressed_keys:
            trigger |= TriggerType.PRIMARY

        self.set_desired_direction(direction)
        if trigger != TriggerType.NONE:
            self.fire_weapons(trigger)

    def update(self, time: FrameTime) -> None:
        """Ease toward the desired velocity, move, and keep within the screen."""
        target = self.desired_direction * self.speed * time.elapsed
        self.velocity = Vector2.lerp(self.velocity, target, self.responsiveness)
        self.translate(self.velocity)

        if self.confined_to_screen:
            top = _SCREEN_PADDING
            left = _SCREEN_PADDING
            right = self.screen_width - _SCREEN_PADDING
            bottom = self.screen_height - _SCREEN_PADDING
            position = self.position

            if position.x - self.half_dimensions().x < left:
                self.set_position(left + self.half_dimensions().x, position.y)
                self.velocity.x = 0.0
            if position.x + self.half_dimensions().x > right:
                self.set_position(right - self.half_dimensions().x, position.y)
                self.velocity.x = 0.0
            if position.y - self.half_dimensions().y < top:
                self.set_position(position.x, top + self.half_dimensions().y)
                self.velocity.y = 0.0
            if position.y + self.half_dimensions().y > bottom:
                self.set_position(position.x, bottom - self.half_dimensions().y)
                self.velocity.y = 0.0

        super().update(time)

    def hit(self, damage: float) -> None:
        """Take damage; at zero hit points lose a life and respawn or explode."""
        self.hit_points -= damage
        if self.hit_points > 0:
            return

        self.lives -= 1
        if self.lives <= 0:
            GameObject.deactivate(self)
            _spawn_explosion(self)
        else:
            self.respawn(_screen_center())
            GameObject.activate(self)

    def respawn(self, start_position: Vector2) -> None:
        """Put the ship back at ``start_position`` with full hit points and lives."""
        self.set_position(start_position)
        self.hit_points = self.max_hit_points
        self.lives = _PLAYER_START_LIVES
        self.confine_to_screen()
        self.responsiveness = 0.1

    def add_life(self) -> None:
        """Give the player one more life."""
        self.lives += 1

    def remove_life(self) -> None:
        """Take a life away; the ship is deactivated when none are left."""
        if self.lives > 0:
            self.lives -= 1
        if self.lives == 0:
            self.deactivate()

    def on_collision_with_enemy(self) -> None:
        """Lose a life after running into an enemy."""
        self.remove_life()
        if self.lives == 0:
            print("Game Over")

    def set_desired_direction(self, direction: Vector2) -> None:
        """Set the direction the player wants to move in."""
        self.desired_direction.set(direction)

    def confine_to_screen(self, confined: bool = True) -> None:
        """Keep the ship inside the screen, or let it leave."""
        self.confined_to_screen = confined

    def half_dimensions(self) -> Vector2:
        """Half the texture size if known, else the collision radius on both axes."""
        if self.texture_size is not None:
            return self.texture_size / 2
        return super().half_dimensions()

    def collision_type(self) -> CollisionType:
        return CollisionType.PLAYER | CollisionType.SHIP

    def __str__(self) -> str:
        return "Player Ship"
"""Weapons that can be attached to ships and fire projectiles from a pool."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from spacefighter.flags import TriggerType
from spacefighter.gameobject import GameObject
from spacefighter.projectile import Projectile
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Sound(Protocol):
    def play(self) -> Any: ...


class Attachment(ABC):
    """An item that can be attached to an attachable object."""

    @abstractmethod
    def attach_to(self, owner: Any, offset: Vector2) -> None:
        """Attach the item to ``owner`` at ``offset`` from its position."""

    @abstractmethod
    def update(self, time: FrameTime) -> None:
        """Advance the item by one frame."""

    @property
    @abstractmethod
    def key(self) -> str:
        """Name used to look the item up on its owner."""

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """Kind of attachment."""


class Weapon(Attachment):
    """Base class for weapons; subclasses decide how firing works."""

    def __init__(
        self,
        key: str,
        attached_to_player: bool = True,
        active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
        projectiles: Optional[list[Projectile]] = None,
    ) -> None:
        self._key = key
        self.attached_to_player = attached_to_player
        self._active = active
        self.trigger_type = trigger_type
        self.projectiles = projectiles
        self.fire_sound: Optional[Sound] = None
        self.owner: Optional[GameObject] = None
        self.offset = Vector2()

    @property
    def key(self) -> str:
        return self._key

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    def attach_to(self, owner: Any, offset: Vector2) -> None:
        """Mount the weapon on a game object; anything else leaves it unmounted."""
        self.owner = owner if isinstance(owner, GameObject) else None
        self.offset = offset.copy()

    def update(self, time: FrameTime) -> None:
        """Advance the weapon by one frame; the base weapon has nothing to do."""

    @abstractmethod
    def fire(self, trigger: TriggerType) -> bool:
        """Try to fire; return True if a projectile was launched."""

    def activate(self) -> None:
        """Allow the weapon to fire."""
        self._active = True

    def deactivate(self) -> None:
        """Stop the weapon from firing."""
        self._active = False

    def is_active(self) -> bool:
        """Return True if the weapon and the object carrying it are both active."""
        return self._active and self.owner is not None and self.owner.is_active()

    def position(self) -> Vector2:
        """Return the weapon's position on screen."""
        if self.owner is None:
            raise RuntimeError(f"weapon {self._key!r} is not attached to a game object")
        return self.owner.position + self.offset

    def get_projectile(self) -> Optional[Projectile]:
        """Return the first inactive projectile in the pool, or None if all are in use."""
        if self.projectiles is None:
            raise RuntimeError(f"weapon {self._key!r} has no projectile pool")
        return next((p for p in self.projectiles if not p.is_active()), None)


class Blaster(Weapon):
    """A weapon that fires one projectile at a time with a cooldown between shots."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(key, **kwargs)
        self.cooldown = 0.0
        self.cooldown_seconds = 0.35

    def update(self, time: FrameTime) -> None:
        """Count the cooldown down."""
        if self.cooldown > 0:
            self.cooldown -= time.elapsed

    def can_fire(self) -> bool:
        """Return True once the cooldown has run out."""
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        """Make the blaster ready to fire at once."""
        self.cooldown = 0.0

    def fire(self, trigger: TriggerType) -> bool:
        """Fire if active, cooled down and ``trigger`` matches the blaster's trigger."""
        if not self.is_active():
            return False
        if not self.can_fire():
            return False
        if not trigger.contains(self.trigger_type):
            return False

        projectile = self.get_projectile()
        if projectile is None:
            return False

        if self.fire_sound is not None:
            self.fire_sound.play()

        projectile.activate(self.position(), self.attached_to_player)
        self.cooldown = self.cooldown_seconds
        return True
"""Animated explosions shown when objects are destroyed."""

from __future__ import annotations

import math
import random as _random
from typing import Any, Optional, Protocol

from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class Animation(Protocol):
    """What an explosion needs from its animation."""

    loop_count: int

    def play(self) -> Any: ...

    def update(self, time: FrameTime) -> Any: ...

    def is_playing(self) -> bool: ...


class Sound(Protocol):
    def play(self) -> Any: ...


class Explosion:
    """An explosion that plays its animation once at a position, scale and rotation."""

    def __init__(
        self,
        animation: Optional[Animation] = None,
        sound: Optional[Sound] = None,
        rng: Optional[_random.Random] = None,
    ) -> None:
        self.animation = animation
        self.sound = sound
        self._rng = rng
        self.position = Vector2()
        self.rotation = 0.0
        self.scale = 1.0

    def _require_animation(self) -> Animation:
        if self.animation is None:
            raise RuntimeError("explosion has no animation")
        return self.animation

    def update(self, time: FrameTime) -> None:
        """Advance the animation by one frame."""
        self._require_animation().update(time)

    def activate(self, position: Vector2, scale: float = 1.0) -> None:
        """Start the explosion at ``position`` with a random rotation."""
        animation = self._require_animation()
        self.position = position.copy()
        self.scale = scale
        source = self._rng if self._rng is not None else _random
        self.rotation = source.random() * 2 * math.pi
        animation.loop_count = 0
        animation.play()
        if self.sound is not None:
            self.sound.play()

    def is_active(self) -> bool:
        """Return True while the animation is playing."""
        return self.animation is not None and bool(self.animation.is_playing())
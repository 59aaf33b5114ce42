"""Simple particle system: particles, initializers, updaters and an emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass
class Particle:
    """A point that moves at a constant velocity until its life runs out."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    _life_percentage: float = field(default=0.0, repr=False)

    def is_active(self) -> bool:
        """Return True while the particle has life remaining."""
        return self.life_remaining > 0

    @property
    def life_percentage(self) -> float:
        """Fraction of the life span still remaining, as of the last update."""
        return self._life_percentage

    def initialize(self, position: Vector2) -> None:
        """Place the particle at ``position`` and restore its full life."""
        self.position = position.copy()
        self.life_remaining = self.life_span

    def update(self, time: FrameTime) -> None:
        """Age the particle and move it by its velocity."""
        elapsed = time.elapsed
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        if self.life_span:
            self._life_percentage = self.life_remaining / self.life_span
        else:
            self._life_percentage = 0.0
        self.position = self.position + self.velocity * elapsed


class SupportsParticleInitialize(Protocol):
    def initialize(self, particle: Particle, position: Vector2) -> None: ...


@dataclass
class ParticleInitializer:
    """Gives each emitted particle a fixed life span, velocity, scale and color."""

    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.5
    velocity: Vector2 = field(default_factory=lambda: Vector2.UNIT_Y * 50)

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Configure ``particle`` and start it at ``position``."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity.copy()
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Advances a particle by one frame."""

    def update(self, particle: Particle, time: FrameTime) -> None:
        """Update ``particle`` for the given frame."""
        particle.update(time)


class ParticleEmitter:
    """Takes inactive particles from a pool and starts them at its position."""

    def __init__(
        self,
        initializer: SupportsParticleInitialize,
        pool: Optional[Iterable[Particle]] = None,
        max_particles_per_second: int = 100,
    ) -> None:
        self.initializer = initializer
        self.pool = pool
        self.max_particles_per_second = max_particles_per_second
        self.position = Vector2()
        self.remaining_particles = 0.0

    def _inactive_particle(self) -> Optional[Particle]:
        if self.pool is None:
            raise RuntimeError("no particle pool set for the emitter")
        return next((p for p in self.pool if not p.is_active()), None)

    def emit(self, amount: float, time: FrameTime) -> int:
        """Emit up to ``amount`` (0 to 1) of the maximum rate; return how many started."""
        exact = amount * self.max_particles_per_second * time.elapsed
        count = int(exact)
        self.remaining_particles += exact - count

        emitted = 0
        while count:
            particle = self._inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return emitted
            self.initializer.initialize(particle, self.position)
            emitted += 1
            count -= 1
        return emitted
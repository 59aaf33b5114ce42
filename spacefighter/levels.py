"""The game's levels and their enemy waves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from spacefighter.gameobject import GameObject
from spacefighter.level import Level
from spacefighter.ships import BioEnemyShip
from spacefighter.vector2 import Vector2

ENEMY_TEXTURE_PATH = "Textures/BioEnemyShip.png"
START_DELAY = 3.0


@dataclass(frozen=True)
class Formation:
    """A group of enemies: a pause before the first, then an even spacing."""

    lead_in: float
    spacing: float
    columns: tuple[float, ...]

    def schedule(self) -> Iterator[tuple[float, float]]:
        """Yield (screen-width fraction, delay since previous enemy) pairs."""
        for position, column in enumerate(self.columns):
            yield column, self.lead_in if position == 0 else self.spacing


def _columns(formations: tuple[Formation, ...]) -> tuple[float, ...]:
    return tuple(x for formation in formations for x, _ in formation.schedule())


def _delays(formations: tuple[Formation, ...]) -> tuple[float, ...]:
    return tuple(step for formation in formations for _, step in formation.schedule())


_OPENING = (
    Formation(0.0, 0.25, (0.25, 0.2, 0.3)),
    Formation(3.0, 0.25, (0.75, 0.8, 0.7)),
    Formation(3.25, 0.25, (0.3, 0.25, 0.35, 0.2, 0.4)),
    Formation(3.25, 0.25, (0.7, 0.75, 0.65, 0.8, 0.6)),
)
_CENTRE = (0.5, 0.4, 0.6, 0.45, 0.55)


class _WaveLevel(Level):
    """A level whose enemies fly in one after another."""

    FORMATIONS: tuple[Formation, ...] = ()
    X_POSITIONS: tuple[float, ...] = ()
    DELAYS: tuple[float, ...] = ()

    def __init__(self, enemy_texture_size: Optional[Vector2] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.enemy_texture_size = enemy_texture_size
        self.enemy_ships: list[BioEnemyShip] = []

    def _spawn_wave(self) -> None:
        texture = self._load_resource(ENEMY_TEXTURE_PATH)
        half_height = self.enemy_texture_size.y / 2 if self.enemy_texture_size else 0.0
        delay = START_DELAY
        for x_fraction, step in zip(self.X_POSITIONS, self.DELAYS):
            delay += step
            enemy = BioEnemyShip(texture=texture)
            GameObject.current_level = self
            enemy.initialize(Vector2(x_fraction * GameObject.screen_width, -half_height), delay)
            self.add_game_object(enemy)
            self.enemy_ships.append(enemy)


class Level01(_WaveLevel):
    """The first level: 21 enemies over a space background."""

    BACKGROUND_PATH = "Textures/SpaceBackground01.png"
    FORMATIONS = _OPENING + (Formation(3.5, 0.3, _CENTRE),)
    X_POSITIONS = _columns(FORMATIONS)
    DELAYS = _delays(FORMATIONS)

    def load_content(self) -> None:
        """Create the enemy wave, load the background and the shared content."""
        self._spawn_wave()
        self.background = self._load_resource(self.BACKGROUND_PATH)
        super().load_content()


class Level02(_WaveLevel):
    """The second level: 22 enemies."""

    FORMATIONS = _OPENING + (Formation(3.5, 0.3, _CENTRE + (0.6,)),)
    X_POSITIONS = _columns(FORMATIONS)
    DELAYS = _delays(FORMATIONS)

    def load_content(self) -> None:
        """Create the enemy wave and load the shared content."""
        self._spawn_wave()
        super().load_content()
"""A level: holds game objects, sorts them into sectors and checks collisions."""

from __future__ import annotations

import sys
from typing import Callable, Collection, Optional, TypeVar

from spacefighter.collision import CollisionManager
from spacefighter.explosion import Explosion
from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject
from spacefighter.input import Key
from spacefighter.projectile import Projectile
from spacefighter.resources import Resource, ResourceManager
from spacefighter.ships import EnemyShip, PlayerShip
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Blaster

SECTOR_SIZE = 64
PROJECTILE_POOL_SIZE = 100
EXPLOSION_POOL_SIZE = 10
_APPROXIMATE_TEXTURE_RADIUS = 120.0
_DRAMATIC_EFFECT = 2.2

G = TypeVar("G", bound=GameObject)


def player_shoots_enemy(first: GameObject, second: GameObject) -> None:
    """Damage the enemy by the projectile's damage and remove the projectile."""
    first_is_enemy = first.has_mask(CollisionType.ENEMY)
    enemy = first if first_is_enemy else second
    projectile = second if first_is_enemy else first
    enemy.hit(projectile.damage)  # type: ignore[attr-defined]
    projectile.deactivate()


def player_collides_with_enemy(first: GameObject, second: GameObject) -> None:
    """Destroy both the player's ship and the enemy ship it ran into."""
    first_is_player = first.has_mask(CollisionType.PLAYER)
    player = first if first_is_player else second
    enemy = second if first_is_player else first
    player.hit(sys.float_info.max)
    enemy.hit(sys.float_info.max)
    if player.lives == 0:  # type: ignore[attr-defined]
        print("Game Over!!!!!!!!!")


class Level:
    """Game objects of one level, their collision sectors and the explosion pool."""

    def __init__(
        self,
        resources: Optional[ResourceManager] = None,
        explosion_factory: Optional[Callable[[], Explosion]] = None,
        player_texture_size: Optional[Vector2] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.resources = resources
        self.explosion_factory = explosion_factory
        self.on_exit = on_exit
        self.alpha = 1.0
        self.background: Optional[Resource] = None
        self.background_audio: Optional[Resource] = None

        self.sector_size = SECTOR_SIZE
        self.sector_count_x = GameObject.screen_width // SECTOR_SIZE + 1
        self.sector_count_y = GameObject.screen_height // SECTOR_SIZE + 1
        self.sectors: list[list[GameObject]] = [
            [] for _ in range(self.sector_count_x * self.sector_count_y)
        ]
        self.collision_manager = CollisionManager()
        self.game_objects: list[GameObject] = []
        self.explosions: list[Explosion] = []

        GameObject.current_level = self

        self.player_ship = PlayerShip(texture_size=player_texture_size)
        self.projectiles = [Projectile() for _ in range(PROJECTILE_POOL_SIZE)]
        blaster = Blaster("Main Blaster", projectiles=self.projectiles)
        self.player_ship.attach_item(blaster, Vector2.UNIT_Y * -20)
        for projectile in self.projectiles:
            self.add_game_object(projectile)

        self.player_ship.activate()
        self.add_game_object(self.player_ship)

        player_ship = CollisionType.PLAYER | CollisionType.SHIP
        player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
        enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
        manager = self.collision_manager
        manager.add_non_collision_type(player_ship, player_projectile)
        manager.add_collision_type(player_projectile, enemy_ship, player_shoots_enemy)
        manager.add_collision_type(player_ship, enemy_ship, player_collides_with_enemy)

    def _load_resource(self, path: str) -> Optional[Resource]:
        if self.resources is None:
            return None
        return self.resources.load(Resource, path)

    def load_content(self) -> None:
        """Fill the explosion pool, once, if an explosion factory was given."""
        if self.explosions or self.explosion_factory is None:
            return
        self.explosions = [self.explosion_factory() for _ in range(EXPLOSION_POOL_SIZE)]

    def add_game_object(self, game_object: GameObject) -> None:
        """Add an object to be updated and checked for collisions."""
        self.game_objects.append(game_object)

    def is_screen_transitioning(self) -> bool:
        """Return True while the screen is fading in or out."""
        return self.alpha < 1

    def handle_input(self, pressed_keys: Collection[Key]) -> None:
        """Pass the keys held down to the player's ship unless the screen is fading."""
        if self.is_screen_transitioning():
            return
        self.player_ship.handle_input(pressed_keys)

    def update(self, time: FrameTime) -> None:
        """Update every object, resolve collisions and advance explosions."""
        for sector in self.sectors:
            sector.clear()

        for game_object in self.game_objects:
            game_object.update(time)

        for sector in self.sectors:
            if len(sector) > 1:
                self._check_collisions(sector)

        for explosion in self.explosions:
            explosion.update(time)

        player = self.player_ship
        if not player.is_active() and player.lives <= 0 and self.on_exit is not None:
            self.on_exit()

    def _sector_index(self, edge: float, count: int) -> int:
        pixel = int(edge)
        sector = int(pixel / self.sector_size)
        return min(max(sector, 0), count - 1)

    def update_sector_position(self, game_object: GameObject) -> None:
        """Record the object in every sector its bounds overlap."""
        position = game_object.position
        half = game_object.half_dimensions()

        min_x = self._sector_index(position.x - half.x - 0.5, self.sector_count_x)
        max_x = self._sector_index(position.x + half.x + 0.5, self.sector_count_x)
        min_y = self._sector_index(position.y - half.y - 0.5, self.sector_count_y)
        max_y = self._sector_index(position.y + half.y + 0.5, self.sector_count_y)

        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                self.sectors[y * self.sector_count_x + x].append(game_object)

    def _check_collisions(self, sector: list[GameObject]) -> None:
        for i, first in enumerate(sector[:-1]):
            if not first.is_active():
                continue
            for second in sector[i + 1:]:
                if not first.is_active():
                    break
                if second.is_active():
                    self.collision_manager.check_collision(first, second)

    def spawn_explosion(self, game_object: GameObject) -> Optional[Explosion]:
        """Start a free explosion sized to the object; return it, or None if none is free."""
        explosion = next((e for e in self.explosions if not e.is_active()), None)
        if explosion is None:
            return None
        scale_to_object = (1 / _APPROXIMATE_TEXTURE_RADIUS) * game_object.collision_radius * 2
        explosion.activate(game_object.position, scale_to_object * _DRAMATIC_EFFECT)
        return explosion

    def closest_object(
        self, position: Vector2, max_range: float, kind: type[G] = GameObject  # type: ignore[assignment]
    ) -> Optional[G]:
        """Return the nearest inactive object of ``kind`` within ``max_range``.

        A range of zero or less means the whole screen diagonal.
        """
        if max_range <= 0:
            width, height = GameObject.screen_width, GameObject.screen_height
            squared_range = float(width * width + height * height)
        else:
            squared_range = max_range * max_range

        closest: Optional[G] = None
        for game_object in self.game_objects:
            if game_object.is_active():
                continue
            squared_distance = (position - game_object.position).length_squared()
            if squared_distance < squared_range and isinstance(game_object, kind):
                closest = game_object
                squared_range = squared_distance
        return closest


__all__ = [
    "EnemyShip",
    "Level",
    "player_collides_with_enemy",
    "player_shoots_enemy",
]
import pytest

from spacefighter.flags import CollisionType
from spacefighter.level import Level
from spacefighter.projectile import Projectile
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


class RecordingLevel(Level):
    def __init__(self):
        super().__init__()
        self.seen = []

    def update_sector_position(self, game_object):
        self.seen.append(game_object)


def test_player_projectile_type_and_name():
    projectile = Projectile()
    projectile.activate(Vector2(10, 10))
    assert projectile.collision_type() == CollisionType.PLAYER | CollisionType.PROJECTILE
    assert str(projectile) == "Player Projectile"


def test_enemy_projectile_type_and_name():
    projectile = Projectile()
    projectile.activate(Vector2(10, 10), shot_by_player=False)
    assert projectile.collision_type() == CollisionType.ENEMY | CollisionType.PROJECTILE
    assert str(projectile) == "Enemy Projectile"


def test_activate_places_and_activates():
    projectile = Projectile()
    assert not projectile.is_active()
    projectile.activate(Vector2(30, 40))
    assert projectile.is_active()
    assert projectile.position == Vector2(30, 40)


def test_flies_along_its_direction():
    projectile = Projectile()
    projectile.activate(Vector2(100, 400))
    start = projectile.position.copy()
    projectile.update(FrameTime(elapsed=0.1))
    expected = start + projectile.direction * projectile.speed * 0.1
    assert projectile.position.x == pytest.approx(expected.x)
    assert projectile.position.y == pytest.approx(expected.y)
    assert projectile.position.y < start.y
    assert projectile.is_active()


def test_inactive_projectile_does_not_move():
    projectile = Projectile()
    projectile.set_position(100, 400)
    projectile.update(FrameTime(elapsed=0.1))
    assert projectile.position == Vector2(100, 400)


def test_leaving_the_top_deactivates():
    projectile = Projectile()
    projectile.activate(Vector2(100, 0))
    projectile.update(FrameTime(elapsed=0.01))
    assert projectile.position.y < 0
    assert not projectile.is_active()


def test_active_projectile_is_reported_to_level():
    level = RecordingLevel()
    projectile = Projectile()
    projectile.activate(Vector2(100, 400))
    projectile.update(FrameTime(elapsed=0.01))
    assert level.seen == [projectile]
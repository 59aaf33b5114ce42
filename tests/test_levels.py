import pytest

from spacefighter.gameobject import GameObject
from spacefighter.levels import Level01, Level02
from spacefighter.resources import ResourceManager
from spacefighter.ships import BioEnemyShip
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


@pytest.fixture
def content(tmp_path):
    textures = tmp_path / "Textures"
    textures.mkdir()
    (textures / "BioEnemyShip.png").write_bytes(b"ship")
    (textures / "SpaceBackground01.png").write_bytes(b"bg")
    return ResourceManager(content_path=f"{tmp_path}/")


def _enemies(level):
    return [o for o in level.game_objects if isinstance(o, BioEnemyShip)]


def test_level01_enemy_count_and_order():
    level = Level01()
    level.load_content()
    enemies = _enemies(level)
    assert len(enemies) == 21
    assert enemies == level.enemy_ships
    assert all(not e.is_active() for e in enemies)
    delays = [e.delay_seconds for e in enemies]
    assert delays[0] == 3.0
    assert delays == sorted(delays)


def test_level01_x_positions():
    level = Level01()
    level.load_content()
    fractions = [e.position.x / GameObject.screen_width for e in _enemies(level)]
    assert fractions[0] == pytest.approx(0.25)
    assert fractions[-1] == pytest.approx(0.55)


def test_level02_has_extra_enemy():
    level = Level02()
    level.load_content()
    enemies = _enemies(level)
    assert len(enemies) == 22
    assert enemies[-1].position.x / GameObject.screen_width == pytest.approx(0.6)
    assert level.background is None


def test_enemies_start_above_screen():
    level = Level01(enemy_texture_size=Vector2(40, 60))
    level.load_content()
    ys = {e.position.y for e in _enemies(level)}
    assert ys == {-30.0}


def test_resources_loaded(content):
    level = Level01(resources=content)
    level.load_content()
    assert level.background.data == b"bg"
    assert all(e.texture.data == b"ship" for e in _enemies(level))
    other = Level02(resources=content)
    other.load_content()
    assert other.background is None
    assert _enemies(other)[0].texture.data == b"ship"


def test_no_resources_means_no_textures():
    level = Level01()
    level.load_content()
    assert level.background is None
    assert all(e.texture is None for e in _enemies(level))


def test_first_enemy_activates_after_start_delay():
    level = Level01()
    level.load_content()
    level.update(FrameTime().advance(3.0))
    enemies = _enemies(level)
    assert enemies[0].is_active() is True
    assert enemies[1].is_active() is False
    assert GameObject.current_level is level
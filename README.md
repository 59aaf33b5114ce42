# spacefighter

The game logic of a small vertical space shooter, as a plain Python library
with no dependencies outside the standard library. Time moves forward one
explicit step per frame, so the library can be driven from any frontend, from
a headless simulation or from tests.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `spacefighter.vector2.Vector2`: a mutable 2D vector. It supports `+`, `-`,
  multiplication and division by a number, and negation. It also has
  `length`, `length_squared`, `normalize`, `is_zero`, `dot`, `cross`,
  `left`, `right`, `to_point`, `copy`, and the static helpers `distance`,
  `distance_squared`, `lerp` (its value is clamped to 0..1), `random` and
  `parse` (reads two whitespace-separated numbers). The shared constants are
  `Vector2.ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`.
- `spacefighter.region.Region`: an integer rectangle. It has the properties
  `top`, `bottom`, `left`, `right`, `top_left`, `top_right`, `bottom_left`,
  `bottom_right` and `center`, the methods `set` and `translate`, and the
  constructor `Region.from_position`.
- `spacefighter.timing.FrameTime`: the `elapsed` and `total` seconds of a
  frame. `advance(elapsed)` moves it forward.
- `spacefighter.input`: the `Key`, `MouseButton`, `Button` and `ButtonState`
  enums, and the game pad dataclasses. `GamePadState` provides
  `is_button_down`, `is_button_up` and `reset`.
- `spacefighter.flags`: the bit masks `CollisionType` and `TriggerType`.
  Combine them with `|`. `contains` tests whether two masks share a bit.
- `spacefighter.particles`: `Particle`, `ParticleInitializer`,
  `ParticleUpdater` and `ParticleEmitter`. `emit` starts particles from a
  pool and returns how many it started.
- `spacefighter.resources`: `Resource`, whose base class reads a file as
  bytes, and `ResourceManager`. The manager prefixes paths with
  `content_path`, caches loaded resources by path, hands out ids, and clones
  the resources whose `is_cloneable()` is true.
- `spacefighter.gameobject.GameObject`: the base of everything that moves and
  collides. The class attributes `screen_width`, `screen_height` and
  `current_level` hold the screen size and the active level.
- `spacefighter.projectile.Projectile`: a shot that flies in a straight line
  and deactivates once it is off screen.
- `spacefighter.weapons`: the `Weapon` base class and `Blaster`. A blaster
  fires one projectile from its pool per trigger pull, then waits out a
  cooldown.
- `spacefighter.ships`: `Ship`, `EnemyShip`, `BioEnemyShip` and `PlayerShip`.
  A ship has hit points and attached weapons. The player ship has lives,
  steering that eases toward the desired direction, and can be confined to
  the screen.
- `spacefighter.collision.CollisionManager`: maps pairs of collision types to
  callbacks. `check_collision` tests two objects by their collision radii and
  returns True when a callback ran.
- `spacefighter.explosion.Explosion`: plays an animation at a position, with
  a random rotation. Any object with `play`, `update`, `is_playing` and
  `loop_count` can serve as the animation.
- `spacefighter.level.Level`: holds the player ship, a pool of 100
  projectiles and the game objects. It sorts the objects into 64-pixel
  sectors for collision checks. It also provides `spawn_explosion` and
  `closest_object`, which returns the nearest inactive object of a given
  class. The collision callbacks are `player_shoots_enemy` and
  `player_collides_with_enemy`. Pass `explosion_factory` to fill the
  explosion pool. Pass `on_exit` to be called once the player has no lives
  left.
- `spacefighter.levels`: `Level01`, with 21 enemies, and `Level02`, with 22.
  Their `load_content` creates the enemy wave.

## A short example

```python
from spacefighter.timing import FrameTime
from spacefighter.levels import Level01
from spacefighter.input import Key

level = Level01()
level.load_content()

time = FrameTime()
for _ in range(60):
    time.advance(1 / 60)
    level.handle_input({Key.SPACE, Key.UP})
    level.update(time)
```

`handle_input` takes the set of keys held down in the current frame. The
player ship steers toward the direction those keys give, and `SPACE` fires
its primary weapons. Enemy ships become active after their delay and weave
down the screen. A projectile or the player ship that hits one destroys it.

## What it does not do

The package has no window, no drawing, no sound playback and no menus. It
has no command to start a game either. Textures and sounds exist only as
`Resource` objects and as protocols such as the explosion's animation, and
the caller has to supply them. To make the simulation playable, you need a
frontend that reads the keyboard, calls `handle_input` and `update` each
frame, and draws the objects' positions.
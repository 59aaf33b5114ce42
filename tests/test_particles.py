import pytest

from spacefighter.particles import (
    WHITE,
    Particle,
    ParticleEmitter,
    ParticleInitializer,
    ParticleUpdater,
)
from spacefighter.timing import FrameTime
from spacefighter.vector2 import Vector2


def test_new_particle_is_inactive():
    particle = Particle()
    assert particle.is_active() is False
    assert particle.scale == 1.0
    assert particle.color == WHITE


def test_initialize_restores_life_and_copies_position():
    particle = Particle(life_span=2.0)
    start = Vector2(3.0, 4.0)
    particle.initialize(start)
    start.x = 100.0
    assert particle.is_active()
    assert particle.life_remaining == 2.0
    assert particle.position == Vector2(3.0, 4.0)


def test_update_moves_and_ages():
    particle = Particle(velocity=Vector2(2.0, -4.0), life_span=2.0)
    particle.initialize(Vector2(1.0, 1.0))
    particle.update(FrameTime(elapsed=0.5))
    assert particle.life_remaining == pytest.approx(1.5)
    assert particle.life_percentage == pytest.approx(0.75)
    assert particle.position == Vector2(2.0, -1.0)


def test_update_clamps_life_at_zero():
    particle = Particle(life_span=1.0)
    particle.initialize(Vector2())
    particle.update(FrameTime(elapsed=5.0))
    assert particle.life_remaining == 0.0
    assert particle.life_percentage == 0.0
    assert not particle.is_active()


def test_initializer_defaults_applied():
    particle = Particle()
    ParticleInitializer().initialize(particle, Vector2(10.0, 20.0))
    assert particle.life_span == 0.5
    assert particle.velocity == Vector2(0.0, 50.0)
    assert particle.position == Vector2(10.0, 20.0)
    assert particle.is_active()


def test_initializer_custom_color_and_scale():
    color = (0.0, 0.0, 1.0, 1.0)
    particle = Particle()
    ParticleInitializer(color=color, scale=3.0).initialize(particle, Vector2())
    assert particle.color == color
    assert particle.scale == 3.0


def test_updater_delegates_to_particle():
    particle = Particle(velocity=Vector2(1.0, 0.0), life_span=1.0)
    particle.initialize(Vector2())
    ParticleUpdater().update(particle, FrameTime(elapsed=0.25))
    assert particle.position == Vector2(0.25, 0.0)
    assert particle.life_remaining == pytest.approx(0.75)


def test_emit_starts_whole_particles_and_keeps_fraction():
    pool = [Particle() for _ in range(10)]
    emitter = ParticleEmitter(ParticleInitializer(), pool, max_particles_per_second=5)
    emitter.position = Vector2(7.0, 8.0)
    started = emitter.emit(1.0, FrameTime(elapsed=0.5))
    assert started == 2
    assert sum(p.is_active() for p in pool) == 2
    assert emitter.remaining_particles == pytest.approx(0.5)
    assert all(p.position == Vector2(7.0, 8.0) for p in pool if p.is_active())


def test_emit_with_exhausted_pool_records_leftover():
    pool = [Particle()]
    emitter = ParticleEmitter(ParticleInitializer(), pool, max_particles_per_second=3)
    started = emitter.emit(1.0, FrameTime(elapsed=1.0))
    assert started == 1
    assert emitter.remaining_particles == pytest.approx(2.0)


def test_emit_without_pool_raises():
    emitter = ParticleEmitter(ParticleInitializer())
    with pytest.raises(RuntimeError):
        emitter.emit(1.0, FrameTime(elapsed=1.0))


def test_emit_zero_amount_starts_nothing():
    pool = [Particle() for _ in range(3)]
    emitter = ParticleEmitter(ParticleInitializer(), pool)
    assert emitter.emit(0.0, FrameTime(elapsed=1.0)) == 0
    assert not any(p.is_active() for p in pool)
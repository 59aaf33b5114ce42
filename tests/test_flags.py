import pytest

from spacefighter.flags import CollisionType, TriggerType


def test_collision_values_look_up_members():
    assert CollisionType(0) == CollisionType.NONE
    assert CollisionType(1 << 0) == CollisionType.PLAYER
    assert CollisionType(1 << 1) == CollisionType.ENEMY
    assert CollisionType(1 << 2) == CollisionType.SHIP
    assert CollisionType(1 << 3) == CollisionType.PROJECTILE


def test_trigger_values_look_up_members():
    assert TriggerType(0) == TriggerType.NONE
    assert TriggerType(1 << 0) == TriggerType.PRIMARY
    assert TriggerType(1 << 1) == TriggerType.SECONDARY
    assert TriggerType(1 << 2) == TriggerType.SPECIAL
    assert TriggerType(0xFFFF) == TriggerType.ALL


def test_combined_collision_contains_parts():
    player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
    assert player_projectile == CollisionType(0b1001)
    assert player_projectile.contains(CollisionType.PLAYER)
    assert player_projectile.contains(CollisionType.PROJECTILE)
    assert not player_projectile.contains(CollisionType.ENEMY)
    assert not player_projectile.contains(CollisionType.SHIP)


def test_contains_is_any_shared_bit():
    enemy_ship = CollisionType(0b0110)
    player_ship = CollisionType(0b0101)
    assert enemy_ship.contains(player_ship)
    assert player_ship.contains(enemy_ship)
    assert not CollisionType(0b0001).contains(CollisionType(0b0010))


@pytest.mark.parametrize("kind", list(CollisionType))
def test_none_contains_nothing(kind):
    assert not CollisionType.NONE.contains(kind)
    assert not kind.contains(CollisionType.NONE)


def test_collision_combinations_are_distinct_and_ordered():
    player_ship = CollisionType(0b0101)
    enemy_ship = CollisionType(0b0110)
    assert player_ship == CollisionType.PLAYER | CollisionType.SHIP
    assert enemy_ship == CollisionType.ENEMY | CollisionType.SHIP
    assert player_ship < enemy_ship
    assert CollisionType.PLAYER < CollisionType.ENEMY
    assert min(enemy_ship, player_ship) == player_ship


def test_collision_bitwise_operators():
    mixed = CollisionType.PLAYER | CollisionType.SHIP
    assert mixed & CollisionType.SHIP == CollisionType(0b0100)
    assert mixed ^ CollisionType.SHIP == CollisionType(0b0001)
    value = CollisionType(0)
    value |= CollisionType.ENEMY
    assert value == CollisionType(0b0010)


@pytest.mark.parametrize(
    "trigger", [TriggerType.PRIMARY, TriggerType.SECONDARY, TriggerType.SPECIAL]
)
def test_all_contains_every_trigger(trigger):
    assert TriggerType.ALL.contains(trigger)
    assert trigger.contains(TriggerType.ALL)


def test_trigger_contains_respects_bits():
    pressed = TriggerType(0)
    pressed |= TriggerType.PRIMARY
    assert pressed.contains(TriggerType.PRIMARY)
    assert not pressed.contains(TriggerType.SECONDARY)
    assert not TriggerType.NONE.contains(TriggerType.PRIMARY)
    assert pressed == TriggerType(1)
import pytest

from eggshot.geometry import Vec3, Velocity
from eggshot.world import (
    CAMERA,
    CAMERA_ROOT,
    GROUND,
    GUN,
    LIGHT,
    PLAYER,
    Entity,
    Mesh,
    World,
    spawn_scene,
)


def _named(world, name):
    return [e for e in world.walk() if e.name == name]


def test_scene_has_ground_player_and_light():
    world = spawn_scene()
    assert [e.name for e in world.entities] == [GROUND, PLAYER, LIGHT]
    assert world.camera_spawned is False


def test_player_starts_resting_on_ground_with_zero_velocity():
    (player,) = _named(spawn_scene(), PLAYER)
    assert player.transform.translation.y == 0.5
    assert player.velocity.linvel == Vec3.ZERO
    assert player.mesh == Mesh("sphere", (0.5,))


def test_light_points_at_origin():
    (light,) = _named(spawn_scene(), LIGHT)
    forward = light.transform.rotation.rotate(Vec3.NEG_Z)
    expected = (Vec3.ZERO - light.transform.translation).normalize()
    assert tuple(forward) == pytest.approx(tuple(expected), abs=1e-9)
    assert light.shadows_enabled is True
    assert light.illuminance == 10000.0


def test_spawn_camera_attaches_rig_under_player():
    world = spawn_scene()
    assert world.spawn_camera() is True
    assert world.camera_spawned is True
    (player,) = _named(world, PLAYER)
    assert [e.name for e in player.walk()] == [PLAYER, CAMERA_ROOT, CAMERA, GUN]


def test_spawn_camera_only_once():
    world = spawn_scene()
    world.spawn_camera()
    assert world.spawn_camera() is False
    assert len(_named(world, CAMERA_ROOT)) == 1


def test_spawn_camera_without_player_does_nothing():
    world = World([Entity(GROUND)])
    assert world.spawn_camera() is False
    assert world.camera_spawned is False
    assert _named(world, CAMERA_ROOT) == []


def test_spawn_camera_with_two_players_does_nothing():
    world = World([Entity(PLAYER, velocity=Velocity()), Entity(PLAYER, velocity=Velocity())])
    assert world.spawn_camera() is False
    assert _named(world, CAMERA_ROOT) == []


def test_walk_is_depth_first():
    leaf = Entity("c")
    tree = Entity("a", children=[Entity("b", children=[leaf]), Entity("d")])
    world = World([tree, Entity("e")])
    assert [e.name for e in world.walk()] == ["a", "b", "c", "d", "e"]
"""Keyboard movement, gravity and jumping for the player."""

from __future__ import annotations

from collections.abc import Collection
from typing import Iterator

from eggshot.geometry import Vec3
from eggshot.world import PLAYER, Entity, World

MOVE_SPEED = 5.0
GRAVITY = -9.8
JUMP_FORCE = 6.5
GROUND_HEIGHT = 0.5
JUMP_TOLERANCE = 0.51


def _players(world: World) -> Iterator[Entity]:
    return (e for e in world.walk() if e.name == PLAYER and e.velocity is not None)


def player_movement_input(world: World, pressed: Collection[str], dt: float) -> None:
    """Move players horizontally from held W/A/S/D keys, relative to their facing."""
    dx = ("d" in pressed) - ("a" in pressed)
    dz = ("s" in pressed) - ("w" in pressed)
    direction = Vec3(float(dx), 0.0, float(dz))
    if direction.length_squared() == 0.0:
        return
    direction = direction.normalize()
    for player in _players(world):
        transform = player.transform
        movement = transform.rotation.rotate(direction)
        step = Vec3(movement.x, 0.0, movement.z) * (MOVE_SPEED * dt)
        transform.translation = transform.translation + step


def apply_gravity(world: World, dt: float) -> None:
    """Integrate gravity and velocity, clamping players to the ground."""
    for player in _players(world):
        velocity = player.velocity
        linvel = velocity.linvel
        linvel = Vec3(linvel.x, linvel.y + GRAVITY * dt, linvel.z)
        translation = player.transform.translation + linvel * dt
        if translation.y <= GROUND_HEIGHT:
            translation = Vec3(translation.x, GROUND_HEIGHT, translation.z)
            linvel = Vec3(linvel.x, 0.0, linvel.z)
        velocity.linvel = linvel
        player.transform.translation = translation


def player_jump(world: World, just_pressed: Collection[str]) -> None:
    """Give grounded players upward velocity when space was just pressed."""
    if "space" not in just_pressed:
        return
    for player in _players(world):
        if player.transform.translation.y <= JUMP_TOLERANCE:
            linvel = player.velocity.linvel
            player.velocity.linvel = Vec3(linvel.x, JUMP_FORCE, linvel.z)
"""Mouse-driven yaw/pitch and cursor grabbing."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from eggshot.geometry import Quat, Vec3
from eggshot.world import CAMERA_ROOT, PLAYER, World

MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = math.pi / 2 - 0.01


@dataclass
class LookAngles:
    """Accumulated view angles in radians."""

    pitch: float = 0.0
    yaw: float = 0.0


@dataclass
class Cursor:
    """Visibility and grab state of the window cursor."""

    visible: bool = True
    locked: bool = False


def setup_cursor(cursor: Cursor) -> None:
    """Hide and lock the cursor."""
    cursor.visible = False
    cursor.locked = True


def mouse_look_system(
    world: World, look: LookAngles, deltas: Iterable[tuple[float, float]]
) -> None:
    """Apply accumulated mouse motion: yaw turns the player, pitch tilts the camera root."""
    dx = dy = 0.0
    for mx, my in deltas:
        dx += mx
        dy += my
    if dx == 0.0 and dy == 0.0:
        return

    scale = MOUSE_SENSITIVITY * 0.01
    look.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, look.pitch - dy * scale))
    look.yaw -= dx * scale

    yaw_rotation = Quat.from_axis_angle(Vec3.Y, look.yaw)
    pitch_rotation = Quat.from_axis_angle(Vec3.X, look.pitch)
    for entity in world.walk():
        if entity.name == PLAYER:
            entity.transform.rotation = yaw_rotation
        elif entity.name == CAMERA_ROOT:
            entity.transform.rotation = pitch_rotation


def unlock_cursor(cursor: Cursor, just_pressed: Collection[str]) -> None:
    """Release the cursor when escape was just pressed."""
    if "escape" in just_pressed:
        cursor.visible = True
        cursor.locked = False
"""Scene entities: ground, the egg player, the light and the camera rig."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from eggshot.geometry import Transform, Vec3, Velocity

GROUND = "ground"
PLAYER = "player"
LIGHT = "light"
CAMERA_ROOT = "camera_root"
CAMERA = "camera"
GUN = "gun"


@dataclass(frozen=True)
class Mesh:
    """A primitive shape: its kind and its dimensions."""

    shape: str
    size: tuple[float, ...]


@dataclass(eq=False)
class Entity:
    """A node in the scene tree."""

    name: str
    transform: Transform = field(default_factory=Transform)
    mesh: Mesh | None = None
    color: tuple[float, float, float] | None = None
    roughness: float | None = None
    velocity: Velocity | None = None
    illuminance: float | None = None
    shadows_enabled: bool = False
    children: list[Entity] = field(default_factory=list)

    def walk(self) -> Iterator[Entity]:
        """Yield this entity and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class World:
    """All top-level entities plus the camera-rig flag."""

    entities: list[Entity] = field(default_factory=list)
    camera_spawned: bool = False

    def walk(self) -> Iterator[Entity]:
        """Yield every entity in the world, depth first."""
        for entity in self.entities:
            yield from entity.walk()

    def spawn_camera(self) -> bool:
        """Attach the camera rig to the single player; return whether it was spawned."""
        if self.camera_spawned:
            return False
        players = [e for e in self.walk() if e.name == PLAYER]
        if len(players) != 1:
            return False

        gun = Entity(
            GUN,
            Transform(Vec3(0.3, -0.3, -0.5)),
            mesh=Mesh("cuboid", (0.2, 0.1, 0.4)),
            color=(0.3, 0.3, 0.3),
        )
        camera = Entity(CAMERA, Transform(Vec3(0.0, 0.6, 0.0)), children=[gun])
        root = Entity(CAMERA_ROOT, Transform(Vec3(0.0, 1.0, 0.0)), children=[camera])
        players[0].children.append(root)
        self.camera_spawned = True
        return True


def spawn_scene() -> World:
    """Build the starting world: ground plane, egg player and a sun light."""
    ground = Entity(
        GROUND,
        mesh=Mesh("plane", (10.0, 10.0)),
        color=(0.2, 0.7, 0.2),
    )
    player = Entity(
        PLAYER,
        Transform(translation=Vec3(0.0, 0.5, 0.0), scale=Vec3(0.8, 1.2, 0.8)),
        mesh=Mesh("sphere", (0.5,)),
        color=(0.95, 0.9, 0.85),
        roughness=0.7,
        velocity=Velocity(),
    )
    light = Entity(
        LIGHT,
        Transform(Vec3(5.0, 10.0, 5.0)).looking_at(Vec3.ZERO, Vec3.Y),
        illuminance=10000.0,
        shadows_enabled=True,
    )
    return World([ground, player, light])
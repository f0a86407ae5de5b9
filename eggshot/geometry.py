"""Vectors, rotations and transforms for the 3D scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """Return the unit vector in the same direction."""
        norm = self.length()
        if norm == 0.0 or not math.isfinite(norm):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return self / norm


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


@dataclass(frozen=True)
class Quat:
    """A unit quaternion describing a rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        unit = axis.normalize()
        s = math.sin(angle * 0.5)
        return cls(unit.x * s, unit.y * s, unit.z * s, math.cos(angle * 0.5))

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        u = Vec3(self.x, self.y, self.z)
        t = _cross(u, v) * 2.0
        return v + t * self.w + _cross(u, t)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.rotate(other)
        return NotImplemented


def _quat_from_axes(right: Vec3, up: Vec3, back: Vec3) -> Quat:
    m00, m01, m02 = right.x, up.x, back.x
    m10, m11, m12 = right.y, up.y, back.y
    m20, m21, m22 = right.z, up.z, back.z
    trace = m00 + m11 + m22
    if trace > 0.0:
        s = 0.5 / math.sqrt(trace + 1.0)
        return Quat((m21 - m12) * s, (m02 - m20) * s, (m10 - m01) * s, 0.25 / s)
    if m00 > m11 and m00 > m22:
        s = 2.0 * math.sqrt(1.0 + m00 - m11 - m22)
        return Quat(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    if m11 > m22:
        s = 2.0 * math.sqrt(1.0 + m11 - m00 - m22)
        return Quat((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    s = 2.0 * math.sqrt(1.0 + m22 - m00 - m11)
    return Quat((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)


def _unit_or(v: Vec3, fallback: Vec3) -> Vec3:
    try:
        return v.normalize()
    except ValueError:
        return fallback


@dataclass
class Transform:
    """Position, rotation and scale of an entity relative to its parent."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """Return a copy rotated so its forward (-Z) axis points at target."""
        back = -_unit_or(target - self.translation, Vec3.NEG_Z)
        up_dir = _unit_or(up, Vec3.Y)
        sign = math.copysign(1.0, up_dir.z)
        a = -1.0 / (sign + up_dir.z)
        orthogonal = Vec3(up_dir.x * up_dir.y * a, sign + up_dir.y * up_dir.y * a, -up_dir.y)
        right = _unit_or(_cross(up_dir, back), orthogonal)
        return replace(self, rotation=_quat_from_axes(right, _cross(back, right), back))


@dataclass
class Velocity:
    """Linear velocity of a moving body."""

    linvel: Vec3 = field(default_factory=Vec3)
"""Three-dimensional vectors and rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

# The renderer's degree-to-radian conversion uses this approximation of pi.
_PI = 3.14159


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, multiplier: float) -> Vector:
        return Vector(self.x * multiplier, self.y * multiplier, self.z * multiplier)

    def __truediv__(self, divisor: float) -> Vector:
        return Vector(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)


def normalize(vector: Vector) -> Vector:
    """Return the unit vector pointing the same way; a zero vector raises ZeroDivisionError."""
    return vector / vector.magnitude


def dot(v1: Vector, v2: Vector) -> float:
    """Dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


@dataclass(frozen=True)
class Quaternion:
    """A quaternion w + xi + yj + zk; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_angle(cls, angle: float = 0.0, axis: Vector = Vector(0, 1, 0)) -> Quaternion:
        """Build a rotation of ``angle`` degrees about ``axis``."""
        unit = normalize(axis)
        half_angle = (angle * _PI / 180) / 2
        s = math.sin(half_angle)
        return cls(math.cos(half_angle), unit.x * s, unit.y * s, unit.z * s)

    def rotate(self, vector: Vector) -> Vector:
        """Rotate ``vector`` by this quaternion."""
        result = self * Quaternion(0.0, vector.x, vector.y, vector.z) * self.conjugate()
        return Vector(result.x, result.y, result.z)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        w, x, y, z = self.w, self.x, self.y, self.z
        return Quaternion(
            w * other.w - x * other.x - y * other.y - z * other.z,
            w * other.x + x * other.w + y * other.z - z * other.y,
            w * other.y - x * other.z + y * other.w + z * other.x,
            w * other.z + x * other.y - y * other.x + z * other.w,
        )
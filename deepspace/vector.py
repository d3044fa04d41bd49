"""Three-component double precision vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3d:
    """An immutable 3D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3d) -> Vec3d:
        return Vec3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3d) -> Vec3d:
        return Vec3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3d:
        return Vec3d(self.x * scale, self.y * scale, self.z * scale)

    def __rmul__(self, scale: float) -> Vec3d:
        return self * scale

    def __truediv__(self, scale: float) -> Vec3d:
        return Vec3d(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> Vec3d:
        return Vec3d(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3d:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0:
            return Vec3d(self.x / length, self.y / length, self.z / length)
        return Vec3d()

    def dot(self, other: Vec3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3d) -> Vec3d:
        return Vec3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
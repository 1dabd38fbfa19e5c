"""Two, three and four component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """A point or direction on the screen plane."""

    x: float
    y: float

    def __len__(self) -> int:
        return 2

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def __truediv__(self, factor: float) -> Vec2:
        return Vec2(self.x / factor, self.y / factor)


@dataclass(frozen=True, slots=True)
class Vec3:
    """A point or direction in space."""

    x: float
    y: float
    z: float

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def __truediv__(self, factor: float) -> Vec3:
        return Vec3(self.x / factor, self.y / factor, self.z / factor)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector is returned as is."""
        norm = self.norm()
        return self / norm if norm > 0 else self

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_vec3(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class VecHomogenous:
    """A point in homogeneous coordinates."""

    x: float
    y: float
    z: float
    w: float

    def __len__(self) -> int:
        return 4

    def to_vec3(self) -> Vec3:
        """Divide by w, unless w is zero."""
        if self.w != 0:
            return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)
        return Vec3(self.x, self.y, self.z)


def reflection(direction: Vec3, normal: Vec3) -> Vec3:
    """Reflect a direction about a normal."""
    return direction - normal * 2.0 * normal.dot(direction)
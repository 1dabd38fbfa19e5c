"""Rotations and placement of objects in space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .matrix import Matrix
from .vec import Vec3


@dataclass(frozen=True, slots=True)
class Rotation:
    """Rotation angles around each axis, in degrees."""

    x: float
    y: float
    z: float

    def matrix(self) -> Matrix:
        """4x4 matrix rotating around X first, then Y, then Z."""
        cos_x, sin_x = math.cos(math.radians(self.x)), math.sin(math.radians(self.x))
        cos_y, sin_y = math.cos(math.radians(self.y)), math.sin(math.radians(self.y))
        cos_z, sin_z = math.cos(math.radians(self.z)), math.sin(math.radians(self.z))
        rot_x = Matrix(
            [1, 0, 0, 0, 0, cos_x, sin_x, 0, 0, -sin_x, cos_x, 0, 0, 0, 0, 1], 4, 4
        )
        rot_y = Matrix(
            [cos_y, 0, -sin_y, 0, 0, 1, 0, 0, sin_y, 0, cos_y, 0, 0, 0, 0, 1], 4, 4
        )
        rot_z = Matrix(
            [cos_z, -sin_z, 0, 0, sin_z, cos_z, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1], 4, 4
        )
        return rot_z * (rot_y * rot_x)


@dataclass(frozen=True, slots=True)
class Transform:
    """Translation, rotation and scale of an object."""

    translation: Vec3 = field(default_factory=lambda: Vec3(0, 0, 0))
    rotation: Rotation = field(default_factory=lambda: Rotation(0, 0, 0))
    scale: Vec3 = field(default_factory=lambda: Vec3(0, 0, 0))
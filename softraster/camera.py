"""The viewer: viewport, position and clipping planes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Plane
from .matrix import Matrix
from .transform import Transform
from .vec import Vec3


@dataclass(frozen=True, slots=True)
class Viewport:
    """Size of the projection window and its distance from the eye."""

    depth: float
    height: float
    width: float


class Camera:
    """A camera looking down the positive z axis."""

    def __init__(self, viewport: Viewport, transform: Transform) -> None:
        self._viewport = viewport
        self.transform = transform
        self.clipping_planes: tuple[Plane, ...] = self.generate_clipping_planes()

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def generate_clipping_planes(self) -> tuple[Plane, Plane, Plane, Plane, Plane]:
        """Near plane at the viewport depth, then left, right, bottom and top planes."""
        half = 1 / math.sqrt(2)
        return (
            Plane(Vec3(0, 0, 1), self._viewport.depth),
            Plane(Vec3(half, 0, half), 0),
            Plane(Vec3(-half, 0, half), 0),
            Plane(Vec3(0, half, half), 0),
            Plane(Vec3(0, -half, half), 0),
        )

    def matrix(self) -> Matrix:
        """Matrix taking world coordinates into camera coordinates."""
        t = self.transform.translation
        translation = Matrix(
            [1, 0, 0, t.x, 0, 1, 0, t.y, 0, 0, 1, t.z, 0, 0, 0, 1], 4, 4
        )
        return translation.inverse()
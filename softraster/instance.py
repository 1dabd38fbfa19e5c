"""A mesh placed in the scene with a transform and a material."""

from __future__ import annotations

from collections.abc import Callable

from .color import Material
from .geometry import Sphere
from .matrix import Matrix
from .meshes import Mesh
from .transform import Transform
from .triangle import Triangle

UpdateBehavior = Callable[["Instance", float], None]


class Instance:
    """One occurrence of a mesh in the scene."""

    def __init__(self, mesh: Mesh, transform: Transform, material: Material) -> None:
        self._mesh = mesh
        self.transform = transform
        self._material = material
        self._behaviors: list[UpdateBehavior] = []

    @property
    def mesh(self) -> Mesh:
        return self._mesh

    @property
    def material(self) -> Material:
        return self._material

    def matrix(self) -> Matrix:
        """Scale, then rotate, then translate."""
        t = self.transform.translation
        s = self.transform.scale
        translation = Matrix(
            [1, 0, 0, t.x, 0, 1, 0, t.y, 0, 0, 1, t.z, 0, 0, 0, 1], 4, 4
        )
        scale = Matrix([s.x, 0, 0, 0, 0, s.y, 0, 0, 0, 0, s.z, 0, 0, 0, 0, 1], 4, 4)
        return translation * (self.transform.rotation.matrix() * scale)

    def bounding_sphere(self) -> Sphere:
        """The mesh's bounding sphere, moved and grown by the transform."""
        sphere = self._mesh.bounding_sphere()
        scale = self.transform.scale
        largest = max(scale.x, scale.y, scale.z)
        return Sphere(sphere.center + self.transform.translation, largest * sphere.radius)

    def scene_triangles(self, matrix_camera: Matrix) -> list[Triangle]:
        """Triangles in camera coordinates."""
        factor = matrix_camera * self.matrix()
        return [triangle * factor for triangle in self._mesh.triangles()]

    def raw_triangles(self) -> list[Triangle]:
        """Triangles of the mesh, untransformed."""
        return self._mesh.triangles()

    def add_update_behavior(self, behavior: UpdateBehavior) -> None:
        self._behaviors.append(behavior)

    def update(self, delta_time: float) -> None:
        """Run every update behavior, in the order they were added."""
        for behavior in list(self._behaviors):
            behavior(self, delta_time)
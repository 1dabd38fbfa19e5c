"""Meshes: collections of triangles forming a shape."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .geometry import Sphere
from .triangle import Triangle
from .vec import Vec3


class Mesh(ABC):
    """A shape made of triangles."""

    @abstractmethod
    def triangles(self) -> list[Triangle]:
        """The triangles of the mesh, in order."""

    def unique_vertices(self) -> list[Vec3]:
        """Distinct vertex values, in order of first appearance."""
        return list(
            dict.fromkeys(vertex for triangle in self.triangles() for vertex in triangle.vertices)
        )

    def bounding_sphere(self) -> Sphere:
        """A sphere enclosing every vertex.

        The box the centre is taken from always includes the origin.
        """
        vertices = self.unique_vertices()
        xs = [0.0, *(v.x for v in vertices)]
        ys = [0.0, *(v.y for v in vertices)]
        zs = [0.0, *(v.z for v in vertices)]
        center = Vec3(
            (min(xs) + max(xs)) / 2,
            (min(ys) + max(ys)) / 2,
            (min(zs) + max(zs)) / 2,
        )
        radius = max([0.0, *((vertex - center).norm() for vertex in vertices)])
        return Sphere(center, radius)


class CubeMesh(Mesh):
    """A mesh of exactly twelve triangles."""

    def __init__(self, *args: Triangle) -> None:
        if len(args) != 12:
            raise ValueError(f"a cube mesh needs 12 triangles, got {len(args)}")
        self._triangles = tuple(args)

    def triangles(self) -> list[Triangle]:
        return list(self._triangles)


class CustomMesh(Mesh):
    """A mesh of any number of triangles."""

    def __init__(self, triangles: Iterable[Triangle]) -> None:
        self._triangles = list(triangles)

    def triangles(self) -> list[Triangle]:
        return list(self._triangles)


class TriangleMesh(Mesh):
    """A mesh of a single triangle."""

    def __init__(self, triangle: Triangle) -> None:
        self._triangle = triangle

    def triangles(self) -> list[Triangle]:
        return [self._triangle]
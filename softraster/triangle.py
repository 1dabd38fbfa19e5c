"""Triangles in space."""

from __future__ import annotations

from .geometry import Plane
from .matrix import Matrix
from .vec import Vec3, VecHomogenous


def _lift(matrix: Matrix, vertex: Vec3):
    return matrix * VecHomogenous(vertex.x, vertex.y, vertex.z, 1)


class Triangle:
    """Three vertices; their order sets the direction of the normal."""

    __slots__ = ("_vertices",)

    def __init__(self, v1: Vec3, v2: Vec3, v3: Vec3) -> None:
        self._vertices = (v1, v2, v3)

    @property
    def vertices(self) -> tuple[Vec3, Vec3, Vec3]:
        return self._vertices

    @property
    def normal(self) -> Vec3:
        """Unnormalised normal following the right-hand rule."""
        first, second, third = self._vertices
        return (second - first).cross(third - first)

    def _edges(self):
        return zip(self._vertices, self._vertices[1:] + self._vertices[:1])

    def is_facing(self, origin: Vec3) -> bool:
        """True when the front side of the triangle faces the given point."""
        return self.normal.dot(origin - self._vertices[0]) > 0

    def has_intersection(self, origin: Vec3, direction: Vec3) -> bool:
        """Whether the ray from origin along direction hits the triangle."""
        normal = self.normal
        if normal.norm() == 0:
            return False
        plane = Plane.through(normal, self._vertices[0])
        if not plane.has_intersection(direction):
            return False
        hit = plane.intersection(origin, direction)
        if (hit - origin).dot(direction) < 0:
            return False
        return all(not ((end - start).dot(hit - start) <= 0) for start, end in self._edges())

    def matrixed(self, matrix_camera: Matrix, matrix_instance: Matrix) -> Triangle:
        """Apply camera and instance matrices, keeping x, y, z without dividing by w."""
        factor = matrix_camera * matrix_instance
        vertices = []
        for vertex in self._vertices:
            result = _lift(factor, vertex)
            if not isinstance(result, (Vec3, VecHomogenous)):
                raise ValueError("matrix does not map vertices into space")
            vertices.append(Vec3(result.x, result.y, result.z))
        return Triangle(*vertices)

    def __mul__(self, matrix: Matrix) -> Triangle:
        if not isinstance(matrix, Matrix):
            return NotImplemented
        vertices = []
        for vertex in self._vertices:
            result = _lift(matrix, vertex)
            if isinstance(result, VecHomogenous):
                vertices.append(result.to_vec3())
            elif isinstance(result, Vec3):
                vertices.append(result)
            else:
                raise ValueError("matrix does not map vertices into space")
        return Triangle(*vertices)

    def __eq__(self, other: object) -> bool:
        """Equal when both hold the same vertices, in any order."""
        if not isinstance(other, Triangle):
            return NotImplemented
        remaining = list(other._vertices)
        for vertex in self._vertices:
            for index, candidate in enumerate(remaining):
                if candidate == vertex:
                    del remaining[index]
                    break
            else:
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        return f"Triangle{self._vertices!r}"

    def __str__(self) -> str:
        return "[" + ", ".join(
            f"({v.x:f}, {v.y:f}, {v.z:f})" for v in self._vertices
        ) + "]"
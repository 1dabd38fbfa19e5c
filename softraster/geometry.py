"""Planes and spheres."""

from __future__ import annotations

from dataclasses import dataclass

from .vec import Vec3


class Plane:
    """The plane ``normal . p = d`` with a unit normal."""

    __slots__ = ("_normal", "_d")

    def __init__(self, normal: Vec3, d: float) -> None:
        norm = normal.norm()
        if norm == 0:
            raise ValueError("plane normal must not be the zero vector")
        if norm != 1:
            normal = normal / norm
            d = d / norm
        self._normal = normal
        self._d = d

    @classmethod
    def through(cls, normal: Vec3, point: Vec3) -> Plane:
        """The plane with the given normal that passes through a point."""
        return cls(normal, normal.dot(point))

    @property
    def normal(self) -> Vec3:
        return self._normal

    @property
    def d(self) -> float:
        return self._d

    def signed_dist(self, point: Vec3) -> float:
        return self._normal.dot(point) - self._d

    def is_in_front(self, point: Vec3) -> bool:
        return self.signed_dist(point) > 0

    def contains(self, point: Vec3) -> bool:
        return self.signed_dist(point) == 0

    def has_intersection(self, direction: Vec3) -> bool:
        return direction.dot(self._normal) != 0

    def intersection(self, origin: Vec3, direction: Vec3) -> Vec3:
        """Point where the line from origin along direction meets the plane."""
        denominator = self._normal.dot(direction)
        if denominator == 0:
            raise ValueError("direction is parallel to the plane")
        coefficient = (-self._d - self._normal.dot(origin)) / denominator
        return origin + direction * coefficient

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self._normal == other._normal and self._d == other._d

    __hash__ = None

    def __repr__(self) -> str:
        return f"Plane({self._normal!r}, {self._d!r})"


@dataclass(frozen=True, slots=True)
class Sphere:
    center: Vec3
    radius: float
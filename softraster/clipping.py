"""Clipping instances and triangles against planes."""

from __future__ import annotations

from collections.abc import Iterable

from .geometry import Plane
from .instance import Instance
from .meshes import CustomMesh
from .triangle import Triangle


def clip_instances_against_planes(
    instances: Iterable[Instance], planes: Iterable[Plane]
) -> list[Instance]:
    """Clip each instance, dropping those that end up fully outside."""
    planes = tuple(planes)
    clipped = (clip_instance_against_planes(instance, planes) for instance in instances)
    return [instance for instance in clipped if instance is not None]


def clip_instance_against_planes(instance: Instance, planes: Iterable[Plane]) -> Instance | None:
    """Clip an instance against each plane in turn; None once it is fully outside."""
    for plane in planes:
        clipped = clip_instance_against_plane(instance, plane)
        if clipped is None:
            return None
        instance = clipped
    return instance


def clip_instance_against_plane(instance: Instance, plane: Plane) -> Instance | None:
    """Keep, drop or cut an instance depending on its bounding sphere."""
    sphere = instance.bounding_sphere()
    distance = plane.signed_dist(sphere.center)
    if distance > sphere.radius:
        return instance
    if distance < -sphere.radius:
        return None
    triangles = clip_triangles_against_plane(instance.raw_triangles(), plane)
    return Instance(CustomMesh(triangles), instance.transform, instance.material)


def clip_triangles_against_plane(triangles: Iterable[Triangle], plane: Plane) -> list[Triangle]:
    return [
        clipped
        for triangle in triangles
        for clipped in clip_triangle_against_plane(triangle, plane)
    ]


def clip_triangle_against_plane(triangle: Triangle, plane: Plane) -> list[Triangle]:
    """Parts of a triangle on the positive side of a plane, as zero to two triangles."""
    vertices = triangle.vertices
    distances = [plane.signed_dist(vertex) for vertex in vertices]
    if all(distance >= 0 for distance in distances):
        return [triangle]
    if all(distance < 0 for distance in distances):
        return []
    inside = [v for v, distance in zip(vertices, distances) if distance >= 0]
    outside = [v for v, distance in zip(vertices, distances) if not distance >= 0]
    if len(inside) == 1:
        (kept,) = inside
        first, second = outside
        return [
            Triangle(
                kept,
                plane.intersection(kept, first - kept),
                plane.intersection(kept, second - kept),
            )
        ]
    if len(inside) == 2:
        first, second = inside
        (dropped,) = outside
        cut_first = plane.intersection(first, dropped - first)
        cut_second = plane.intersection(second, dropped - second)
        return [Triangle(first, second, cut_first), Triangle(second, cut_first, cut_second)]
    return []
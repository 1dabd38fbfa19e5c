import dataclasses

import pytest

from softraster.geometry import Plane, Sphere
from softraster.vec import Vec3


def test_new_normalizes_normal():
    plane1 = Plane(Vec3(1, 0, 0), 1)
    plane2 = Plane(Vec3(3, 0, 0), 3)
    assert plane1.normal == plane2.normal
    assert plane2.d == 1


def test_new_from_point():
    plane1 = Plane(Vec3(1, 0, 0), 1)
    plane2 = Plane.through(Vec3(1, 0, 0), Vec3(1, 0, 0))
    assert plane1.normal == plane2.normal
    assert plane1.d == plane2.d


def test_zero_normal_raises():
    with pytest.raises(ValueError):
        Plane(Vec3(0, 0, 0), 1)


def test_is_in_front_through_origin():
    plane = Plane(Vec3(1, 0, 0), 0)
    assert plane.is_in_front(Vec3(2, 0, 0))
    assert plane.is_in_front(Vec3(2, 2, 2))
    assert not plane.is_in_front(Vec3(0, 0, 0))
    assert plane.is_in_front(Vec3(-1, 0, 0)) is False


def test_is_in_front_offset():
    plane = Plane(Vec3(1, 0, 0), 1)
    assert plane.is_in_front(Vec3(2, 0, 0)) is True
    assert plane.is_in_front(Vec3(2, 2, 2)) is True
    assert plane.is_in_front(Vec3(0, 0, 0)) is False
    assert plane.is_in_front(Vec3(1, 0, 0)) is False


def test_signed_dist():
    plane = Plane(Vec3(1, 0, 0), 0)
    assert plane.signed_dist(Vec3(0, 0, 0)) == 0
    assert plane.signed_dist(Vec3(2, 0, 0)) == 2
    assert plane.signed_dist(Vec3(2, 2, 0)) == 2
    assert plane.signed_dist(Vec3(-2, 0, 0)) == -2


def test_contains():
    plane = Plane(Vec3(1, 0, 0), 1)
    assert plane.contains(Vec3(1, 5, -3))
    assert not plane.contains(Vec3(0, 0, 0))


def test_has_intersection():
    plane = Plane(Vec3(1, 0, 0), 0)
    assert not plane.has_intersection(Vec3(0, 1, 0))
    assert plane.has_intersection(Vec3(1, 0, 0))
    assert plane.has_intersection(Vec3(-1, 0, 0))


def test_intersection():
    plane = Plane(Vec3(1, 0, 0), 0)
    assert plane.intersection(Vec3(0, 0, 0), Vec3(1, 1, 0)) == Vec3(0, 0, 0)
    assert plane.intersection(Vec3(-1, 0, 0), Vec3(1, 0, 0)) == Vec3(0, 0, 0)
    assert plane.intersection(Vec3(-1, 1, 0), Vec3(1, 0, 0)) == Vec3(0, 1, 0)


def test_intersection_parallel_raises():
    with pytest.raises(ValueError):
        Plane(Vec3(1, 0, 0), 0).intersection(Vec3(0, 0, 0), Vec3(0, 1, 0))


def test_sphere_is_immutable():
    sphere = Sphere(Vec3(1, 2, 3), 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sphere.radius = 5
    assert sphere == Sphere(Vec3(1, 2, 3), 4)
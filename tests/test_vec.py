import math

import pytest

from softraster.vec import Vec2, Vec3, VecHomogenous, reflection


def test_new_keeps_components():
    a = 1
    vec = Vec3(a, a + 1, a + 2)
    assert (vec.x, vec.y, vec.z) == (1, 2, 3)


def test_norm_unit_axis():
    assert Vec3(0, 1, 0).norm() == 1


def test_norm_diagonal():
    assert Vec3(1, 1, 1).norm() == math.sqrt(3)


def test_normalize_axis():
    normalized = Vec3(1, 0, 0).normalize()
    assert (normalized.x, normalized.y, normalized.z) == (1, 0, 0)


def test_normalize_diagonal():
    normalized = Vec3(1, 1, 1).normalize()
    expected = 1 / math.sqrt(3)
    assert normalized.x == expected
    assert normalized.y == expected
    assert normalized.z == expected


def test_normalize_zero_vector_unchanged():
    assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)


def test_dot_of_axes_is_zero():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert x.dot(y) == 0
    assert x.dot(z) == 0
    assert y.dot(z) == 0


def test_dot_value():
    assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32


def test_cross_product():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(x) == z * -1


def test_reflection():
    reflected = reflection(Vec3(1, 1, 0), Vec3(0, -1, 0))
    assert reflected == Vec3(1, -1, 0)


def test_vec3_arithmetic():
    a = Vec3(1, 2, 3)
    b = Vec3(4, 6, 8)
    assert a + b == Vec3(5, 8, 11)
    assert b - a == Vec3(3, 4, 5)
    assert b / 2 == Vec3(2, 3, 4)
    assert a * 3 == Vec3(3, 6, 9)


def test_vec2_arithmetic():
    a = Vec2(4, 6)
    assert a - Vec2(1, 1) == Vec2(3, 5)
    assert a * 0.5 == Vec2(2, 3)
    assert a / 2 == Vec2(2, 3)


@pytest.mark.parametrize(
    ("vec", "length"),
    [(Vec2(0, 0), 2), (Vec3(0, 0, 0), 3), (VecHomogenous(0, 0, 0, 1), 4)],
)
def test_lengths(vec, length):
    assert len(vec) == length


def test_homogenous_to_vec3_divides_by_w():
    assert VecHomogenous(2, 4, 6, 2).to_vec3() == Vec3(1, 2, 3)


def test_homogenous_to_vec3_with_zero_w():
    assert VecHomogenous(2, 4, 6, 0).to_vec3() == Vec3(2, 4, 6)


def test_vec3_to_vec3_copies_values():
    assert Vec3(1, 2, 3).to_vec3() == Vec3(1, 2, 3)
import dataclasses

import pytest

from softraster.matrix import Matrix
from softraster.transform import Rotation, Transform
from softraster.vec import Vec3, VecHomogenous


def _rows(matrix):
    return [list(matrix[row]) for row in range(matrix.rows)]


def _approx_rows(matrix):
    return [pytest.approx(row, abs=1e-12) for row in _rows(matrix)]


def test_zero_rotation_is_identity():
    assert Rotation(0, 0, 0).matrix() == Matrix.identity(4)


@pytest.mark.parametrize("angles", [(30, 45, 60), (90, 0, 0), (-15, 200, 7)])
def test_rotation_is_orthogonal(angles):
    matrix = Rotation(*angles).matrix()
    assert _rows(matrix * matrix.transpose()) == _approx_rows(Matrix.identity(4))


@pytest.mark.parametrize("angles", [(30, 45, 60), (12, -80, 170)])
def test_rotation_preserves_volume(angles):
    assert Rotation(*angles).matrix().determinant() == pytest.approx(1.0)


def test_full_turn_is_identity():
    assert _rows(Rotation(360, 360, 360).matrix()) == _approx_rows(Matrix.identity(4))


def test_rotation_around_z():
    result = Rotation(0, 0, 90).matrix() * VecHomogenous(1, 0, 0, 1)
    assert (result.x, result.y, result.z, result.w) == pytest.approx((0, 1, 0, 1), abs=1e-12)


def test_rotation_around_x():
    result = Rotation(90, 0, 0).matrix() * VecHomogenous(0, 1, 0, 1)
    assert (result.x, result.y, result.z) == pytest.approx((0, 0, -1), abs=1e-12)


def test_rotation_order_x_then_z():
    combined = Rotation(90, 0, 90).matrix()
    expected = Rotation(0, 0, 90).matrix() * Rotation(90, 0, 0).matrix()
    assert _rows(combined) == _approx_rows(expected)


def test_transform_defaults():
    transform = Transform()
    assert transform.translation == Vec3(0, 0, 0)
    assert transform.rotation == Rotation(0, 0, 0)
    assert transform.scale == Vec3(0, 0, 0)


def test_transform_replace_leaves_original():
    transform = Transform(Vec3(1, 2, 3), Rotation(0, 0, 0), Vec3(1, 1, 1))
    moved = dataclasses.replace(transform, translation=Vec3(4, 5, 6))
    assert moved.translation == Vec3(4, 5, 6)
    assert transform.translation == Vec3(1, 2, 3)
    assert moved.scale == transform.scale


def test_transform_is_immutable():
    transform = Transform()
    with pytest.raises(dataclasses.FrozenInstanceError):
        transform.translation = Vec3(1, 1, 1)
import dataclasses
import math

import pytest

from softraster.camera import Camera, Viewport
from softraster.color import RGBA, Material
from softraster.instance import Instance
from softraster.meshes import CubeMesh, TriangleMesh
from softraster.transform import Rotation, Transform
from softraster.triangle import Triangle
from softraster.vec import Vec3


def _material():
    return Material(RGBA(0, 255, 0, 255), 0, 0)


def _cube():
    v1, v2, v3, v4 = Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(1, 1, 0)
    v5, v6, v7, v8 = Vec3(0, 0, 1), Vec3(1, 0, 1), Vec3(0, 1, 1), Vec3(1, 1, 1)
    return CubeMesh(
        Triangle(v1, v2, v3),
        Triangle(v1, v3, v4),
        Triangle(v5, v1, v2),
        Triangle(v5, v4, v8),
        Triangle(v6, v5, v8),
        Triangle(v6, v8, v7),
        Triangle(v2, v6, v7),
        Triangle(v2, v7, v3),
        Triangle(v5, v6, v2),
        Triangle(v5, v2, v1),
        Triangle(v3, v7, v8),
        Triangle(v3, v8, v4),
    )


def _triangle():
    return Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))


def _camera():
    return Camera(Viewport(1, 1, 1), Transform(Vec3(0, 0, 0), Rotation(0, 0, 0), Vec3(0, 0, 0)))


def test_bounding_sphere():
    translation = Vec3(1.5, 0, 5)
    instance = Instance(_cube(), Transform(translation, Rotation(0, 0, 0), Vec3(1, 1, 1)), _material())
    sphere = instance.bounding_sphere()
    assert sphere.center == Vec3(0.5, 0.5, 0.5) + translation
    assert sphere.radius == Vec3(0.5, 0.5, 0.5).norm()


def test_bounding_sphere_scaled_by_largest_axis():
    instance = Instance(_cube(), Transform(Vec3(0, 0, 0), Rotation(0, 0, 0), Vec3(1, 3, 2)), _material())
    assert instance.bounding_sphere().radius == 3 * Vec3(0.5, 0.5, 0.5).norm()


def test_matrix_identity_transform():
    t1 = _triangle()
    instance = Instance(TriangleMesh(t1), Transform(Vec3(0, 0, 0), Rotation(0, 0, 0), Vec3(1, 1, 1)), _material())
    assert t1 * instance.matrix() == t1


def test_matrix_translation():
    t1 = _triangle()
    translation = Vec3(10, -10, 2)
    instance = Instance(TriangleMesh(t1), Transform(translation, Rotation(0, 0, 0), Vec3(1, 1, 1)), _material())
    expected = Triangle(*(v + translation for v in t1.vertices))
    assert t1 * instance.matrix() == expected


def test_scene_triangles_at_origin():
    t1 = _triangle()
    instance = Instance(TriangleMesh(t1), Transform(Vec3(0, 0, 0), Rotation(0, 0, 0), Vec3(1, 1, 1)), _material())
    scene = instance.scene_triangles(_camera().matrix())
    assert len(scene) == 1
    assert scene[0] == t1


def test_scene_triangles_rotated_quarter_turn_about_z():
    instance = Instance(TriangleMesh(_triangle()), Transform(Vec3(0, 0, 0), Rotation(0, 0, 90), Vec3(1, 1, 1)), _material())
    scene = instance.scene_triangles(_camera().matrix())
    assert len(scene) == 1
    expected = [(0, 0, 0), (0, 1, 0), (-1, 0, 0)]
    for vertex, want in zip(scene[0].vertices, expected):
        assert (vertex.x, vertex.y, vertex.z) == pytest.approx(want, abs=1e-12)


def test_raw_triangles_are_mesh_triangles():
    cube = _cube()
    instance = Instance(cube, Transform(Vec3(5, 5, 5), Rotation(0, 0, 0), Vec3(2, 2, 2)), _material())
    assert instance.raw_triangles() == cube.triangles()


def test_update_runs_behaviors_in_order():
    instance = Instance(TriangleMesh(_triangle()), Transform(), _material())
    calls = []

    def rotate(inst, delta_time):
        rotation = inst.transform.rotation
        inst.transform = dataclasses.replace(
            inst.transform, rotation=Rotation(rotation.x + delta_time * 5, rotation.y, rotation.z)
        )
        calls.append("rotate")

    instance.add_update_behavior(rotate)
    instance.add_update_behavior(lambda inst, dt: calls.append("second"))
    instance.update(2)
    instance.update(2)
    assert instance.transform.rotation.x == 20
    assert calls == ["rotate", "second", "rotate", "second"]


def test_material_and_mesh_exposed():
    mesh = TriangleMesh(_triangle())
    material = _material()
    instance = Instance(mesh, Transform(), material)
    assert instance.mesh is mesh
    assert instance.material is material
    assert not math.isnan(instance.bounding_sphere().radius)
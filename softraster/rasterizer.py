"""A small scene of lit cubes rendered onto a canvas."""

from __future__ import annotations

from dataclasses import replace

from .camera import Camera, Viewport
from .canvas import Canvas
from .clipping import clip_instances_against_planes
from .color import RGBA, Material
from .drawing import draw_triangle_phong
from .instance import Instance
from .light import AmbientLight, DirectionalLight, Light, PointLight
from .matrix import Matrix
from .meshes import CubeMesh, CustomMesh
from .transform import Rotation, Transform
from .triangle import Triangle
from .vec import Vec3

_CAMERA_SPEED = 3.0
_SPIN_SPEED = 5.0


def generate_matrix_projection(canvas: Canvas, viewport: Viewport) -> Matrix:
    """4x4 matrix scaling camera coordinates onto the canvas, kept square to be invertible."""
    width_ratio = viewport.depth * (canvas.width_max - 1) / viewport.width
    height_ratio = viewport.depth * (canvas.height_max - 1) / viewport.height
    return Matrix(
        [width_ratio, 0, 0, 0, 0, height_ratio, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1], 4, 4
    )


def _cube_mesh() -> CubeMesh:
    """A cube of side 2 centred on the origin."""
    # front vertices
    v0 = Vec3(1, 1, 1)
    v1 = Vec3(-1, 1, 1)
    v2 = Vec3(-1, -1, 1)
    v3 = Vec3(1, -1, 1)
    # back vertices
    v4 = Vec3(1, 1, -1)
    v5 = Vec3(-1, 1, -1)
    v6 = Vec3(-1, -1, -1)
    v7 = Vec3(1, -1, -1)
    return CubeMesh(
        Triangle(v0, v1, v2), Triangle(v0, v2, v3),  # front
        Triangle(v4, v0, v3), Triangle(v4, v3, v7),  # right
        Triangle(v5, v4, v6), Triangle(v4, v7, v6),  # back
        Triangle(v1, v5, v6), Triangle(v1, v6, v2),  # left
        Triangle(v4, v5, v1), Triangle(v4, v1, v0),  # top
        Triangle(v2, v6, v7), Triangle(v2, v7, v3),  # bottom
    )


def _spin(instance: Instance, delta_time: float) -> None:
    rotation = instance.transform.rotation
    instance.transform = replace(
        instance.transform,
        rotation=Rotation(rotation.x + delta_time * _SPIN_SPEED, rotation.y, rotation.z),
    )


class Rasterizer:
    """A 200x200 view of a spinning green cube above a brown slab."""

    def __init__(self) -> None:
        self._canvas = Canvas(200, 200)
        self._camera = Camera(
            Viewport(1, 1, 1),
            Transform(Vec3(0, 0, 0), Rotation(0, 0, 0), Vec3(0, 0, 0)),
        )
        self._projection = generate_matrix_projection(self._canvas, self._camera.viewport)

        cube = _cube_mesh()
        spinning = Instance(
            cube,
            Transform(Vec3(0, 0, 5), Rotation(0, 0, 0), Vec3(1, 1, 1)),
            Material(RGBA(0, 255, 0, 255), 500, 0),
        )
        ground = Instance(
            cube,
            Transform(Vec3(0, -2.5, 5), Rotation(0, 0, 0), Vec3(1, 0.1, 1)),
            Material(RGBA(151, 99, 71, 255), 0, 0),
        )
        spinning.add_update_behavior(_spin)
        self._instances = [spinning, ground]

        self._lights: tuple[Light, ...] = (
            AmbientLight(0.3),
            PointLight(0.5, Vec3(2, 0, -2)),
            DirectionalLight(0.2, Vec3(0, -1, 0)),
        )

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def instances(self) -> tuple[Instance, ...]:
        return tuple(self._instances)

    @property
    def lights(self) -> tuple[Light, ...]:
        return self._lights

    @property
    def projection(self) -> Matrix:
        return self._projection

    def draw(self) -> list[int]:
        """The current frame as flat RGBA channel values."""
        return self._canvas.render()

    def input(self, forward, backward, left, right, up, down, delta_time) -> None:
        """Move the camera along the pressed directions."""
        x = (1 if right else 0) - (1 if left else 0)
        y = (1 if up else 0) - (1 if down else 0)
        z = (1 if forward else 0) - (1 if backward else 0)
        step = Vec3(x, y, z).normalize() * delta_time * _CAMERA_SPEED
        transform = self._camera.transform
        self._camera.transform = replace(transform, translation=transform.translation + step)

    def render(self, delta_time: float) -> None:
        """Advance the scene by delta_time and draw a new frame."""
        self._canvas.reset()
        for instance in self._instances:
            instance.update(delta_time)
        matrix_camera = self._camera.matrix()
        scened = [
            Instance(
                CustomMesh(instance.scene_triangles(matrix_camera)),
                Transform(),
                instance.material,
            )
            for instance in self._instances
        ]
        for instance in clip_instances_against_planes(scened, self._camera.clipping_planes):
            self._render_instance(instance)

    def _render_instance(self, instance: Instance) -> None:
        eye = self._camera.transform.translation
        for triangle in instance.raw_triangles():
            if triangle.is_facing(eye):
                draw_triangle_phong(
                    self._canvas,
                    triangle,
                    instance.material,
                    self._projection,
                    self.lighting_coeff,
                )

    def lighting_coeff(self, position: Vec3, normal: Vec3, material: Material) -> float:
        """Sum of every light's contribution at a surface point."""
        eye = self._camera.transform.translation
        return sum(
            light.lighting_coeff(material, position, eye, normal) for light in self._lights
        )
# softraster

A small software rasterizer in pure Python with no third-party
dependencies. It projects triangle meshes through a camera onto an RGBA
canvas. Along the way it clips them against the view frustum and skips the
faces that point away from the camera. It also keeps a depth buffer and
shades each pixel from ambient, point and directional lights.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building blocks

- `softraster.vec`: the frozen dataclasses `Vec2`, `Vec3` and
  `VecHomogenous`, and `reflection(direction, normal)`. `Vec3` has `norm`,
  `normalize`, `dot` and `cross`. `VecHomogenous.to_vec3` divides by `w`
  unless `w` is zero.
- `softraster.matrix`: an immutable row-major `Matrix(data, rows, columns)`
  with `Matrix.identity` and `Matrix.from_vec`. `m[row]` gives a row and
  `m[row, column]` a single value. It also has `determinant`, `minor`,
  `cofactor`, `adjoint`, `transpose`, `inverse` and `to_vec`. The `*`
  operator multiplies by another matrix, a vector or a number. A
  mismatched size or a singular inverse raises `ValueError`.
- `softraster.geometry`: `Plane(normal, d)`, whose normal is made a unit
  vector, and `Plane.through(normal, point)`. A plane gives `signed_dist`,
  `is_in_front`, `contains`, `has_intersection` and `intersection`. The
  module also has the `Sphere(center, radius)` dataclass.
- `softraster.interpolation`: `interpolate_vec2`, `interpolate` and
  `interp_linear`, which produce one value per integer step.
- `softraster.color`: `RGBA`, whose channels are clamped to 0..255. It has
  `unpack()`, and multiplying it by a number scales r, g and b but not
  alpha. The module also has the `Material(color, specular, reflective)`
  dataclass.
- `softraster.triangle`: `Triangle(v1, v2, v3)` with `vertices` and
  `normal`. It also has `is_facing`, a ray test in `has_intersection`, and
  `matrixed`. `triangle * matrix` transforms the vertices. Two triangles
  compare equal when they hold the same vertices in any order.
- `softraster.transform`: `Rotation(x, y, z)`, Euler angles in degrees,
  whose `matrix()` rotates around X, then Y, then Z. `Transform` holds a
  translation, a rotation and a scale.
- `softraster.meshes`: the abstract `Mesh` base and the `CubeMesh` (exactly
  twelve triangles), `CustomMesh` and `TriangleMesh` meshes. Each has
  `triangles()`, `unique_vertices()` and `bounding_sphere()`.
- `softraster.canvas`: `Canvas(height, width)`, a pixel grid centred on its
  middle with y pointing up. It has a depth buffer, `set_pixel` and
  `set_pixel_rgba` (each with an optional depth), `render()` and `reset()`.
- `softraster.camera`: `Viewport(depth, height, width)` and
  `Camera(viewport, transform)`. A camera holds five clipping planes and
  gives a world-to-camera `matrix()`.
- `softraster.instance`: `Instance(mesh, transform, material)` places a
  mesh in the world. It has `matrix()`, `bounding_sphere()`,
  `scene_triangles(matrix_camera)` and `raw_triangles()`. Callables added
  with `add_update_behavior` run on each `update(delta_time)`.
- `softraster.light`: `AmbientLight`, `PointLight` and `DirectionalLight`.
  Each gives a `lighting_coeff(material, position, camera_position, normal)`.
- `softraster.clipping`: `clip_instances_against_planes`,
  `clip_instance_against_planes`, `clip_instance_against_plane`,
  `clip_triangles_against_plane` and `clip_triangle_against_plane`.
- `softraster.drawing`: functions that draw onto a `Canvas`.
  `draw_line`, `draw_triangle_wireframe`, `draw_triangle_filled` and
  `draw_triangle_shaded` take screen points and ignore depth.
  `draw_line_depth`, `draw_triangle_wireframe_depth`,
  `draw_triangle_filled_depth`, `draw_triangle_gouraud` and
  `draw_triangle_phong` project a `Triangle` and go through the depth
  buffer.
- `softraster.rasterizer`: `generate_matrix_projection(canvas, viewport)`
  and `Rasterizer`, which ties the pieces into a fixed scene.

## Example

```python
from softraster.rasterizer import Rasterizer

rasterizer = Rasterizer()

# move the camera forward for a tenth of a second
rasterizer.input(True, False, False, False, False, False, 0.1)

# advance the scene and rasterize it
rasterizer.render(0.1)

# flat list of RGBA components, row by row, top to bottom
pixels = rasterizer.draw()
print(len(pixels))  # 200 * 200 * 4
```

`Rasterizer` uses a 200x200 canvas. Its scene holds two instances of a
cube. One is green and spins around its X axis as time passes. The other
is flattened into a brown slab below it. An ambient light, a point light
and a directional light illuminate the scene, and faces are drawn with
per-pixel (Phong) lighting.

Matrices multiply with `*`:

```python
from softraster.matrix import Matrix
from softraster.vec import Vec3

m = Matrix.identity(3)
v = m * Vec3(4, 5, 75)  # Vec3(x=4.0, y=5.0, z=75.0)
```

## What it does not do

softraster only computes pixels. It has no command-line program, no window
and no event loop. `Rasterizer.input` and `Rasterizer.render` must be
called by your own code. It writes no image files: `draw()` returns a
plain list of channel values, and saving or showing them is up to you. It
loads no meshes from files either, so you build meshes from `Triangle`
objects yourself. The `Rasterizer` scene is fixed and cannot be configured.
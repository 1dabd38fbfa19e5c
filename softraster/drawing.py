"""Drawing lines and triangles on a canvas, with and without a depth buffer."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from .canvas import Canvas
from .color import RGBA, Material
from .interpolation import interp_linear, interpolate_vec2
from .matrix import Matrix
from .triangle import Triangle
from .vec import Vec2, Vec3, VecHomogenous

Lighting = Callable[[Vec3, Vec3, Material], float]
"""Lighting coefficient for a surface point, given its position, normal and material."""

_T = TypeVar("_T")
_Edges = tuple[list[float], list[float], list[float]]


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division giving inf or nan instead of raising on zero."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _inverse(value: float) -> float:
    return _ratio(1.0, value)


def _apply(matrix: Matrix, vertex: Vec3):
    """Multiply a point, lifted to homogeneous coordinates, by a matrix."""
    return matrix * VecHomogenous(vertex.x, vertex.y, vertex.z, 1)


def _at(values: Sequence[float], index: int) -> float:
    """Value at index, holding the last value past the end."""
    return values[min(index, len(values) - 1)]


def _order_by_y(first: _T, second: _T, third: _T, y: Callable[[_T], float]) -> tuple[_T, _T, _T]:
    """Put the smallest y first and the largest last."""
    if y(second) < y(first):
        first, second = second, first
    if y(third) < y(first):
        first, third = third, first
    if y(third) < y(second):
        second, third = third, second
    return first, second, third


def _edges(a1: float, a2: float, a3: float, steps: tuple[float, float, float]) -> _Edges:
    """Values interpolated along the edges 1-2, 1-3 and 2-3."""
    steps12, steps13, steps23 = steps
    return interp_linear(a1, a2, steps12), interp_linear(a1, a3, steps13), interp_linear(a2, a3, steps23)


def _scanlines(
    p1: Vec2, p3: Vec2, xs: _Edges, *tracks: _Edges
) -> Iterator[tuple[int, float, float, list[tuple[float, float]]]]:
    """Yield each row with its left and right x and the left and right value of each track."""
    xs12, xs13, xs23 = xs
    merged = xs12[:-1] + xs23
    middle = len(merged) // 2
    long_on_left = xs13[middle] < merged[middle]

    def sides(edges: _Edges) -> tuple[list[float], list[float]]:
        edge12, edge13, edge23 = edges
        long_side, short_side = edge13, edge12[:-1] + edge23
        return (long_side, short_side) if long_on_left else (short_side, long_side)

    x_left, x_right = sides(xs)
    track_sides = [sides(track) for track in tracks]
    for y in range(int(p1.y), math.ceil(p3.y)):
        index = int(y - p1.y)
        yield (
            y,
            _at(x_left, index),
            _at(x_right, index),
            [(_at(left, index), _at(right, index)) for left, right in track_sides],
        )


def _x_edges(p1: Vec2, p2: Vec2, p3: Vec2) -> _Edges:
    return _edges(p1.x, p2.x, p3.x, (p2.y - p1.y, p3.y - p1.y, p3.y - p2.y))


def _projected(triangle: Triangle, projection: Matrix) -> tuple[tuple[Vec2, Vec3], ...]:
    """Screen points paired with their original vertices, sorted by screen y."""
    projected = triangle * projection
    points = [Vec2(v.x, v.y) * _inverse(v.z) for v in projected.vertices]
    return _order_by_y(*zip(points, triangle.vertices), y=lambda pair: pair[0].y)


def draw_line(canvas: Canvas, start: Vec2, end: Vec2, color: RGBA) -> None:
    """Draw a line between two screen points, ignoring depth."""
    for point in interpolate_vec2(start, end):
        canvas.set_pixel_rgba(point.x, point.y, color)


def draw_line_depth(canvas: Canvas, start: Vec3, end: Vec3, color: RGBA, projection: Matrix) -> None:
    """Project a segment onto the canvas and draw it through the depth buffer."""
    start_projected = _apply(projection, start)
    end_projected = _apply(projection, end)
    start_2d = Vec2(start_projected.x, start_projected.y) * _inverse(start_projected.z)
    end_2d = Vec2(end_projected.x, end_projected.y) * _inverse(end_projected.z)
    if abs(end_2d.x - start_2d.x) > abs(end_2d.y - start_2d.y):
        if start_2d.x > end_2d.x:
            start, end = end, start
            start_2d, end_2d = end_2d, start_2d
        slope = _ratio(end_2d.y - start_2d.y, end_2d.x - start_2d.x)
        depths = interp_linear(_inverse(start.z), _inverse(end.z), end_2d.x - start_2d.x)
        y = start_2d.y
        for x in range(int(start_2d.x), math.floor(end_2d.x) + 1):
            canvas.set_pixel_rgba(x, y, color, _at(depths, int(x - start_2d.x)))
            y += slope
        return
    if start_2d.y > end_2d.y:
        start, end = end, start
        start_2d, end_2d = end_2d, start_2d
    slope = _ratio(end_2d.x - start_2d.x, end_2d.y - start_2d.y)
    depths = interp_linear(_inverse(start.z), _inverse(end.z), end_2d.y - start_2d.y)
    x = start_2d.x
    for y in range(int(start_2d.y), math.floor(end_2d.y) + 1):
        canvas.set_pixel_rgba(x, y, color, _at(depths, int(y - start_2d.y)))
        x += slope


def draw_triangle_wireframe(canvas: Canvas, p1: Vec2, p2: Vec2, p3: Vec2, color: RGBA) -> None:
    """Draw the outline of a screen triangle, ignoring depth."""
    draw_line(canvas, p1, p2, color)
    draw_line(canvas, p2, p3, color)
    draw_line(canvas, p3, p1, color)


def draw_triangle_wireframe_depth(
    canvas: Canvas, triangle: Triangle, color: RGBA, projection: Matrix
) -> None:
    """Draw the outline of a triangle through the depth buffer."""
    v1, v2, v3 = triangle.vertices
    draw_line_depth(canvas, v1, v2, color, projection)
    draw_line_depth(canvas, v2, v3, color, projection)
    draw_line_depth(canvas, v3, v1, color, projection)


def draw_triangle_filled(canvas: Canvas, p1: Vec2, p2: Vec2, p3: Vec2, color: RGBA) -> None:
    """Fill a screen triangle with one colour, ignoring depth."""
    p1, p2, p3 = _order_by_y(p1, p2, p3, y=lambda point: point.y)
    for y, x_left, x_right, _ in _scanlines(p1, p3, _x_edges(p1, p2, p3)):
        for x in range(int(x_left), int(x_right) + 1):
            canvas.set_pixel_rgba(x, y, color)


def draw_triangle_filled_depth(
    canvas: Canvas, triangle: Triangle, material: Material, projection: Matrix, lighting: Lighting
) -> None:
    """Fill a triangle with one lit colour through the depth buffer."""
    (p1, v1), (p2, v2), (p3, v3) = _projected(triangle, projection)
    xs = _x_edges(p1, p2, p3)
    zs = _edges(_inverse(v1.z), _inverse(v2.z), _inverse(v3.z), tuple(len(edge) for edge in xs))
    color = material.color * lighting(v1, triangle.normal, material)
    for y, x_left, x_right, [(z_left, z_right)] in _scanlines(p1, p3, xs, zs):
        x_left, x_right = int(x_left), int(x_right)
        depths = interp_linear(z_left, z_right, x_right - x_left)
        for x in range(x_left, x_right + 1):
            canvas.set_pixel_rgba(x, y, color, depths[x - x_left])


def draw_triangle_shaded(canvas: Canvas, p1: Vec2, p2: Vec2, p3: Vec2, color: RGBA) -> None:
    """Fill a screen triangle fading from full colour at the lowest vertex to black at the highest."""
    p1, p2, p3 = _order_by_y(p1, p2, p3, y=lambda point: point.y)
    intensities = _edges(1.0, 0.5, 0.0, (p2.y - p1.y, p3.y - p1.y, p3.y - p2.y))
    rows = _scanlines(p1, p3, _x_edges(p1, p2, p3), intensities)
    for y, x_left, x_right, [(i_left, i_right)] in rows:
        segment = interp_linear(i_left, i_right, x_right - x_left)
        for x in range(int(x_left), math.floor(x_right) + 1):
            canvas.set_pixel_rgba(x, y, color * _at(segment, int(x - x_left)))


def draw_triangle_gouraud(
    canvas: Canvas, triangle: Triangle, material: Material, projection: Matrix, lighting: Lighting
) -> None:
    """Fill a triangle with lighting computed at the vertices and interpolated between them."""
    (p1, v1), (p2, v2), (p3, v3) = _projected(triangle, projection)
    normal = triangle.normal
    i1, i2, i3 = (lighting(vertex, normal, material) for vertex in (v1, v2, v3))
    xs = _x_edges(p1, p2, p3)
    sizes = tuple(len(edge) for edge in xs)
    zs = _edges(_inverse(v1.z), _inverse(v2.z), _inverse(v3.z), sizes)
    intensities = _edges(i1, i2, i3, sizes)
    rows = _scanlines(p1, p3, xs, zs, intensities)
    for y, x_left, x_right, [(z_left, z_right), (i_left, i_right)] in rows:
        x_left, x_right = int(x_left), int(x_right)
        depths = interp_linear(z_left, z_right, x_right - x_left)
        shades = interp_linear(i_left, i_right, x_right - x_left)
        for x in range(x_left, x_right + 1):
            color = material.color * shades[x - x_left]
            canvas.set_pixel_rgba(x, y, color, depths[x - x_left])


def draw_triangle_phong(
    canvas: Canvas, triangle: Triangle, material: Material, projection: Matrix, lighting: Lighting
) -> None:
    """Fill a triangle with lighting computed at every pixel."""
    (p1, v1), (p2, v2), (p3, v3) = _projected(triangle, projection)
    xs = _x_edges(p1, p2, p3)
    zs = _edges(_inverse(v1.z), _inverse(v2.z), _inverse(v3.z), tuple(len(edge) for edge in xs))
    rows = list(_scanlines(p1, p3, xs, zs))
    unproject = projection.inverse()
    normal = triangle.normal
    for y, x_left, x_right, [(z_left, z_right)] in rows:
        x_left, x_right = int(x_left), int(x_right)
        depths = interp_linear(z_left, z_right, x_right - x_left)
        for x in range(x_left, x_right + 1):
            z = depths[x - x_left]
            recovered = unproject * VecHomogenous(x, y, _inverse(z), 1)
            position = Vec3(recovered.x, recovered.y, recovered.z)
            color = material.color * lighting(position, normal, material)
            canvas.set_pixel_rgba(x, y, color, z)
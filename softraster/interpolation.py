"""Linear interpolation over integer steps."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .vec import Vec2


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising on zero."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _steps(first: float, last: float) -> Iterator[int]:
    """Integers from ``first`` truncated toward zero up to and including ``last``."""
    current = int(first)
    while current <= last:
        yield current
        current += 1


def interpolate_vec2(start: Vec2, end: Vec2) -> list[Vec2]:
    """Points of the line between two screen points, one per integer step."""
    if abs(end.x - start.x) > abs(end.y - start.y):
        if start.x > end.x:
            start, end = end, start
        slope = _divide(end.y - start.y, end.x - start.x)
        points = []
        y = start.y
        for x in _steps(start.x, end.x):
            points.append(Vec2(x, y))
            y += slope
        return points
    if start.y > end.y:
        start, end = end, start
    slope = _divide(end.x - start.x, end.y - start.y)
    points = []
    x = start.x
    for y in _steps(start.y, end.y):
        points.append(Vec2(x, y))
        x += slope
    return points


def interpolate(
    interval_begin: float, value_begin: float, interval_end: float, value_end: float
) -> list[float]:
    """Values going linearly from value_begin to value_end over an integer interval."""
    if interval_begin > interval_end:
        interval_begin, interval_end = interval_end, interval_begin
        value_begin, value_end = value_end, value_begin
    step = _divide(value_end - value_begin, interval_end - interval_begin)
    values = []
    value = value_begin
    for _ in _steps(interval_begin, interval_end):
        values.append(value)
        value += step
    return values


def interp_linear(start: float, end: float, steps: float) -> list[float]:
    """``steps + 1`` values going linearly from start to end.

    A negative step count swaps the two ends.
    """
    if steps < 0:
        start, end = end, start
        steps = -steps
    step = _divide(end - start, steps)
    values = []
    value = start
    for _ in _steps(0, steps):
        values.append(value)
        value += step
    return values
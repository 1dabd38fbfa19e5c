"""Colours and surface materials."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _channel(value: float) -> int:
    """Clamp a channel to 0..255, truncating toward zero."""
    if math.isnan(value):
        return 0
    return int(max(0, min(255, value)))


@dataclass(frozen=True, slots=True)
class RGBA:
    """A colour with channels clamped to 0..255."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    def unpack(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __mul__(self, factor: float) -> RGBA:
        """Scale the colour channels, leaving alpha untouched."""
        return RGBA(self.r * factor, self.g * factor, self.b * factor, self.a)


@dataclass(frozen=True, slots=True)
class Material:
    color: RGBA
    specular: float
    reflective: float
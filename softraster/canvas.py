"""A pixel grid with a depth buffer."""

from __future__ import annotations

from .color import RGBA

_WHITE = RGBA(255, 255, 255, 255)


class Canvas:
    """Pixels addressed by coordinates centred on the middle, y pointing up."""

    def __init__(self, height: int, width: int) -> None:
        if height < 0 or width < 0:
            raise ValueError("canvas size must not be negative")
        self._height = height
        self._width = width
        self._pixels = [_WHITE] * (height * width)
        self._depth = [0.0] * (height * width)
        self._dirty: list[int] = []

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def width_max(self) -> int:
        return self._width // 2

    @property
    def height_max(self) -> int:
        return self._height // 2

    def _index(self, x: int, y: int) -> int:
        column = x + self.width_max
        row = self.height_max - y
        if not (0 <= column < self._width and 0 <= row < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return row * self._width + column

    def render(self) -> list[int]:
        """Flat RGBA channel values, row by row from the top."""
        return [channel for pixel in self._pixels for channel in pixel.unpack()]

    def reset(self) -> None:
        """Clear every pixel drawn with a depth since the last reset."""
        while self._dirty:
            index = self._dirty.pop()
            self._pixels[index] = _WHITE
            self._depth[index] = 0.0

    def set_pixel(self, x, y, r, g, b, a, depth=None) -> None:
        self.set_pixel_rgba(x, y, RGBA(r, g, b, a), depth)

    def set_pixel_rgba(self, x, y, rgba: RGBA, depth=None) -> None:
        """Colour a pixel.

        Without a depth the pixel is written as is and must lie on the canvas.
        With a depth, pixels on the border or beyond are ignored and the pixel
        is only written when its depth is greater than the stored one.
        """
        x, y = int(x), int(y)
        if depth is None:
            self._pixels[self._index(x, y)] = rgba
            return
        width_max, height_max = self.width_max, self.height_max
        # The lower bound on y is taken from the width.
        if x <= -width_max or x >= width_max or y <= -width_max or y >= height_max:
            return
        try:
            index = self._index(x, y)
        except IndexError:
            return
        if depth > self._depth[index]:
            self._depth[index] = depth
            self._pixels[index] = rgba
            self._dirty.append(index)
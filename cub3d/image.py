"""An in-memory pixel buffer with the line primitives the renderer needs."""

from __future__ import annotations

import math

from .geometry import Vec


class Image:
    """A width x height grid of 32-bit colours, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set a pixel; coordinates outside the image are silently ignored."""
        if x < 0 or y < 0:
            return
        ix, iy = int(x), int(y)
        if ix < self.width and iy < self.height:
            self.pixels[iy * self.width + ix] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y); raise IndexError outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def draw_line(self, a: Vec, b: Vec, color: int) -> None:
        """Draw a Bresenham line between two points."""
        if abs(int(b.x - a.x)) > abs(int(b.y - a.y)):
            start, end = (b, a) if a.x > b.x else (a, b)
            self._draw_shallow(start, end.x - start.x, end.y - start.y, color)
        else:
            start, end = (b, a) if a.y > b.y else (a, b)
            self._draw_steep(start, end.x - start.x, end.y - start.y, color)

    def _draw_shallow(self, start: Vec, dx: float, dy: float, color: int) -> None:
        if dx == 0:
            return
        step = -1 if dy < 0 else 1
        dy *= step
        y = int(start.y)
        p = int(2 * dy - dx)
        for i in range(math.ceil(dx + 1)):
            self.put_pixel(start.x + i, y, color)
            if p >= 0:
                y += step
                p = int(p - 2 * dx)
            p = int(p + 2 * dy)

    def _draw_steep(self, start: Vec, dx: float, dy: float, color: int) -> None:
        if dy == 0:
            return
        step = -1 if dx < 0 else 1
        dx *= step
        x = int(start.x)
        p = int(2 * dx - dy)
        for i in range(math.ceil(dy + 1)):
            self.put_pixel(x, start.y + i, color)
            if p >= 0:
                x += step
                p = int(p - 2 * dy)
            p = int(p + 2 * dx)

    def draw_straight(self, a: Vec, b: Vec, color: int) -> None:
        """Draw an axis-aligned segment from ``a`` towards ``b``.

        A vertical segment includes its end row; a horizontal one stops
        before its end column.
        """
        if a.x == b.x:
            first = int(a.y - 1) + 1
            for y in range(first, math.floor(b.y) + 1):
                self.put_pixel(a.x, y, color)
            return
        first = int(a.x - 1) + 1
        for x in range(first, math.ceil(b.x)):
            self.put_pixel(x, a.y, color)
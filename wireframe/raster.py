"""Rasterising the projected height map into a 32-bit pixel canvas."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Iterator

from wireframe.mapfile import HeightMap
from wireframe.projection import project
from wireframe.view import HEIGHT, WIDTH, View

FLAT_COLOR = 0xFFFFFFFF
RAISED_COLOR = 0xAA9E1212
SUNKEN_COLOR = 0xAA485990

_TYPECODE = next(code for code in "IL" if array(code).itemsize == 4)

Point = tuple[float, float]


class Canvas:
    """A width x height grid of 32-bit pixels, initially black."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array(_TYPECODE)
        self.clear()

    def clear(self) -> None:
        """Paint every pixel black."""
        self._pixels = array(_TYPECODE, bytes(4 * self.width * self.height))

    def put(self, x: float, y: float, color: int) -> None:
        """Set the pixel under ``(x, y)``; points off the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[int(y) * self.width + int(x)] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off the canvas")
        return self._pixels[y * self.width + x]

    def to_bytes(self) -> bytes:
        """Pixels row by row, each as a little-endian 32-bit word (B, G, R, A)."""
        pixels = self._pixels
        if sys.byteorder == "big":
            pixels = array(_TYPECODE, pixels)
            pixels.byteswap()
        return pixels.tobytes()


def point_color(z: float, trans_z: float) -> int:
    """Colour of a segment ending at height ``z``: white when flat, red above, blue below."""
    if z == 0:
        return FLAT_COLOR
    if z + trans_z > 0:
        return RAISED_COLOR
    return SUNKEN_COLOR


def _shallow(start: Point, end: Point) -> Iterator[Point]:
    (ox, oy), (nx, ny) = (end, start) if start[0] > end[0] else (start, end)
    dx = int(nx - ox)
    dy = int(ny - oy)
    step = -1 if dy < 0 else 1
    dy *= step
    if dx == 0:
        return
    error = 2 * dy - dx
    y = oy
    for offset in range(1, dx + 2):
        yield ox + offset, y
        if error >= 0:
            y += step
            error -= 2 * dx
        error += 2 * dy


def _steep(start: Point, end: Point) -> Iterator[Point]:
    (ox, oy), (nx, ny) = (end, start) if start[1] > end[1] else (start, end)
    dx = int(nx - ox)
    dy = int(ny - oy)
    step = -1 if dx < 0 else 1
    dx *= step
    if dy == 0:
        return
    error = 2 * dx - dy
    x = ox
    for offset in range(1, dy + 2):
        yield x, oy + offset
        if error >= 0:
            x += step
            error -= 2 * dy
        error += 2 * dx


def line_points(start: Point, end: Point) -> Iterator[Point]:
    """Pixel positions of the segment between two screen points.

    Walks the longer axis one pixel at a time, from just past the lower
    end to one past the upper end.
    """
    if abs(int(end[0]) - int(start[0])) > abs(int(end[1]) - int(start[1])):
        return _shallow(start, end)
    return _steep(start, end)


def _segments(columns: int, rows: int) -> Iterator[tuple[int, int]]:
    for row in range(rows):
        for column in range(1, columns):
            index = row * columns + column
            yield index - 1, index
    for column in range(columns):
        for row in range(1, rows):
            index = row * columns + column
            yield index - columns, index


def draw_wireframe(canvas: Canvas, heightmap: HeightMap, view: View) -> None:
    """Draw every row segment, then every column segment, of the map."""
    screen = [project(*heightmap.point(index), view) for index in range(len(heightmap))]
    for old, new in _segments(heightmap.columns, heightmap.rows):
        color = point_color(heightmap.heights[new], view.trans_z)
        for x, y in line_points(screen[old], screen[new]):
            canvas.put(x, y, color)
"""Rasterising the projected height map: a pixel canvas and gradient line drawing."""

from __future__ import annotations

import numpy as np

from .colors import Gradient
from .model import WINDOW_HEIGHT, WINDOW_WIDTH, HeightMap

_WORD = 0xFFFFFFFF


class Canvas:
    """A ``width`` x ``height`` image of packed 32-bit colours."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points on the top or left edge or outside the canvas are ignored."""
        if x >= self.width or y >= self.height or x <= 0 or y <= 0:
            return
        self.pixels[y, x] = color & _WORD

    def pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return int(self.pixels[y, x])

    def clear(self) -> None:
        """Paint the whole canvas black."""
        self.pixels.fill(0)


def draw_line(
    canvas: Canvas,
    x0: int,
    y0: int,
    color0: int,
    x1: int,
    y1: int,
    color1: int,
    pix_space: int,
    doubled_error: bool = True,
) -> None:
    """Draw a line with Bresenham's algorithm, fading from ``color0`` to ``color1``.

    With ``doubled_error`` the classic doubled error term is used and the colour
    only moves when the end colours differ; without it the error is compared
    undoubled and the colour steps on every pixel.
    """
    gradient = Gradient(color0, color1, pix_space)
    fade = not doubled_error or color0 != color1
    dx, dy = x1 - x0, y1 - y0
    sx = (dx > 0) - (dx < 0)
    sy = (dy > 0) - (dy < 0)
    dx, dy = abs(dx), abs(dy)
    diff = dx - dy
    x, y = x0, y0
    while x != x1 or y != y1:
        canvas.put_pixel(x, y, gradient.color)
        check = 2 * diff if doubled_error else diff
        if check > -dy:
            diff -= dy
            x += sx
        if check < dx:
            diff += dx
            y += sy
        if fade:
            gradient.advance()
    canvas.put_pixel(x, y, gradient.color)


def render(
    height_map: HeightMap,
    canvas: Canvas,
    pix_space: int,
    doubled_error: bool = True,
) -> None:
    """Draw every edge of the projected map: to the right and to the point below."""
    for y, row in enumerate(height_map):
        for x, point in enumerate(row):
            if x + 1 < len(row):
                right = row[x + 1]
                draw_line(
                    canvas,
                    point.proj_x, point.proj_y, point.color,
                    right.proj_x, right.proj_y, right.color,
                    pix_space, doubled_error,
                )
            if height_map.has_below(y, x):
                below = height_map[y + 1][x]
                draw_line(
                    canvas,
                    point.proj_x, point.proj_y, point.color,
                    below.proj_x, below.proj_y, below.color,
                    pix_space, doubled_error,
                )
            else:
                canvas.put_pixel(point.proj_x, point.proj_y, point.color)
"""The height map: a grid of points with their world and projected positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

WINDOW_WIDTH = 1800
WINDOW_HEIGHT = 900
DEFAULT_COLOR = 0xFFFFFF

_LOW_COLOR = 0x0000FF
_MID_COLOR = 0x00FF00
_HIGH_COLOR = 0xFF0000
_TOP_COLOR = 0xFFFFFF


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Point:
    """One vertex of the map: grid position, height, colour and projection."""

    z: int
    color: int = DEFAULT_COLOR
    x: int = 0
    y: int = 0
    proj_x: int = 0
    proj_y: int = 0
    proj_z: int = 0
    saved_color: int | None = None


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extent of the projected points."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def center(self) -> tuple[int, int]:
        """Midpoint of the bounds, each coordinate rounded towards zero."""
        return (
            _div_trunc(self.x_max + self.x_min, 2),
            _div_trunc(self.y_max + self.y_min, 2),
        )


class HeightMap:
    """Rows of points; rows may differ in length."""

    def __init__(self, rows: Iterable[Iterable[Point]]) -> None:
        self.rows: list[list[Point]] = [list(row) for row in rows]

    def __iter__(self) -> Iterator[list[Point]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> list[Point]:
        return self.rows[index]

    def points(self) -> Iterator[Point]:
        """Every point, row by row."""
        for row in self.rows:
            yield from row

    def max_row(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    def has_below(self, y: int, x: int) -> bool:
        """Whether the row after ``y`` has a point in column ``x``."""
        return y + 1 < len(self.rows) and len(self.rows[y + 1]) > x

    def bounds(self) -> Bounds:
        """Extent of the projected coordinates."""
        points = list(self.points())
        if not points:
            raise ValueError("the map has no points")
        xs = [point.proj_x for point in points]
        ys = [point.proj_y for point in points]
        return Bounds(min(xs), max(xs), min(ys), max(ys))

    def layout(self, pix_space: int) -> None:
        """Place every point on a grid ``pix_space`` pixels apart and copy it to the projection."""
        for row_index, row in enumerate(self.rows):
            for col_index, point in enumerate(row):
                point.x = col_index * pix_space
                point.y = row_index * pix_space
        self.reset()

    def reset(self) -> None:
        """Set the projection back to the unprojected grid positions."""
        for point in self.points():
            point.proj_x = point.x
            point.proj_y = point.y
            point.proj_z = point.z

    def shift(self, dx: int, dy: int) -> None:
        """Move every projected point by ``(dx, dy)``."""
        for point in self.points():
            point.proj_x += dx
            point.proj_y += dy

    def center(self, width: int, height: int) -> None:
        """Move the projection so its bounds are centred in a ``width`` x ``height`` area."""
        cx, cy = self.bounds().center()
        self.shift(width // 2 - cx, height // 2 - cy)

    def color_by_height(self) -> None:
        """Recolour points in bands by height, remembering their own colours."""
        z_max = max(point.z for point in self.points())
        range_1 = float(_div_trunc(z_max, 3))
        range_2 = float(z_max - _div_trunc(z_max, 3))
        for point in self.points():
            point.saved_color = point.color
            if point.z <= 0:
                point.color = _LOW_COLOR
            elif point.z <= range_1:
                point.color = _MID_COLOR
            elif point.z <= range_2:
                point.color = _HIGH_COLOR
            else:
                point.color = _TOP_COLOR

    def restore_colors(self) -> None:
        """Give back the colours saved by :meth:`color_by_height`."""
        for point in self.points():
            if point.saved_color is not None:
                point.color = point.saved_color
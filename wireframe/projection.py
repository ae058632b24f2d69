"""Projection of a height map onto the screen and the key-driven view state.

Angles, zoom factor and height scale are single-precision values, and every
projected coordinate is truncated to an integer after each step, so the
picture matches pixel for pixel what the drawing code expects.
"""

from __future__ import annotations

import math
import struct
from enum import IntEnum

from .model import WINDOW_HEIGHT, WINDOW_WIDTH, HeightMap

ISO_ANGLE = 0.6108
ANGLE_STEP = 0.0872
ANGLE_UPPER = 6.3656
ANGLE_LOWER = -6.3
ZOOM_STEP = 0.1
ZOOM_MIN = 0.2
ZOOM_MAX = 5
Z_STEP = 0.1
Z_LIMIT = 10
TRANSLATE_START = 10
TRANSLATE_STEP = 10
TRANSLATE_LIMIT = 40


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    ESC = 65307
    TO_TOP = 65362
    TO_DOWN = 65364
    TO_RIGHT = 65363
    TO_LEFT = 65361
    X_TOP = 65431
    X_DOWN = 65433
    Y_RIGHT = 65432
    Y_LEFT = 65430
    Z_RIGHT = 65434
    Z_LEFT = 65436
    P_Z = 65451
    M_Z = 65453
    TRANSLATE = 116
    ZM_IN = 105
    ZM_OUT = 111
    RETURN = 114
    PARALLEL = 112
    COLOR = 99


_ROTATION_KEYS = frozenset(
    {Key.X_TOP, Key.X_DOWN, Key.Y_RIGHT, Key.Y_LEFT, Key.Z_RIGHT, Key.Z_LEFT}
)
_TRANSLATION_KEYS = frozenset(
    {Key.TO_TOP, Key.TO_DOWN, Key.TO_RIGHT, Key.TO_LEFT, Key.TRANSLATE}
)
_ZOOM_KEYS = frozenset({Key.ZM_IN, Key.ZM_OUT})
_HEIGHT_KEYS = frozenset({Key.P_Z, Key.M_Z})


def rotate_point(
    x: int, y: int, z: int, angle_x: float, angle_y: float, angle_z: float
) -> tuple[int, int, int]:
    """Rotate about the x, then y, then z axis, truncating after each rotation."""
    cos_x, sin_x = math.cos(angle_x), math.sin(angle_x)
    y, z = int(y * cos_x - z * sin_x), int(y * sin_x + z * cos_x)
    cos_y, sin_y = math.cos(angle_y), math.sin(angle_y)
    x, z = int(x * cos_y + z * sin_y), int(-x * sin_y + z * cos_y)
    cos_z, sin_z = math.cos(angle_z), math.sin(angle_z)
    x, y = int(x * cos_z - y * sin_z), int(x * sin_z + y * cos_z)
    return x, y, z


def pixel_spacing(lines: int, max_row: int) -> int:
    """Distance in pixels between neighbouring grid points for a map of this size."""
    if lines <= 0 or max_row <= 0:
        raise ValueError("the map must have at least one row and one column")
    taller = max(lines, max_row)
    smaller = min(lines, max_row)
    if smaller > 300:
        factor = 0.7
    elif smaller > 180 or smaller < 50:
        factor = 0.5
    else:
        factor = 0.6
    return int(_f32(float(WINDOW_WIDTH // taller) * _f32(factor)))


class View:
    """How a height map is currently shown: angles, zoom, offset and colouring."""

    def __init__(self, height_map: HeightMap, pix_space: int) -> None:
        self.height_map = height_map
        self.pix_space = pix_space
        self.translate_var = TRANSLATE_START
        self.zoom_alpha = 1.0
        self.parallel = False
        self.z_value = 0.0
        self.colored = False
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0
        height_map.layout(pix_space)
        self.isometric()

    def _set_iso_angles(self) -> None:
        self.angle_x = _f32(ISO_ANGLE)
        self.angle_z = _f32(ISO_ANGLE)
        self.angle_y = _f32(-ISO_ANGLE)

    def _center(self) -> None:
        self.height_map.center(WINDOW_WIDTH, WINDOW_HEIGHT)

    def isometric(self) -> None:
        """Switch to the isometric angles and project the map."""
        self._set_iso_angles()
        self.rotate()

    def _step_angles(self, key: Key) -> None:
        if key == Key.X_TOP:
            self.angle_x = _f32(self.angle_x + ANGLE_STEP)
        elif key == Key.X_DOWN:
            self.angle_x = _f32(self.angle_x - ANGLE_STEP)
        elif key == Key.Y_LEFT:
            self.angle_y = _f32(self.angle_y + ANGLE_STEP)
        elif key == Key.Y_RIGHT:
            self.angle_y = _f32(self.angle_y - ANGLE_STEP)
        elif key == Key.Z_RIGHT:
            self.angle_z = _f32(self.angle_z + ANGLE_STEP)
        elif key == Key.Z_LEFT:
            self.angle_z = _f32(self.angle_z - ANGLE_STEP)
        if self.angle_x >= ANGLE_UPPER or self.angle_x <= ANGLE_LOWER:
            self.angle_x = 0.0
        if self.angle_y >= ANGLE_UPPER or self.angle_y <= ANGLE_LOWER:
            self.angle_y = 0.0
        if self.angle_z >= ANGLE_UPPER or self.angle_z <= ANGLE_LOWER:
            self.angle_z = 0.0

    def rotate(self, key: Key | None = None) -> None:
        """Turn by one step for a rotation key (or not at all) and re-project.

        A rotation key also drops any height scaling and zoom.
        """
        if key is not None:
            self._step_angles(key)
            self.z_value = 0.0
            self.zoom_alpha = 1.0
        for point in self.height_map.points():
            point.proj_x, point.proj_y, point.proj_z = rotate_point(
                point.x, point.y, point.z, self.angle_x, self.angle_y, self.angle_z
            )
        self._center()

    def translate(self, key: Key) -> None:
        """Move the picture for an arrow key, or cycle the step for the translate key."""
        bounds = self.height_map.bounds()
        dx = dy = 0
        if key == Key.TO_RIGHT and bounds.x_min < WINDOW_WIDTH:
            dx = self.translate_var
        elif key == Key.TO_LEFT and bounds.x_max > 0:
            dx = -self.translate_var
        elif key == Key.TO_TOP and bounds.y_max > 0:
            dy = -self.translate_var
        elif key == Key.TO_DOWN and bounds.y_min < WINDOW_HEIGHT:
            dy = self.translate_var
        if key == Key.TRANSLATE:
            if self.translate_var < TRANSLATE_LIMIT:
                self.translate_var += TRANSLATE_STEP
            else:
                self.translate_var = TRANSLATE_START
        self.height_map.shift(dx, dy)

    def _zoom_by(self, step: float) -> None:
        self.height_map.reset()
        if self.parallel:
            self.angle_x = self.angle_y = self.angle_z = 0.0
        else:
            self.isometric()
        self.zoom_alpha = _f32(self.zoom_alpha + step)
        alpha = self.zoom_alpha
        for point in self.height_map.points():
            point.proj_x = int(_f32(_f32(float(point.proj_x)) * alpha))
            point.proj_y = int(_f32(_f32(float(point.proj_y)) * alpha))
        self._center()

    def zoom(self, key: Key) -> None:
        """Zoom in or out by one step, keeping the picture where it was."""
        old_center = self.height_map.bounds().center()
        if key == Key.ZM_OUT and self.zoom_alpha > ZOOM_MIN:
            step = -ZOOM_STEP
        elif key == Key.ZM_IN and self.zoom_alpha < ZOOM_MAX:
            step = ZOOM_STEP
        else:
            return
        self._zoom_by(step)
        new_center = self.height_map.bounds().center()
        self.height_map.shift(old_center[0] - new_center[0], old_center[1] - new_center[1])
        self.z_value = 0.0

    def change_z(self, key: Key) -> None:
        """Raise or lower the height scale by one step; ignored in parallel view."""
        if self.parallel:
            return
        if key == Key.M_Z and self.z_value >= -Z_LIMIT:
            self.z_value = _f32(self.z_value - Z_STEP)
        elif key == Key.P_Z and self.z_value <= Z_LIMIT:
            self.z_value = _f32(self.z_value + Z_STEP)
        else:
            return
        self.height_map.reset()
        self.isometric()
        scale = self.z_value
        for point in self.height_map.points():
            lift = _f32(_f32(float(point.z)) * scale)
            point.proj_y = int(_f32(_f32(float(point.proj_y)) - lift))
        self._center()
        self.zoom_alpha = 1.0

    def reset(self, parallel: bool) -> None:
        """Go back to the starting picture, isometric or parallel, with original colours."""
        self.height_map.reset()
        self.z_value = 0.0
        self.zoom_alpha = 1.0
        if parallel:
            self._center()
            self.angle_x = self.angle_y = self.angle_z = 0.0
            self.parallel = True
        else:
            self.parallel = False
            self.isometric()
        if self.colored:
            self.height_map.restore_colors()
        self.colored = False

    def toggle_color(self) -> None:
        """Switch on colouring by height; it stays on until the view is reset."""
        if not self.colored:
            self.height_map.color_by_height()
            self.colored = True

    def handle_key(self, key: int) -> bool:
        """Apply a key press. Returns False when the key asks to close the viewer."""
        try:
            key = Key(key)
        except ValueError:
            return True
        if key == Key.ESC:
            return False
        if key in _TRANSLATION_KEYS:
            self.translate(key)
        if key in _ZOOM_KEYS:
            self.zoom(key)
        if key in _ROTATION_KEYS:
            self.height_map.reset()
            self.rotate(key)
        if key == Key.RETURN:
            self.reset(parallel=False)
        elif key == Key.PARALLEL and not self.parallel:
            self.reset(parallel=True)
        if key in _HEIGHT_KEYS:
            self.change_z(key)
        if key == Key.COLOR:
            self.toggle_color()
        return True
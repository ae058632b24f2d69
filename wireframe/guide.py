"""The on-screen help text: what the keys do and the current view settings."""

from __future__ import annotations

import math
from typing import NamedTuple

from .projection import View

_RULE = "-" * 28


class GuideEntry(NamedTuple):
    """One piece of text to draw at a screen position."""

    x: int
    y: int
    text: str


def format_angle(n: int) -> str:
    """Bracketed value, nudged one away from zero when it is not a multiple of five."""
    if n % 5 != 0:
        n = n + 1 if n > 0 else n - 1
    return f"[{n}]"


def _degrees(angle: float) -> int:
    return int(angle * 180 / math.pi)


def guide_entries(view: View) -> list[GuideEntry]:
    """Every text of the help panel, in drawing order, for the given view."""
    parallel = (80, 281, " [Active]") if view.parallel else (85, 281, "[Not Active]")
    colored = (85, 311, "[Active]") if view.colored else (85, 311, "[Not Active]")
    entries = [
        (5, 13, "Zoom: "),
        (5, 14, "____"),
        (5, 15, "____"),
        (5, 37, "zoom in : I || zoom out: O"),
        (65, 39, "_              _"),
        (2, 50, _RULE),
        (5, 65, "Translate: "),
        (5, 66, "_________"),
        (5, 67, "_________"),
        (5, 88, "to top:       || to down: "),
        (57, 89, "^"),
        (58, 89, "^"),
        (57, 89, "|"),
        (58, 89, "|"),
        (160, 89, "|"),
        (161, 90, "|"),
        (162, 89, "|"),
        (161, 91, "v"),
        (5, 110, "to right:     || to left:  "),
        (70, 110, ">"),
        (70, 111, ">"),
        (70, 105, "_"),
        (67, 105, "_"),
        (70, 106, "_"),
        (67, 106, "_"),
        (160, 112, "<"),
        (160, 113, "<"),
        (162, 107, "_"),
        (165, 107, "_"),
        (162, 108, "_"),
        (165, 108, "_"),
        (5, 132, "translate x2: T"),
        (120, 132, format_angle(view.translate_var)),
        (89, 134, "_"),
        (2, 145, _RULE),
        (5, 160, "Rotation: "),
        (5, 161, "________"),
        (5, 162, "________"),
        (5, 184, "Rotate (Z): 9 and 1    "),
        (77, 186, "_     _"),
        (130, 185, format_angle(_degrees(view.angle_z))),
        (5, 206, "Rotate (X): 8 and 2    "),
        (77, 208, "_     _"),
        (130, 207, format_angle(_degrees(view.angle_x))),
        (5, 228, "Rotate (Y): 4 and 6"),
        (77, 230, "_     _"),
        (130, 229, format_angle(_degrees(view.angle_y))),
        (2, 241, _RULE),
        (5, 256, "Projection:"),
        (5, 257, "__________"),
        (5, 258, "__________"),
        (5, 280, "Parallel: P"),
        (65, 282, "_"),
        parallel,
        (2, 293, _RULE),
        (5, 310, "Color:"),
        (5, 311, "_____"),
        (5, 312, "_____"),
        colored,
        (5, 334, "change color:  C"),
        (5, 336, "               _"),
        (2, 349, _RULE),
        (5, 366, "Edit Z:"),
        (5, 367, "______"),
        (5, 368, "______"),
        (5, 390, "change Z:      and    "),
        (68, 387, "__         __"),
        (68, 388, "__         __"),
        (68, 389, "__         __"),
        (136, 387, "_"),
        (136, 388, "_"),
        (136, 389, "_"),
        (70, 393, "|"),
        (71, 393, "|"),
        (72, 393, "|"),
        (2, 405, _RULE),
        (5, 422, "Return:"),
        (5, 423, "______"),
        (5, 424, "______"),
        (5, 446, "go to the main map:  R"),
        (5, 448, "                     _"),
        (5, 461, _RULE),
    ]
    return [GuideEntry(*entry) for entry in entries]
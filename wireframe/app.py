"""The viewer window and the command that opens a map in it."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from .guide import guide_entries  # noqa: E402
from .model import HeightMap  # noqa: E402
from .parser import MapError  # noqa: E402
from .projection import Key, View, pixel_spacing  # noqa: E402
from .raster import Canvas, render  # noqa: E402
from .reader import load_map  # noqa: E402

WINDOW_TITLE = "FDF"
_GUIDE_COLOR = (255, 255, 255)
_FONT_SIZE = 16
_FRAME_RATE = 30

_KEY_MAP: dict[int, Key] = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.TO_TOP,
    pygame.K_DOWN: Key.TO_DOWN,
    pygame.K_RIGHT: Key.TO_RIGHT,
    pygame.K_LEFT: Key.TO_LEFT,
    pygame.K_KP8: Key.X_TOP,
    pygame.K_KP2: Key.X_DOWN,
    pygame.K_KP6: Key.Y_RIGHT,
    pygame.K_KP4: Key.Y_LEFT,
    pygame.K_KP9: Key.Z_RIGHT,
    pygame.K_KP1: Key.Z_LEFT,
    pygame.K_KP_PLUS: Key.P_Z,
    pygame.K_KP_MINUS: Key.M_Z,
    pygame.K_t: Key.TRANSLATE,
    pygame.K_i: Key.ZM_IN,
    pygame.K_o: Key.ZM_OUT,
    pygame.K_r: Key.RETURN,
    pygame.K_p: Key.PARALLEL,
    pygame.K_c: Key.COLOR,
}

_USAGE = "usage: wireframe [--basic] <map.fdf>"


class Viewer:
    """Shows a height map in a window.

    An interactive viewer reacts to the navigation keys and draws a help
    panel; a basic one shows the isometric picture and only closes on Escape.
    """

    def __init__(self, height_map: HeightMap, interactive: bool = True) -> None:
        self.height_map = height_map
        self.interactive = interactive
        self.pix_space = pixel_spacing(len(height_map), height_map.max_row())
        self.view = View(height_map, self.pix_space)
        self.canvas = Canvas()
        self._redraw()

    def key_for(self, pygame_key: int) -> Key | None:
        """The viewer key a pygame key stands for, or None if it does nothing here."""
        key = _KEY_MAP.get(pygame_key)
        if key is None or (not self.interactive and key != Key.ESC):
            return None
        return key

    def _redraw(self) -> None:
        self.canvas.clear()
        render(
            self.height_map,
            self.canvas,
            self.pix_space,
            doubled_error=not self.interactive,
        )

    def _handle(self, key: Key | None) -> bool:
        """Apply a key press; False means the window should close."""
        if key == Key.ESC:
            return False
        if not self.interactive:
            return True
        if key is not None:
            self.view.handle_key(key)
        self._redraw()
        return True

    def _show(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        image = pygame.Surface((self.canvas.width, self.canvas.height), depth=32)
        pygame.surfarray.blit_array(image, np.ascontiguousarray(self.canvas.pixels.T))
        screen.blit(image, (0, 0))
        if self.interactive:
            ascent = font.get_ascent()
            for entry in guide_entries(self.view):
                text = font.render(entry.text, True, _GUIDE_COLOR)
                screen.blit(text, (entry.x, entry.y - ascent))
        pygame.display.flip()

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.canvas.width, self.canvas.height))
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(None, _FONT_SIZE)
            clock = pygame.time.Clock()
            self._show(screen, font)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                        break
                    if event.type != pygame.KEYDOWN:
                        continue
                    if not self._handle(self.key_for(event.key)):
                        running = False
                        break
                    if self.interactive:
                        self._show(screen, font)
                if running:
                    clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and show it."""
    args = list(sys.argv[1:] if argv is None else argv)
    interactive = True
    if "--basic" in args:
        args.remove("--basic")
        interactive = False
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        height_map = load_map(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    Viewer(height_map, interactive=interactive).run()
    return 0
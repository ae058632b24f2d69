"""Packed TRGB colour helpers and the per-pixel gradient used when drawing edges."""

from __future__ import annotations

_CHANNEL = 0xFF
_WORD = 0xFFFFFFFF


def get_t(trgb: int) -> int:
    """Return the transparency channel of a packed colour."""
    return (trgb >> 24) & _CHANNEL


def get_r(trgb: int) -> int:
    """Return the red channel of a packed colour."""
    return (trgb >> 16) & _CHANNEL


def get_g(trgb: int) -> int:
    """Return the green channel of a packed colour."""
    return (trgb >> 8) & _CHANNEL


def get_b(trgb: int) -> int:
    """Return the blue channel of a packed colour."""
    return trgb & _CHANNEL


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack four channels into one 32-bit colour."""
    return (t << 24 | r << 16 | g << 8 | b) & _WORD


def _split(color: int) -> list[float]:
    return [float(get_t(color)), float(get_r(color)), float(get_g(color)), float(get_b(color))]


class Gradient:
    """Walks from one colour towards another, one pixel step at a time.

    Each channel moves by ``|start - end| / pix_space`` per step, towards its
    target, and stops moving once it sits exactly on the target.
    """

    def __init__(self, color0: int, color1: int, pix_space: int) -> None:
        self._current = _split(color0)
        self._target = _split(color1)
        self._steps = [
            abs(start - end) / pix_space if pix_space else abs(start - end)
            for start, end in zip(self._current, self._target)
        ]
        self.color = color0

    def advance(self) -> int:
        """Move one step towards the target colour and return the new colour."""
        for index, (value, target, step) in enumerate(
            zip(self._current, self._target, self._steps)
        ):
            if value < target:
                self._current[index] = value + step
            elif value > target:
                self._current[index] = value - step
        self.color = create_trgb(*(int(channel) for channel in self._current))
        return self.color
"""Validation and parsing of the text lines that make up a map file.

A map line holds whitespace-separated points. Each point is a height,
optionally signed, optionally followed by ``,`` and a colour written either
in decimal or as ``0x`` followed by hex digits.
"""

from __future__ import annotations

from .model import DEFAULT_COLOR, Point

MAX_HEIGHT = 159_999_999
MAX_COLOR = 0x7FFFFFFF

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIGNS = frozenset("+-")
_DELIMITERS = frozenset(" \n")
_UPPER_HEX = str.maketrans("abcdef", "ABCDEF")


class MapError(ValueError):
    """Raised when a map line is malformed or holds values out of range."""

    def __init__(self, message: str = "Invalid map") -> None:
        super().__init__(message)


def _color_end(line: str, start: int) -> int | None:
    """Index just past a colour beginning at ``start``, or None if it is malformed."""
    size = len(line)
    if line.startswith("0x", start) and start + 2 < size and line[start + 2] not in _DELIMITERS:
        allowed = _HEX_DIGITS
        index = start + 2
    elif start < size and line[start] in _DIGITS:
        allowed = _DIGITS
        index = start
    else:
        return None
    while index < size and line[index] not in _DELIMITERS:
        if line[index] not in allowed:
            return None
        index += 1
    return index


def check_line(line: str) -> bool:
    """Whether a raw line uses only the characters and shapes a map allows."""
    size = len(line)
    index = 0
    while index < size:
        char = line[index]
        if char in _DIGITS or char in _DELIMITERS:
            index += 1
            continue
        if char in _SIGNS:
            followed_by_digit = index + 1 < size and line[index + 1] in _DIGITS
            starts_token = index == 0 or line[index - 1] == " "
            if not (followed_by_digit and starts_token):
                return False
            index += 1
            continue
        if char == ",":
            end = _color_end(line, index + 1)
            if end is None:
                return False
            index = end + 1
            continue
        return False
    return True


def normalize_line(line: str) -> str:
    """Collapse runs of spaces, drop the line ending and upper-case hex letters.

    Raises MapError when the line holds no points at all.
    """
    content = line.split("\n", 1)[0]
    tokens = [token for token in content.split(" ") if token]
    if not tokens:
        raise MapError("Invalid map: empty line")
    return " ".join(token.translate(_UPPER_HEX) for token in tokens)


def parse_hex_color(text: str) -> int:
    """Turn ``0x``-prefixed hex text into a colour value."""
    if not text.startswith("0x") or len(text) <= 2:
        raise MapError(f"Invalid map: bad colour {text!r}")
    digits = text[2:]
    if any(char not in _HEX_DIGITS for char in digits):
        raise MapError(f"Invalid map: bad colour {text!r}")
    value = int(digits, 16)
    if value > MAX_COLOR:
        raise MapError(f"Invalid map: colour {text!r} out of range")
    return value


def _parse_decimal_color(text: str) -> int:
    if not text or any(char not in _DIGITS for char in text):
        raise MapError(f"Invalid map: bad colour {text!r}")
    value = int(text)
    if value > MAX_COLOR:
        raise MapError(f"Invalid map: colour {text!r} out of range")
    return value


def parse_point(token: str) -> Point:
    """Parse one point token such as ``10``, ``-3,0xFF0000`` or ``4,255``."""
    start = next(
        (index for index, char in enumerate(token) if char in _DIGITS or char in _SIGNS),
        None,
    )
    if start is None:
        raise MapError(f"Invalid map: bad point {token!r}")
    body = token[start:]
    sign = -1 if body[0] == "-" else 1
    if body[0] in _SIGNS:
        body = body[1:]
    height_text, separator, color_text = body.partition(",")
    if not height_text or any(char not in _DIGITS for char in height_text):
        raise MapError(f"Invalid map: bad point {token!r}")
    height = int(height_text)
    if height > MAX_HEIGHT:
        raise MapError(f"Invalid map: height {token!r} out of range")
    if not separator:
        color = DEFAULT_COLOR
    elif color_text[1:2] == "x":
        color = parse_hex_color(color_text)
    else:
        color = _parse_decimal_color(color_text)
    return Point(z=height * sign, color=color)


def parse_row(line: str) -> list[Point]:
    """Validate, normalise and parse a whole map line into its points."""
    if not check_line(line):
        raise MapError(f"Invalid map: bad line {line!r}")
    return [parse_point(token) for token in normalize_line(line).split(" ")]
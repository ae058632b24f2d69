"""Reading map files from disk into a :class:`HeightMap`."""

from __future__ import annotations

import os
from typing import Iterator

from .model import HeightMap
from .parser import MapError, check_line, normalize_line, parse_row

MAP_SUFFIX = ".fdf"

PathLike = str | os.PathLike


def _read_text(path: PathLike) -> str:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError(f"Invalid file: {os.fspath(path)!r}") from exc
    return data.decode("latin-1")


def _iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each keeping its ``\\n`` where it has one."""
    *complete, tail = text.split("\n")
    for line in complete:
        yield line + "\n"
    if tail:
        yield tail


def count_lines(path: PathLike) -> int:
    """Number of lines in the file, counting a last line without a newline.

    An empty file counts as one line. Raises MapError if it cannot be read.
    """
    text = _read_text(path)
    newlines = text.count("\n")
    return newlines if text.endswith("\n") else newlines + 1


def read_lines(path: PathLike, count: int) -> list[str]:
    """Read the first ``count`` lines of a map file, validated and normalised.

    Raises MapError when the file name lacks the map suffix, when the file
    holds fewer lines than asked for, or when a line is malformed or empty.
    """
    if not os.fspath(path).endswith(MAP_SUFFIX):
        raise MapError(f"Invalid file: {os.fspath(path)!r}")
    lines = list(_iter_lines(_read_text(path)))
    if len(lines) < count:
        raise MapError("Invalid map: fewer lines than expected")
    normalized = []
    for line in lines[:count]:
        if not check_line(line):
            raise MapError(f"Invalid map: bad line {line!r}")
        normalized.append(normalize_line(line))
    return normalized


def load_map(path: PathLike) -> HeightMap:
    """Load and parse a map file.

    The first row must hold at least two points.
    """
    rows = []
    for index, line in enumerate(read_lines(path, count_lines(path))):
        row = parse_row(line)
        if index == 0 and len(row) < 2:
            raise MapError("Invalid map: the first row needs at least two points")
        rows.append(row)
    return HeightMap(rows)
"""Loading height maps: rows of space-separated heights, one row per line."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice, takewhile

from wireframe.support.lines import read_lines
from wireframe.support.strings import strlen

_FIELD_END = re.compile(r"(?<=[^ ]) ")
_FIELD_STOP = " \n\0"


class MapError(Exception):
    """A map file cannot be opened or does not describe a grid."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights stored row by row."""

    path: str
    columns: int
    rows: int
    heights: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.heights)

    def point(self, index: int) -> tuple[float, float, float]:
        """Grid position and height ``(x, y, z)`` of the ``index``-th point."""
        if not 0 <= index < len(self.heights):
            raise IndexError(f"point {index} out of range")
        row, column = divmod(index, self.columns)
        return float(column), float(row), self.heights[index]


def _body(line: str) -> str:
    return line.split("\0", 1)[0]


def count_columns(line: str) -> int:
    """Number of space-separated values on the line, up to its newline."""
    return sum(1 for token in _body(line).split("\n", 1)[0].split(" ") if token)


def parse_field(line: str, index: int) -> float:
    """Value of the ``index``-th field of the line.

    Reading stops at a decimal point or a comma, so ``"3,0xFF"`` reads as 3.
    A field that is not there, or that starts on a repeated space, reads as 0.
    """
    if index < 0:
        raise ValueError(f"field index must not be negative, got {index}")
    text = _body(line)
    position = 0
    if index:
        ends = list(islice(_FIELD_END.finditer(text), index))
        if len(ends) < index:
            return 0.0
        position = ends[-1].end()
    sign = 1.0
    if text[position : position + 1] in ("+", "-"):
        sign = -1.0 if text[position] == "-" else 1.0
        position += 1
    value = 0.0
    for ch in takewhile(lambda c: c not in _FIELD_STOP, text[position:]):
        if ch in ".,":
            break
        value = value * 10.0 + (ord(ch) - 48)
    return value * sign


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read a map file into a HeightMap.

    Every line counts as a row; a line longer than its newline must hold as
    many values as the first line.
    """
    name = os.fspath(path)
    try:
        with open(name, encoding="latin-1") as handle:
            lines = list(read_lines(handle))
    except OSError as exc:
        raise MapError(f"cannot open map file {name}: {exc.strerror or exc}") from exc
    if not lines:
        raise MapError(f"error while reading the map {name}: empty map")
    columns = count_columns(lines[0])
    if columns == 0:
        raise MapError(f"error while reading the map {name}: no values on the first line")
    for number, line in enumerate(lines, start=1):
        if strlen(line) > 1 and count_columns(line) != columns:
            raise MapError(f"error while reading the map {name}: uneven map at line {number}")
    heights = tuple(parse_field(line, field) for line in lines for field in range(columns))
    return HeightMap(path=name, columns=columns, rows=len(lines), heights=heights)
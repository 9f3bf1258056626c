"""Reading ``.ber`` map files into a grid of text rows."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from solong.errors import MapError, SoLongError

MAP_SUFFIX = ".ber"
MAX_WIDTH = 80
MAX_HEIGHT = 41

PathArg = Union[str, "os.PathLike[str]"]


@dataclass
class MapGrid:
    """The rows of a map exactly as read, line endings included."""

    rows: list[str] = field(default_factory=list)

    @property
    def height(self) -> int:
        """Number of rows in the file."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the first row, not counting its line ending."""
        return map_width(self.rows)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x`` of row ``y``.

        Positions outside the stored text give an empty string.
        """
        if 0 <= y < len(self.rows):
            row = self.rows[y]
            if 0 <= x < len(row):
                return row[x]
        return ""

    def set_cell(self, x: int, y: int, char: str) -> None:
        """Replace the character at column ``x`` of row ``y``."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if not 0 <= y < len(self.rows) or not 0 <= x < len(self.rows[y]):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        row = self.rows[y]
        self.rows[y] = row[:x] + char + row[x + 1:]

    def positions(self, char: str) -> list[tuple[int, int]]:
        """All ``(x, y)`` positions holding ``char``, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell == char
        ]

    def find(self, char: str) -> Optional[tuple[int, int]]:
        """The last ``(x, y)`` position holding ``char``, or ``None``."""
        found = self.positions(char)
        return found[-1] if found else None


def check_filename(path: PathArg) -> str:
    """Return ``path`` as a string if it names a ``.ber`` file."""
    name = os.fspath(path)
    if isinstance(name, bytes):
        name = os.fsdecode(name)
    if not name.endswith(MAP_SUFFIX):
        raise SoLongError("File name must end with .ber")
    return name


def map_width(rows: list[str]) -> int:
    """Length of the first row up to its newline; 0 if there is none."""
    if not rows or not rows[0] or rows[0][0] == "\n":
        return 0
    return len(rows[0].split("\n", 1)[0])


def _split_lines(text: str) -> list[str]:
    """Split ``text`` at newlines only, keeping each newline."""
    pieces = text.split("\n")
    rows = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        rows.append(pieces[-1])
    return rows


def read_map(path: PathArg) -> MapGrid:
    """Read the map file at ``path`` into a :class:`MapGrid`."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise SoLongError("File does not exist.") from exc
    rows = _split_lines(data.decode("latin-1"))
    if not rows:
        raise MapError("Empty map.")
    return MapGrid(rows)


def check_screen_size(grid: MapGrid) -> MapGrid:
    """Return ``grid`` if it fits on screen, else raise :class:`MapError`."""
    if grid.width > MAX_WIDTH or grid.height > MAX_HEIGHT:
        raise MapError("map too big lol")
    return grid
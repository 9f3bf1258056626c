"""Checks that a map read from a ``.ber`` file is playable."""

from __future__ import annotations

from typing import Optional

from solong.errors import MapError
from solong.mapfile import MapGrid, PathArg, check_filename, check_screen_size, read_map

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

_BASE_CHARS = frozenset({WALL, FLOOR, COLLECTIBLE, PLAYER, EXIT, "\n"})
_BONUS_CHARS = _BASE_CHARS | {ENEMY}

_WALLS_MESSAGE = "Map is not surrounded by walls."


def check_rectangular(grid: MapGrid) -> MapGrid:
    """Require every row to have the same length as the first one.

    Lengths include the line ending, so a last row without a newline
    counts as shorter than the others.
    """
    if not grid.rows:
        return grid
    expected = len(grid.rows[0])
    if any(len(row) != expected for row in grid.rows):
        raise MapError("Map is not rectangular or empty line")
    return grid


def check_components(grid: MapGrid, bonus: bool = False) -> MapGrid:
    """Require one player, one exit, at least one collectible.

    With ``bonus`` at least one enemy is required as well.
    """
    text = "".join(grid.rows)
    players = text.count(PLAYER)
    exits = text.count(EXIT)
    collectibles = text.count(COLLECTIBLE)
    enemies = text.count(ENEMY)
    if players != 1 or exits != 1 or collectibles < 1 or (bonus and enemies < 1):
        raise MapError("Error in map components")
    return grid


def check_chars(grid: MapGrid, bonus: bool = False) -> MapGrid:
    """Reject any character that has no meaning on the map."""
    allowed = _BONUS_CHARS if bonus else _BASE_CHARS
    if any(char not in allowed for row in grid.rows for char in row):
        raise MapError("Invalid character in map.")
    return grid


def _leading_walls(row: str) -> int:
    return len(row) - len(row.lstrip(WALL))


def check_walls(grid: MapGrid) -> MapGrid:
    """Require the first and last rows to be all wall, and the side columns too."""
    rows = grid.rows
    if len(rows) < 2:
        raise MapError(_WALLS_MESSAGE)
    first = rows[0]
    walls = _leading_walls(first)
    if len(first) - 1 != walls:
        raise MapError(_WALLS_MESSAGE)
    last_column = walls - 1
    if last_column < 0:
        raise MapError(_WALLS_MESSAGE)
    for y in range(1, len(rows) - 1):
        if grid.cell(0, y) != WALL or grid.cell(last_column, y) != WALL:
            raise MapError(_WALLS_MESSAGE)
    last = rows[-1]
    if len(last) - 1 != _leading_walls(last):
        raise MapError(_WALLS_MESSAGE)
    return grid


def reachable(
    grid: MapGrid, start: tuple[int, int], bonus: bool = False
) -> set[tuple[int, int]]:
    """All cells reachable from ``start`` in four directions.

    Walls block movement; with ``bonus`` enemies block it too.
    """
    width, height = grid.width, grid.height
    blocked = {WALL, ENEMY} if bonus else {WALL}
    seen: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < width and 0 <= y < height) or (x, y) in seen:
            continue
        char = grid.cell(x, y)
        if not char or char in blocked:
            continue
        seen.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return seen


def check_path(grid: MapGrid, bonus: bool = False) -> MapGrid:
    """Require every collectible and the exit to be reachable by the player."""
    start: Optional[tuple[int, int]] = grid.find(PLAYER)
    filled = reachable(grid, start if start is not None else (0, 0), bonus)
    targets = grid.positions(COLLECTIBLE) + grid.positions(EXIT)
    if any(target not in filled for target in targets):
        raise MapError("invalid path.")
    return grid


def parse_map(path: PathArg, bonus: bool = False) -> MapGrid:
    """Read the map at ``path`` and run every check on it, in order."""
    name = check_filename(path)
    grid = read_map(name)
    check_screen_size(grid)
    check_components(grid, bonus)
    check_rectangular(grid)
    check_chars(grid, bonus)
    check_walls(grid)
    check_path(grid, bonus)
    return grid
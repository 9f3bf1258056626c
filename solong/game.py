"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import enum
from typing import Optional, Union

from solong.errors import MapError
from solong.mapfile import MapGrid

TILE_SIZE = 32

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

WIN_MESSAGE = "\033[1;32mYou won!\033[0m\n"
LOSE_MESSAGE = "\033[1;31mYou lost!\033[0m\n"


class Key(enum.IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class Outcome(enum.Enum):
    """What a key press or a move led to."""

    IGNORED = "ignored"
    MOVED = "moved"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def finished(self) -> bool:
        """True when the game is over after this outcome."""
        return self in (Outcome.WON, Outcome.LOST, Outcome.QUIT)


_DIRECTIONS: dict[Key, tuple[int, int]] = {
    Key.W: (0, -1),
    Key.UP: (0, -1),
    Key.A: (-1, 0),
    Key.LEFT: (-1, 0),
    Key.S: (0, 1),
    Key.DOWN: (0, 1),
    Key.D: (1, 0),
    Key.RIGHT: (1, 0),
}


def move_message(moves: int) -> str:
    """The line reporting the move count."""
    return f"Move: {moves}\n"


class Game:
    """A running game on a validated map.

    The grid is updated in place as the player moves: the cell the player
    leaves becomes floor, unless it is the exit.
    """

    def __init__(self, grid: MapGrid, bonus: bool = False) -> None:
        start = grid.find(PLAYER)
        if start is None:
            raise MapError("Error in map components")
        self.grid = grid
        self.bonus = bonus
        self.player: tuple[int, int] = start
        self.exit: Optional[tuple[int, int]] = grid.find(EXIT)
        self.collectibles = len(grid.positions(COLLECTIBLE))
        self.moves = 0
        self.outcome: Optional[Outcome] = None

    @property
    def exit_open(self) -> bool:
        """True once every collectible has been picked up."""
        return self.collectibles == 0

    @property
    def finished(self) -> bool:
        """True once the game has been won, lost or quit."""
        return self.outcome is not None and self.outcome.finished

    def enemies(self) -> list[tuple[int, int]]:
        """Positions of all enemies on the map, row by row."""
        return self.grid.positions(ENEMY)

    def is_valid_move(self, x: int, y: int) -> bool:
        """Whether the player may step onto ``(x, y)``."""
        if x < 0 or y < 0:
            return False
        if x > self.grid.width or y >= self.grid.height:
            return False
        return self.grid.cell(x, y) != WALL

    def _step(self, x: int, y: int) -> None:
        old_x, old_y = self.player
        if self.grid.cell(old_x, old_y) != EXIT:
            self.grid.set_cell(old_x, old_y, FLOOR)
        self.player = (x, y)

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by ``(dx, dy)`` and report what happened."""
        if self.finished:
            return self.outcome  # type: ignore[return-value]
        x, y = self.player[0] + dx, self.player[1] + dy
        if not self.is_valid_move(x, y):
            return Outcome.IGNORED
        self.moves += 1
        self._step(x, y)
        here = self.grid.cell(x, y)
        if here == COLLECTIBLE:
            self.collectibles -= 1
        outcome = Outcome.MOVED
        if self.collectibles == 0 and here == EXIT:
            outcome = Outcome.WON
        elif self.bonus and here == ENEMY:
            outcome = Outcome.LOST
        if outcome.finished:
            self.outcome = outcome
        return outcome

    def handle_key(self, key: Union[Key, int]) -> Outcome:
        """React to a key press: move, quit, or ignore it."""
        if self.finished:
            return self.outcome  # type: ignore[return-value]
        try:
            code = Key(key)
        except ValueError:
            return Outcome.IGNORED
        if code is Key.ESC:
            self.outcome = Outcome.QUIT
            return Outcome.QUIT
        dx, dy = _DIRECTIONS[code]
        return self.move(dx, dy)
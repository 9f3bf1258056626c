"""Drawing a game onto a pygame surface, with animated enemies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from solong.errors import SoLongError
from solong.game import COLLECTIBLE, ENEMY, EXIT, TILE_SIZE, WALL, Game, Key

ANIMATION_SPEED = 1200
ENEMY_FRAMES = 5
DEFAULT_TEXTURE_DIR = "textures"
IMAGE_EXTENSIONS = (".xpm", ".png", ".bmp")

TEXT_COLOR = (255, 255, 255)
TEXT_POSITION = (12, 6)
STATUS_FONT_SIZE = 20
STATUS_WALL_COLUMNS = 6

_LOAD_FAILED = "Failed to load textures"

_PYGAME_KEYS: dict[int, Key] = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


def key_from_pygame(key: int) -> Optional[Key]:
    """The game key for a pygame key code, or ``None`` if it has no use."""
    return _PYGAME_KEYS.get(key)


def status_text(moves: int) -> str:
    """The move counter shown in the window."""
    return f"moves : {moves}"


@dataclass
class Animation:
    """Counts loop cycles and advances the enemy frame every ``speed`` of them."""

    speed: int = ANIMATION_SPEED
    frames: int = ENEMY_FRAMES
    frame: int = 0
    cycle: int = 0

    def tick(self) -> bool:
        """Count one cycle; return True when the frame advanced."""
        self.cycle += 1
        if self.cycle <= self.speed:
            return False
        self.frame = (self.frame + 1) % self.frames
        self.cycle = 0
        return True


@dataclass
class Textures:
    """The images used to draw each kind of tile."""

    player: pygame.Surface
    wall: pygame.Surface
    floor: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface
    exit_open: pygame.Surface
    enemy: tuple[pygame.Surface, ...] = ()

    @classmethod
    def load(
        cls,
        directory: Union[str, "os.PathLike[str]"] = DEFAULT_TEXTURE_DIR,
        bonus: bool = False,
    ) -> "Textures":
        """Load every texture from ``directory``.

        Each image is looked up by name with any of the known extensions.
        Without ``bonus`` the open exit looks like the closed one and there
        are no enemy frames.
        """
        base = Path(directory)

        def image(stem: str) -> pygame.Surface:
            for extension in IMAGE_EXTENSIONS:
                candidate = base / f"{stem}{extension}"
                if not candidate.is_file():
                    continue
                try:
                    return pygame.image.load(os.fspath(candidate))
                except (pygame.error, OSError):
                    continue
            raise SoLongError(_LOAD_FAILED)

        closed_exit = image("closed_exit")
        textures = cls(
            player=image("vampire"),
            wall=image("wall"),
            floor=image("floor"),
            collectible=image("blood"),
            exit=closed_exit,
            exit_open=image("opened_exit") if bonus else closed_exit,
        )
        if bonus:
            textures.enemy = tuple(
                image(f"enemy{index}") for index in range(ENEMY_FRAMES)
            )
        return textures


class Renderer:
    """Draws a :class:`Game` onto a surface, one tile per map cell."""

    def __init__(
        self, game: Game, textures: Textures, surface: pygame.Surface
    ) -> None:
        self.game = game
        self.textures = textures
        self.surface = surface
        self.animation = Animation()
        self._font: Optional[pygame.font.Font] = None

    def _blit(self, image: pygame.Surface, x: int, y: int) -> None:
        self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))

    def _enemy_image(self) -> Optional[pygame.Surface]:
        frames = self.textures.enemy
        if not frames:
            return None
        return frames[self.animation.frame % len(frames)]

    def _draw_cell(self, x: int, y: int, char: str) -> None:
        textures = self.textures
        on_player = (x, y) == self.game.player
        self._blit(textures.floor, x, y)
        if char == WALL:
            self._blit(textures.wall, x, y)
        elif char == COLLECTIBLE and not on_player:
            self._blit(textures.collectible, x, y)
        elif char == EXIT:
            exit_image = textures.exit_open if self.game.exit_open else textures.exit
            self._blit(exit_image, x, y)
        elif char == ENEMY:
            enemy = self._enemy_image()
            if enemy is not None:
                self._blit(enemy, x, y)
        if on_player:
            self._blit(textures.player, x, y)

    def _status_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, STATUS_FONT_SIZE)
        return self._font

    def _draw_status(self) -> None:
        rows = self.game.grid.rows
        if rows:
            for x, char in enumerate(rows[0][:STATUS_WALL_COLUMNS]):
                if char == WALL:
                    self._blit(self.textures.wall, x, 0)
        text = self._status_font().render(
            status_text(self.game.moves), True, TEXT_COLOR
        )
        self.surface.blit(text, TEXT_POSITION)

    def draw(self) -> None:
        """Draw the whole map, the player and, in bonus mode, the move counter."""
        for y, row in enumerate(self.game.grid.rows):
            for x, char in enumerate(row):
                if char != "\n":
                    self._draw_cell(x, y, char)
        if self.game.bonus:
            self._draw_status()

    def draw_enemies(self) -> None:
        """Redraw every enemy with the current animation frame."""
        enemy = self._enemy_image()
        if enemy is None:
            return
        for x, y in self.game.enemies():
            self._blit(self.textures.floor, x, y)
            self._blit(enemy, x, y)

    def tick(self) -> bool:
        """Advance the animation by one cycle; return True if enemies were redrawn."""
        if not self.animation.tick():
            return False
        if self.game.bonus:
            self.draw_enemies()
        return True
"""Command line entry point: load a map and play it in a window."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import pygame

from solong.errors import SoLongError, format_error
from solong.game import LOSE_MESSAGE, TILE_SIZE, WIN_MESSAGE, Game, Outcome, move_message
from solong.mapfile import PathArg
from solong.render import DEFAULT_TEXTURE_DIR, Renderer, Textures, key_from_pygame
from solong.validation import parse_map

WINDOW_TITLE = "so_long"
FRAME_RATE = 1000


def _report(game: Game, outcome: Outcome) -> Optional[int]:
    """Print what an outcome calls for; return an exit status if the game ended."""
    if outcome is Outcome.MOVED:
        if not game.bonus:
            sys.stdout.write(move_message(game.moves))
        return None
    if outcome is Outcome.WON:
        if not game.bonus:
            sys.stdout.write(move_message(game.moves))
        sys.stdout.write(WIN_MESSAGE)
        return 0
    if outcome is Outcome.LOST:
        sys.stderr.write(LOSE_MESSAGE)
        return 1
    if outcome is Outcome.QUIT:
        return 0
    return None


def run(
    path: PathArg, bonus: bool = False, texture_dir: PathArg = DEFAULT_TEXTURE_DIR
) -> int:
    """Validate the map at ``path``, open a window and play until the game ends.

    Returns the process exit status.
    """
    grid = parse_map(path, bonus)
    game = Game(grid, bonus)
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode(
                (grid.width * TILE_SIZE, grid.height * TILE_SIZE)
            )
        except pygame.error as exc:
            raise SoLongError("Failed to create window") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        textures = Textures.load(texture_dir, bonus)
        renderer = Renderer(game, textures, surface)
        renderer.draw()
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                key = key_from_pygame(event.key)
                if key is None:
                    continue
                status = _report(game, game.handle_key(key))
                if status is not None:
                    return status
                renderer.draw()
            if bonus:
                renderer.tick()
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run the game; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="so_long", description="Collect everything and reach the exit."
    )
    parser.add_argument("maps", nargs="*", help="path of a .ber map file")
    parser.add_argument(
        "--bonus", action="store_true", help="play with enemies and animations"
    )
    parser.add_argument(
        "--textures",
        default=DEFAULT_TEXTURE_DIR,
        help="directory holding the texture images",
    )
    args = parser.parse_args(argv)
    try:
        if len(args.maps) != 1:
            raise SoLongError("Invalid number of arguments.")
        return run(args.maps[0], args.bonus, args.textures)
    except SoLongError as exc:
        sys.stderr.write(format_error(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
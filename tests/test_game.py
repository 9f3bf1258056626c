import pytest

from solong.errors import MapError
from solong.game import Game, Key, Outcome, move_message
from solong.mapfile import MapGrid


def make(rows, bonus=False):
    return Game(MapGrid([row + "\n" for row in rows]), bonus)


def test_key_codes_match_keyboard_layout():
    game = make(["11111", "10001", "10P01", "10CE1", "11111"])
    assert game.handle_key(13) is Outcome.MOVED
    assert game.player == (2, 1)
    assert game.handle_key(125) is Outcome.MOVED
    assert game.player == (2, 2)
    assert game.handle_key(53) is Outcome.QUIT
    assert game.finished


def test_initial_state():
    game = make(["11111", "1PCE1", "11111"])
    assert game.player == (1, 1)
    assert game.exit == (3, 1)
    assert game.collectibles == 1
    assert game.moves == 0
    assert not game.exit_open


def test_missing_player_rejected():
    with pytest.raises(MapError):
        make(["1111", "1CE1", "1111"])


def test_collect_then_win():
    game = make(["11111", "1PCE1", "11111"])
    assert game.move(1, 0) is Outcome.MOVED
    assert game.collectibles == 0
    assert game.exit_open
    assert game.grid.cell(1, 1) == "0"
    assert game.move(1, 0) is Outcome.WON
    assert game.moves == 2
    assert game.finished


def test_wall_blocks_move():
    game = make(["11111", "1PCE1", "11111"])
    assert game.move(0, -1) is Outcome.IGNORED
    assert game.moves == 0
    assert game.player == (1, 1)


def test_exit_without_collectibles_does_not_win():
    game = make(["111111", "1PEC01", "111111"])
    assert game.move(1, 0) is Outcome.MOVED
    assert game.move(1, 0) is Outcome.MOVED
    assert game.grid.cell(2, 1) == "E"
    assert game.exit_open
    assert game.move(-1, 0) is Outcome.WON


def test_collectible_counted_once():
    game = make(["111111", "1PC0E1", "1C0001", "111111"])
    game.move(1, 0)
    game.move(1, 0)
    game.move(-1, 0)
    assert game.collectibles == 1
    assert game.grid.cell(2, 1) == "0"


def test_enemy_loses_in_bonus():
    game = make(["111111", "1PXCE1", "111111"], bonus=True)
    assert game.enemies() == [(2, 1)]
    assert game.move(1, 0) is Outcome.LOST
    assert game.finished


def test_finished_game_ignores_further_input():
    game = make(["111111", "1PXCE1", "111111"], bonus=True)
    game.move(1, 0)
    moves = game.moves
    assert game.handle_key(Key.D) is Outcome.LOST
    assert game.moves == moves


def test_handle_key_directions():
    game = make(["11111", "10001", "10P01", "10CE1", "11111"])
    assert game.handle_key(Key.UP) is Outcome.MOVED
    assert game.player == (2, 1)
    assert game.handle_key(Key.S) is Outcome.MOVED
    assert game.handle_key(Key.LEFT) is Outcome.MOVED
    assert game.player == (1, 2)
    assert game.handle_key(Key.RIGHT) is Outcome.MOVED
    assert game.player == (2, 2)
    assert game.moves == 4


def test_handle_key_escape_and_unknown():
    game = make(["11111", "1PCE1", "11111"])
    assert game.handle_key(99) is Outcome.IGNORED
    assert game.handle_key(Key.ESC) is Outcome.QUIT
    assert game.finished


def test_is_valid_move_bounds():
    game = make(["11111", "1PCE1", "11111"])
    assert not game.is_valid_move(-1, 1)
    assert not game.is_valid_move(1, 3)
    assert game.is_valid_move(2, 1)


def test_move_message():
    assert move_message(3) == "Move: 3\n"
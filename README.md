# solong

A small top-down tile game. You move a character around a walled map,
pick up every collectible, and then walk onto the exit to win. In bonus
mode there are also enemies on the map, and stepping onto one loses the
game. The exit is drawn open once every item is collected. The move
counter is shown in the window, and the enemies are animated.

## Installation

```
pip install .
```

The game window uses `pygame`.

## Playing

```
solong maps/level.ber
solong --bonus --textures path/to/textures maps/level.ber
```

The command takes exactly one map file, and the file name must end in
`.ber`. It accepts these options:

| Option              | Effect                                                   |
|---------------------|----------------------------------------------------------|
| `--bonus`           | play with enemies, the open exit and the in-window counter |
| `--textures DIR`    | directory holding the texture images (default `textures`) |

Controls:

| Key             | Action     |
|-----------------|------------|
| W / Up arrow    | move up    |
| A / Left arrow  | move left  |
| S / Down arrow  | move down  |
| D / Right arrow | move right |
| Esc             | quit       |

Closing the window also quits. Each move is counted. In the standard mode
every move prints `Move: N` to standard output. In bonus mode the count is
drawn in the top-left corner of the window as `moves : N`.

Winning prints a green `You won!` and exits with status 0. Losing in bonus
mode prints a red `You lost!` to standard error and exits with status 1.
Quitting exits with status 0.

## Map format

A map is a plain text file with one row per line. It uses these characters:

| Char | Meaning                                 |
|------|-----------------------------------------|
| `1`  | wall                                    |
| `0`  | floor                                   |
| `P`  | player start (exactly one)              |
| `E`  | exit (exactly one)                      |
| `C`  | collectible (at least one)              |
| `X`  | enemy (bonus mode only, at least one)   |

The checks run in this order, and the first one that fails rejects the map:

1. the file exists and is not empty;
2. it is no larger than 80 columns by 41 rows;
3. it has exactly one `P`, exactly one `E`, at least one `C`, and in
   bonus mode at least one `X`;
4. every row has the same length. Line endings count, so the last line
   must end with a newline too;
5. it contains only the allowed characters;
6. the first and last rows are all walls, and so are the first and last
   columns;
7. every collectible and the exit can be reached from the player's start
   by moving up, down, left or right. Walls block the way, and in bonus
   mode enemies block it as well.

Example (the file ends with a newline):

```
1111111111
1P0C0000E1
1000X00001
1111111111
```

If the map is rejected, or the game cannot start, the game prints
`Error` on one line and the reason on the next to standard error. It then
exits with status 1.

## Textures

Each tile is 32×32 pixels. Images are looked up in the texture directory
by name, trying the extensions `.xpm`, `.png` and `.bmp` in that order:

| Name           | Used for                      | Mode     |
|----------------|-------------------------------|----------|
| `vampire`      | player                        | both     |
| `wall`         | wall                          | both     |
| `floor`        | floor                         | both     |
| `blood`        | collectible                   | both     |
| `closed_exit`  | exit                          | both     |
| `opened_exit`  | exit once all items are taken | bonus    |
| `enemy0`–`enemy4` | enemy animation frames     | bonus    |

The package does not ship any images. If one is missing or cannot be
loaded, the game stops with `Failed to load textures`.

## Using it as a library

```python
from solong.validation import parse_map
from solong.game import Game, Key, Outcome

grid = parse_map("maps/level.ber", bonus=False)
game = Game(grid, bonus=False)

outcome = game.move(1, 0)          # Outcome.MOVED, IGNORED, WON or LOST
outcome = game.handle_key(Key.S)   # keys also cover Key.ESC -> Outcome.QUIT
print(game.moves, game.player, game.collectibles, game.exit_open)
```

The modules are:

- `solong.mapfile`: `read_map`, `check_filename`, `check_screen_size`,
  `map_width` and the `MapGrid` class (`cell`, `set_cell`, `find`,
  `positions`, `width`, `height`).
- `solong.validation`: the individual checks (`check_components`,
  `check_rectangular`, `check_chars`, `check_walls`, `check_path`),
  `reachable`, and `parse_map`, which runs them all.
- `solong.game`: `Game`, `Key` and `Outcome`.
- `solong.render`: `Textures.load`, `Renderer` (`draw`, `draw_enemies`,
  `tick`), `Animation`, `status_text` and `key_from_pygame`.
- `solong.cli`: `run(path, bonus, texture_dir)` and `main(argv)`.
- `solong.errors`: `SoLongError`, its subclass `MapError`, and
  `format_error`.

Validation problems raise `MapError`. Other fatal problems, such as a bad
file name, a missing file, or textures that cannot be loaded, raise
`SoLongError`.
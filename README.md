# solong

A small top-down tile game. You walk a character around a rectangular map,
pick up every collectible, and then leave through the open exit. Every press
of a movement key counts as a move, and the running count is printed to the
terminal.

## Installing

```
pip install .
```

This installs the `solong` command. It depends on `pygame`.

## Playing

```
solong path/to/level.ber
```

The window is sized to the map, 32 pixels per tile. The tile images are read
from an `assets` directory under the current working directory: `0.xpm`
(floor), `1.xpm` (wall), `e.xpm` (closed exit), `E.xpm` (open exit), `P.xpm`
(player) and the collectible tiles `3.xpm`, `B.xpm`, `U.xpm`, `G.xpm`,
`D.xpm`, `I.xpm`, `R.xpm` and `5.xpm`. Which collectible picture a tile gets
depends on where it lies on the map.

Controls:

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| A     | move left   |
| S     | move down   |
| D     | move right  |
| Esc   | quit        |

Closing the window also quits.

When the game starts it prints `0`; after each movement key it prints the
move count, including presses where a wall or the closed exit blocked the
step. The exit opens once every collectible is picked up. Stepping onto the
open exit prints `Your score is N` (the step onto the exit is not counted)
and ends the game.

## Map format

A map is a plain text file whose lines are the rows of the map. A trailing
newline at the end of the file is ignored. Only these symbols may appear:

| Symbol | Meaning              |
|--------|----------------------|
| `0`    | empty floor          |
| `1`    | wall                 |
| `C`    | collectible          |
| `E`    | exit                 |
| `P`    | player start         |

A map is accepted when:

- it is not empty and every line has the same length;
- it has at least one collectible, exactly one exit and exactly one start;
- it is fully enclosed by walls;
- every collectible and the exit can be reached from the start, walking
  over floor and collectibles only.

The file name should end in `.ber`; a name is refused only when none of its
last three characters matches the one in the same place in `ber`.

Example:

```
1111111111
1P0C00C001
1000110001
10C00000E1
1111111111
```

An invalid map, a wrong number of arguments, or an unreadable tile image
stops the program with `Error` on one line followed by the reason on the
next, for instance `Wrong file type`, `Empty file`, `Not rectangular`,
`Wrong symbol`, `Not closed` or `Impossible path`. The exit status is then 1.

## Using it as a library

- `solong.mapfile.load_map(path)` checks the name, reads and validates a map
  file and returns a `GameMap` (its `grid`, the player's `(x, y)` start and
  the `ElementCounts`). `parse_map(rows)` does the same for a list of row
  strings. Problems raise `MapError`, a `ValueError`.
- `solong.game.Game.from_map(game_map)` starts a game. `Game.move(direction)`
  takes a `Direction` (`LEFT`, `UP`, `RIGHT`, `DOWN`) and returns a
  `MoveResult`; `Game.handle_key(keycode)` takes a key symbol (`97`, `119`,
  `100`, `115` for a, w, d, s; `65307` for Esc), counts the move, opens the
  exit when no collectibles are left, and returns a `MoveResult`, or `None`
  for keys it does not handle. No window is needed for either.
- `solong.app.run(game, assets_dir)` opens a pygame window and plays a game;
  `Renderer` and `load_tiles(assets_dir)` draw the tiles.
- `solong.xpm.read_xpm(path)` and `parse_xpm(lines)` decode XPM images into
  an `XpmImage` with `width`, `height`, `pixels` and `pixel(x, y)`; bad data
  raises `XpmError`.
- `solong.colors.lookup_color(name)` resolves an X11 colour name, ignoring
  case; `none` gives `-1` and unknown names raise `KeyError`.
- `solong.printf.format_printf(fmt, *args)` formats
  `%c %s %p %d %i %u %x %X %%`; `ft_printf` writes the result to standard
  output and returns its length.

## Running the tests

```
pip install ".[test]"
pytest
```
# snowpath

The logic behind a small tile-based game. A player walks a snowy map, picks up
every present and reaches the exit. This package covers the parts that do not
need a screen.

- **Map loading and validation** (`snowpath.gamemap`). `load_map(path)`
  checks that the file name ends with `.ber` and reads the file. It strips `\n`
  and `\r\n` line endings, then calls `validate(rows)`. `validate` checks these
  things:
  - the map is not empty and is rectangular;
  - every border cell is a wall (`1`);
  - inner cells use only `0 1 C E P M`;
  - there is exactly one player `P` and one exit `E`, and at least one
    present `C`;
  - the exit and every present can be reached from the player. Walls block
    the way.

  Any failure raises `MapError`. A valid map comes back as a frozen `GameMap`.
  It has `rows`, `width`, `height`, `collectibles`, `player_position()` (which
  returns `(x, y)`) and `reachable()` (the set of reachable `(x, y)` cells).
- **Scene layout** (`snowpath.render`). `build_scene(game_map, moves)` places
  one `DrawCommand(sprite, x, y)` for each tile on an 80-pixel grid. It adds the
  move-counter texts and records the exit's pixel position and the enemies'
  cells. `tile_sprite` picks the `Sprite` for a single cell. Border walls use
  `wall.xpm` and inner walls use `trees.xpm`. `sprite_path` gives the file path,
  for example `./images/present.xpm`.
- **XPM decoding** (`snowpath.xpm`).
  - `xpm_file_to_image(path)` reads an XPM file. It blanks out comments, takes
    the quoted strings and decodes them.
  - `xpm_to_image(lines)` decodes a list of those strings.
  - `parse_xpm(lines)` returns `(width, height, rows)`. Transparent (`None`)
    pixels come out as `0xFF000000`.

  Colours may be `#RRGGBB` or X11 names. Malformed data raises `XpmError`.
- **Pixel buffers and colours**.
  - `snowpath.image.Image` is a zero-filled buffer with `set_pixel`,
    `get_pixel` and `row`. Its rows are padded to 32 bits, and it has a chosen
    depth and byte order.
  - `snowpath.colorconv` has `rgb_shifts` and `convert_color`. They map
    `0xRRGGBB` to pixel values for visuals shallower than 24 bits.
  - `snowpath.colors.lookup_color` looks up X11 colour names and ignores
    case.

## Installing

```
pip install .
```

## Checking a map from the command line

```
snowpath-check maps/level1.ber
```

For a valid map, the command prints a line and exits with status 0:

```
maps/level1.ber: 7x3 map, 1 presents
```

For an invalid map, it prints the reason to standard error and exits with
status 1. The reasons are:

- `map's name must end with .ber`
- `map's empty`
- `map's must be rectangular`
- `must be 1 (wall)`
- `map must be 0, 1, C, E, P or M`
- `must have only 1 E and 1 P`
- `must have 1 E, 1 P and least 1 C`
- `invalid map`

A map file looks like this:

```
1111111
1P0C0E1
1111111
```

## Using the library

```python
from snowpath.gamemap import load_map, MapError
from snowpath.render import build_scene

try:
    game_map = load_map("maps/level1.ber")
except MapError as err:
    print("bad map:", err)
else:
    print(game_map.player_position())
    scene = build_scene(game_map, moves=0)
    for draw in scene.draws:
        print(draw.sprite.value, draw.x, draw.y)
```

Decoding a sprite:

```python
from snowpath.xpm import xpm_file_to_image, XpmError

image = xpm_file_to_image("images/present.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

Named colours:

```python
from snowpath.colors import lookup_color

lookup_color("light sky")   # 0x87cefa
lookup_color("none")        # -1
```

## What it does not do

There is no window, no drawing to a screen and no game loop. Keyboard
movement, enemy behaviour, animation playback and win or lose handling are not
included. `build_scene` only describes what would be drawn. `snowpath-check`
validates a map and does not start a game.

## Running the tests

```
pip install ".[test]"
pytest
```
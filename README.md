# cub3d

A small first-person maze explorer drawn with raycasting on a fixed 8×8 grid.
Walls are textured by the side they face, doors can be opened and closed, and
a minimap in the top-left corner shows the grid and the rays cast each frame.
The package also holds a printf-style formatter.

## Installing

```
pip install .
```

This installs the `cub3d` command and its one dependency, pygame.

## Playing

```
cub3d
cub3d --textures path/to/textures
```

The game reads its wall textures from the directory given by `--textures`
(by default `textures` in the current directory): `north.xpm`, `south.xpm`,
`east.xpm`, `west.xpm`, `Tile_04.xpm` for closed doors and `blank.xpm` for
open doors. The window is 960×640.

Controls:

- `W` / `S` — walk forward and backward
- `A` / `D` — step sideways
- `←` / `→` — turn
- moving the mouse more than 90 pixels away from the window centre — turn
- `E` — open or close a door in front of you
- `Esc` — quit

Movement slides along walls rather than passing through them; open doors can
be walked through.

## What it does not do

The level is always the built-in 8×8 grid from `cub3d.world.default_map`;
there is no reading of map or scene files, and the floor and ceiling colours
are fixed.

## Using the pieces

The modules can also be used on their own:

- `cub3d.geometry` — `Vec`, `Player` (with `rotate`), `distance`,
  `limit_angle`, `trgb`, `hex_to_dec`.
- `cub3d.image` — `Image`, an in-memory pixel buffer with `put_pixel`,
  `get_pixel`, `draw_line` (Bresenham) and `draw_straight`.
- `cub3d.world` — `Cell`, `default_map`, `cell_color`, `draw_minimap`.
- `cub3d.raycast` — `Textures`, `Ray`, `horizontal_hit`, `vertical_hit`,
  `cast_ray`, `select_texture` and `render_view`, which draws a whole frame
  into an `Image` and the ray fan onto a minimap `Image`.
- `cub3d.controls` — `Key`, `handle_key`, `handle_wasd`, `handle_mouse`,
  `move_player`, `toggle_door`, which act on a `Player` and a grid.
- `cub3d.game` — `Game`, which holds the state of one game and draws frames
  with `render` and `tick`, and `main`, the command above.
- `cub3d.printf` — `format_string` and `print_formatted`, a formatter for
  `%c %s %p %d %i %u %x %X %%` with the `- 0 . # space +` flags and widths.
  `print_formatted` writes to standard output and returns the printed count.
- `cub3d.printf_args` and `cub3d.printf_flags` — the argument collection and
  single-flag handlers the formatter is built from.

```python
from cub3d.printf import format_string

format_string("[%-5d|%#x]", 42, 255)   # '[42   |0xff]'
```

A frame can be drawn without a window:

```python
from cub3d.game import Game
from cub3d.image import Image
from cub3d.raycast import Textures

tex = Image(32, 32)
game = Game(Textures(tex, tex, tex, tex, tex, tex))
game.render()
game.image.get_pixel(0, 0)   # ceiling colour
```

## Tests

```
pip install .[test]
pytest
```
# cub3d

A small raycasting renderer in the style of early first-person games. The
world is a grid map read from a text file: `0` marks open floor, anything else
is wall. Each screen column casts a ray from the player, finds the nearest
horizontal or vertical grid crossing, and draws a textured wall slice whose
height depends on the distance, corrected for the angle to the view
direction. Next to it, a flat-shaded reference view is drawn from a simple
fixed-step ray march.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, keyboard input and
texture loading.

## Running

```
cub3d [MAP]
```

`MAP` defaults to a file named `map` in the current directory; its first 16
lines are read as the grid. The player starts at cell position (8, 8) facing
along the positive x axis. Four wall textures are loaded from
`textures/T01.xpm` to `textures/T04.xpm` (north, south, east and west faces),
relative to the current directory.

One window, 1600×600, shows the textured view on the left and the reference
view on the right.

Controls:

| Key          | Action              |
|--------------|---------------------|
| `W` / `S`    | move forward / back |
| `←` / `→`    | turn left / right   |
| `Esc`        | quit                |

Closing the window also quits. `A` and `D` are tracked as held keys but do
not move the player.

## What it does not do

- Movement does not check for walls: the player can walk through them.
- There is no scene-file format; the map path is the only option, and the
  start position, texture paths and ceiling and floor colours are fixed.
- There is no sound, no sprites and no game logic beyond moving and turning.

## Using the pieces

- `cub3d.raycast` — `GameMap` (built with `GameMap.from_lines`, read with
  `cell`), `Player`, `Facing`, `Hit`, and the functions `cast_ray`,
  `cast_row_ray`, `cast_column_ray`, `march_ray`, `column_angle` and
  `deg_to_rad`.
- `cub3d.render` — `FrameBuffer` (`put_pixel`, `get_pixel`), `Texture`
  (`color_at`), `slice_bounds`, `draw_wall_section`, `draw_flat_wall_section`
  and `render_frame`.
- `cub3d.game` — `Game` (`press`, `release`, `step`, `render`), the `Input`
  flags, `load_texture` and the `main` entry point.

```python
from cub3d.raycast import GameMap, Player, cast_ray

game_map = GameMap.from_lines([
    "1111",
    "1001",
    "1001",
    "1111",
])
player = Player(x=2.0, y=2.0, direction=0.0)
hit = cast_ray(game_map, player, 0.0)
print(hit.distance, hit.facing, hit.offset)
```

Supporting utilities:

- `cub3d.arena` — `Arena`, which tracks objects by block number and releases
  a block, or everything, at once; usable as a context manager.
- `cub3d.lines` — `LineReader`, which reads lines from a text or binary
  stream through a fixed-size buffer, and `read_lines(path, count)`, which
  pads with `None` past the end of the file.
- `cub3d.strings`, `cub3d.chars` and `cub3d.memory` — string, character and
  byte-buffer helpers with C library semantics.
- `cub3d.output` — number formatting and a small `printf`-style formatter
  (`render_format`, `printf`, `dprintf`) supporting
  `%c %s %p %d %i %u %x %X %%`.

## Tests

```
pip install ".[test]"
pytest
```
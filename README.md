# raycaster

A small first-person raycasting engine built on pygame. You walk around an
8×8 grid map in a 1300×700 window. The walls, ceiling and floor are
textured. A weapon image sits at the bottom of the screen, and you can
switch a rain overlay on and off.

## Installing

```
pip install .
```

## Running

```
raycaster path/to/level.map
```

Run without a map file, the command prints `Usage: raycaster <map_file>`
and exits with status 1. It also exits with status 1 if the map cannot be
opened or is malformed, or if pygame fails to open the window. Close the
window to quit.

### Controls

| Key         | Action                  |
|-------------|-------------------------|
| Left/Right  | Turn (while held)       |
| W / S       | Walk forward / backward |
| A / D       | Strafe left / right     |
| R           | Toggle rain             |

Movement keys act while they are held, and several can be combined. Each
step is checked against the map one axis at a time, so you slide along walls
instead of stopping dead.

## Map format

A map file must hold at least 8 lines, and each of those lines must be at
least 8 characters long. Only the first 8 characters of each line count, and
lines after the eighth are ignored. A `#` or `1` is a wall; any other
character is open floor.

```
########
#......#
#..##..#
#......#
#......#
#..#...#
#......#
########
```

Everything outside the grid counts as wall. The player starts at (3.5, 3.5)
facing 1 radian, so that cell should be open.

## Textures

The files `wall.bmp`, `ceiling.bmp`, `floor.bmp` and `weapon.bmp` are read
from the current directory. If a file cannot be loaded, a message is printed
and a plain 64×64 fill takes its place: grey walls, a light-blue ceiling, a
green floor and a red weapon. The ceiling and floor images are each
stretched over half the screen. The weapon is drawn at twice its size,
centred at the bottom. Wall faces closer to a horizontal grid line are drawn
darker.

## Using it as a library

```python
from raycaster.game_map import load_map
from raycaster.player import Player, movement_vector
from raycaster.raycast import cast_all

game_map = load_map("level.map")
player = Player()
dx, dy = movement_vector(player.angle, True, False, False, False)
player.try_move(game_map, dx, dy)        # -> (moved_x, moved_y)
slices = cast_all(game_map, player, 64, 64)
```

- `raycaster.game_map`: `parse_map(lines)` builds a `GameMap` from any
  iterable of lines. `load_map(path)` reads a file. Both raise `MapError`, a
  `ValueError`, on a missing or malformed map. `GameMap.is_wall(x, y)` tests
  a point. `str(game_map)` draws the grid with `#` and `.`.
- `raycaster.player`: the `Player` dataclass has `x`, `y`, `angle`,
  `rotate(delta)` and `try_move(game_map, dx, dy)`. `movement_vector(...)`
  sums the step for the held movement keys.
- `raycaster.raycast`: `cast_ray` and `cast_all` return `WallSlice` objects.
  Each gives the texture column, the screen top and height, the brightness
  (255 or 130) and the distance to the wall, plus `source_rect` and
  `dest_rect`.
- `raycaster.rain`: `Rain(count, width, height, rng)` holds the raindrops
  (1000 by default, falling 2 to 4 pixels per frame). `update()` moves them,
  and `segments()` yields the line drawn for each drop.
- `raycaster.textures`: `load_texture(path, fallback_color)` and
  `load_textures(directory)` return `Texture` and `TextureSet` objects.
- `raycaster.render`: drawing functions for each layer, and
  `render_scene(...)` to draw a whole frame onto a pygame surface.
- `raycaster.app`: `run(map_path)` opens the game window, and `main(argv)`
  is the command-line entry point.

## What it does not do

The weapon is only a picture. There is no shooting, no enemies or other
objects, no sound, and no saving. Maps are always 8×8, and the start
position is fixed.

## Running the tests

```
pip install .[test]
pytest
```
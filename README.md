# cub3d

A small first-person maze explorer drawn with grid raycasting. A `.cub` file
describes the scene: the wall textures, the floor and ceiling colours and the
map layout. The view is drawn in software and shown in a pygame window.

## Installing

```
pip install .
```

## Running

```
cub3d path/to/scene.cub
```

The window is 1200 by 800 pixels and the field of view is 60 degrees.

Controls:

- `W` / `S`: move forward / backward
- `A` / `D`: strafe left / right
- `Left` / `Right` arrows: turn
- `Escape` or closing the window: quit

You cannot walk into walls or off the edge of the map.

If there are no arguments or more than one, or the scene cannot be used, the
program writes `Error` on one line and a short message on the next, then exits
with status 1. For example, a file name that does not end in `.cub` gives
`file name incorrect`, and a malformed colour gives `Invalid RGB color format`.

## Scene files

A `.cub` file names four wall textures, gives two colours and then lists the map:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE` and `EA` are paths to the wall images. The images are loaded
  with pygame, so any format it can read will work, PNG included.
- `F` and `C` are the floor and ceiling colours, written as `R,G,B`. The file
  needs exactly two commas and three numbers. Each number must be between 0
  and 255, and spaces are allowed around it but not inside it.
- These six elements may come in any order, each only once, with blank lines
  between them. They must all come before the map.
- In the map, `1` is a wall, `0` is open floor and spaces are empty. Exactly
  one of `N`, `S`, `E` or `W` marks where the player starts and which way the
  player faces.
- The map must be closed. The first and last rows may contain only walls and
  spaces, and every open cell must be bordered on all four sides by floor, a
  wall or the start position.
- There may be no blank lines inside the map.

## Using it as a library

```python
from cub3d.parser import parse_cub_file
from cub3d.raycast import cast_ray, move_forward

scene = parse_cub_file("maps/scene.cub")  # raises cub3d.config.CubError if invalid
ray = cast_ray(scene, scene.player.angle)
print(ray.side, ray.dist, ray.wall_x)
move_forward(scene, 5.0)
```

The modules:

- `cub3d.config` holds `Config`, `Player`, `Scene`, the `CubError` exception
  and `to_radian`.
- `cub3d.parser` holds `parse_cub` and `parse_cub_file`, which turn lines or a
  file into a `Scene`. It also holds the single checks they use, among them
  `parse_color`, `validate_map` and `build_map`.
- `cub3d.raycast` holds `cast_ray` and `Ray`, `check_collision`, and the
  movement functions: `move_forward`, `move_backward`, `move_left`,
  `move_right`, `turn_left` and `turn_right`.
- `cub3d.render` draws into a `Frame` of 32-bit RGBA pixels.
  `render_frame(frame, scene, textures)` draws a whole view, and
  `draw_ceil_and_floor` draws only the two background halves. It uses
  `Texture` and `WallTextures`.
- `cub3d.app` holds `load_texture` and `load_textures`, which need pygame.
  It also holds `apply_keys`, which moves the player for a set of held key
  names, and `main`, the command's entry point.
- `cub3d.lineio.read_lines` and `cub3d.textutil` are small reading and text
  helpers that the parser uses.

## What it does not do

It is a viewer for walking through a map. There are no enemies, no weapons,
no sprites or doors, no minimap, no sound and no mouse look.

## Tests

```
pip install .[test]
pytest
```
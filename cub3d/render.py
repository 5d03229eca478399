"""Software rendering of the ray-cast view into an RGBA frame."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass, field
from typing import Optional

from cub3d.config import FOV, TILE_UNIT, Config, Scene, to_radian
from cub3d.raycast import Ray, cast_ray


@dataclass
class Texture:
    """A decoded image: row-major RGBA bytes, four per pixel."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError("pixel data does not match texture dimensions")


@dataclass
class WallTextures:
    """The four wall textures, one per compass direction."""

    north: Optional[Texture] = None
    south: Optional[Texture] = None
    west: Optional[Texture] = None
    east: Optional[Texture] = None


@dataclass
class Frame:
    """A drawing surface of 32-bit RGBA colours, stored row by row."""

    width: int
    height: int
    pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("frame dimensions must not be negative")
        self.pixels = array("I", [0]) * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to an RGBA colour."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour of the pixel at (x, y)."""
        return self.pixels[self._index(x, y)]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.pixels = array("I", [0]) * (self.width * self.height)


def texel_color(texture: Texture, tex_x: int, tex_y: int) -> int:
    """Return the texel at (tex_x, tex_y) as an RGBA integer."""
    offset = (tex_y * texture.width + tex_x) * 4
    red, green, blue, alpha = texture.pixels[offset:offset + 4]
    return (red << 24) | (green << 16) | (blue << 8) | alpha


def wall_texture(textures: WallTextures, ray: Ray) -> Optional[Texture]:
    """Pick the texture for the wall face a ray hit."""
    if ray.side == 0:
        return textures.east if math.cos(ray.angle) > 0 else textures.west
    return textures.south if math.sin(ray.angle) > 0 else textures.north


def draw_ceil_and_floor(frame: Frame, config: Config) -> None:
    """Paint the upper half with the ceiling colour and the lower half with the floor."""
    for y in range(config.height // 2):
        for x in range(config.width):
            frame.put_pixel(x, y, config.ceil_color)
            frame.put_pixel(x, config.height - y - 1, config.floor_color)


def _trunc_half(value: int) -> int:
    return -((-value) // 2) if value < 0 else value // 2


def _draw_wall_column(
    frame: Frame,
    config: Config,
    ray: Ray,
    x: int,
    wall_height: float,
    textures: WallTextures,
) -> None:
    texture = wall_texture(textures, ray)
    if texture is None:
        return
    column_height = int(wall_height)
    start_y = _trunc_half(config.height - column_height)
    end_y = start_y + column_height
    flip = (ray.side == 0 and ray.dx < 0) or (ray.side == 1 and ray.dy > 0)
    tex_x = int(ray.wall_x * texture.width)
    if flip:
        tex_x = texture.width - tex_x - 1
    for y in range(max(start_y, 0), min(end_y, config.height)):
        tex_y = int(((y - start_y) * texture.height) / wall_height)
        frame.put_pixel(x, y, texel_color(texture, tex_x, tex_y))


def render_frame(frame: Frame, scene: Scene, textures: WallTextures) -> None:
    """Draw one complete view of the scene from the player's position."""
    config = scene.config
    frame.clear()
    fov = to_radian(FOV)
    draw_ceil_and_floor(frame, config)
    if config.width <= 0:
        return
    increment = fov / config.width
    start_angle = scene.player.angle - fov / 2
    for x in range(config.width):
        ray = cast_ray(scene, start_angle + x * increment)
        if ray.side == -1 or ray.dist <= 0:
            continue
        wall_height = (config.height * TILE_UNIT) / ray.dist
        _draw_wall_column(frame, config, ray, x, wall_height, textures)
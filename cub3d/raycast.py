"""Grid ray casting and player movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cub3d.config import TILE_UNIT, Config, Scene


@dataclass
class Ray:
    """Result of casting one ray through the map."""

    angle: float
    dx: float = 0.0
    dy: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    wall_x: float = 0.0
    side: int = -1
    dist: float = 0.0
    hit: bool = False


def check_collision(config: Config, map_x: int, map_y: int) -> bool:
    """Return True if the cell is outside the map or a wall."""
    inside = 0 <= map_x < config.map_width and 0 <= map_y < config.map_height
    return not (inside and config.map[map_y][map_x] != "1")


def _cell(value: float) -> int:
    return int(value / TILE_UNIT)


def cast_ray(scene: Scene, angle: float) -> Ray:
    """Cast a ray from the player at the given angle using DDA stepping.

    On a hit, ``dist`` is the fish-eye corrected distance, ``side`` is 0 for a
    vertical grid line and 1 for a horizontal one, and ``wall_x`` is the hit
    position along the wall as a fraction of a tile. Without a hit ``side`` is
    -1 and ``dist`` is the screen height.
    """
    config = scene.config
    player = scene.player
    ray = Ray(angle=angle)

    ray.dx = math.cos(angle)
    ray.dy = math.sin(angle) + 1e-10
    step_x = 1 if ray.dx > 0 else -1
    step_y = 1 if ray.dy > 0 else -1
    if ray.dx == 0:
        ray.delta_dist_x = 1e30
        ray.delta_dist_y = 1e30
    else:
        ray.delta_dist_x = abs(TILE_UNIT / ray.dx)
        ray.delta_dist_y = abs(TILE_UNIT / ray.dy)

    map_x = _cell(player.x)
    map_y = _cell(player.y)
    if ray.dx > 0:
        side_dist_x = ((map_x + 1) * TILE_UNIT - player.x) / ray.dx
    else:
        side_dist_x = (player.x - map_x * TILE_UNIT) / -ray.dx
    if ray.dy > 0:
        side_dist_y = ((map_y + 1) * TILE_UNIT - player.y) / ray.dy
    else:
        side_dist_y = (player.y - map_y * TILE_UNIT) / -ray.dy

    while not ray.hit:
        if side_dist_x < side_dist_y:
            side_dist_x += ray.delta_dist_x
            map_x += step_x
            ray.side = 0
        else:
            side_dist_y += ray.delta_dist_y
            map_y += step_y
            ray.side = 1
        if not (0 <= map_x < config.map_width and 0 <= map_y < config.map_height):
            break
        if config.map[map_y][map_x] == "1":
            ray.hit = True

    if ray.hit:
        if ray.side == 0:
            ray.dist = side_dist_x - ray.delta_dist_x
            wall = player.y + ray.dist * ray.dy
        else:
            ray.dist = side_dist_y - ray.delta_dist_y
            wall = player.x + ray.dist * ray.dx
        ray.wall_x = math.fmod(wall, TILE_UNIT) / TILE_UNIT
        ray.dist *= math.cos(angle - player.angle)
    else:
        ray.dist = config.height
        ray.side = -1
        ray.wall_x = 0.0
    return ray


def _try_move(scene: Scene, direction: float, distance: float) -> None:
    player = scene.player
    new_x = player.x + math.cos(direction) * distance
    new_y = player.y + math.sin(direction) * distance
    if not check_collision(scene.config, _cell(new_x), _cell(new_y)):
        player.x = new_x
        player.y = new_y


def move_forward(scene: Scene, speed: float) -> None:
    """Step along the viewing direction unless that enters a wall."""
    _try_move(scene, scene.player.angle, speed)


def move_backward(scene: Scene, speed: float) -> None:
    """Step against the viewing direction unless that enters a wall."""
    _try_move(scene, scene.player.angle, -speed)


def move_right(scene: Scene, speed: float) -> None:
    """Strafe to the right unless that enters a wall."""
    _try_move(scene, scene.player.angle + math.pi / 2, speed)


def move_left(scene: Scene, speed: float) -> None:
    """Strafe to the left unless that enters a wall."""
    _try_move(scene, scene.player.angle - math.pi / 2, speed)


def turn_right(scene: Scene, rot_speed: float) -> None:
    """Rotate the view clockwise on screen."""
    scene.player.angle += rot_speed


def turn_left(scene: Scene, rot_speed: float) -> None:
    """Rotate the view counter-clockwise on screen."""
    scene.player.angle -= rot_speed
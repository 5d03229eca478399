import math

import pytest

from cub3d.config import TILE_UNIT, Config, Player, Scene
from cub3d.raycast import (
    Ray,
    cast_ray,
    check_collision,
    move_backward,
    move_forward,
    move_left,
    move_right,
    turn_left,
    turn_right,
)

ROOM = ["11111", "10001", "10001", "10001", "11111"]
CENTER = 2 * TILE_UNIT + TILE_UNIT / 2


def make_scene(rows=ROOM, x=CENTER, y=CENTER, angle=0.0):
    config = Config(map=list(rows), map_width=len(rows[0]), map_height=len(rows))
    return Scene(config=config, player=Player(x=x, y=y, angle=angle))


def test_check_collision_cases():
    config = make_scene().config
    assert check_collision(config, 0, 0) is True
    assert check_collision(config, 2, 2) is False
    assert check_collision(config, -1, 2) is True
    assert check_collision(config, 5, 2) is True
    assert check_collision(config, 2, 5) is True


def test_ray_east_hits_vertical_wall():
    ray = cast_ray(make_scene(), 0.0)
    assert isinstance(ray, Ray)
    assert ray.hit is True
    assert ray.side == 0
    assert ray.dist == pytest.approx(96.0)


def test_opposite_rays_are_symmetric_in_room():
    scene = make_scene()
    east = cast_ray(scene, 0.0)
    west = cast_ray(scene, math.pi)
    assert west.side == 0
    assert west.dist == pytest.approx(east.dist, rel=1e-6)


def test_vertical_rays_hit_horizontal_walls():
    scene = make_scene(angle=math.pi / 2)
    south = cast_ray(scene, math.pi / 2)
    north = cast_ray(scene, 3 * math.pi / 2)
    assert south.side == 1
    assert north.side == 1
    assert south.dist == pytest.approx(cast_ray(make_scene(), 0.0).dist, rel=1e-6)
    assert north.dist == pytest.approx(south.dist, rel=1e-6)


def test_wall_x_is_fraction_of_tile():
    scene = make_scene()
    for step in range(16):
        ray = cast_ray(scene, step * math.pi / 8 + 0.1)
        assert ray.hit
        assert 0.0 <= ray.wall_x < 1.0


def test_fisheye_correction_scales_distance():
    scene = make_scene(angle=0.0)
    straight = cast_ray(scene, 0.0)
    slanted = cast_ray(scene, 0.3)
    assert slanted.dist == pytest.approx(straight.dist, rel=1e-6)


def test_ray_leaving_open_map_reports_no_hit():
    scene = make_scene(rows=["000", "000", "000"], x=96.0, y=96.0)
    ray = cast_ray(scene, 0.0)
    assert ray.hit is False
    assert ray.side == -1
    assert ray.dist == scene.config.height
    assert ray.wall_x == 0.0


def test_move_forward_and_backward_round_trip():
    scene = make_scene(angle=0.4)
    move_forward(scene, 5.0)
    assert scene.player.x > CENTER
    move_backward(scene, 5.0)
    assert scene.player.x == pytest.approx(CENTER)
    assert scene.player.y == pytest.approx(CENTER)


def test_move_forward_along_x():
    scene = make_scene(angle=0.0)
    move_forward(scene, 5.0)
    assert scene.player.x == pytest.approx(CENTER + 5.0)
    assert scene.player.y == pytest.approx(CENTER)


def test_strafe_directions():
    scene = make_scene(angle=0.0)
    move_right(scene, 5.0)
    assert scene.player.y == pytest.approx(CENTER + 5.0)
    move_left(scene, 10.0)
    assert scene.player.y == pytest.approx(CENTER - 5.0)
    assert scene.player.x == pytest.approx(CENTER)


def test_move_into_wall_is_blocked():
    scene = make_scene(angle=0.0)
    move_forward(scene, 2.5 * TILE_UNIT)
    assert scene.player.x == CENTER
    assert scene.player.y == CENTER


def test_turning_changes_angle_only():
    scene = make_scene(angle=1.0)
    turn_right(scene, 0.1)
    assert scene.player.angle == pytest.approx(1.1)
    turn_left(scene, 0.3)
    assert scene.player.angle == pytest.approx(0.8)
    assert (scene.player.x, scene.player.y) == (CENTER, CENTER)
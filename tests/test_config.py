import math

import pytest

from cub3d.config import (
    FOV,
    HEIGHT,
    WIDTH,
    Config,
    CubError,
    Player,
    Scene,
    to_radian,
)


def test_to_radian_half_turn():
    assert to_radian(180) == pytest.approx(math.pi)


def test_to_radian_fov_is_third_of_half_turn():
    assert to_radian(FOV) * 3 == pytest.approx(math.pi)


def test_to_radian_zero():
    assert to_radian(0) == 0


def test_to_radian_is_linear():
    assert to_radian(90) * 2 == pytest.approx(to_radian(180))


def test_config_defaults_use_window_size():
    config = Config()
    assert (config.width, config.height) == (WIDTH, HEIGHT)
    assert config.no_texture is None
    assert config.map == []
    assert config.has_player is False


def test_config_maps_are_independent():
    first = Config()
    second = Config()
    first.map.append("111")
    assert second.map == []


def test_scene_holds_config_and_player():
    scene = Scene(player=Player(x=96.0, y=32.0, angle=math.pi))
    assert scene.player.x == 96.0
    assert scene.player.angle == math.pi
    assert scene.config.floor_color == 0


def test_cub_error_message():
    error = CubError("parsing map")
    assert str(error) == "parsing map"
    assert error.message == "parsing map"


def test_cub_error_is_an_exception():
    error = CubError("Missing required elements in .cub file")
    assert isinstance(error, Exception)
    assert error.message == "Missing required elements in .cub file"
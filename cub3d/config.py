"""Scene configuration, player state and shared constants."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

WIDTH = 1200
HEIGHT = 800
FOV = 60
TILE_UNIT = 64


class CubError(Exception):
    """Raised when a scene file or its resources are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class Player:
    """Position in world units and viewing angle in radians."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0


@dataclass
class Config:
    """Everything read from a .cub scene description."""

    width: int = WIDTH
    height: int = HEIGHT
    no_texture: Optional[str] = None
    so_texture: Optional[str] = None
    we_texture: Optional[str] = None
    ea_texture: Optional[str] = None
    floor_color: int = 0
    ceil_color: int = 0
    map: list[str] = field(default_factory=list)
    map_width: int = 0
    map_height: int = 0
    has_player: bool = False


@dataclass
class Scene:
    """A parsed configuration together with the player in it."""

    config: Config = field(default_factory=Config)
    player: Player = field(default_factory=Player)


def to_radian(value: float) -> float:
    """Convert degrees to radians."""
    return value * math.pi / 180.0
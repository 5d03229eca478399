"""Window, input handling and the program entry point."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Collection, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cub3d.config import Config, CubError, Scene  # noqa: E402
from cub3d.parser import parse_cub_file  # noqa: E402
from cub3d.raycast import (  # noqa: E402
    move_backward,
    move_forward,
    move_left,
    move_right,
    turn_left,
    turn_right,
)
from cub3d.render import Frame, Texture, WallTextures, render_frame  # noqa: E402

MOVE_SPEED = 5.0
ROT_SPEED = 0.1
USAGE = "Usage: ./cub3d <map.cub>"

_KEYMAP = {
    "escape": pygame.K_ESCAPE,
    "w": pygame.K_w,
    "s": pygame.K_s,
    "a": pygame.K_a,
    "d": pygame.K_d,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
}


def load_texture(path: str) -> Texture:
    """Load an image file into an RGBA texture."""
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise CubError(f"Cannot load texture {path}") from exc
    width, height = surface.get_size()
    return Texture(width, height, pygame.image.tostring(surface, "RGBA"))


def load_textures(config: Config) -> WallTextures:
    """Load the four wall textures named in the configuration."""
    textures = WallTextures()
    for attr, path, name in (
        ("north", config.no_texture, "north"),
        ("south", config.so_texture, "south"),
        ("west", config.we_texture, "west"),
        ("east", config.ea_texture, "east"),
    ):
        try:
            if path is None:
                raise CubError(f"No {name} texture")
            setattr(textures, attr, load_texture(path))
        except CubError as exc:
            raise CubError(f"Failed to load {name} texture") from exc
    return textures


def apply_keys(scene: Scene, pressed: Collection[str]) -> bool:
    """Move and turn the player for the held keys.

    Keys are named "escape", "w", "s", "a", "d", "left" and "right".
    Returns False when escape is held and the window should close.
    """
    if "w" in pressed:
        move_forward(scene, MOVE_SPEED)
    if "s" in pressed:
        move_backward(scene, MOVE_SPEED)
    if "a" in pressed:
        move_left(scene, MOVE_SPEED)
    if "d" in pressed:
        move_right(scene, MOVE_SPEED)
    if "left" in pressed:
        turn_left(scene, ROT_SPEED)
    if "right" in pressed:
        turn_right(scene, ROT_SPEED)
    return "escape" not in pressed


def _frame_bytes(frame: Frame) -> bytes:
    data = array("I", frame.pixels)
    if sys.byteorder == "little":
        data.byteswap()
    return data.tobytes()


def _held_keys() -> set[str]:
    state = pygame.key.get_pressed()
    return {name for name, code in _KEYMAP.items() if state[code]}


def _run(scene: Scene) -> int:
    config = scene.config
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((config.width, config.height))
        except pygame.error as exc:
            raise CubError("Display initialization failed") from exc
        pygame.display.set_caption("Cub3D")
        textures = load_textures(config)
        frame = Frame(config.width, config.height)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            render_frame(frame, scene, textures)
            image = pygame.image.frombuffer(
                _frame_bytes(frame), (config.width, config.height), "RGBA"
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()
            if not apply_keys(scene, _held_keys()):
                running = False
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer on the scene file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise CubError(USAGE)
        scene = parse_cub_file(args[0])
        return _run(scene)
    except CubError as exc:
        sys.stdout.write(f"Error\n{exc.message}")
        sys.stdout.flush()
        return 1


if __name__ == "__main__":
    sys.exit(main())
"""Reading and validating .cub scene descriptions."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from cub3d.config import TILE_UNIT, Config, CubError, Player, Scene
from cub3d.lineio import read_lines
from cub3d.textutil import c_atoi, split_fields, trim

_TRIM_SET = " \t\n"
_MAP_START = "01NSEW"
_WALKABLE = "01NSEW"
_PLAYER_SYMBOLS = "NSEW"
_COLOR_CHARS = frozenset("0123456789 \t")

_TEXTURE_KEYS = (
    ("NO ", "no_texture"),
    ("SO ", "so_texture"),
    ("WE ", "we_texture"),
    ("EA ", "ea_texture"),
)
_COLOR_KEYS = (
    ("F ", "floor_color"),
    ("C ", "ceil_color"),
)

_SPAWN_ANGLES = {
    "N": 3 * math.pi / 2,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}

BAD_NAME = "file name incorrect"
CANNOT_OPEN = "Cannot open .cub file"
BAD_COLOR = "Invalid RGB color format"
BAD_LINE = "parce error"
BAD_MAP = "parsing map"
MISSING = "Missing required elements in .cub file"


def check_filename(path: str) -> None:
    """Raise CubError unless the path ends with the .cub extension."""
    if not str(path).endswith(".cub"):
        raise CubError(BAD_NAME)


def parse_color(text: str) -> int:
    """Parse an ``R,G,B`` triple into a 32-bit RGBA value with full alpha."""
    fields = split_fields(text, ",")
    if text.count(",") != 2 or len(fields) != 3:
        raise CubError(BAD_COLOR)
    for part in fields:
        if not set(part) <= _COLOR_CHARS or len(part.split()) > 1:
            raise CubError(BAD_COLOR)
    red, green, blue = (c_atoi(part) for part in fields)
    if not all(0 <= channel <= 255 for channel in (red, green, blue)):
        raise CubError(BAD_COLOR)
    return (red << 24) | (green << 16) | (blue << 8) | 0xFF


def is_blank_line(line: str) -> bool:
    """Return True if the line holds nothing but spaces, tabs and newlines."""
    return all(char in _TRIM_SET for char in line)


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def pad_rows(lines: Iterable[str]) -> list[str]:
    """Drop trailing newlines and pad every row with spaces to a common width."""
    stripped = [_strip_newline(line) for line in lines]
    width = max((len(row) for row in stripped), default=0)
    return [row.ljust(width) for row in stripped]


def _border_open(row: str) -> bool:
    return any(char not in _TRIM_SET and char != "1" for char in row)


def check_sides(rows: list[str]) -> bool:
    """Return True if the first or last row holds anything but walls."""
    if not rows:
        return True
    return _border_open(rows[0]) or _border_open(rows[-1])


def _cell(rows: list[str], i: int, j: int) -> str:
    if 0 <= i < len(rows) and 0 <= j < len(rows[i]):
        return rows[i][j]
    return ""


def check_zero(rows: list[str], i: int, j: int) -> bool:
    """Return True if any neighbour of cell (i, j) is outside the playable area."""
    neighbours = ((i, j + 1), (i, j - 1), (i + 1, j), (i - 1, j))
    return any(
        not _cell(rows, row, col) or _cell(rows, row, col) not in _WALKABLE
        for row, col in neighbours
    )


def validate_map(rows: list[str]) -> None:
    """Raise CubError unless the map is closed and holds exactly one player."""
    if not rows or check_sides(rows):
        raise CubError(BAD_MAP)
    found_player = False
    for i, row in enumerate(rows[:-1]):
        for j, char in enumerate(row):
            if char in " \t":
                continue
            if char in _PLAYER_SYMBOLS:
                if found_player:
                    raise CubError(BAD_MAP)
                found_player = True
            if char in _WALKABLE and char != "1" and check_zero(rows, i, j):
                raise CubError(BAD_MAP)
    if not found_player:
        raise CubError(BAD_MAP)


def measure_map(lines: Iterable[str]) -> tuple[int, int]:
    """Return (height, width): the count of non-empty lines and the longest one."""
    height = 0
    width = 0
    for line in lines:
        width = max(width, len(line))
        if line:
            height += 1
    return height, width


def spawn_player(symbol: str, col: int, row: int) -> Optional[Player]:
    """Return a player centred in the cell if the symbol is a spawn point."""
    angle = _SPAWN_ANGLES.get(symbol)
    if angle is None:
        return None
    return Player(
        x=col * TILE_UNIT + TILE_UNIT // 2,
        y=row * TILE_UNIT + TILE_UNIT // 2,
        angle=angle,
    )


def build_map(lines: Iterable[str]) -> tuple[list[str], Optional[Player]]:
    """Build the padded grid, replacing the spawn point with floor.

    Returns the grid rows and the player found in them, if any.
    """
    stripped = [_strip_newline(line) for line in lines]
    _, width = measure_map(stripped)
    grid: list[str] = []
    player: Optional[Player] = None
    for row_index, line in enumerate(line for line in stripped if line):
        cells = []
        for col, char in enumerate(line[:width]):
            spawned = spawn_player(char, col, row_index)
            if spawned is not None:
                player = spawned
                char = "0"
            cells.append(char)
        grid.append("".join(cells).ljust(width))
    return grid, player


def _read_element(config: Config, trimmed: str) -> bool:
    for prefix, attr in _TEXTURE_KEYS:
        if trimmed.startswith(prefix) and getattr(config, attr) is None:
            setattr(config, attr, trim(trimmed[len(prefix):], _TRIM_SET))
            return True
    for prefix, attr in _COLOR_KEYS:
        if trimmed.startswith(prefix) and not getattr(config, attr):
            setattr(config, attr, parse_color(trim(trimmed[len(prefix):], _TRIM_SET)))
            return True
    return False


def _textures_missing(config: Config) -> bool:
    return any(getattr(config, attr) is None for _, attr in _TEXTURE_KEYS)


def _elements_missing(config: Config) -> bool:
    return _textures_missing(config) or not config.ceil_color or not config.floor_color


def parse_cub(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene description into a Scene."""
    config = Config()
    map_lines: list[str] = []
    map_started = False
    for line in lines:
        trimmed = trim(line, _TRIM_SET)
        if not map_started:
            if not trimmed or _read_element(config, trimmed):
                continue
            if trimmed[0] not in _MAP_START:
                raise CubError(BAD_LINE)
            map_started = True
        if _elements_missing(config):
            raise CubError(MISSING)
        if is_blank_line(line):
            raise CubError(BAD_MAP)
        map_lines.append(line)

    validate_map(pad_rows(map_lines))
    grid, player = build_map(map_lines)
    config.map = grid
    config.map_height, config.map_width = measure_map(grid)
    config.has_player = player is not None
    if _textures_missing(config):
        raise CubError(MISSING)
    return Scene(config=config, player=player if player is not None else Player())


def parse_cub_file(path: str) -> Scene:
    """Read and parse a .cub file from disk."""
    check_filename(path)
    try:
        with open(path, "rb") as stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise CubError(CANNOT_OPEN) from exc
    return parse_cub(lines)
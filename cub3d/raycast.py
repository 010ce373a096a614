"""Map, player and ray casting against a grid of wall cells."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_NAME = "CUB3D"
TEST_WINDOW_NAME = "REFERENCE RENDER"
FOV = 60

FLOOR = "0"
EMPTY = " "
MARCH_STEP = 0.02


class Facing(enum.IntEnum):
    """Side of a wall a ray hits."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass
class Player:
    """Position on the map in cell units and viewing direction in degrees."""

    x: float
    y: float
    direction: float = 0.0


@dataclass(frozen=True)
class GameMap:
    """A grid of cells; ``"0"`` is open floor, anything else blocks rays."""

    rows: tuple[str, ...]
    width: int
    height: int

    @classmethod
    def from_lines(cls, lines: Iterable[str | None]) -> GameMap:
        """Build a map from text lines; missing lines become empty rows."""
        rows = tuple("" if line is None else line.rstrip("\r\n") for line in lines)
        width = max((len(row) for row in rows), default=0)
        return cls(rows, width, len(rows))

    def cell(self, x: float, y: float) -> str:
        """Return the cell holding the point, coordinates truncated toward zero.

        Points outside the map read as empty space, which is not floor.
        """
        col, row = int(x), int(y)
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return EMPTY


@dataclass(frozen=True)
class Hit:
    """Where a ray met a wall: corrected distance, wall side and texture offset."""

    distance: float
    facing: Facing
    offset: float


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def cast_row_ray(game_map: GameMap, player: Player, dx: float, dy: float) -> tuple[float, float]:
    """Follow a ray across horizontal grid lines until it enters a wall.

    Returns the distance travelled and the fractional x position of the hit.
    A ray with no vertical component never crosses a row and returns infinity.
    """
    if dy == 0:
        return math.inf, 0.0
    step_x = dx / abs(dy)
    step_y = 1 if dy > 0 else -1
    y = float(int(player.y) + 1) if step_y == 1 else float(int(player.y))
    x = player.x + step_x * abs(player.y - y)
    row_shift = 0 if step_y == 1 else -1
    while (
        0 < x < game_map.width
        and 0 < y < game_map.height
        and game_map.cell(x, int(y) + row_shift) == FLOOR
    ):
        x += step_x
        y += step_y
    return math.hypot(x - player.x, y - player.y), x - int(x)


def cast_column_ray(game_map: GameMap, player: Player, dx: float, dy: float) -> tuple[float, float]:
    """Follow a ray across vertical grid lines until it enters a wall.

    Returns the distance travelled and the fractional y position of the hit.
    A ray with no horizontal component never crosses a column and returns infinity.
    """
    if dx == 0:
        return math.inf, 0.0
    step_y = dy / abs(dx)
    step_x = 1 if dx > 0 else -1
    x = float(int(player.x) + 1) if step_x == 1 else float(int(player.x))
    y = player.y + step_y * abs(player.x - x)
    col_shift = 0 if step_x == 1 else -1
    while (
        0 < x < game_map.width
        and 0 < y < game_map.height
        and game_map.cell(int(x) + col_shift, y) == FLOOR
    ):
        x += step_x
        y += step_y
    return math.hypot(x - player.x, y - player.y), y - int(y)


def cast_ray(game_map: GameMap, player: Player, ray_angle: float) -> Hit:
    """Cast a ray at ``ray_angle`` degrees and return the nearest wall hit.

    The distance is corrected for the angle between the ray and the player's
    view direction.
    """
    radians = deg_to_rad(ray_angle)
    dx, dy = math.cos(radians), math.sin(radians)
    row_distance, row_offset = cast_row_ray(game_map, player, dx, dy)
    column_distance, column_offset = cast_column_ray(game_map, player, dx, dy)
    correction = math.cos(radians - deg_to_rad(player.direction))
    if row_distance < column_distance:
        facing = Facing.NORTH if dy >= 0 else Facing.SOUTH
        return Hit(row_distance * correction, facing, row_offset)
    facing = Facing.EAST if dx >= 0 else Facing.WEST
    return Hit(column_distance * correction, facing, column_offset)


def march_ray(game_map: GameMap, player: Player, ray_angle: float) -> tuple[float, bool]:
    """Step along a ray in small fixed increments until it leaves the floor.

    Returns the distance travelled and whether the last step crossed a row
    boundary (a horizontal wall face) rather than a column one.
    """
    radians = deg_to_rad(ray_angle)
    dx, dy = math.cos(radians), math.sin(radians)
    travelled = 0.0
    while game_map.cell(player.x + dx * travelled, player.y + dy * travelled) == FLOOR:
        travelled += MARCH_STEP
    before = int(player.y + dy * (travelled - MARCH_STEP))
    after = int(player.y + dy * travelled)
    return travelled, before != after


def column_angle(direction: float, column: int, width: int) -> float:
    """Return the ray angle for a screen column, spreading the field of view across ``width``."""
    return direction + (FOV / width) * column - FOV // 2
"""Software rendering of wall slices into 32-bit pixel buffers."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from typing import Mapping, Sequence

from cub3d.raycast import Facing, GameMap, Player, cast_ray, column_angle, march_ray

CEILING_COLOR = 0x11001111
FLOOR_COLOR = 0x11110011
ROW_WALL_COLOR = 0xAAAAAAAA
COLUMN_WALL_COLOR = 0xBBBBBBBB
COLOR_MASK = 0xFFFFFFFF


class FrameBuffer:
    """A width x height image of 32-bit colors stored row by row in ``pixels``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", bytes(4 * width * height))

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the color of a pixel; raises IndexError outside the frame."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class Texture:
    """A width x height image of colors stored row by row."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid texture size {self.width}x{self.height}")
        pixels = tuple(self.pixels)
        if len(pixels) != self.width * self.height:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs "
                f"{self.width * self.height} pixels, got {len(pixels)}"
            )
        object.__setattr__(self, "pixels", pixels)

    def color_at(self, x: int, y: int) -> int:
        """Return the color at a texel; raises IndexError outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside {self.width}x{self.height} texture")
        return self.pixels[y * self.width + x]


def _clamp(value: int, limit: int) -> int:
    return min(max(value, 0), limit - 1)


def slice_bounds(distance: float, height: int) -> tuple[int, int]:
    """Return the height of a wall slice and the row it starts on.

    A non-positive distance fills the whole height. The start is negative when
    the slice is taller than the frame.
    """
    size = int(height * 2 / distance) if distance > 0 else height
    diff = height - size
    start = diff // 2 if diff >= 0 else -((-diff) // 2)
    return size, start


def draw_wall_section(
    frame: FrameBuffer,
    x: int,
    distance: float,
    texture: Texture,
    facing: Facing,
    offset: float,
) -> None:
    """Draw one textured column: ceiling, wall slice, then floor."""
    size, start = slice_bounds(distance, frame.height)
    if facing in (Facing.NORTH, Facing.WEST):
        offset = 1 - offset
    tex_x = _clamp(int(texture.width * offset), texture.width)
    scale = texture.height / size if size else 0.0
    for row in range(frame.height):
        if row < start:
            color = CEILING_COLOR
        elif row > size + start:
            color = FLOOR_COLOR
        else:
            tex_y = _clamp(int(scale * (row - start)), texture.height)
            color = texture.color_at(tex_x, tex_y)
        frame.put_pixel(x, row, color)


def draw_flat_wall_section(frame: FrameBuffer, x: int, distance: float, color: int) -> None:
    """Draw one column with a single wall color between ceiling and floor."""
    size, start = slice_bounds(distance, frame.height)
    for row in range(frame.height):
        if row < start:
            frame.put_pixel(x, row, CEILING_COLOR)
        elif row > size + start:
            frame.put_pixel(x, row, FLOOR_COLOR)
        else:
            frame.put_pixel(x, row, color)


def render_frame(
    frame: FrameBuffer,
    reference: FrameBuffer | None,
    game_map: GameMap,
    player: Player,
    textures: Mapping[Facing, Texture],
) -> None:
    """Render every column after the first into ``frame``.

    When ``reference`` is given, a flat-shaded view from fixed-step ray
    marching is drawn into it as well.
    """
    for column in range(1, frame.width):
        angle = column_angle(player.direction, column, frame.width)
        if reference is not None:
            distance, row_hit = march_ray(game_map, player, angle)
            color = ROW_WALL_COLOR if row_hit else COLUMN_WALL_COLOR
            draw_flat_wall_section(reference, column, distance, color)
        hit = cast_ray(game_map, player, angle)
        draw_wall_section(frame, column, hit.distance, textures[hit.facing], hit.facing, hit.offset)
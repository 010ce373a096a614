"""Game state, keyboard input and the main loop."""

from __future__ import annotations

import enum
import math
import os
import sys
from typing import Mapping, Sequence

import pygame

from cub3d.lines import read_lines
from cub3d.raycast import (
    TEST_WINDOW_NAME,
    WINDOW_HEIGHT,
    WINDOW_NAME,
    WINDOW_WIDTH,
    Facing,
    GameMap,
    Player,
    deg_to_rad,
)
from cub3d.render import FrameBuffer, Texture, render_frame

KEY_ESC = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_W = 119
KEY_S = 115
KEY_D = 100
KEY_A = 97

MOVE_STEP = 0.1
TURN_STEP = 0.5

MAP_PATH = "map"
MAP_ROWS = 16
START_X = 8.0
START_Y = 8.0
TEXTURE_PATHS = {
    Facing.NORTH: "textures/T01.xpm",
    Facing.SOUTH: "textures/T02.xpm",
    Facing.EAST: "textures/T03.xpm",
    Facing.WEST: "textures/T04.xpm",
}


class Input(enum.IntFlag):
    """Keys currently held down."""

    NONE = 0
    LEFT = 0b000001
    RIGHT = 0b000010
    W = 0b000100
    A = 0b001000
    S = 0b010000
    D = 0b100000


_KEY_FLAGS = {
    KEY_LEFT: Input.LEFT,
    KEY_RIGHT: Input.RIGHT,
    KEY_W: Input.W,
    KEY_S: Input.S,
    KEY_D: Input.D,
    KEY_A: Input.A,
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_UP: KEY_UP,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_w: KEY_W,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_a: KEY_A,
}


class Game:
    """A map, the player on it, wall textures and the frames rendered from them."""

    def __init__(
        self,
        game_map: GameMap,
        player: Player,
        textures: Mapping[Facing, Texture],
    ) -> None:
        self.game_map = game_map
        self.player = player
        self.textures = dict(textures)
        self.input = Input.NONE
        self.frame = FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.reference: FrameBuffer | None = FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)

    def press(self, keycode: int) -> None:
        """Record a key press; Escape ends the program."""
        if keycode == KEY_ESC:
            raise SystemExit(0)
        self.input |= _KEY_FLAGS.get(keycode, Input.NONE)

    def release(self, keycode: int) -> None:
        """Record a key release; Escape ends the program."""
        if keycode == KEY_ESC:
            raise SystemExit(0)
        self.input &= ~_KEY_FLAGS.get(keycode, Input.NONE)

    def step(self) -> None:
        """Move and turn the player from the held keys, then render."""
        radians = deg_to_rad(self.player.direction)
        if self.input & Input.W:
            self.player.x += math.cos(radians) * MOVE_STEP
            self.player.y += math.sin(radians) * MOVE_STEP
        elif self.input & Input.S:
            self.player.x -= math.cos(radians) * MOVE_STEP
            self.player.y -= math.sin(radians) * MOVE_STEP
        if self.input & Input.LEFT:
            self.player.direction -= TURN_STEP
        elif self.input & Input.RIGHT:
            self.player.direction += TURN_STEP
        self.render()

    def render(self) -> None:
        """Render the current view into the frame buffers."""
        render_frame(self.frame, self.reference, self.game_map, self.player, self.textures)


def load_texture(path: str | os.PathLike) -> Texture:
    """Load an image file as a texture of 0xRRGGBB colors."""
    surface = pygame.image.load(os.fspath(path))
    width, height = surface.get_size()
    pixels = []
    for y in range(height):
        for x in range(width):
            color = surface.get_at((x, y))
            pixels.append((color.r << 16) | (color.g << 8) | color.b)
    return Texture(width, height, pixels)


def _to_rgb(frame: FrameBuffer) -> bytes:
    pixels = frame.pixels
    if sys.byteorder == "big":
        pixels = type(pixels)(pixels.typecode, pixels)
        pixels.byteswap()
    data = pixels.tobytes()
    rgb = bytearray(frame.width * frame.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _blit(screen, frame: FrameBuffer, left: int) -> None:
    image = pygame.image.frombuffer(_to_rgb(frame), (frame.width, frame.height), "RGB")
    screen.blit(image, (left, 0))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window on a map file and run until Escape or the window closes."""
    args = list(sys.argv[1:] if argv is None else argv)
    map_path = args[0] if args else MAP_PATH
    game_map = GameMap.from_lines(read_lines(map_path, MAP_ROWS))
    pygame.init()
    try:
        textures = {facing: load_texture(path) for facing, path in TEXTURE_PATHS.items()}
        game = Game(game_map, Player(START_X, START_Y, 0.0), textures)
        screen = pygame.display.set_mode((WINDOW_WIDTH * 2, WINDOW_HEIGHT))
        pygame.display.set_caption(f"{WINDOW_NAME} | {TEST_WINDOW_NAME}")
        game.render()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key in _PYGAME_KEYS:
                    game.press(_PYGAME_KEYS[event.key])
                elif event.type == pygame.KEYUP and event.key in _PYGAME_KEYS:
                    game.release(_PYGAME_KEYS[event.key])
            game.step()
            _blit(screen, game.frame, 0)
            if game.reference is not None:
                _blit(screen, game.reference, WINDOW_WIDTH)
            pygame.display.flip()
    except SystemExit as stop:
        return int(stop.code or 0)
    finally:
        pygame.quit()
import math

import pygame
import pytest

from cub3d.game import (
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    MOVE_STEP,
    TURN_STEP,
    Game,
    Input,
    load_texture,
    main,
)
from cub3d.raycast import WINDOW_HEIGHT, WINDOW_WIDTH, Facing, GameMap, Player
from cub3d.render import (
    CEILING_COLOR,
    COLUMN_WALL_COLOR,
    FLOOR_COLOR,
    ROW_WALL_COLOR,
    FrameBuffer,
    Texture,
)


def _walled_map(size=16):
    rows = ["1" * size] + ["1" + "0" * (size - 2) + "1" for _ in range(size - 2)] + ["1" * size]
    return GameMap.from_lines(rows)


def _textures():
    return {facing: Texture(2, 2, [10 + facing, 20 + facing, 30 + facing, 40 + facing]) for facing in Facing}


def _game(direction=0.0):
    game = Game(_walled_map(), Player(8.0, 8.0, direction), _textures())
    game.frame = FrameBuffer(8, 6)
    game.reference = FrameBuffer(8, 6)
    return game


def test_new_game_has_no_input_and_window_sized_frames():
    game = Game(_walled_map(), Player(8.0, 8.0), _textures())
    assert game.input == Input.NONE
    assert (game.frame.width, game.frame.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert (game.reference.width, game.reference.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)


@pytest.mark.parametrize(
    "keycode, flag",
    [
        (KEY_LEFT, Input.LEFT),
        (KEY_RIGHT, Input.RIGHT),
        (KEY_W, Input.W),
        (KEY_S, Input.S),
        (KEY_D, Input.D),
        (KEY_A, Input.A),
    ],
)
def test_press_and_release_toggle_flag(keycode, flag):
    game = _game()
    game.press(keycode)
    assert game.input == flag
    game.release(keycode)
    assert game.input == Input.NONE


def test_flags_combine():
    game = _game()
    game.press(KEY_W)
    game.press(KEY_LEFT)
    assert game.input == Input.W | Input.LEFT
    game.release(KEY_W)
    assert game.input == Input.LEFT


def test_unknown_key_is_ignored():
    game = _game()
    game.press(KEY_W)
    game.press(KEY_UP)
    game.release(KEY_UP)
    assert game.input == Input.W


def test_escape_press_exits_with_status_zero():
    game = _game()
    with pytest.raises(SystemExit) as info:
        game.press(KEY_ESC)
    assert info.value.code == 0


def test_escape_release_exits_with_status_zero():
    game = _game()
    with pytest.raises(SystemExit) as info:
        game.release(KEY_ESC)
    assert info.value.code == 0


def test_step_forward_moves_along_direction():
    game = _game()
    game.press(KEY_W)
    game.step()
    assert game.player.x == pytest.approx(8.0 + MOVE_STEP)
    assert game.player.y == pytest.approx(8.0)


def test_step_forward_facing_ninety_degrees_moves_down():
    game = _game(direction=90.0)
    game.press(KEY_W)
    game.step()
    assert game.player.x == pytest.approx(8.0)
    assert game.player.y == pytest.approx(8.0 + MOVE_STEP)


def test_forward_then_back_returns_to_start():
    game = _game(direction=37.0)
    game.press(KEY_W)
    game.step()
    game.release(KEY_W)
    game.press(KEY_S)
    game.step()
    assert game.player.x == pytest.approx(8.0)
    assert game.player.y == pytest.approx(8.0)


def test_forward_wins_over_backward():
    game = _game()
    game.press(KEY_W)
    game.press(KEY_S)
    game.step()
    assert game.player.x == pytest.approx(8.0 + MOVE_STEP)


def test_turning():
    game = _game()
    game.press(KEY_LEFT)
    game.step()
    assert game.player.direction == pytest.approx(-TURN_STEP)
    game.release(KEY_LEFT)
    game.press(KEY_RIGHT)
    game.step()
    game.step()
    assert game.player.direction == pytest.approx(TURN_STEP)


def test_left_wins_over_right():
    game = _game()
    game.press(KEY_LEFT)
    game.press(KEY_RIGHT)
    game.step()
    assert game.player.direction == pytest.approx(-TURN_STEP)


def test_step_without_input_keeps_player():
    game = _game(direction=12.0)
    game.step()
    assert (game.player.x, game.player.y, game.player.direction) == (8.0, 8.0, 12.0)


def test_render_fills_columns_after_the_first():
    game = _game()
    game.render()
    frame, reference = game.frame, game.reference
    assert frame.get_pixel(0, 0) == 0
    assert frame.get_pixel(1, 0) == CEILING_COLOR
    assert frame.get_pixel(1, frame.height - 1) == FLOOR_COLOR
    texels = {color for texture in game.textures.values() for color in texture.pixels}
    wall_rows = [frame.get_pixel(1, row) for row in range(frame.height)]
    assert any(color in texels for color in wall_rows)
    assert reference.get_pixel(0, 0) == 0
    assert reference.get_pixel(1, 0) == CEILING_COLOR
    ref_rows = {reference.get_pixel(1, row) for row in range(reference.height)}
    assert ref_rows & {ROW_WALL_COLOR, COLUMN_WALL_COLOR}


def test_render_without_reference():
    game = _game()
    game.reference = None
    game.render()
    assert game.frame.get_pixel(game.frame.width - 1, 0) == CEILING_COLOR


def test_load_texture_reads_colors(tmp_path):
    surface = pygame.Surface((2, 1))
    surface.fill((0, 0, 0))
    surface.set_at((0, 0), (255, 0, 0))
    surface.set_at((1, 0), (0, 0, 255))
    path = tmp_path / "tex.bmp"
    pygame.image.save(surface, str(path))
    texture = load_texture(path)
    assert (texture.width, texture.height) == (2, 1)
    assert texture.color_at(0, 0) == 0xFF0000
    assert texture.color_at(1, 0) == 0x0000FF


def test_load_texture_missing_file(tmp_path):
    with pytest.raises((FileNotFoundError, pygame.error)):
        load_texture(tmp_path / "absent.bmp")


def test_main_missing_map(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing_map")])


def test_turn_then_forward_follows_new_direction():
    game = _game()
    game.player.direction = 180.0
    game.press(KEY_W)
    game.step()
    assert game.player.x == pytest.approx(8.0 + math.cos(math.pi) * MOVE_STEP)
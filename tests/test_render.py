import random

import pygame
import pytest

from dreamblocks.constants import (
    BLOCK_WIDTH_PIXELS,
    FIELD_LEFT,
    FIELD_TOP,
    TETROMINO_COLORS,
    TETROMINO_INFOS,
    BlockColor,
    TetrominoType,
    rgb,
    rgba,
)
from dreamblocks.game import Game
from dreamblocks.render import (
    Renderer,
    active_block_positions,
    cell_center,
    field_block_positions,
    ghost_tiles,
    hold_block_positions,
    hud_lines,
)


@pytest.fixture
def game():
    return Game(random.Random(5))


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((640, 480)), None)


def test_cell_center_layout():
    x, y = cell_center(3, 1)
    assert x - BLOCK_WIDTH_PIXELS // 2 == FIELD_LEFT
    assert y - BLOCK_WIDTH_PIXELS // 2 == FIELD_TOP
    assert cell_center(4, 1)[1] - y == BLOCK_WIDTH_PIXELS
    assert cell_center(3, 2)[0] - x == BLOCK_WIDTH_PIXELS


def test_field_blocks_hide_border(game):
    assert field_block_positions(game) == []
    game.field[22][1] = BlockColor.RED
    assert field_block_positions(game) == [(*cell_center(22, 1), BlockColor.RED)]


def test_active_and_ghost_positions(game):
    assert active_block_positions(game) == []
    assert ghost_tiles(game) == []
    game.spawn(TetrominoType.T)
    active = active_block_positions(game)
    ghost = ghost_tiles(game)
    assert len(active) == 4
    assert len(ghost) == 4
    shift = game.hard_drop_distance * BLOCK_WIDTH_PIXELS
    assert sorted((x, y + shift) for x, y in active) == sorted(ghost)


def test_hold_positions(game):
    assert hold_block_positions(game) == []
    game.held = TETROMINO_INFOS[TetrominoType.I]
    positions = hold_block_positions(game)
    assert len(positions) == 4
    assert len({y for _, y in positions}) == 1


def test_hud_lines(game):
    game.score = 1234
    texts = [text for _, _, text in hud_lines(game)]
    assert "Score" in texts and "1234" in texts
    assert "You lost!" not in texts
    game.loss = True
    game.paused = True
    texts = [text for _, _, text in hud_lines(game)]
    assert "You lost!" in texts
    assert "Press START to reset" in texts
    assert "PAUSED" in texts


def test_draw_square_opaque(renderer):
    renderer.draw_square(20, 10, 20, 10, rgb(0xFF0000))
    assert renderer.surface.get_at((15, 15)) == pygame.Color(255, 0, 0, 255)
    assert renderer.surface.get_at((25, 25)) == pygame.Color(0, 0, 0, 255)


def test_draw_square_translucent_blends(renderer):
    renderer.draw_square_centered_on(50, 50, 10, 10, rgba(0xFFFFFF, 128))
    red = renderer.surface.get_at((50, 50)).r
    assert 100 < red < 160


def test_draw_block_center_is_base(renderer):
    colors = TETROMINO_COLORS[BlockColor.GREEN]
    renderer.draw_block(100, 100, colors)
    base = colors.base
    expected = pygame.Color((base >> 16) & 0xFF, (base >> 8) & 0xFF, base & 0xFF)
    assert renderer.surface.get_at((100, 100)) == expected


def test_draw_text_covers_area(renderer):
    rect = renderer.draw_text(50, 300, "Score")
    assert rect.width > 0 and rect.height > 0
    assert rect.bottom > 300 - renderer.font.get_ascent()


def test_draw_frame(renderer, game):
    game.advance()
    renderer.draw_frame(game)
    assert renderer.surface.get_at((5, 5)) == pygame.Color(0xC9, 0xC3, 0xFF)
    base = TETROMINO_COLORS[game.active.info.color].base
    expected = pygame.Color((base >> 16) & 0xFF, (base >> 8) & 0xFF, base & 0xFF)
    x, y = active_block_positions(game)[0]
    assert renderer.surface.get_at((x, y)) == expected
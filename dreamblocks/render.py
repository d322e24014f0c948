"""Screen layout of the game and drawing it with pygame."""

from __future__ import annotations

import pygame

from .constants import (
    BLOCK_WIDTH_PIXELS,
    BOTTOM_VISIBLE_ROW_INDEX,
    FIELD_BOTTOM,
    FIELD_HEIGHT_PIXELS,
    FIELD_LEFT,
    FIELD_RIGHT,
    FIELD_TOP,
    FIELD_WIDTH_PIXELS,
    LEFT_VISIBLE_COLUMN_INDEX,
    RIGHT_VISIBLE_COLUMN_INDEX,
    SCREEN_HEIGHT_PIXELS,
    SCREEN_WIDTH_PIXELS,
    TETROMINO_COLORS,
    TOP_VISIBLE_ROW_INDEX,
    BlockColor,
    BlockColorSet,
    rgb,
    rgba,
)
from .game import Game

HOLD_LEFT = 50
HOLD_TOP = 50
BACKGROUND = rgb(0xC9C3FF)
BORDER_COLOR = rgb(0xFFFFFF)
GRID_COLOR = rgba(0x000000, 160)
GHOST_COLOR = rgba(0xFFFFFF, 128)
TEXT_COLOR = rgb(0xFFFFFF)
FONT_SIZE = 32

Position = tuple[int, int]


def _visible(x: int, y: int) -> bool:
    return (
        TOP_VISIBLE_ROW_INDEX <= y <= BOTTOM_VISIBLE_ROW_INDEX
        and LEFT_VISIBLE_COLUMN_INDEX <= x <= RIGHT_VISIBLE_COLUMN_INDEX
    )


def cell_center(row: int, col: int) -> Position:
    """Return the pixel centre of a field cell."""
    half = BLOCK_WIDTH_PIXELS // 2
    x = FIELD_LEFT + BLOCK_WIDTH_PIXELS * (col - LEFT_VISIBLE_COLUMN_INDEX) + half
    y = FIELD_TOP + BLOCK_WIDTH_PIXELS * (row - TOP_VISIBLE_ROW_INDEX) + half
    return x, y


def field_block_positions(game: Game) -> list[tuple[int, int, BlockColor]]:
    """Return the centre and colour of every visible committed block."""
    return [
        (*cell_center(row, col), BlockColor(game.field[row][col]))
        for row in range(TOP_VISIBLE_ROW_INDEX, BOTTOM_VISIBLE_ROW_INDEX + 1)
        for col in range(LEFT_VISIBLE_COLUMN_INDEX, RIGHT_VISIBLE_COLUMN_INDEX + 1)
        if game.field[row][col] != BlockColor.NONE
    ]


def active_block_positions(game: Game) -> list[Position]:
    """Return the centres of the visible blocks of the falling piece."""
    if game.active is None:
        return []
    return [cell_center(y, x) for x, y in game.active.cells() if _visible(x, y)]


def ghost_tiles(game: Game) -> list[Position]:
    """Return the centres of the visible tiles of the landing preview."""
    piece = game.active
    if piece is None:
        return []
    dx = game.ghost_left_x - piece.left_x
    dy = game.ghost_top_y - piece.top_y
    return [
        cell_center(y + dy, x + dx)
        for x, y in piece.cells()
        if _visible(x + dx, y + dy)
    ]


def hold_block_positions(game: Game) -> list[Position]:
    """Return the centres of the blocks of the held piece."""
    if game.held is None:
        return []
    half = BLOCK_WIDTH_PIXELS // 2
    return [
        (
            HOLD_LEFT + BLOCK_WIDTH_PIXELS * (col - 1) + half,
            HOLD_TOP + BLOCK_WIDTH_PIXELS * (row - 1) + half,
        )
        for row, cells in enumerate(game.held.shape)
        for col, value in enumerate(cells)
        if value
    ]


def hud_lines(game: Game) -> list[tuple[int, int, str]]:
    """Return every piece of text on screen as (x, baseline y, text)."""
    lines: list[tuple[int, int, str]] = []
    if game.loss:
        lines.append((50, 200, "You lost!"))
        lines.append((50, 250, "Press START to reset"))
    if game.paused:
        lines.append((50, 200, "PAUSED"))
    lines += [
        (50, 300, "Score"),
        (50, 340, str(game.score)),
        (500, 200, "Level"),
        (500, 240, str(game.level)),
        (500, 300, "Lines"),
        (500, 340, str(game.line_clears)),
    ]
    return lines


def _color(argb: int) -> pygame.Color:
    return pygame.Color(
        (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF
    )


class Renderer:
    """Draws game frames onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        self.surface = surface
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, FONT_SIZE)
        self.font = font

    def draw_square(self, left, right, top, bottom, color: int) -> None:
        """Fill a rectangle with an ARGB colour, blending when translucent."""
        left, right = sorted((int(left), int(right)))
        top, bottom = sorted((int(top), int(bottom)))
        width, height = right - left, bottom - top
        if width <= 0 or height <= 0:
            return
        fill = _color(color)
        if fill.a == 255:
            pygame.draw.rect(self.surface, fill, pygame.Rect(left, top, width, height))
            return
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        layer.fill(fill)
        self.surface.blit(layer, (left, top))

    def draw_square_centered_on(self, center_x, center_y, width, height, color: int) -> None:
        """Fill a rectangle of the given size around a centre point."""
        self.draw_square(
            center_x - width / 2,
            center_x + width / 2,
            center_y - height / 2,
            center_y + height / 2,
            color,
        )

    def _vert_line(self, x, top, bottom, color: int) -> None:
        self.draw_square(x, x + 1, top, bottom, color)

    def _horiz_line(self, left, right, y, color: int) -> None:
        self.draw_square(left, right, y, y + 1, color)

    def draw_block(self, center_x, center_y, color_set: BlockColorSet) -> None:
        """Draw one bevelled block: highlight and shadow halves with a base centre."""
        half = BLOCK_WIDTH_PIXELS // 2
        left, right = center_x - half, center_x + half - 1
        top, bottom = center_y - half, center_y + half - 1
        pygame.draw.polygon(
            self.surface,
            _color(color_set.highlight),
            [(left, top), (left, bottom), (right, top)],
        )
        pygame.draw.polygon(
            self.surface,
            _color(color_set.shadow),
            [(left, bottom), (right, bottom), (right, top)],
        )
        inner = BLOCK_WIDTH_PIXELS * 0.6
        self.draw_square_centered_on(center_x, center_y, inner, inner, color_set.base)

    def draw_text(self, x, y, text: str) -> pygame.Rect:
        """Draw text with its baseline at y and return the area it covers."""
        image = self.font.render(text, True, _color(TEXT_COLOR))
        return self.surface.blit(image, (int(x), int(y) - self.font.get_ascent()))

    def draw_playfield_grid(self) -> None:
        """Draw the field border and the faint lines between cells."""
        for i in range(BLOCK_WIDTH_PIXELS, FIELD_HEIGHT_PIXELS, BLOCK_WIDTH_PIXELS):
            self._horiz_line(FIELD_LEFT, FIELD_RIGHT, FIELD_TOP + i, GRID_COLOR)
        for j in range(BLOCK_WIDTH_PIXELS, FIELD_WIDTH_PIXELS, BLOCK_WIDTH_PIXELS):
            self._vert_line(FIELD_LEFT + j, FIELD_TOP, FIELD_BOTTOM, GRID_COLOR)
        self._horiz_line(FIELD_LEFT, FIELD_RIGHT, FIELD_TOP, BORDER_COLOR)
        self._horiz_line(FIELD_LEFT, FIELD_RIGHT, FIELD_BOTTOM, BORDER_COLOR)
        self._vert_line(FIELD_LEFT, FIELD_TOP, FIELD_BOTTOM, BORDER_COLOR)
        self._vert_line(FIELD_RIGHT, FIELD_TOP, FIELD_BOTTOM, BORDER_COLOR)

    def draw_frame(self, game: Game) -> None:
        """Draw a whole frame, back to front."""
        self.draw_square(0, SCREEN_WIDTH_PIXELS, 0, SCREEN_HEIGHT_PIXELS, BACKGROUND)
        for x, y in ghost_tiles(game):
            self.draw_square_centered_on(
                x, y, BLOCK_WIDTH_PIXELS, BLOCK_WIDTH_PIXELS, GHOST_COLOR
            )
        self.draw_playfield_grid()
        for x, y, color in field_block_positions(game):
            self.draw_block(x, y, TETROMINO_COLORS[color])
        if game.active is not None:
            colors = TETROMINO_COLORS[game.active.info.color]
            for x, y in active_block_positions(game):
                self.draw_block(x, y, colors)
        if game.held is not None:
            colors = TETROMINO_COLORS[game.held.color]
            for x, y in hold_block_positions(game):
                self.draw_block(x, y, colors)
        for x, y, text in hud_lines(game):
            self.draw_text(x, y, text)
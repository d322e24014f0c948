"""Game constants: piece definitions, kick tables, colours, field layout and gravity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Offset = tuple[int, int]
KickTable = tuple[tuple[Offset, ...], ...]


class TetrominoType(IntEnum):
    NONE = 0
    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class BlockColor(IntEnum):
    NONE = 0
    CYAN = 1
    YELLOW = 2
    PURPLE = 3
    GREEN = 4
    RED = 5
    BLUE = 6
    ORANGE = 7
    WHITE = 8


class Rotation(IntEnum):
    DEFAULT = 0
    RIGHT = 1
    TWO = 2
    LEFT = 3

    def clockwise(self) -> "Rotation":
        return Rotation((self + 1) % 4)

    def counterclockwise(self) -> "Rotation":
        return Rotation((self - 1) % 4)


@dataclass(frozen=True)
class TetrominoInfo:
    """Read-only description of a tetromino as it spawns."""

    type: TetrominoType
    color: BlockColor
    size: int
    symbol: str
    shape: tuple[tuple[int, ...], ...]
    perform_kicks: bool
    kicks_cw: KickTable
    kicks_ccw: KickTable
    initial_left_x: int
    initial_top_y: int


@dataclass(frozen=True)
class BlockColorSet:
    """ARGB colours used to draw one bevelled block."""

    base: int
    highlight: int
    shadow: int


def rgb(value: int) -> int:
    """Return an opaque ARGB colour from a 0xRRGGBB value."""
    return (0xFF << 24) | (value & 0xFFFFFF)


def rgba(value: int, alpha: int) -> int:
    """Return an ARGB colour from a 0xRRGGBB value and an alpha of 0-255."""
    return (alpha << 24) | (value & 0xFFFFFF)


SCREEN_WIDTH_PIXELS = 640
SCREEN_HEIGHT_PIXELS = 480
FIELD_HEIGHT_PIXELS = 400  # 20 blocks x 20 pixels
FIELD_WIDTH_PIXELS = 200  # 10 blocks x 20 pixels
BLOCK_WIDTH_PIXELS = 20

# Layering, larger is nearer the viewer.
Z_TEXT = 5.0
Z_GRID_BORDER = 5.0
Z_BLOCKS = 4.0
Z_GRID = 3.7
Z_GHOST = 3.5
Z_BG = 0.1

# Only part of the field matrix is ever shown on screen.
FIELD_ROWS = 24
FIELD_COLUMNS = 12
TOP_VISIBLE_ROW_INDEX = 3
BOTTOM_VISIBLE_ROW_INDEX = 22
LEFT_VISIBLE_COLUMN_INDEX = 1
RIGHT_VISIBLE_COLUMN_INDEX = 10

FIELD_LEFT = SCREEN_WIDTH_PIXELS // 2 - FIELD_WIDTH_PIXELS // 2
FIELD_RIGHT = SCREEN_WIDTH_PIXELS // 2 + FIELD_WIDTH_PIXELS // 2
FIELD_TOP = SCREEN_HEIGHT_PIXELS // 2 - FIELD_HEIGHT_PIXELS // 2
FIELD_BOTTOM = SCREEN_HEIGHT_PIXELS // 2 + FIELD_HEIGHT_PIXELS // 2

# SRS wall kick offsets, each relative to the previous test.
# Indexed by the orientation rotated from; the fifth entry undoes the other four.
KICKS_CW: KickTable = (
    ((-1, 0), (0, 1), (1, -3), (-1, 0), (1, 2)),  # 0 -> R
    ((1, 0), (0, -1), (-1, 3), (1, 0), (-1, -2)),  # R -> 2
    ((1, 0), (0, 1), (-1, -3), (1, 0), (-1, 2)),  # 2 -> L
    ((-1, 0), (0, -1), (1, 3), (-1, 0), (1, -2)),  # L -> 0
)
KICKS_CCW: KickTable = (
    ((1, 0), (0, 1), (-1, -3), (1, 0), (-1, 2)),  # 0 -> L
    ((-1, 0), (0, -1), (1, 3), (-1, 0), (1, -2)),  # L -> 2
    ((-1, 0), (0, 1), (1, -3), (-1, 0), (1, 2)),  # 2 -> R
    ((1, 0), (0, -1), (-1, 3), (1, 0), (-1, -2)),  # R -> 0
)
KICKS_CW_I: KickTable = (
    ((-2, 0), (3, 0), (-3, -1), (3, 3), (-1, -2)),  # 0 -> R
    ((-1, 0), (3, 0), (-3, 2), (3, -3), (-2, 1)),  # R -> 2
    ((2, 0), (-3, 0), (3, 1), (-3, -3), (1, 2)),  # 2 -> L
    ((1, 0), (-3, 0), (3, -2), (-3, 3), (2, -1)),  # L -> 0
)
KICKS_CCW_I: KickTable = (
    ((-1, 0), (3, 0), (-3, 2), (3, -3), (-2, 1)),  # 0 -> L
    ((-2, 0), (3, 0), (-3, -1), (3, 3), (-1, -2)),  # R -> 0
    ((1, 0), (-3, 0), (3, -2), (-3, 3), (2, -1)),  # 2 -> R
    ((2, 0), (-3, 0), (3, 1), (-3, -3), (1, 2)),  # L -> 2
)


def _info(kind, color, shape, kicks_cw, kicks_ccw, perform_kicks=True, left_x=4):
    return TetrominoInfo(
        type=kind,
        color=color,
        size=len(shape),
        symbol=kind.name,
        shape=shape,
        perform_kicks=perform_kicks,
        kicks_cw=kicks_cw,
        kicks_ccw=kicks_ccw,
        initial_left_x=left_x,
        initial_top_y=3,
    )


TETROMINO_INFOS: dict[TetrominoType, TetrominoInfo] = {
    TetrominoType.I: _info(
        TetrominoType.I,
        BlockColor.CYAN,
        ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
        KICKS_CW_I,
        KICKS_CCW_I,
    ),
    TetrominoType.O: _info(
        TetrominoType.O,
        BlockColor.YELLOW,
        ((1, 1), (1, 1)),
        KICKS_CW,
        KICKS_CCW,
        perform_kicks=False,
        left_x=5,
    ),
    TetrominoType.T: _info(
        TetrominoType.T,
        BlockColor.PURPLE,
        ((0, 1, 0), (1, 1, 1), (0, 0, 0)),
        KICKS_CW,
        KICKS_CCW,
    ),
    TetrominoType.S: _info(
        TetrominoType.S,
        BlockColor.GREEN,
        ((0, 1, 1), (1, 1, 0), (0, 0, 0)),
        KICKS_CW,
        KICKS_CCW,
    ),
    TetrominoType.Z: _info(
        TetrominoType.Z,
        BlockColor.RED,
        ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
        KICKS_CW,
        KICKS_CCW,
    ),
    TetrominoType.J: _info(
        TetrominoType.J,
        BlockColor.BLUE,
        ((1, 0, 0), (1, 1, 1), (0, 0, 0)),
        KICKS_CW,
        KICKS_CCW,
    ),
    TetrominoType.L: _info(
        TetrominoType.L,
        BlockColor.ORANGE,
        ((0, 0, 1), (1, 1, 1), (0, 0, 0)),
        KICKS_CW,
        KICKS_CCW,
    ),
}

TETROMINO_COLORS: dict[BlockColor, BlockColorSet] = {
    BlockColor.RED: BlockColorSet(0xFFDC3545, 0xFFF67456, 0xFFBE2457),
    BlockColor.ORANGE: BlockColorSet(0xFFFD7E14, 0xFFFFAA26, 0xFFFD4514),
    BlockColor.YELLOW: BlockColorSet(0xFFFFC107, 0xFFFFF200, 0xFFFF9307),
    BlockColor.GREEN: BlockColorSet(0xFF28A745, 0xFF5EDB32, 0xFF177F59),
    BlockColor.CYAN: BlockColorSet(0xFF05DDFF, 0xFF65FFFA, 0xFF0592FF),
    BlockColor.BLUE: BlockColorSet(0xFF007BFF, 0xFF00D2FF, 0xFF0048FF),
    BlockColor.PURPLE: BlockColorSet(0xFF753EDA, 0xFFB866EC, 0xFF4E32B5),
}


def _backup_row(index: int) -> tuple[BlockColor, ...]:
    wall = BlockColor.CYAN
    if index in (2, FIELD_ROWS - 1):
        return (wall,) * FIELD_COLUMNS
    return (wall,) + (BlockColor.NONE,) * (FIELD_COLUMNS - 2) + (wall,)


# Hidden border of cyan blocks around the playfield gives cheap wall,
# floor and loss collision checks.
FIELD_BACKUP: tuple[tuple[BlockColor, ...], ...] = tuple(
    _backup_row(index) for index in range(FIELD_ROWS)
)

GRAVITY_BY_LEVEL: tuple[float, ...] = (
    0.0,  # unused
    0.01667,
    0.021017,
    0.026977,
    0.035256,
    0.04693,
    0.06361,
    0.0879,
    0.1236,
    0.1775,
    0.2598,
    0.388,
    0.59,
    0.92,
    1.46,
    2.36,
    3.91,
    6.61,
    11.43,
    20.23,
    36.6,
)


def new_field() -> list[list[BlockColor]]:
    """Return a fresh, mutable copy of the default field layout."""
    return [list(row) for row in FIELD_BACKUP]


def gravity_for_level(level: int) -> float:
    """Return the rows fallen per frame at the given level."""
    if not 0 <= level < len(GRAVITY_BY_LEVEL):
        raise ValueError(f"no gravity defined for level {level}")
    return GRAVITY_BY_LEVEL[level]
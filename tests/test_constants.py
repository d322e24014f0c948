import pytest

from dreamblocks.constants import (
    BOTTOM_VISIBLE_ROW_INDEX,
    FIELD_BOTTOM,
    FIELD_COLUMNS,
    FIELD_HEIGHT_PIXELS,
    FIELD_LEFT,
    FIELD_RIGHT,
    FIELD_ROWS,
    FIELD_TOP,
    FIELD_WIDTH_PIXELS,
    KICKS_CCW,
    KICKS_CCW_I,
    KICKS_CW,
    KICKS_CW_I,
    LEFT_VISIBLE_COLUMN_INDEX,
    RIGHT_VISIBLE_COLUMN_INDEX,
    SCREEN_HEIGHT_PIXELS,
    SCREEN_WIDTH_PIXELS,
    TETROMINO_COLORS,
    TETROMINO_INFOS,
    TOP_VISIBLE_ROW_INDEX,
    BlockColor,
    BlockColorSet,
    Rotation,
    TetrominoInfo,
    TetrominoType,
    gravity_for_level,
    new_field,
    rgb,
    rgba,
)


def _spawn_cells(info):
    return [
        (info.initial_left_x + x, info.initial_top_y + y)
        for y, row in enumerate(info.shape)
        for x, cell in enumerate(row)
        if cell
    ]


@pytest.mark.parametrize("value", [0x000000, 0xFFFFFF, 0xC9C3FF, 0x123456])
def test_rgb_is_opaque_and_keeps_colour(value):
    colour = rgb(value)
    assert colour >> 24 == 0xFF
    assert colour & 0xFFFFFF == value


def test_rgb_masks_upper_bits():
    assert rgb(0x12C9C3FF) == rgb(0xC9C3FF)


@pytest.mark.parametrize("alpha", [0, 128, 160, 255])
def test_rgba_alpha_channel(alpha):
    colour = rgba(0xFFFFFF, alpha)
    assert colour >> 24 == alpha
    assert colour & 0xFFFFFF == 0xFFFFFF


def test_rgba_full_alpha_matches_rgb():
    assert rgba(0xC9C3FF, 0xFF) == rgb(0xC9C3FF)


def test_new_field_dimensions():
    field = new_field()
    assert len(field) == FIELD_ROWS
    assert all(len(row) == FIELD_COLUMNS for row in field)


def test_new_field_visible_area_is_empty():
    field = new_field()
    for row in field[TOP_VISIBLE_ROW_INDEX : BOTTOM_VISIBLE_ROW_INDEX + 1]:
        visible = row[LEFT_VISIBLE_COLUMN_INDEX : RIGHT_VISIBLE_COLUMN_INDEX + 1]
        assert all(cell == BlockColor.NONE for cell in visible)


def test_new_field_has_walls_and_floor():
    field = new_field()
    assert all(row[0] == BlockColor.CYAN and row[-1] == BlockColor.CYAN for row in field)
    assert all(cell == BlockColor.CYAN for cell in field[-1])
    assert all(cell == BlockColor.CYAN for cell in field[2])
    assert all(cell == BlockColor.NONE for cell in field[0][1:-1])


def test_new_field_returns_independent_copies():
    first = new_field()
    first[10][5] = BlockColor.RED
    assert new_field()[10][5] == BlockColor.NONE


def test_gravity_level_one_matches_table():
    assert gravity_for_level(1) == pytest.approx(0.01667)
    assert gravity_for_level(20) == pytest.approx(36.6)


def test_gravity_increases_with_level():
    values = [gravity_for_level(level) for level in range(1, 21)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("level", [-1, 21, 100])
def test_gravity_out_of_range(level):
    with pytest.raises(ValueError):
        gravity_for_level(level)


@pytest.mark.parametrize("table", [KICKS_CW, KICKS_CCW, KICKS_CW_I, KICKS_CCW_I])
def test_kick_tests_sum_to_zero(table):
    assert len(table) == 4
    for tests in table:
        assert len(tests) == 5
        assert sum(dx for dx, _ in tests) == 0
        assert sum(dy for _, dy in tests) == 0


def test_all_pieces_defined():
    assert set(TETROMINO_INFOS) == set(TetrominoType) - {TetrominoType.NONE}
    field = new_field()
    for info in TETROMINO_INFOS.values():
        assert all(field[y][x] == BlockColor.NONE for x, y in _spawn_cells(info))


@pytest.mark.parametrize("kind", list(TETROMINO_INFOS))
def test_piece_shape_is_consistent(kind):
    info = TETROMINO_INFOS[kind]
    assert isinstance(info, TetrominoInfo)
    assert info.type == kind
    assert info.symbol == kind.name
    assert len(info.shape) == info.size
    assert all(len(row) == info.size for row in info.shape)
    assert sum(sum(row) for row in info.shape) == 4
    assert info.color in TETROMINO_COLORS
    assert info.initial_top_y == TOP_VISIBLE_ROW_INDEX
    field = new_field()
    cells = _spawn_cells(info)
    assert len(cells) == 4
    assert all(field[y][x] == BlockColor.NONE for x, y in cells)


def test_i_piece_uses_its_own_kicks():
    info = TETROMINO_INFOS[TetrominoType.I]
    assert info.kicks_cw is KICKS_CW_I
    assert info.kicks_ccw is KICKS_CCW_I
    assert info.size == 4
    field = new_field()
    cells = _spawn_cells(info)
    assert {y for _, y in cells} == {info.initial_top_y + 1}
    assert all(field[y][x] == BlockColor.NONE for x, y in cells)


def test_o_piece_does_not_kick():
    info = TETROMINO_INFOS[TetrominoType.O]
    assert info.perform_kicks is False
    assert info.size == 2
    assert all(
        TETROMINO_INFOS[kind].perform_kicks
        for kind in TETROMINO_INFOS
        if kind != TetrominoType.O
    )
    field = new_field()
    cells = _spawn_cells(info)
    assert all(
        LEFT_VISIBLE_COLUMN_INDEX <= x <= RIGHT_VISIBLE_COLUMN_INDEX for x, _ in cells
    )
    assert all(field[y][x] == BlockColor.NONE for x, y in cells)


def test_piece_colours_are_distinct():
    colours = [info.color for info in TETROMINO_INFOS.values()]
    assert len(set(colours)) == len(colours)


def test_red_colour_set_from_palette():
    red = TETROMINO_COLORS[BlockColor.RED]
    assert isinstance(red, BlockColorSet)
    assert red.base == 0xFFDC3545
    assert red.highlight == 0xFFF67456
    assert red.shadow == 0xFFBE2457
    assert red.base == rgb(0xDC3545)
    assert red.highlight == rgb(0xF67456)
    assert red.shadow == rgb(0xBE2457)


def test_all_block_colours_opaque():
    for colour_set in TETROMINO_COLORS.values():
        for value in (colour_set.base, colour_set.highlight, colour_set.shadow):
            assert value >> 24 == 0xFF


def test_field_is_centred_on_screen():
    assert FIELD_RIGHT - FIELD_LEFT == FIELD_WIDTH_PIXELS
    assert FIELD_BOTTOM - FIELD_TOP == FIELD_HEIGHT_PIXELS
    assert FIELD_LEFT + FIELD_RIGHT == SCREEN_WIDTH_PIXELS
    assert FIELD_TOP + FIELD_BOTTOM == SCREEN_HEIGHT_PIXELS
    field = new_field()
    visible_rows = [
        row
        for row in field
        if all(
            cell == BlockColor.NONE
            for cell in row[LEFT_VISIBLE_COLUMN_INDEX : RIGHT_VISIBLE_COLUMN_INDEX + 1]
        )
    ]
    visible_columns = RIGHT_VISIBLE_COLUMN_INDEX - LEFT_VISIBLE_COLUMN_INDEX + 1
    hidden_empty_rows = TOP_VISIBLE_ROW_INDEX - 1
    block_rows = len(visible_rows) - hidden_empty_rows
    assert block_rows == BOTTOM_VISIBLE_ROW_INDEX - TOP_VISIBLE_ROW_INDEX + 1
    assert FIELD_WIDTH_PIXELS // visible_columns == FIELD_HEIGHT_PIXELS // block_rows


def test_rotation_cycles():
    assert Rotation.LEFT.clockwise() == Rotation.DEFAULT
    assert Rotation.DEFAULT.counterclockwise() == Rotation.LEFT
    for rotation in Rotation:
        assert rotation.clockwise().counterclockwise() == rotation
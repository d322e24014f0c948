"""Plain-text dumps of game state for debugging."""

from __future__ import annotations

import logging

from .constants import FIELD_COLUMNS, FIELD_ROWS, BlockColor
from .game import Game
from .input import InputState

logger = logging.getLogger(__name__)

_FIELD_HEADER = "== FIELD + ACTIVE TETRO OVERLAY =="
_FIELD_FOOTER = "=" * 31


def format_bag(game: Game) -> str:
    """Describe the piece bag and the index of the next piece."""
    contents = ", ".join(str(int(kind)) for kind in game.bag)
    current = int(game.bag[game.bag_index])
    return (
        f"Bag: [{contents}]\n"
        f"Current index: {game.bag_index} (tetromino num: {current})"
    )


def format_controller(state: InputState) -> str:
    """Describe the four directions of the d-pad."""
    sections = (
        ("Up", state.dpad_up),
        ("Down", state.dpad_down),
        ("Left", state.dpad_left),
        ("Right", state.dpad_right),
    )
    return "\n".join(
        f"{name}\nPressed: {int(button.pressed)}, "
        f"Just pressed: {int(button.just_pressed)}, "
        f"Just released: {int(button.just_released)}"
        for name, button in sections
    )


def format_field(game: Game) -> str:
    """Draw the whole field: '@' active piece, '#' committed block, '.' empty."""
    active = set(game.active.cells()) if game.active is not None else set()
    lines = [_FIELD_HEADER]
    for row in range(FIELD_ROWS):
        chars = []
        for col in range(FIELD_COLUMNS):
            if (col, row) in active:
                chars.append("@")
            elif game.field[row][col] == BlockColor.NONE:
                chars.append(".")
            else:
                chars.append("#")
        lines.append(f"{row:02d} | {''.join(chars)}")
    lines.append(_FIELD_FOOTER)
    return "\n".join(lines)


def log_game(game: Game) -> None:
    """Write the bag, the controller and the field to the debug log."""
    logger.info("%s", format_bag(game))
    logger.info("%s", format_controller(game.input))
    logger.info("%s", format_field(game))
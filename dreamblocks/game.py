"""Game state and rules: the field, the falling piece, the bag, scoring and levels."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .constants import (
    BOTTOM_VISIBLE_ROW_INDEX,
    FIELD_COLUMNS,
    FIELD_ROWS,
    LEFT_VISIBLE_COLUMN_INDEX,
    RIGHT_VISIBLE_COLUMN_INDEX,
    TETROMINO_INFOS,
    TOP_VISIBLE_ROW_INDEX,
    BlockColor,
    Rotation,
    TetrominoInfo,
    TetrominoType,
    gravity_for_level,
    new_field,
)
from .input import InputState

MOVE_DELAY_FRAMES = 10
HOLD_TRIGGER_THRESHOLD = 128
BAG_SIZE = 7
MAX_LEVEL_FROM_LINES = 15
LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}


@dataclass
class ActivePiece:
    """The falling tetromino: its position, orientation and rotated shape."""

    info: TetrominoInfo
    left_x: int
    top_y: int
    orientation: Rotation = Rotation.DEFAULT
    set: bool = False
    shape: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.shape:
            self.shape = [list(row) for row in self.info.shape]

    @property
    def type(self) -> TetrominoType:
        return self.info.type

    def cells(self) -> list[tuple[int, int]]:
        """Return the (x, y) field coordinates of every filled block."""
        return [
            (self.left_x + x, self.top_y + y)
            for y, row in enumerate(self.shape)
            for x, value in enumerate(row)
            if value
        ]

    def move(self, dx: int, dy: int) -> None:
        """Shift the piece by the given offset."""
        self.left_x += dx
        self.top_y += dy

    def transpose(self) -> None:
        """Flip the shape along its main diagonal."""
        self.shape = [list(column) for column in zip(*self.shape)]

    def reverse_rows(self) -> None:
        """Mirror every row of the shape."""
        self.shape = [row[::-1] for row in self.shape]


class Game:
    """One game: field contents, active piece, hold slot, bag and score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.input = InputState()
        self.active: ActivePiece | None = None
        self.reset()

    def reset(self) -> None:
        """Start a new game on an empty field with a freshly shuffled bag."""
        self.paused = False
        self.field = new_field()
        self.held: TetrominoInfo | None = None
        self.hold_eligible = True
        self.line_clears = 0
        self.score = 0
        self.level = 1
        self.fall_timer = 0.0
        self.loss = False
        self.first_run = True
        if self.active is not None:
            self.active.set = False
        self.hard_drop_distance = 0
        self.ghost_left_x = 0
        self.ghost_top_y = 0
        self.move_timebuffer = MOVE_DELAY_FRAMES
        self.bag_index = 0
        self.bag = [TetrominoType(value) for value in range(1, BAG_SIZE + 1)]
        self.shuffle_bag()

    @property
    def _piece(self) -> ActivePiece:
        if self.active is None:
            raise RuntimeError("no active piece")
        return self.active

    def is_valid(self) -> bool:
        """Return whether the active piece overlaps nothing on the field."""
        return all(
            0 <= y < FIELD_ROWS
            and 0 <= x < FIELD_COLUMNS
            and self.field[y][x] == BlockColor.NONE
            for x, y in self._piece.cells()
        )

    def clear_line(self, row: int) -> None:
        """Remove a row, moving every visible row above it down by one."""
        columns = slice(LEFT_VISIBLE_COLUMN_INDEX, RIGHT_VISIBLE_COLUMN_INDEX + 1)
        for current in range(row, TOP_VISIBLE_ROW_INDEX, -1):
            self.field[current][columns] = self.field[current - 1][columns]
        top = self.field[TOP_VISIBLE_ROW_INDEX]
        top[LEFT_VISIBLE_COLUMN_INDEX - 1] = BlockColor.CYAN
        top[columns] = [BlockColor.NONE] * (
            RIGHT_VISIBLE_COLUMN_INDEX - LEFT_VISIBLE_COLUMN_INDEX + 1
        )
        top[RIGHT_VISIBLE_COLUMN_INDEX + 1] = BlockColor.CYAN

    def check_lines(self) -> None:
        """Clear full rows from the bottom up, then award score and levels."""
        width = RIGHT_VISIBLE_COLUMN_INDEX - LEFT_VISIBLE_COLUMN_INDEX + 1
        cleared = 0
        for row in range(BOTTOM_VISIBLE_ROW_INDEX, TOP_VISIBLE_ROW_INDEX - 1, -1):
            visible = self.field[row][LEFT_VISIBLE_COLUMN_INDEX : RIGHT_VISIBLE_COLUMN_INDEX + 1]
            empty = sum(1 for block in visible if block == BlockColor.NONE)
            if empty == 0:
                self.clear_line(row)
                self.line_clears += 1
                cleared += 1
            elif empty == width:
                # Nothing can sit above an empty row.
                break

        self.score += self.level * LINE_SCORES.get(cleared, 0)

        if self.level < MAX_LEVEL_FROM_LINES:
            self.level = max(self.level, self.line_clears // 10 + 1)

    def shuffle_bag(self) -> None:
        """Shuffle the seven-piece bag in place."""
        self._rng.shuffle(self.bag)

    def update_pause(self) -> None:
        """Toggle pause when start is pressed this frame."""
        if self.input.button_start.just_pressed:
            self.paused = not self.paused

    def advance(self) -> None:
        """Run one frame of game logic using the current input state."""
        if self.loss:
            if self.input.button_start.just_pressed:
                self.reset()
            return

        self.update_pause()
        if self.paused:
            return

        if self.active is not None:
            self.process_movement()
        if self.first_run or self._piece.set:
            self.check_lines()
            self.generate_new_piece()
            self.hold_eligible = True
            self.first_run = False
        self.process_fall()

    def spawn(self, kind: TetrominoType) -> None:
        """Make a fresh piece of the given type the active piece."""
        info = TETROMINO_INFOS[TetrominoType(kind)]
        self.active = ActivePiece(
            info=info, left_x=info.initial_left_x, top_y=info.initial_top_y
        )
        self.hard_drop_distance = self.find_hard_drop_distance()
        self.update_ghost()

    def commit(self) -> None:
        """Write the active piece's blocks into the field."""
        piece = self._piece
        for x, y in piece.cells():
            self.field[y][x] = piece.info.color

    def _after_move(self) -> None:
        self.hard_drop_distance = self.find_hard_drop_distance()
        self.update_ghost()

    def _try_shift(self, dx: int) -> None:
        piece = self._piece
        piece.move(dx, 0)
        if self.is_valid():
            self._after_move()
        else:
            piece.move(-dx, 0)

    def move_left(self) -> None:
        """Move the active piece one column left if there is room."""
        self._try_shift(-1)

    def move_right(self) -> None:
        """Move the active piece one column right if there is room."""
        self._try_shift(1)

    def update_ghost(self) -> None:
        """Place the ghost where the active piece would land."""
        piece = self._piece
        self.ghost_top_y = piece.top_y + self.hard_drop_distance
        self.ghost_left_x = piece.left_x

    def soft_drop(self, award_score: bool, commit: bool) -> None:
        """Move the piece down one row, locking it if it cannot move and commit is set."""
        piece = self._piece
        piece.move(0, 1)
        if not self.is_valid():
            piece.move(0, -1)
            if commit:
                self.commit()
                piece.set = True
            return
        if award_score:
            self.score += 1
        self._after_move()

    def hard_drop(self) -> None:
        """Drop the piece to its landing row and lock it."""
        piece = self._piece
        piece.move(0, self.hard_drop_distance)
        self.commit()
        piece.set = True

    def find_hard_drop_distance(self) -> int:
        """Return how many rows the active piece can fall before landing."""
        piece = self._piece
        original = piece.top_y
        fallen = 0
        try:
            while True:
                piece.top_y += 1
                if not self.is_valid():
                    break
                fallen += 1
        finally:
            piece.top_y = original
        return fallen

    def _rotate(self, clockwise: bool) -> None:
        piece = self._piece
        if piece.type == TetrominoType.O:
            return

        if clockwise:
            piece.transpose()
            piece.reverse_rows()
            kicks = piece.info.kicks_cw[piece.orientation]
            turned = piece.orientation.clockwise()
        else:
            piece.reverse_rows()
            piece.transpose()
            kicks = piece.info.kicks_ccw[piece.orientation]
            turned = piece.orientation.counterclockwise()

        if self.is_valid():
            piece.orientation = turned
            self._after_move()
            return

        *tests, undo = kicks
        for dx, dy in tests:
            piece.move(dx, dy)
            if self.is_valid():
                piece.orientation = turned
                self._after_move()
                return

        piece.move(*undo)
        if clockwise:
            piece.reverse_rows()
            piece.transpose()
        else:
            piece.transpose()
            piece.reverse_rows()

    def rotate_clockwise(self) -> None:
        """Rotate clockwise, trying wall kicks; leave the piece unchanged if none fit."""
        self._rotate(clockwise=True)

    def rotate_counterclockwise(self) -> None:
        """Rotate counter-clockwise, trying wall kicks; leave the piece unchanged if none fit."""
        self._rotate(clockwise=False)

    def hold(self) -> None:
        """Swap the active piece with the held one, or stash it and draw a new one."""
        to_hold = self._piece.info
        if self.held is not None:
            self.spawn(self.held.type)
            self.held = to_hold
        else:
            self.held = to_hold
            self.generate_new_piece()
        self.hold_eligible = False

    def process_movement(self) -> None:
        """Apply this frame's controller input to the active piece."""
        controls = self.input
        if controls.trigger_left >= HOLD_TRIGGER_THRESHOLD and self.hold_eligible:
            self.hold()

        if controls.dpad_up.just_pressed:
            self.hard_drop()
            self.move_timebuffer = MOVE_DELAY_FRAMES
            return

        if self.move_timebuffer > 0:
            self.move_timebuffer -= 1
            return

        if controls.dpad_down.pressed:
            self.soft_drop(award_score=True, commit=True)
            self.move_timebuffer = MOVE_DELAY_FRAMES
        if controls.dpad_left.pressed:
            self.move_left()
            self.move_timebuffer = MOVE_DELAY_FRAMES
        if controls.dpad_right.pressed:
            self.move_right()
            self.move_timebuffer = MOVE_DELAY_FRAMES
        if controls.button_y.just_pressed:
            self.rotate_clockwise()
        if controls.button_x.just_pressed:
            self.rotate_counterclockwise()

    def generate_new_piece(self) -> None:
        """Spawn the next piece from the bag; the game is lost if it does not fit."""
        kind = self.bag[self.bag_index]
        self.bag_index += 1
        if self.bag_index == BAG_SIZE:
            self.bag_index = 0
            self.shuffle_bag()

        self.spawn(kind)
        if not self.is_valid():
            self.loss = True

    def process_fall(self) -> None:
        """Apply gravity, locking the piece when it cannot fall further."""
        self.fall_timer += gravity_for_level(self.level)
        if self.fall_timer <= 1.0:
            return

        blocks = int(self.fall_timer)
        self.fall_timer -= blocks
        blocks = min(blocks, self.hard_drop_distance)

        piece = self._piece
        if blocks == 0:
            self.commit()
            piece.set = True
        else:
            piece.move(0, blocks)
        self.hard_drop_distance = self.find_hard_drop_distance()
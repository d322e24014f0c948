# dreamblocks

A falling-block puzzle game built on pygame. It plays on a 10 × 20 field
and has:

- Super Rotation System rotation, with wall kicks
- a 7-bag randomiser
- a ghost piece that shows where the active piece will land
- a hold slot, usable once per piece
- soft drop, hard drop and gravity that speeds up as the level rises
- line-clear scoring of 100 / 300 / 500 / 800 × level, plus one point
  for each row of soft drop

The level goes up by one for every ten lines cleared, until it reaches 15.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing

```
dreamblocks
```

Options:

| Option         | Meaning                                   |
|----------------|-------------------------------------------|
| `--seed N`     | seed for the piece bag                    |
| `--fps N`      | frames per second (default 60)            |
| `--frames N`   | stop after this many frames               |

Keys:

| Action                      | Key                  |
|-----------------------------|----------------------|
| Move left / right           | ← / →                |
| Soft drop                   | ↓                    |
| Hard drop                   | ↑ or Space           |
| Rotate clockwise            | X                    |
| Rotate counter-clockwise    | Z                    |
| Hold                        | C or Left Shift      |
| Pause / restart after loss  | Enter                |
| Quit                        | Escape               |

After a move, further moves and rotations wait about ten frames, so a held
direction repeats at that rate. A rotation acts once per key press. If a
new piece cannot spawn, the game is lost; press Enter to start again.

## Using it as a library

The game logic does not depend on the display, so you can drive it in code:

```python
import random

from dreamblocks.game import Game
from dreamblocks.input import Button
from dreamblocks.debug import format_field

game = Game(random.Random(1))
game.advance()                          # spawns the first piece
game.input.update({Button.DPAD_UP})     # press up this frame
game.advance()                          # hard drop
print(format_field(game))
print(game.score, game.level, game.line_clears)
```

- `dreamblocks.game` holds `Game` and `ActivePiece`. `Game` offers the
  single actions too: `move_left`, `move_right`, `soft_drop`, `hard_drop`,
  `rotate_clockwise`, `rotate_counterclockwise`, `hold` and `spawn`.
- `dreamblocks.input` holds `Button`, `ButtonState` and `InputState`, which
  tracks per-frame `just_pressed` and `just_released` edges.
- `dreamblocks.constants` holds the piece definitions, kick tables, colours,
  `new_field()` and `gravity_for_level()`.
- `dreamblocks.debug` turns the bag, the controller and the field into
  text (`format_bag`, `format_controller`, `format_field`) and
  `log_game` writes them to the `logging` module.
- `dreamblocks.render` draws a `Game` onto a pygame surface with
  `Renderer.draw_frame`. It also provides `cell_center`,
  `field_block_positions`, `active_block_positions`, `ghost_tiles`,
  `hold_block_positions` and `hud_lines`, which compute screen layout
  without drawing anything.

## What it does not do

There is no sound, no next-piece preview and no saved high scores. The
game is played from the keyboard only; game controllers are not read.
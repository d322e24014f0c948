"""Window, keyboard mapping and main loop."""

from __future__ import annotations

import argparse
import random

import pygame

from .constants import SCREEN_HEIGHT_PIXELS, SCREEN_WIDTH_PIXELS
from .game import Game
from .input import Button
from .render import Renderer

KEY_BINDINGS: dict[int, Button] = {
    pygame.K_UP: Button.DPAD_UP,
    pygame.K_SPACE: Button.DPAD_UP,
    pygame.K_DOWN: Button.DPAD_DOWN,
    pygame.K_LEFT: Button.DPAD_LEFT,
    pygame.K_RIGHT: Button.DPAD_RIGHT,
    pygame.K_a: Button.A,
    pygame.K_b: Button.B,
    pygame.K_z: Button.X,
    pygame.K_x: Button.Y,
    pygame.K_RETURN: Button.START,
}
HOLD_KEYS = (pygame.K_c, pygame.K_LSHIFT)
TRIGGER_MAX = 255


def pressed_buttons(keys) -> set[Button]:
    """Return the controller buttons held, given a key state indexed by key code."""
    return {button for key, button in KEY_BINDINGS.items() if keys[key]}


def _left_trigger(keys) -> int:
    return TRIGGER_MAX if any(keys[key] for key in HOLD_KEYS) else 0


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dreamblocks", description="Falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece bag")
    parser.add_argument("--fps", type=_positive_int, default=60, help="frames per second")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    return parser


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parser().parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH_PIXELS, SCREEN_HEIGHT_PIXELS))
        pygame.display.set_caption("dreamblocks")
        renderer = Renderer(screen, None)
        game = Game(random.Random(args.seed))
        clock = pygame.time.Clock()
        frame = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            keys = pygame.key.get_pressed()
            game.input.update(pressed_buttons(keys), trigger_left=_left_trigger(keys))
            game.advance()
            renderer.draw_frame(game)
            pygame.display.flip()
            clock.tick(args.fps)
            frame += 1
            if args.frames is not None and frame >= args.frames:
                break
    finally:
        pygame.quit()
    return 0
"""Controller state tracking with per-frame press and release edges."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Button(Enum):
    """Digital buttons; each value names the matching InputState attribute."""

    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"
    A = "button_a"
    B = "button_b"
    X = "button_x"
    Y = "button_y"
    START = "button_start"


@dataclass
class ButtonState:
    """State of one button, including whether it changed this frame."""

    current: bool = False
    previous: bool = False
    pressed: bool = False
    just_pressed: bool = False
    just_released: bool = False

    def update(self, is_down_now) -> None:
        """Record the button's state for a new frame."""
        is_down = bool(is_down_now)
        self.previous = self.current
        self.current = is_down
        self.pressed = is_down
        self.just_pressed = not self.previous and is_down
        self.just_released = self.previous and not is_down


@dataclass
class InputState:
    """Everything read from one controller in a frame."""

    port: int = 0
    dpad_up: ButtonState = field(default_factory=ButtonState)
    dpad_down: ButtonState = field(default_factory=ButtonState)
    dpad_left: ButtonState = field(default_factory=ButtonState)
    dpad_right: ButtonState = field(default_factory=ButtonState)
    button_a: ButtonState = field(default_factory=ButtonState)
    button_b: ButtonState = field(default_factory=ButtonState)
    button_x: ButtonState = field(default_factory=ButtonState)
    button_y: ButtonState = field(default_factory=ButtonState)
    button_start: ButtonState = field(default_factory=ButtonState)
    trigger_left: int = 0  # 0..255
    trigger_right: int = 0  # 0..255
    joy_x: int = 0  # -128..127
    joy_y: int = 0  # -128..127

    def button(self, button: Button) -> ButtonState:
        """Return the state of the given button."""
        return getattr(self, button.value)

    def update(
        self,
        pressed: Iterable[Button],
        trigger_left: int = 0,
        trigger_right: int = 0,
        joy_x: int = 0,
        joy_y: int = 0,
    ) -> None:
        """Advance one frame given the buttons held down and the analog values."""
        down = set(pressed)
        for button in Button:
            self.button(button).update(button in down)
        self.trigger_left = trigger_left
        self.trigger_right = trigger_right
        self.joy_x = joy_x
        self.joy_y = joy_y
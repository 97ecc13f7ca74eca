"""A clickable rectangle on a menu screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable

from chunkrunner.input import InputHandler, MouseButton


class ButtonState(IntEnum):
    """How the pointer relates to a button."""

    MOUSE_OUT = 0
    MOUSE_OVER = 1
    CLICKED = 2


@dataclass
class Button:
    """A rectangle that runs ``callback`` when clicked with the left mouse button.

    While the left button stays held over it, the button fires on every
    other update.
    """

    x: int
    y: int
    width: int
    height: int
    callback: Callable[[], Any]
    current_frame: ButtonState = field(default=ButtonState.MOUSE_OUT, init=False)
    _armed: bool = field(default=True, init=False, repr=False)

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies strictly inside the button."""
        return self.x < x < self.x + self.width and self.y < y < self.y + self.height

    def update(self, input_handler: InputHandler) -> None:
        """Read the pointer, update the frame and fire the callback on a click."""
        if not self.contains(*input_handler.mouse_position):
            self.current_frame = ButtonState.MOUSE_OUT
            return
        self.current_frame = ButtonState.MOUSE_OVER
        if input_handler.mouse_button(MouseButton.LEFT):
            if self._armed:
                self.current_frame = ButtonState.CLICKED
                self.callback()
                self._armed = False
            else:
                self._armed = True

    def draw(self, textures: Any, texture_id: str, target: Any) -> None:
        """Draw the texture ``texture_id`` over the button's rectangle."""
        textures.draw(texture_id, self.x, self.y, self.width, self.height, target)
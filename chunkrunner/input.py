"""Keyboard and mouse state gathered from pygame events."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterable

import pygame


class MouseButton(IntEnum):
    """Mouse buttons tracked by the input handler."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


_PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


class InputHandler:
    """Tracks held keys, keys pressed this frame, mouse buttons and pointer position.

    ``scale`` divides window coordinates into logical screen coordinates;
    ``on_quit`` is called when a quit event arrives.
    """

    def __init__(
        self,
        scale: float = 1.0,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.scale = scale
        self.on_quit = on_quit
        self.quit_requested = False
        self.mouse_position: tuple[float, float] = (0.0, 0.0)
        self._mouse_buttons = [False] * len(MouseButton)
        self._held_keys: set[int] = set()
        self._pressed_keys: set[int] = set()

    def update(self, events: Iterable[pygame.event.Event]) -> None:
        """Process every event of one frame."""
        for event in events:
            self.process_event(event)

    def process_event(self, event: pygame.event.Event) -> None:
        """Update the tracked state from a single event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.quit_requested = True
            if self.on_quit is not None:
                self.on_quit()
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            self.mouse_position = (x / self.scale, y / self.scale)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _PYGAME_BUTTONS.get(event.button)
            if button is not None:
                self._mouse_buttons[button] = kind == pygame.MOUSEBUTTONDOWN
        elif kind == pygame.KEYDOWN:
            self._held_keys.add(event.key)
            if not getattr(event, "repeat", 0):
                self._pressed_keys.add(event.key)
        elif kind == pygame.KEYUP:
            self._held_keys.discard(event.key)
            self._pressed_keys.discard(event.key)

    def is_key_down(self, key: int) -> bool:
        """Return True while ``key`` is held."""
        return key in self._held_keys

    def was_key_pressed(self, key: int) -> bool:
        """Return True if ``key`` went down since the pressed keys were last cleared."""
        return key in self._pressed_keys

    def clear_pressed_keys(self) -> None:
        """Forget the keys pressed this frame; held keys stay held."""
        self._pressed_keys.clear()

    def mouse_button(self, button: MouseButton | int) -> bool:
        """Return True while ``button`` is held."""
        return self._mouse_buttons[MouseButton(button)]

    def reset(self) -> None:
        """Release all mouse buttons and move the pointer to the origin."""
        self._mouse_buttons = [False] * len(MouseButton)
        self.mouse_position = (0.0, 0.0)
"""Screens of the game and the stack that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class GameState(ABC):
    """One screen of the game: it updates, draws, and is told when it starts and ends."""

    state_id: ClassVar[str] = ""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the screen by ``dt`` seconds."""

    @abstractmethod
    def render(self, surface: Any) -> None:
        """Draw the screen onto ``surface``."""

    @abstractmethod
    def on_enter(self) -> bool:
        """Prepare the screen; return True on success."""

    @abstractmethod
    def on_exit(self) -> bool:
        """Release the screen; return True if it may be removed."""


class GameStateMachine:
    """A stack of game states in which only the top one runs."""

    def __init__(self) -> None:
        self._states: list[GameState] = []

    def __len__(self) -> int:
        return len(self._states)

    def current(self) -> GameState | None:
        """Return the running state, or None if the stack is empty."""
        return self._states[-1] if self._states else None

    def push_state(self, state: GameState) -> None:
        """Put ``state`` on top of the stack and enter it."""
        self._states.append(state)
        state.on_enter()

    def pop_state(self) -> None:
        """Remove the top state if it agrees to exit."""
        if self._states and self._states[-1].on_exit():
            self._states.pop()

    def change_state(self, state: GameState) -> None:
        """Replace the top state by ``state``.

        The old state is only removed when its id differs from the new one
        and it agrees to exit; the new state is pushed in any case.
        """
        if self._states:
            top = self._states[-1]
            if top.state_id != state.state_id and top.on_exit():
                self._states.pop()
        self._states.append(state)
        state.on_enter()

    def update(self, dt: float) -> None:
        """Update the running state."""
        if self._states:
            self._states[-1].update(dt)

    def render(self, surface: Any) -> None:
        """Draw the running state."""
        if self._states:
            self._states[-1].render(surface)
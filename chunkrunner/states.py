"""The screens of the game: main menu, running level, pause and game over."""

from __future__ import annotations

import math
import random
from abc import abstractmethod
from pathlib import Path
from typing import Any, ClassVar

import pygame

from chunkrunner.button import Button
from chunkrunner.collision import check_collision
from chunkrunner.level import (
    CHUNK_HEIGHT,
    CHUNK_WIDTH,
    FLY_SECONDS,
    INVINCIBLE_SECONDS,
    Collectible,
    CollectibleKind,
    default_obstacles,
    generate_run,
)
from chunkrunner.player import Player
from chunkrunner.state_machine import GameState

WHITE = (255, 255, 255)
MAGENTA = (255, 0, 255)
FONT_FILE = "arial.ttf"


def _load_font(directory: Path | str | None, size: int) -> Any:
    """Load the game font, falling back to pygame's default; None without pygame.font."""
    if not pygame.font.get_init():
        return None
    if directory is not None:
        try:
            return pygame.font.Font(str(Path(directory) / FONT_FILE), size)
        except (OSError, pygame.error):
            pass
    try:
        return pygame.font.Font(None, size)
    except (OSError, pygame.error):
        return None


def _blit_text(surface: Any, font: Any, text: str, color: tuple[int, int, int],
               position: tuple[int, int]) -> None:
    if font is None:
        return
    surface.blit(font.render(text, False, color), position)


class _ButtonScreen(GameState):
    """A full-screen picture with buttons over it."""

    background: ClassVar[str] = ""

    def __init__(self, game: Any) -> None:
        self.game = game
        self.buttons: list[Button] = []

    @abstractmethod
    def _make_buttons(self) -> list[Button]:
        """Create the buttons of this screen."""

    def _open(self) -> bool:
        self.buttons = self._make_buttons()
        return True

    def _close(self) -> bool:
        self.buttons = []
        self.game.input.reset()
        return True

    def _update_buttons(self) -> None:
        for button in self.buttons:
            button.update(self.game.input)

    def _draw_background(self, surface: Any) -> None:
        self.game.textures.draw(self.background, 0, 0, CHUNK_WIDTH, CHUNK_HEIGHT, surface)


class MenuState(_ButtonScreen):
    """The title screen with a play and an exit button."""

    state_id: ClassVar[str] = "MENU"
    background: ClassVar[str] = "menuu"

    def _make_buttons(self) -> list[Button]:
        return [
            Button(128, 56, 128, 40, self._to_play),
            Button(128, 134, 128, 40, self.game.stop),
        ]

    def _to_play(self) -> None:
        self.game.state_machine.change_state(PlayState(self.game))

    def on_enter(self) -> bool:
        return self._open()

    def on_exit(self) -> bool:
        return self._close()

    def update(self, dt: float) -> None:
        self._update_buttons()

    def render(self, surface: Any) -> None:
        self._draw_background(surface)


class PauseState(_ButtonScreen):
    """The pause screen with a resume and a main-menu button."""

    state_id: ClassVar[str] = "PAUSE"
    background: ClassVar[str] = "pause"

    def _make_buttons(self) -> list[Button]:
        return [
            Button(176, 64, 16, 16, self.game.state_machine.pop_state),
            Button(176, 136, 16, 16, self._to_main),
        ]

    def _to_main(self) -> None:
        self.game.state_machine.change_state(MenuState(self.game))

    def on_enter(self) -> bool:
        return self._open()

    def on_exit(self) -> bool:
        return self._close()

    def update(self, dt: float) -> None:
        self._update_buttons()

    def render(self, surface: Any) -> None:
        self._draw_background(surface)


class GameOverState(_ButtonScreen):
    """The end of a run: shows the final score, offers the menu or leaving."""

    state_id: ClassVar[str] = "GAMEOVER"
    background: ClassVar[str] = "gameover"

    def __init__(self, game: Any, score: int) -> None:
        super().__init__(game)
        self.score = score
        self._font = _load_font(game.asset_dir, 35)

    def _make_buttons(self) -> list[Button]:
        return [
            Button(93, 174, 198, 34, self.game.stop),
            Button(93, 132, 198, 34, self._to_main),
        ]

    def _to_main(self) -> None:
        self.game.state_machine.change_state(MenuState(self.game))

    def on_enter(self) -> bool:
        return self._open()

    def on_exit(self) -> bool:
        return self._close()

    def update(self, dt: float) -> None:
        self._update_buttons()

    def render(self, surface: Any) -> None:
        self._draw_background(surface)
        _blit_text(surface, self._font, f"Final Score: {self.score}", MAGENTA, (40, 0))


class PlayState(GameState):
    """A run through a random sequence of chunks."""

    state_id: ClassVar[str] = "PLAY"

    def __init__(self, game: Any, rng: random.Random | None = None) -> None:
        self.game = game
        self.rng = rng if rng is not None else game.rng
        self.obstacles = default_obstacles()
        self.score = 0
        self.player: Player | None = None
        self.chunk_sequence: list[str] = []
        self.pickups: list[list[Collectible]] = []
        self._font = _load_font(game.asset_dir, 20)

    def on_enter(self) -> bool:
        self.player = Player()
        self.chunk_sequence, self.pickups = generate_run(self.rng)
        return True

    def on_exit(self) -> bool:
        self.player = None
        return True

    def update(self, dt: float) -> None:
        player = self.player
        machine = self.game.state_machine
        if player.failed:
            machine.push_state(GameOverState(self.game, self.score))

        if self.game.input.is_key_down(pygame.K_ESCAPE):
            machine.push_state(PauseState(self.game))
            return

        scrolling = player.x >= Player.SCREEN_WIDTH / 2.0
        index = player.step(
            dt,
            self.obstacles,
            self.chunk_sequence,
            self.game.input.is_key_down(pygame.K_SPACE),
        )
        if scrolling:
            self.game.camera_x = player.camera_x
        if 0 <= index < len(self.chunk_sequence):
            self.collect(index)

    def collect(self, chunk_index: int) -> list[Collectible]:
        """Pick up everything in the given chunk that the player touches.

        Returns the pickups collected by this call.
        """
        player = self.player
        taken = []
        for item in self.pickups[chunk_index]:
            if item.collected or not check_collision(
                player.rel_x, player.y, player.width, player.height,
                item.x, item.y, item.width, item.height,
            ):
                continue
            item.collected = True
            taken.append(item)
            self.score += item.kind.points
            if item.kind is CollectibleKind.CARROT:
                player.invincible = True
                player.invincible_time = INVINCIBLE_SECONDS
            elif item.kind is CollectibleKind.TOMATO:
                player.flying = True
                player.fly_time = FLY_SECONDS
        return taken

    def render(self, surface: Any) -> None:
        textures = self.game.textures
        camera_x = self.game.camera_x
        textures.draw_infinite_scrolling(
            self.chunk_sequence, camera_x, 0, CHUNK_WIDTH, CHUNK_HEIGHT, surface
        )

        player = self.player
        _blit_text(surface, self._font, f"Score: {self.score}", WHITE, (20, 10))
        if player.invincible:
            seconds = math.ceil(player.invincible_time)
            _blit_text(surface, self._font, f"Invincible: {seconds}s", WHITE, (20, 30))
        if player.flying:
            seconds = math.ceil(player.fly_time)
            _blit_text(surface, self._font, f"Fly: {seconds}s", WHITE, (20, 50))

        index = player.render(textures, surface)
        if not 0 <= index < len(self.pickups):
            return
        for item in self.pickups[index]:
            if not item.collected:
                screen_x = int(item.x + index * CHUNK_WIDTH - camera_x)
                textures.draw(
                    item.texture_id, screen_x, int(item.y), item.width, item.height, surface
                )
"""The game object that ties the screens together, and the command that runs it."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Any

import pygame

from chunkrunner.input import InputHandler
from chunkrunner.level import CHUNK_HEIGHT, CHUNK_WIDTH
from chunkrunner.state_machine import GameStateMachine
from chunkrunner.states import MenuState
from chunkrunner.textures import TextureManager

ASSETS: tuple[tuple[str, str], ...] = (
    ("map1.png", "chunk0"),
    ("map2.png", "chunk1"),
    ("map3.png", "chunk2"),
    ("map4.png", "chunk3"),
    ("map5.png", "chunk4"),
    ("map6.png", "chunk5"),
    ("map7.png", "chunk6"),
    ("map8.png", "chunk7"),
    ("idle.png", "character"),
    ("den.png", "menuu"),
    ("pause.png", "pause"),
    ("coin.png", "coin"),
    ("apple.png", "apple"),
    ("carrot.png", "carrot"),
    ("tomato.png", "tomato"),
    ("gameover.png", "gameover"),
)

FRAME_RATE = 60
DEFAULT_SCALE = 3


def load_assets(textures: TextureManager, asset_dir: Path | str) -> list[str]:
    """Load every game image from ``asset_dir``; return the ids that could not be loaded."""
    directory = Path(asset_dir)
    missing = []
    for file_name, texture_id in ASSETS:
        try:
            textures.load(directory / file_name, texture_id)
        except (OSError, pygame.error):
            missing.append(texture_id)
    return missing


class Game:
    """Owns the textures, the input, the camera and the stack of screens."""

    def __init__(
        self,
        textures: TextureManager | None = None,
        input_handler: InputHandler | None = None,
        asset_dir: Path | str = "assets",
        rng: random.Random | None = None,
        scale: float = 1.0,
    ) -> None:
        self.textures = textures if textures is not None else TextureManager()
        self.input = (
            input_handler
            if input_handler is not None
            else InputHandler(scale=scale, on_quit=self.stop)
        )
        self.asset_dir = Path(asset_dir)
        self.rng = rng if rng is not None else random.Random()
        self.camera_x = 0
        self.running = True
        self.state_machine = GameStateMachine()
        self.state_machine.change_state(MenuState(self))

    def stop(self) -> None:
        """Ask the main loop to finish."""
        self.running = False

    def update(self, dt: float) -> None:
        """Advance the running screen by ``dt`` seconds."""
        self.state_machine.update(dt)

    def render(self, surface: Any) -> None:
        """Clear ``surface`` and draw the running screen on it."""
        surface.fill((0, 0, 0))
        self.state_machine.render(surface)

    def run(self, screen: Any, clock: Any) -> None:
        """Run frames until the game stops, scaling the logical screen up to ``screen``."""
        canvas = pygame.Surface((CHUNK_WIDTH, CHUNK_HEIGHT))
        clock.tick(FRAME_RATE)
        while self.running:
            dt = clock.tick(FRAME_RATE) / 1000.0
            self.input.update(pygame.event.get())
            self.update(dt)
            self.render(canvas)
            pygame.transform.scale(canvas, screen.get_size(), screen)
            pygame.display.flip()
            self.input.clear_pressed_keys()


def main(argv: list[str] | None = None) -> int:
    """Open the window and play."""
    parser = argparse.ArgumentParser(prog="chunkrunner", description="Endless chunk runner.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="whole-number window scale")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("scale must be at least 1")

    pygame.init()
    try:
        screen = pygame.display.set_mode((CHUNK_WIDTH * args.scale, CHUNK_HEIGHT * args.scale))
        pygame.display.set_caption("chunkrunner")
        textures = TextureManager()
        for texture_id in load_assets(textures, args.assets):
            print(f"Image could not be loaded: {texture_id}", file=sys.stderr)
        game = Game(textures=textures, asset_dir=args.assets, scale=args.scale)
        game.run(screen, pygame.time.Clock())
        textures.clean()
    finally:
        pygame.quit()
    return 0
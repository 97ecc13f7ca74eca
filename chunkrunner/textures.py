"""Named images and the ways the game draws them."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Sequence

import pygame


class Flip(Enum):
    """Mirroring applied to the copied region when drawing."""

    NONE = (False, False)
    HORIZONTAL = (True, False)
    VERTICAL = (False, True)
    BOTH = (True, True)


def scroll_slices(chunk_count: int, camera_x: int, chunk_width: int) -> tuple[int, int, int]:
    """Work out which chunks a camera position shows.

    Returns ``(first, second, offset)``: the index of the chunk at the left
    edge of the screen, the index of the chunk that follows it (wrapping to
    the start of the sequence) and how far into the first chunk the left
    edge lies.
    """
    if chunk_count <= 0:
        raise ValueError("at least one chunk is needed to scroll")
    if chunk_width <= 0:
        raise ValueError("chunk width must be positive")
    scroll_x = camera_x % (chunk_width * chunk_count)
    first, offset = divmod(scroll_x, chunk_width)
    return first, (first + 1) % chunk_count, offset


class TextureManager:
    """Holds images by id and draws parts of them onto a target surface.

    Drawing an id that was never loaded draws nothing.
    """

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def load(self, file_name: str | Path, texture_id: str) -> pygame.Surface:
        """Load an image file and store it under ``texture_id``."""
        path = Path(file_name)
        if not path.is_file():
            raise FileNotFoundError(f"image not found: {path}")
        surface = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures[texture_id] = surface
        return surface

    def add(self, texture_id: str, surface: pygame.Surface) -> None:
        """Store an existing surface under ``texture_id``."""
        self._textures[texture_id] = surface

    def get(self, texture_id: str) -> pygame.Surface | None:
        """Return the surface stored under ``texture_id``, or None."""
        return self._textures.get(texture_id)

    def _copy(
        self,
        texture_id: str,
        source: pygame.Rect,
        dest: tuple[int, int],
        target: pygame.Surface,
        flip: Flip = Flip.NONE,
    ) -> None:
        surface = self._textures.get(texture_id)
        if surface is None:
            return
        area = source.clip(surface.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        piece = surface.subsurface(area)
        if flip is not Flip.NONE:
            flip_x, flip_y = flip.value
            piece = pygame.transform.flip(piece, flip_x, flip_y)
        target.blit(piece, dest)

    def draw(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        target: pygame.Surface,
        flip: Flip = Flip.NONE,
    ) -> None:
        """Draw the top-left ``width`` x ``height`` of a texture at ``(x, y)``."""
        self._copy(texture_id, pygame.Rect(0, 0, width, height), (x, y), target, flip)

    def draw_frame(
        self,
        texture_id: str,
        x: int,
        y: int,
        dest_x: int,
        dest_y: int,
        width: int,
        height: int,
        target: pygame.Surface,
    ) -> None:
        """Draw the region at ``(x, y)`` of a texture at ``(dest_x, dest_y)``."""
        self._copy(texture_id, pygame.Rect(x, y, width, height), (dest_x, dest_y), target)

    def draw_scrolling(
        self,
        texture_id: str,
        x: int,
        y: int,
        width: int,
        height: int,
        target: pygame.Surface,
    ) -> None:
        """Draw the region at ``(x, y)`` of a texture at the target's origin."""
        self._copy(texture_id, pygame.Rect(x, y, width, height), (0, 0), target)

    def draw_infinite_scrolling(
        self,
        chunks: Sequence[str],
        camera_x: int,
        y: int,
        chunk_width: int,
        height: int,
        target: pygame.Surface,
    ) -> None:
        """Draw the two chunks visible at ``camera_x``, side by side."""
        first, second, offset = scroll_slices(len(chunks), camera_x, chunk_width)
        visible = chunk_width - offset
        self._copy(chunks[first], pygame.Rect(offset, 0, visible, height), (0, y), target)
        self._copy(chunks[second], pygame.Rect(0, 0, offset, height), (visible, y), target)

    def draw_stretch(self, texture_id: str, target: pygame.Surface) -> None:
        """Draw a whole texture scaled to cover the whole target."""
        surface = self._textures.get(texture_id)
        if surface is None:
            return
        target.blit(pygame.transform.scale(surface, target.get_size()), (0, 0))

    def clean(self) -> None:
        """Forget every stored texture."""
        self._textures.clear()
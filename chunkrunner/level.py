"""The level chunks: their platforms, their pickups and random runs of them."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum

from chunkrunner.collision import GameObject, Obstacle

CHUNK_WIDTH = 384
CHUNK_HEIGHT = 224
RUN_LENGTH = 100
CHUNK_IDS: tuple[str, ...] = tuple(f"chunk{n}" for n in range(8))

INVINCIBLE_SECONDS = 5.0
FLY_SECONDS = 4.0


class CollectibleKind(Enum):
    """Kinds of pickup; the value doubles as the texture id."""

    APPLE = "apple"
    CARROT = "carrot"
    COIN = "coin"
    TOMATO = "tomato"

    @property
    def points(self) -> int:
        """Score gained by picking this up."""
        return {CollectibleKind.COIN: 1, CollectibleKind.APPLE: 3}.get(self, 0)


@dataclass
class Collectible(GameObject):
    """A pickup placed relative to the left edge of a chunk."""

    kind: CollectibleKind
    collected: bool = False

    @property
    def texture_id(self) -> str:
        return self.kind.value


_OBSTACLES: dict[str, tuple[tuple[int, int, int, int], ...]] = {
    "chunk0": (
        (0, 176, 48, 16), (112, 144, 48, 16), (192, 112, 48, 16),
        (272, 128, 32, 32), (288, 144, 16, 16), (336, 176, 48, 16),
    ),
    "chunk1": (
        (0, 176, 64, 16), (112, 112, 48, 48), (192, 176, 64, 16),
        (240, 96, 16, 16), (320, 64, 16, 16), (336, 176, 48, 16),
    ),
    "chunk2": (
        (0, 176, 80, 16), (144, 128, 32, 16), (208, 80, 32, 32),
        (224, 96, 16, 32), (240, 96, 32, 32), (240, 80, 32, 16),
        (224, 64, 32, 16), (208, 176, 48, 16), (304, 176, 16, 16),
        (336, 176, 48, 16),
    ),
    "chunk3": (
        (0, 176, 48, 16), (96, 128, 32, 32), (112, 144, 16, 16),
        (176, 96, 16, 16), (240, 80, 16, 16), (160, 176, 32, 16),
        (240, 160, 32, 32), (256, 176, 16, 16), (288, 48, 48, 48),
        (304, 80, 32, 16), (320, 64, 16, 16), (320, 176, 64, 16),
    ),
    "chunk4": (
        (0, 176, 48, 16), (112, 144, 48, 16), (192, 176, 16, 16),
        (256, 176, 16, 16), (208, 80, 48, 16), (336, 176, 48, 16),
    ),
    "chunk5": (
        (0, 176, 48, 16), (112, 144, 32, 32), (192, 80, 48, 16),
        (192, 96, 16, 32), (176, 176, 64, 16), (304, 64, 16, 16),
        (288, 144, 16, 16), (336, 176, 48, 16),
    ),
    "chunk6": (
        (0, 176, 48, 16), (112, 144, 16, 16), (160, 112, 16, 16),
        (224, 80, 16, 48), (240, 112, 32, 16), (192, 176, 48, 16),
        (272, 48, 16, 16), (256, 176, 16, 16), (288, 176, 16, 16),
        (320, 176, 64, 16),
    ),
    "chunk7": (
        (0, 176, 48, 16), (112, 128, 32, 32), (128, 144, 16, 16),
        (176, 96, 32, 32), (192, 112, 16, 16), (208, 176, 64, 16),
        (272, 80, 32, 16), (336, 48, 16, 16), (320, 176, 64, 16),
    ),
}

_COLLECTIBLES: dict[str, tuple[tuple[CollectibleKind, int, int], ...]] = {
    "chunk0": ((CollectibleKind.COIN, 144, 128), (CollectibleKind.COIN, 288, 112)),
    "chunk1": ((CollectibleKind.CARROT, 320, 48), (CollectibleKind.COIN, 240, 80)),
    "chunk2": ((CollectibleKind.COIN, 240, 48), (CollectibleKind.APPLE, 304, 160)),
    "chunk3": ((CollectibleKind.TOMATO, 304, 32), (CollectibleKind.APPLE, 320, 160)),
    "chunk4": ((CollectibleKind.CARROT, 256, 160), (CollectibleKind.APPLE, 240, 64)),
    "chunk5": ((CollectibleKind.APPLE, 304, 48), (CollectibleKind.COIN, 304, 80)),
    "chunk6": (
        (CollectibleKind.COIN, 256, 96),
        (CollectibleKind.APPLE, 288, 160),
        (CollectibleKind.CARROT, 272, 32),
    ),
    "chunk7": (
        (CollectibleKind.APPLE, 256, 160),
        (CollectibleKind.COIN, 128, 112),
        (CollectibleKind.TOMATO, 336, 32),
    ),
}

_PICKUP_SIZE = 16


def default_obstacles() -> dict[str, list[Obstacle]]:
    """Return the platforms of every chunk, keyed by chunk id."""
    return {
        chunk_id: [Obstacle(*rect) for rect in rects]
        for chunk_id, rects in _OBSTACLES.items()
    }


def default_collectibles() -> dict[str, list[Collectible]]:
    """Return the pickups of every chunk, keyed by chunk id and ordered by kind."""
    return {
        chunk_id: sorted(
            (
                Collectible(x, y, _PICKUP_SIZE, _PICKUP_SIZE, kind)
                for kind, x, y in entries
            ),
            key=lambda item: item.kind.value,
        )
        for chunk_id, entries in _COLLECTIBLES.items()
    }


def generate_run(
    rng: random.Random | None = None,
    length: int = RUN_LENGTH,
) -> tuple[list[str], list[list[Collectible]]]:
    """Pick ``length`` random chunks and give each its own fresh pickups.

    Returns the chunk ids in order and, for each position, that chunk's
    pickups as independent copies.
    """
    if length < 0:
        raise ValueError("a run cannot have a negative length")
    rng = rng if rng is not None else random.Random()
    table = default_collectibles()
    chunks = [rng.choice(CHUNK_IDS) for _ in range(length)]
    pickups = [[replace(item) for item in table[chunk_id]] for chunk_id in chunks]
    return chunks, pickups
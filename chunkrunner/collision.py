"""Axis-aligned rectangle collision and the basic positioned game object."""

from __future__ import annotations

from dataclasses import dataclass


def check_collision(
    x1: float,
    y1: float,
    w1: float,
    h1: float,
    x2: float,
    y2: float,
    w2: float,
    h2: float,
) -> bool:
    """Return True when two rectangles overlap; touching edges do not count."""
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


@dataclass(frozen=True)
class Obstacle:
    """A solid rectangle placed relative to the left edge of a level chunk."""

    x: float
    y: float
    width: int
    height: int


@dataclass
class GameObject:
    """Something in the world with a position and a size."""

    x: float
    y: float
    width: int
    height: int

    def collides_with(self, other: Obstacle | GameObject) -> bool:
        """Return True if this object's rectangle overlaps ``other``'s."""
        return check_collision(
            self.x,
            self.y,
            self.width,
            self.height,
            other.x,
            other.y,
            other.width,
            other.height,
        )
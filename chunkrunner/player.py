"""The running character: automatic forward motion, jumping, flying and collisions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Sequence

from chunkrunner.collision import GameObject, Obstacle, check_collision

CHARACTER_TEXTURE = "character"


@dataclass
class Player(GameObject):
    """The player; ``x`` is the position on screen, ``world_x`` the one in the run."""

    SPEED: ClassVar[float] = 120.0
    GRAVITY: ClassVar[float] = 220.0
    JUMP_VELOCITY: ClassVar[float] = 220.0
    MAX_JUMP_TIME: ClassVar[float] = 0.35
    FLY_FALL_FACTOR: ClassVar[float] = 0.3
    SCREEN_WIDTH: ClassVar[float] = 384.0
    CHUNK_WIDTH: ClassVar[int] = 384
    FLOOR_Y: ClassVar[float] = 168.0

    x: float = 0.0
    y: float = 120.0
    width: int = 20
    height: int = 40
    world_x: float = 0.0
    rel_x: float = 0.0
    chunk_index: int = 0
    camera_x: int = 0
    invincible: bool = False
    invincible_time: float = 0.0
    flying: bool = False
    fly_time: float = 0.0
    grounded: bool = True
    jumping: bool = False
    jump_time: float = 0.0
    failed: bool = False

    def _tick_powerups(self, dt: float) -> None:
        if self.invincible:
            self.invincible_time -= dt
            if self.invincible_time <= 0:
                self.invincible = False
                self.invincible_time = 0.0
        if self.flying:
            self.fly_time -= dt
            if self.fly_time <= 0:
                self.flying = False
                self.fly_time = 0.0

    def _stop_jump(self) -> None:
        self.jumping = False
        self.jump_time = 0.0

    def step(
        self,
        dt: float,
        obstacles: Mapping[str, Sequence[Obstacle]],
        chunk_sequence: Sequence[str],
        jump_held: bool,
    ) -> int:
        """Advance the player by ``dt`` seconds and return the current chunk index."""
        if not chunk_sequence:
            raise ValueError("the chunk sequence is empty")
        self._tick_powerups(dt)

        width = self.CHUNK_WIDTH
        next_x = self.world_x + self.SPEED * dt
        total = len(chunk_sequence)
        current = int(next_x / width) % total
        following = (current + 1) % total
        nearby = (
            (current, obstacles[chunk_sequence[current]], next_x - current * width),
            (following, obstacles[chunk_sequence[following]], next_x - following * width),
        )
        self.rel_x = nearby[0][2]

        if self.x < self.SCREEN_WIDTH / 2.0:
            self.x += self.SPEED * dt
        else:
            self.camera_x = int(self.world_x - self.SCREEN_WIDTH / 2.0)

        for index, rects, rel_x in nearby:
            for obs in rects:
                wall_x = index * width + obs.x
                if (
                    check_collision(rel_x, self.y, self.width, self.height,
                                    obs.x, obs.y, obs.width, obs.height)
                    and rel_x + self.width > obs.x
                    and self.world_x < wall_x
                ):
                    next_x = wall_x - self.width

        next_y = self.y
        if self.grounded and jump_held:
            self.jumping = True
            self.grounded = False
            self.jump_time = 0.0

        if self.flying:
            if jump_held:
                next_y -= self.JUMP_VELOCITY * dt
            else:
                next_y += self.GRAVITY * dt * self.FLY_FALL_FACTOR
        elif self.jumping:
            next_y -= self.JUMP_VELOCITY * dt
            self.jump_time += dt
            if self.jump_time >= self.MAX_JUMP_TIME:
                self._stop_jump()
        else:
            next_y += self.GRAVITY * dt

        landed = False
        for _, rects, rel_x in nearby:
            for obs in rects:
                if not check_collision(rel_x, next_y, self.width, self.height,
                                       obs.x, obs.y, obs.width, obs.height):
                    continue
                if self.y + self.height <= obs.y < next_y + self.height:
                    next_y = obs.y - self.height
                    self._stop_jump()
                    self.grounded = True
                    landed = True
                elif self.y >= obs.y + obs.height >= next_y:
                    next_y = obs.y + obs.height
                    self._stop_jump()

        if not landed and not self.jumping:
            self.grounded = False

        self.world_x = next_x
        self.y = max(next_y, 0.0)

        if self.y >= self.FLOOR_Y:
            if self.invincible:
                self.y = self.FLOOR_Y
                self.grounded = True
                self._stop_jump()
            else:
                self.failed = True

        self.chunk_index = current
        return current

    def render(self, textures: Any, target: Any) -> int:
        """Draw the character and return the chunk index of the last step."""
        textures.draw(
            CHARACTER_TEXTURE, int(self.x), int(self.y), self.width, self.height, target
        )
        return self.chunk_index
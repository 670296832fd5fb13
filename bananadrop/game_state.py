"""Game model: the bowl, falling bananas, power-ups and the rules that move them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

BOARD_BOTTOM = 40
MISS_LINE = 35
SPAWN_ROW = 5
SPAWN_X_RANGE = (5, 90)
START_LIVES = 5
START_BANANAS = 15
START_BOWL_SIZE = 10
SIZE_STEP = 5


class _RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


@dataclass
class Vec2:
    """A mutable point on the character grid."""

    x: int = 0
    y: int = 0


@dataclass
class Bowl:
    pos: Vec2
    size: int


@dataclass
class Banana:
    pos: Vec2
    speed: float = 1.0


class PowerType(Enum):
    ONE_UP = "one_up"
    EXTEND = "extend"
    SHRINK = "shrink"

    @classmethod
    def random(cls, rng: _RandomSource) -> "PowerType":
        """Pick a power type with equal chance for each kind."""
        index = rng.randrange(1, 4)
        if index == 1:
            return cls.EXTEND
        if index == 2:
            return cls.ONE_UP
        return cls.SHRINK


@dataclass
class PowerUp:
    power_type: PowerType
    pos: Vec2
    speed: float = 1.0


def is_collision(bowl_pos: Vec2, bowl_size: int, obj_pos: Vec2) -> bool:
    """True when the object lies within the bowl's two-row footprint."""
    return (
        bowl_pos.x <= obj_pos.x < bowl_pos.x + bowl_size
        and bowl_pos.y <= obj_pos.y < bowl_pos.y + 2
    )


def _fall(objects: list, limit: int) -> list:
    for obj in objects:
        obj.pos.y += int(obj.speed)
    return [obj for obj in objects if obj.pos.y < limit]


@dataclass
class GameState:
    """Everything that changes while a game is played."""

    bowl: Bowl = field(
        default_factory=lambda: Bowl(pos=Vec2(100 // 2, 32), size=START_BOWL_SIZE)
    )
    score: int = 0
    lives: int = START_LIVES
    level: int = 1
    bananas: list[Banana] = field(default_factory=list)
    power_ups: list[PowerUp] = field(default_factory=list)
    frame_count: int = 0
    remaining_bananas: int = START_BANANAS
    remaining_power_ups: int = 0
    rng: _RandomSource = field(default_factory=random.Random, repr=False, compare=False)

    def reset(self) -> None:
        """Start a new round; the bowl and pending power-ups are kept."""
        self.score = 0
        self.lives = START_LIVES
        self.level = 0
        self.bananas = []
        self.power_ups = []
        self.frame_count = 0
        self.remaining_bananas = START_BANANAS

    def spawn_power_ups(self) -> None:
        if self.remaining_power_ups > 0:
            x_pos = self.rng.randrange(*SPAWN_X_RANGE)
            self.power_ups.append(
                PowerUp(PowerType.random(self.rng), Vec2(x_pos, SPAWN_ROW), 1.0)
            )
            self.remaining_power_ups -= 1

    def spawn_bananas(self) -> None:
        if self.remaining_bananas > 0:
            x_pos = self.rng.randrange(*SPAWN_X_RANGE)
            self.bananas.append(Banana(Vec2(x_pos, SPAWN_ROW), 1.0))
            self.remaining_bananas -= 1

    def update_power_ups(self) -> None:
        self.power_ups = _fall(self.power_ups, BOARD_BOTTOM)

    def update_bananas(self) -> None:
        self.bananas = _fall(self.bananas, BOARD_BOTTOM)

    def check_power_up_collisions(self) -> None:
        """Apply caught power-ups and drop those that reached the bottom."""
        caught: list[PowerType] = []
        kept: list[PowerUp] = []
        for power_up in self.power_ups:
            if is_collision(self.bowl.pos, self.bowl.size, power_up.pos):
                caught.append(power_up.power_type)
            elif power_up.pos.y < MISS_LINE:
                kept.append(power_up)
        self.power_ups = kept

        for power_type in caught:
            if power_type is PowerType.EXTEND:
                self.bowl.size += SIZE_STEP
            elif power_type is PowerType.ONE_UP:
                self.lives += 1
            else:
                self.bowl.size -= SIZE_STEP

    def check_banana_collisions(self) -> None:
        """Score caught bananas and take a life for each missed one."""
        caught = missed = 0
        kept: list[Banana] = []
        for banana in self.bananas:
            if is_collision(self.bowl.pos, self.bowl.size, banana.pos):
                caught += 1
            elif banana.pos.y >= MISS_LINE:
                missed += 1
            else:
                kept.append(banana)
        self.bananas = kept
        self.score += caught
        self.lives = max(0, self.lives - missed)

    def update_state(self) -> None:
        """Advance the game by one frame."""
        self.frame_count += 1
        self.level = self.score // 10
        if self.score % 10 == 0 and self.score > 0:
            self.remaining_power_ups = 1
            self.remaining_bananas = START_BANANAS

        if self.level >= 30 or self.frame_count % (30 - self.level) == 0:
            self.spawn_bananas()
            self.spawn_power_ups()

        if self.level >= 20 or self.frame_count % (20 - self.level) == 0:
            self.update_bananas()
            self.update_power_ups()

        self.check_banana_collisions()
        self.check_power_up_collisions()
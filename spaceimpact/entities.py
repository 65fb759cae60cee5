"""
Entity records for the playfield.

Entities are plain data. Movement and collision rules live in
``spaceimpact.simulation`` so a whole tick can be read in one place.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

import pygame

from .settings import (
    BOSS_SIZE,
    BOSS_SPEED,
    BULLET_SIZE,
    BULLET_SPEED,
    ENEMY_NORMAL,
    EXPLOSION_TICKS,
    HEIGHT,
    POWERUP_LIFE,
    POWERUP_SIZE,
    POWERUP_SPEED,
    SHIP_SIZE,
    SHIP_SPEED,
    SHIP_START_X,
    STAR_COUNT,
    WIDTH,
)


@dataclass
class Entity:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))


@dataclass
class Ship(Entity):
    x: float = SHIP_START_X
    y: float = HEIGHT / 2 - SHIP_SIZE[1] / 2
    w: float = SHIP_SIZE[0]
    h: float = SHIP_SIZE[1]
    speed: float = SHIP_SPEED

    def reset_position(self):
        self.x = SHIP_START_X
        self.y = HEIGHT / 2 - self.h / 2


@dataclass
class Bullet(Entity):
    w: float = BULLET_SIZE[0]
    h: float = BULLET_SIZE[1]
    speed: float = BULLET_SPEED


@dataclass
class Enemy(Entity):
    kind: str = ENEMY_NORMAL
    speed: float = 2.0
    hp: int = 1
    angle: Optional[float] = None  # zigzag phase


@dataclass
class Boss(Entity):
    w: float = BOSS_SIZE[0]
    h: float = BOSS_SIZE[1]
    speed: float = BOSS_SPEED
    hp: int = 25
    # Reserved for attack patterns; nothing advances these yet.
    phase_timer: int = 0
    shoot_timer: int = 0


@dataclass
class Powerup(Entity):
    kind: str = POWERUP_LIFE
    w: float = POWERUP_SIZE[0]
    h: float = POWERUP_SIZE[1]
    speed: float = POWERUP_SPEED


@dataclass
class Explosion(Entity):
    timer: int = EXPLOSION_TICKS

    @classmethod
    def from_entity(cls, e: Entity) -> "Explosion":
        return cls(e.x, e.y, e.w, e.h)


@dataclass
class Star(Entity):
    speed: float = 1.0


class Starfield:
    """Parallax-free background of scrolling stars. Purely cosmetic."""

    def __init__(self, rng: Optional[random.Random] = None, count: int = STAR_COUNT):
        self.rng = rng or random.Random()
        self.stars: List[Star] = []
        for _ in range(count):
            size = self.rng.random() * 2 + 1
            self.stars.append(Star(
                x=self.rng.random() * WIDTH,
                y=self.rng.random() * HEIGHT,
                w=size,
                h=size,
                speed=self.rng.random() * 1.5 + 0.5,
            ))

    def update(self):
        for s in self.stars:
            s.x -= s.speed
            if s.x < 0:
                s.x = WIDTH
                s.y = self.rng.random() * HEIGHT


@dataclass
class Keys:
    """Held-state of the four direction keys. Last write wins."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def set(self, direction: str, held: bool):
        if direction not in ("up", "down", "left", "right"):
            raise ValueError(f"unknown direction {direction!r}")
        setattr(self, direction, held)

    def clear(self):
        self.up = self.down = self.left = self.right = False


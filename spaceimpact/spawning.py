"""Spawn policy: which enemies and powerups appear, and how tough they are."""
from __future__ import annotations

import math
import random

from .entities import Boss, Enemy, Powerup
from .settings import (
    BOSS_BASE_HP,
    BOSS_HP_PER_LEVEL,
    BOSS_SIZE,
    ENDLESS_DIFFICULTY_STEP,
    ENEMY_BANDS,
    ENEMY_STATS,
    ENEMY_ZIGZAG,
    HEIGHT,
    LEVEL_DIFFICULTY_STEP,
    LEVEL_SCORE_STEP,
    MODE_LEVEL,
    POWERUP_DOUBLE,
    POWERUP_LIFE,
    POWERUP_SIZE,
    WIDTH,
)


def difficulty_multiplier(mode: str, level: int, score: int) -> float:
    """Scalar added to enemy speed/hp. Level mode scales by level, endless by score."""
    if mode == MODE_LEVEL:
        return max(0, level - 1) * LEVEL_DIFFICULTY_STEP
    return (score // LEVEL_SCORE_STEP) * ENDLESS_DIFFICULTY_STEP


def pick_enemy_kind(roll: float) -> str:
    for kind, upper in ENEMY_BANDS:
        if roll < upper:
            return kind
    return ENEMY_BANDS[-1][0]


def spawn_enemy(rng: random.Random, multiplier: float) -> Enemy:
    kind = pick_enemy_kind(rng.random())
    size, base_speed, speed_scale, base_hp, hp_scale = ENEMY_STATS[kind]
    enemy = Enemy(
        x=WIDTH,
        y=rng.random() * (HEIGHT - size),
        w=size,
        h=size,
        kind=kind,
        speed=base_speed + multiplier * speed_scale,
        hp=base_hp + math.floor(multiplier * hp_scale),
    )
    if kind == ENEMY_ZIGZAG:
        enemy.angle = rng.random() * math.pi * 2
    return enemy


def spawn_powerup(rng: random.Random) -> Powerup:
    kind = POWERUP_LIFE if rng.random() < 0.5 else POWERUP_DOUBLE
    return Powerup(x=WIDTH, y=rng.random() * (HEIGHT - POWERUP_SIZE[1]), kind=kind)


def boss_hp(level: int) -> int:
    return BOSS_BASE_HP + (level - 1) * BOSS_HP_PER_LEVEL


def spawn_boss(level: int) -> Boss:
    return Boss(x=WIDTH, y=HEIGHT / 2 - BOSS_SIZE[1] / 2, hp=boss_hp(level))

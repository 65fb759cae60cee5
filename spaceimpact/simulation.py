"""
One run of the game: the live entity collections and the per-tick update.

A ``SimulationState`` is built when a mode is chosen and replaced wholesale on
restart. ``step`` advances it by exactly one tick; wall-clock time comes in as
``now_ms`` so nothing here reads a clock.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .entities import Boss, Bullet, Enemy, Explosion, Keys, Powerup, Ship
from .geometry import clamp, overlaps
from .settings import (
    BOSS_POINTS,
    BOSS_STOP_MARGIN,
    BULLET_SIZE,
    DOUBLE_SHOT_TICKS,
    ENEMY_MINIBOSS,
    ENEMY_POINTS,
    ENEMY_SPAWN_TICKS,
    ENEMY_ZIGZAG,
    FIRE_INTERVAL,
    FIRE_INTERVAL_DOUBLE,
    HEIGHT,
    LEVEL_SCORE_STEP,
    MINIBOSS_POINTS,
    MODE_LEVEL,
    POWERUP_LIFE,
    POWERUP_SPAWN_TICKS,
    START_LEVEL,
    START_LIVES,
    WIDTH,
    ZIGZAG_AMPLITUDE,
    ZIGZAG_PERIOD_MS,
)
from .spawning import difficulty_multiplier, spawn_boss, spawn_enemy, spawn_powerup

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    mode: str
    rng: random.Random = field(default_factory=random.Random)
    score: int = 0
    lives: int = START_LIVES
    level: int = START_LEVEL
    level_target: int = START_LEVEL * LEVEL_SCORE_STEP
    game_over: bool = False

    ship: Ship = field(default_factory=Ship)
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    powerups: List[Powerup] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    boss: Optional[Boss] = None

    double_shot: bool = False
    double_timer: int = 0
    bullet_timer: int = 0
    enemy_timer: int = 0
    powerup_timer: int = 0

    # ============================
    # DERIVED
    # ============================
    @property
    def difficulty(self) -> float:
        return difficulty_multiplier(self.mode, self.level, self.score)

    @property
    def fire_interval(self) -> int:
        return FIRE_INTERVAL_DOUBLE if self.double_shot else FIRE_INTERVAL

    # ============================
    # TICK
    # ============================
    def step(self, keys: Keys, now_ms: float):
        """Advance one tick. Does nothing once the run is over."""
        if self.game_over:
            return
        # 1) Input -> ship
        self.move_ship(keys)
        # 2) Auto-fire
        self.auto_fire()
        # 3) Spawns
        self.spawn_tick()
        # 4) Bullets vs enemies / boss
        self.update_bullets()
        # 5) Enemies vs ship
        self.update_enemies(now_ms)
        if self.game_over:
            return
        # 6) Powerups
        self.update_powerups()
        # 7) Boss movement
        self.update_boss()
        # 8) Double-shot timer
        self.tick_double_shot()
        # 9) Explosions
        self.update_explosions()

    def move_ship(self, keys: Keys):
        ship = self.ship
        if keys.up:
            ship.y = clamp(ship.y - ship.speed, 0, HEIGHT - ship.h)
        if keys.down:
            ship.y = clamp(ship.y + ship.speed, 0, HEIGHT - ship.h)
        if keys.left:
            ship.x = clamp(ship.x - ship.speed, 0, WIDTH / 2 - ship.w)
        if keys.right:
            ship.x = clamp(ship.x + ship.speed, 0, WIDTH / 2 - ship.w)

    def auto_fire(self):
        self.bullet_timer += 1
        if self.bullet_timer <= self.fire_interval:
            return
        ship = self.ship
        if self.double_shot:
            self.bullets.append(Bullet(ship.right, ship.y + 6))
            self.bullets.append(Bullet(ship.right, ship.bottom - 12))
        else:
            self.bullets.append(Bullet(ship.right, ship.y + ship.h / 2 - BULLET_SIZE[1] / 2))
        self.bullet_timer = 0

    def spawn_tick(self):
        # The enemy timer keeps running during a boss fight.
        self.enemy_timer += 1
        if self.enemy_timer > ENEMY_SPAWN_TICKS and self.boss is None:
            self.enemies.append(spawn_enemy(self.rng, self.difficulty))
            self.enemy_timer = 0
        self.powerup_timer += 1
        if self.powerup_timer > POWERUP_SPAWN_TICKS:
            self.powerups.append(spawn_powerup(self.rng))
            self.powerup_timer = 0

    def update_bullets(self):
        survivors = []
        for b in self.bullets:
            b.x += b.speed
            if b.x > WIDTH:
                continue
            if self._hit_enemy(b):
                continue
            if self.boss is not None and overlaps(b, self.boss):
                self.boss.hp -= 1
                if self.boss.hp <= 0:
                    self.defeat_boss()
                continue
            survivors.append(b)
        self.bullets = survivors
        self.enemies = [e for e in self.enemies if e.hp > 0]

    def _hit_enemy(self, b: Bullet) -> bool:
        for e in self.enemies:
            if e.hp <= 0 or not overlaps(b, e):
                continue
            e.hp -= 1
            if e.hp <= 0:
                self.explosions.append(Explosion.from_entity(e))
                self.add_score(MINIBOSS_POINTS if e.kind == ENEMY_MINIBOSS else ENEMY_POINTS)
            return True
        return False

    def update_enemies(self, now_ms: float):
        survivors = []
        for i, e in enumerate(self.enemies):
            e.x -= e.speed
            if e.kind == ENEMY_ZIGZAG:
                e.y += math.sin(now_ms / ZIGZAG_PERIOD_MS + (e.angle or 0.0)) * ZIGZAG_AMPLITUDE
            if e.right < 0:
                continue
            if overlaps(e, self.ship):
                self.lose_life()
                if self.game_over:
                    # Freeze whatever has not been processed yet.
                    survivors.extend(self.enemies[i + 1:])
                    break
                continue
            survivors.append(e)
        self.enemies = survivors

    def update_powerups(self):
        survivors = []
        for p in self.powerups:
            p.x -= p.speed
            if overlaps(p, self.ship):
                self.collect(p)
                continue
            if p.right < 0:
                continue
            survivors.append(p)
        self.powerups = survivors

    def update_boss(self):
        if self.boss is None:
            return
        boss = self.boss
        boss.x -= boss.speed
        stop = WIDTH - boss.w - BOSS_STOP_MARGIN
        if boss.x < stop:
            boss.x = stop

    def tick_double_shot(self):
        if not self.double_shot:
            return
        self.double_timer -= 1
        if self.double_timer <= 0:
            self.double_timer = 0
            self.double_shot = False

    def update_explosions(self):
        for ex in self.explosions:
            ex.timer -= 1
        self.explosions = [ex for ex in self.explosions if ex.timer > 0]

    # ============================
    # SCORING & LIFE
    # ============================
    def add_score(self, points: int):
        self.score += points
        if self.mode == MODE_LEVEL and self.boss is None and self.score >= self.level_target:
            self.boss = spawn_boss(self.level)
            logger.info("Boss spawned for level %d (hp %d) at score %d",
                        self.level, self.boss.hp, self.score)

    def defeat_boss(self):
        self.boss = None
        if self.mode == MODE_LEVEL:
            self.level += 1
            self.level_target = self.level * LEVEL_SCORE_STEP
            logger.info("Boss defeated, advancing to level %d (target %d)",
                        self.level, self.level_target)
        self.add_score(BOSS_POINTS)

    def lose_life(self):
        if self.lives <= 0:
            return
        self.lives -= 1
        if self.lives == 0:
            self.game_over = True

    def collect(self, p: Powerup):
        if p.kind == POWERUP_LIFE:
            self.lives += 1
        else:
            self.double_shot = True
            self.double_timer = DOUBLE_SHOT_TICKS

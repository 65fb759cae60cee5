"""
Scene state machine: MENU -> COUNTDOWN -> PLAYING -> GAME_OVER.

The controller owns the current ``SimulationState`` and the background
starfield. Input arrives as commands (mode select, restart, menu) and as
held-direction changes; ``update`` is called once per frame with the
wall-clock time in milliseconds.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .entities import Boss, Bullet, Enemy, Explosion, Keys, Powerup, Ship, Star, Starfield
from .leaderboard import load_leaderboard, merge_score, save_leaderboard
from .settings import (
    COUNTDOWN_SECONDS,
    LEVEL_SCORE_STEP,
    MODE_ENDLESS,
    MODES,
    SCENE_COUNTDOWN,
    SCENE_GAME_OVER,
    SCENE_MENU,
    SCENE_PLAYING,
    START_LEVEL,
    START_LIVES,
)
from .simulation import SimulationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer may look at for one frame. Read-only."""
    scene: str
    mode: Optional[str]
    score: int
    lives: int
    level: int
    level_target: int
    game_over: bool
    countdown: Optional[int]
    leaderboard: Tuple[int, ...]
    ship: Ship
    bullets: Tuple[Bullet, ...]
    enemies: Tuple[Enemy, ...]
    boss: Optional[Boss]
    powerups: Tuple[Powerup, ...]
    explosions: Tuple[Explosion, ...]
    stars: Tuple[Star, ...]
    double_shot: bool
    now_ms: float

    @property
    def countdown_label(self) -> Optional[str]:
        if self.countdown is None:
            return None
        return str(self.countdown) if self.countdown > 0 else "GO!"


class GameController:
    def __init__(self, rng: Optional[random.Random] = None,
                 leaderboard_path: Optional[str] = None):
        self.rng = rng or random.Random()
        self.leaderboard_path = leaderboard_path
        self.scene = SCENE_MENU
        self.mode: Optional[str] = None
        self.keys = Keys()
        self.starfield = Starfield(self.rng)
        self.state: Optional[SimulationState] = None
        self.countdown_start: Optional[float] = None
        self.countdown: Optional[int] = None
        self.leaderboard = load_leaderboard(leaderboard_path)
        self.now_ms = 0.0

    # ============================
    # COMMANDS
    # ============================
    def select_mode(self, mode: str, now_ms: float) -> bool:
        """Pick a mode from the menu. Returns False if not in the menu."""
        if mode not in MODES:
            raise ValueError(f"unknown mode {mode!r}")
        if self.scene != SCENE_MENU:
            return False
        self.mode = mode
        logger.info("Mode selected: %s", mode)
        self._new_run(now_ms)
        return True

    def restart(self, now_ms: float):
        if self.mode is None:
            return
        logger.info("Restarting %s run", self.mode)
        self._new_run(now_ms)

    def go_to_menu(self):
        if self.mode is None:
            return
        logger.info("Returning to menu")
        self.mode = None
        self.state = None
        self.scene = SCENE_MENU
        self.countdown_start = None
        self.countdown = None
        self.keys.clear()

    def set_key(self, direction: str, held: bool):
        self.keys.set(direction, held)

    def _new_run(self, now_ms: float):
        self.state = SimulationState(self.mode, rng=self.rng)
        self.scene = SCENE_COUNTDOWN
        self.countdown_start = now_ms
        self.countdown = COUNTDOWN_SECONDS

    def _end_run(self):
        self.scene = SCENE_GAME_OVER
        score = self.state.score
        logger.info("Game over in %s mode with score %d", self.mode, score)
        if self.mode == MODE_ENDLESS:
            self.leaderboard = merge_score(self.leaderboard, score)
            save_leaderboard(self.leaderboard, self.leaderboard_path)

    # ============================
    # FRAME
    # ============================
    def countdown_remaining(self, now_ms: float) -> int:
        elapsed = int((now_ms - self.countdown_start) // 1000)
        return COUNTDOWN_SECONDS - elapsed

    def update(self, now_ms: float):
        self.now_ms = now_ms
        self.starfield.update()
        self.countdown = None
        if self.scene == SCENE_COUNTDOWN:
            remaining = self.countdown_remaining(now_ms)
            self.countdown = max(remaining, 0)
            if remaining <= 0:
                # "GO!" is shown for this frame; play starts next frame.
                self.scene = SCENE_PLAYING
                self.countdown_start = None
        elif self.scene == SCENE_PLAYING:
            self.state.step(self.keys, now_ms)
            if self.state.game_over:
                self._end_run()

    def snapshot(self) -> Snapshot:
        s = self.state
        stars = tuple(self.starfield.stars)
        if s is None:
            return Snapshot(
                scene=self.scene, mode=self.mode, score=0, lives=START_LIVES,
                level=START_LEVEL, level_target=START_LEVEL * LEVEL_SCORE_STEP,
                game_over=False, countdown=self.countdown,
                leaderboard=tuple(self.leaderboard), ship=Ship(), bullets=(),
                enemies=(), boss=None, powerups=(), explosions=(), stars=stars,
                double_shot=False, now_ms=self.now_ms,
            )
        return Snapshot(
            scene=self.scene,
            mode=self.mode,
            score=s.score,
            lives=s.lives,
            level=s.level,
            level_target=s.level_target,
            game_over=s.game_over,
            countdown=self.countdown,
            leaderboard=tuple(self.leaderboard),
            ship=s.ship,
            bullets=tuple(s.bullets),
            enemies=tuple(s.enemies),
            boss=s.boss,
            powerups=tuple(s.powerups),
            explosions=tuple(s.explosions),
            stars=stars,
            double_shot=s.double_shot,
            now_ms=self.now_ms,
        )

    def describe(self) -> str:
        """One-line debug summary."""
        if self.state is None:
            return f"Scene {self.scene} | no run"
        s = self.state
        boss = f"{s.boss.hp}hp" if s.boss else "none"
        return (f"Scene {self.scene} | Mode {self.mode} | Score {s.score} | Lives {s.lives} | "
                f"Level {s.level} | Target {s.level_target} | Difficulty {s.difficulty:.2f} | "
                f"Enemies {len(s.enemies)} | Bullets {len(s.bullets)} | Boss {boss}")

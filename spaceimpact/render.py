"""Drawing. Reads a ``Snapshot`` and never changes it."""
from __future__ import annotations

import pygame

from .game import Snapshot
from .settings import (
    COLOR_BG,
    COLOR_BOSS,
    COLOR_BULLET,
    COLOR_ENEMY,
    COLOR_EXPLOSION,
    COLOR_HIGHLIGHT,
    COLOR_HUD,
    COLOR_POWERUP_DOUBLE,
    COLOR_POWERUP_LIFE,
    COLOR_SHIP,
    COLOR_STAR,
    COLOR_TEXT,
    HEIGHT,
    MENU_BLINK_MS,
    MODE_ENDLESS,
    MODE_LEVEL,
    POWERUP_LIFE,
    SCENE_GAME_OVER,
    SCENE_MENU,
    WIDTH,
)


class Renderer:
    def __init__(self, surface: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.font = pygame.font.SysFont("monospace", 16)
        self.menufont = pygame.font.SysFont("monospace", 20)
        self.titlefont = pygame.font.SysFont("monospace", 22, bold=True)
        self.bigfont = pygame.font.SysFont("monospace", 60, bold=True)

    def draw(self, snap: Snapshot):
        self.surface.fill(COLOR_BG)
        self.draw_stars(snap)
        if snap.scene == SCENE_MENU:
            self.draw_menu(snap)
        elif snap.countdown is not None:
            self.draw_countdown(snap)
        else:
            self.draw_game(snap)
            if snap.scene == SCENE_GAME_OVER:
                self.draw_game_over(snap)

    def _text(self, font: pygame.font.Font, text: str, color, pos, center: bool = False):
        img = font.render(text, True, color)
        x, y = pos
        if center:
            x -= img.get_width() // 2
        self.surface.blit(img, (x, y))

    def draw_stars(self, snap: Snapshot):
        for s in snap.stars:
            pygame.draw.rect(self.surface, COLOR_STAR, s.to_rect())

    def draw_game(self, snap: Snapshot):
        surf = self.surface
        pygame.draw.rect(surf, COLOR_SHIP, snap.ship.to_rect())
        for e in snap.enemies:
            pygame.draw.rect(surf, COLOR_ENEMY, e.to_rect())
        if snap.boss is not None:
            pygame.draw.rect(surf, COLOR_BOSS, snap.boss.to_rect())
        for b in snap.bullets:
            pygame.draw.rect(surf, COLOR_BULLET, b.to_rect())
        for p in snap.powerups:
            color = COLOR_POWERUP_LIFE if p.kind == POWERUP_LIFE else COLOR_POWERUP_DOUBLE
            pygame.draw.rect(surf, color, p.to_rect())
        for ex in snap.explosions:
            pygame.draw.rect(surf, COLOR_EXPLOSION, ex.to_rect())
        self.draw_hud(snap)

    def draw_hud(self, snap: Snapshot):
        pad = 12
        mode = f"Level {snap.level}" if snap.mode == MODE_LEVEL else "Endless"
        lines = [f"Score: {snap.score}", f"Lives: {snap.lives}", f"Mode: {mode}"]
        if snap.mode == MODE_LEVEL:
            lines.append(f"Target: {snap.level_target}")
        for i, line in enumerate(lines):
            self._text(self.font, line, COLOR_HUD, (pad, 6 + i * 20))
        if snap.double_shot:
            self._text(self.font, "DOUBLE", COLOR_POWERUP_DOUBLE, (WIDTH - 80, 6))

    def draw_menu(self, snap: Snapshot):
        cx, cy = WIDTH // 2, HEIGHT // 2
        self._text(self.menufont, "SPACE IMPACT - Retro Clone", COLOR_HUD, (cx, cy - 90), center=True)
        self._text(self.menufont, "Press 1 -> Level Mode", COLOR_TEXT, (cx, cy - 45), center=True)
        self._text(self.menufont, "Press 2 -> Endless Mode", COLOR_TEXT, (cx, cy - 15), center=True)
        if int(snap.now_ms // MENU_BLINK_MS) % 2 == 0:
            self._text(self.menufont, "PRESS START", COLOR_HIGHLIGHT, (cx, cy + 30), center=True)
        if snap.leaderboard:
            best = ", ".join(str(v) for v in snap.leaderboard[:3])
            self._text(self.font, f"Endless best: {best}", COLOR_TEXT, (cx, cy + 80), center=True)

    def draw_countdown(self, snap: Snapshot):
        img = self.bigfont.render(snap.countdown_label, True, COLOR_HIGHLIGHT)
        self.surface.blit(img, img.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

    def draw_game_over(self, snap: Snapshot):
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.surface.blit(overlay, (0, 0))
        cx = WIDTH // 2
        top = 60 if snap.mode == MODE_ENDLESS else HEIGHT // 2 - 40
        self._text(self.titlefont, "GAME OVER", COLOR_TEXT, (cx, top), center=True)
        self._text(self.font, f"Score: {snap.score}", COLOR_TEXT, (cx, top + 30), center=True)
        self._text(self.font, "Press R to Restart", COLOR_TEXT, (cx, top + 54), center=True)
        self._text(self.font, "Press M for Menu", COLOR_TEXT, (cx, top + 74), center=True)
        if snap.mode == MODE_ENDLESS:
            self._text(self.font, "Top Scores:", COLOR_HIGHLIGHT, (cx, top + 104), center=True)
            for i, v in enumerate(snap.leaderboard):
                self._text(self.font, f"{i + 1}. {v}", COLOR_TEXT, (cx, top + 124 + i * 16), center=True)

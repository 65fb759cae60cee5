"""
Settings and constants for Space Impact.

Everything is in logical playfield units and ticks. A tick is one frame of the
60 FPS loop; durations other than the countdown are counted in ticks.
"""
import logging
import os

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 1:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


# ============================
# DISPLAY
# ============================
WIDTH, HEIGHT = 640, 368
FPS = 60
TITLE = "Space Impact - Retro Clone"
SCALE = _env_int("SPACEIMPACT_SCALE", 2)
LOG_LEVEL = os.environ.get("SPACEIMPACT_LOG_LEVEL", "WARNING").upper()

LEADERBOARD_PATH = os.environ.get(
    "SPACEIMPACT_LEADERBOARD",
    os.path.join(os.path.dirname(__file__), "leaderboard.json"),
)
LEADERBOARD_SIZE = 10

# Colors
COLOR_BG = (0, 0, 0)
COLOR_STAR = (255, 255, 255)
COLOR_HUD = (0, 255, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_HIGHLIGHT = (255, 255, 0)
COLOR_SHIP = (0, 255, 255)
COLOR_ENEMY = (255, 0, 0)
COLOR_BOSS = (136, 0, 0)
COLOR_BULLET = (255, 255, 0)
COLOR_POWERUP_LIFE = (0, 255, 0)
COLOR_POWERUP_DOUBLE = (0, 255, 255)
COLOR_EXPLOSION = (255, 255, 255)

# ============================
# SCENES & MODES
# ============================
SCENE_MENU = "MENU"
SCENE_COUNTDOWN = "COUNTDOWN"
SCENE_PLAYING = "PLAYING"
SCENE_GAME_OVER = "GAME_OVER"

MODE_LEVEL = "level"
MODE_ENDLESS = "endless"
MODES = (MODE_LEVEL, MODE_ENDLESS)

COUNTDOWN_SECONDS = 3
MENU_BLINK_MS = 500

# ============================
# GAMEPLAY
# ============================
START_LIVES = 3
START_LEVEL = 1
LEVEL_SCORE_STEP = 200

SHIP_SIZE = (32, 32)
SHIP_SPEED = 4
SHIP_START_X = 40

BULLET_SIZE = (8, 6)
BULLET_SPEED = 6
FIRE_INTERVAL = 20
FIRE_INTERVAL_DOUBLE = 12
DOUBLE_SHOT_TICKS = 600

ENEMY_SPAWN_TICKS = 60
POWERUP_SPAWN_TICKS = 500

# Difficulty scaling
LEVEL_DIFFICULTY_STEP = 0.4
ENDLESS_DIFFICULTY_STEP = 0.25

# Enemy variants. Bands are upper bounds of a cumulative draw in [0, 1).
ENEMY_NORMAL = "normal"
ENEMY_FAST = "fast"
ENEMY_ZIGZAG = "zigzag"
ENEMY_MINIBOSS = "miniboss"
ENEMY_BANDS = (
    (ENEMY_NORMAL, 0.55),
    (ENEMY_FAST, 0.78),
    (ENEMY_ZIGZAG, 0.95),
    (ENEMY_MINIBOSS, 1.0),
)
# variant: (size, base speed, speed scale, base hp, hp scale)
ENEMY_STATS = {
    ENEMY_NORMAL: (28, 2.0, 1.0, 1, 0.0),
    ENEMY_FAST: (20, 3.5, 1.2, 1, 0.0),
    ENEMY_ZIGZAG: (24, 2.0, 1.0, 2, 0.0),
    ENEMY_MINIBOSS: (44, 1.2, 0.3, 6, 2.0),
}
ENEMY_POINTS = 5
MINIBOSS_POINTS = 15
ZIGZAG_PERIOD_MS = 200
ZIGZAG_AMPLITUDE = 2

POWERUP_LIFE = "life"
POWERUP_DOUBLE = "double"
POWERUP_SIZE = (20, 20)
POWERUP_SPEED = 2

EXPLOSION_TICKS = 20

BOSS_SIZE = (128, 128)
BOSS_SPEED = 1
BOSS_BASE_HP = 25
BOSS_HP_PER_LEVEL = 10
BOSS_POINTS = 100
BOSS_STOP_MARGIN = 100

STAR_COUNT = 120

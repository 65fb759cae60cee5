import random

import pytest

from spaceimpact.entities import Enemy
from spaceimpact.game import GameController
from spaceimpact.leaderboard import load_leaderboard, save_leaderboard
from spaceimpact.settings import (
    MODE_ENDLESS,
    MODE_LEVEL,
    SCENE_COUNTDOWN,
    SCENE_GAME_OVER,
    SCENE_MENU,
    SCENE_PLAYING,
)

from .conftest import hush


@pytest.fixture
def board(tmp_path):
    return str(tmp_path / "leaderboard.json")


@pytest.fixture
def controller(board):
    return GameController(rng=random.Random(3), leaderboard_path=board)


def start_playing(c, mode=MODE_LEVEL):
    assert c.select_mode(mode, 0)
    c.update(3000)
    assert c.scene == SCENE_PLAYING
    hush(c.state)
    return c.state


def kill_ship(c):
    state = c.state
    state.lives = 1
    ship = state.ship
    state.enemies.append(Enemy(ship.x + 10, ship.y + 2, 28, 28))
    c.update(5000)


def test_starts_in_menu(controller):
    snap = controller.snapshot()
    assert snap.scene == SCENE_MENU
    assert snap.mode is None
    assert snap.score == 0
    assert snap.lives == 3
    assert snap.countdown is None


def test_restart_and_menu_ignored_before_mode(controller):
    controller.restart(0)
    assert controller.scene == SCENE_MENU
    assert controller.state is None
    controller.go_to_menu()
    assert controller.scene == SCENE_MENU


def test_unknown_mode_rejected(controller):
    with pytest.raises(ValueError):
        controller.select_mode("versus", 0)


def test_countdown_sequence(controller):
    controller.select_mode(MODE_LEVEL, 10_000)
    assert controller.scene == SCENE_COUNTDOWN
    seen = []
    for now in (10_000, 10_999, 11_000, 12_500, 12_999):
        controller.update(now)
        seen.append(controller.snapshot().countdown_label)
    assert seen == ["3", "3", "2", "1", "1"]
    assert controller.scene == SCENE_COUNTDOWN

    controller.update(13_000)
    snap = controller.snapshot()
    assert snap.countdown_label == "GO!"
    assert controller.scene == SCENE_PLAYING

    controller.update(13_016)
    assert controller.snapshot().countdown is None


def test_entities_frozen_during_countdown(controller):
    controller.select_mode(MODE_LEVEL, 0)
    controller.set_key("right", True)
    for now in range(0, 2900, 16):
        controller.update(now)
    state = controller.state
    assert state.bullet_timer == 0
    assert state.ship.x == 40
    assert state.bullets == []


def test_mode_keys_only_work_in_menu(controller):
    start_playing(controller)
    assert not controller.select_mode(MODE_ENDLESS, 4000)
    assert controller.mode == MODE_LEVEL


def test_stars_move_in_menu(controller):
    star = controller.starfield.stars[0]
    before = (star.x, star.y)
    controller.update(0)
    assert (star.x, star.y) != before


def test_playing_steps_simulation(controller):
    state = start_playing(controller)
    controller.set_key("up", True)
    controller.update(3016)
    assert state.ship.y == 168 - 4
    controller.set_key("up", False)
    controller.update(3032)
    assert state.ship.y == 168 - 4


def test_restart_mid_run_resets(controller):
    state = start_playing(controller, MODE_ENDLESS)
    state.score = 90
    state.lives = 1
    state.enemies.append(Enemy(400, 10, 28, 28))
    state.ship.x = 200
    controller.restart(7000)
    assert controller.scene == SCENE_COUNTDOWN
    assert controller.mode == MODE_ENDLESS
    fresh = controller.state
    assert fresh is not state
    assert (fresh.score, fresh.lives, fresh.level, fresh.level_target) == (0, 3, 1, 200)
    assert fresh.enemies == [] and fresh.bullets == [] and fresh.powerups == []
    assert fresh.explosions == [] and fresh.boss is None
    assert fresh.ship.x == 40


def test_go_to_menu(controller):
    start_playing(controller)
    controller.set_key("down", True)
    controller.go_to_menu()
    assert controller.scene == SCENE_MENU
    assert controller.mode is None
    assert controller.state is None
    assert not controller.keys.down
    assert controller.select_mode(MODE_ENDLESS, 0)


def test_endless_game_over_updates_leaderboard(board):
    save_leaderboard([500, 300, 100], board)
    c = GameController(rng=random.Random(3), leaderboard_path=board)
    assert c.leaderboard == [500, 300, 100]
    start_playing(c, MODE_ENDLESS)
    c.state.score = 150
    kill_ship(c)
    assert c.scene == SCENE_GAME_OVER
    assert c.snapshot().game_over
    assert c.leaderboard == [500, 300, 150, 100]
    assert load_leaderboard(board) == [500, 300, 150, 100]
    assert c.snapshot().leaderboard == (500, 300, 150, 100)


def test_level_game_over_leaves_leaderboard_alone(controller, board):
    start_playing(controller, MODE_LEVEL)
    controller.state.score = 150
    kill_ship(controller)
    assert controller.scene == SCENE_GAME_OVER
    assert controller.leaderboard == []
    assert load_leaderboard(board) == []


def test_game_over_is_frozen(controller):
    start_playing(controller)
    kill_ship(controller)
    state = controller.state
    positions = [(e.x, e.y) for e in state.enemies]
    ship = (state.ship.x, state.ship.y)
    controller.set_key("up", True)
    for now in range(5000, 6000, 16):
        controller.update(now)
    assert [(e.x, e.y) for e in state.enemies] == positions
    assert (state.ship.x, state.ship.y) == ship
    assert controller.scene == SCENE_GAME_OVER


def test_restart_from_game_over(controller):
    start_playing(controller, MODE_ENDLESS)
    kill_ship(controller)
    controller.restart(9000)
    assert controller.scene == SCENE_COUNTDOWN
    assert controller.mode == MODE_ENDLESS
    assert not controller.state.game_over


def test_describe(controller):
    assert "no run" in controller.describe()
    start_playing(controller)
    assert "Lives 3" in controller.describe()


def test_stars_move_during_countdown(controller):
    controller.select_mode(MODE_LEVEL, 0)
    star = controller.starfield.stars[0]
    before = (star.x, star.y)
    controller.update(500)
    assert controller.scene == SCENE_COUNTDOWN
    assert (star.x, star.y) != before


def test_restart_during_countdown_restarts_it(controller):
    controller.select_mode(MODE_LEVEL, 0)
    controller.update(2500)
    assert controller.snapshot().countdown_label == "1"
    first = controller.state
    controller.restart(2600)
    assert controller.scene == SCENE_COUNTDOWN
    assert controller.countdown_start == 2600
    assert controller.state is not first
    controller.update(3000)
    assert controller.scene == SCENE_COUNTDOWN
    assert controller.snapshot().countdown_label == "3"

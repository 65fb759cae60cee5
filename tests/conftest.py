import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from spaceimpact.settings import MODE_LEVEL
from spaceimpact.simulation import SimulationState


class FixedRandom(random.Random):
    """Random that replays a fixed list of ``random()`` values."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def hush(state):
    """Push the spawn timers far back so nothing appears on its own."""
    state.enemy_timer = -10 ** 6
    state.powerup_timer = -10 ** 6
    return state


@pytest.fixture
def make_state():
    def _make(mode=MODE_LEVEL, **kwargs):
        return hush(SimulationState(mode, rng=random.Random(0), **kwargs))
    return _make

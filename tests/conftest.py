import os
import random

# Headless SDL so pygame surfaces and fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from classic_snake.game import new_game_state


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return new_game_state("MEDIUM", rng)

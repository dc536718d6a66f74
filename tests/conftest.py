import math
import os
import random

# headless pygame: no window, no audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

import BassetRun


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def world(rng):
    return BassetRun.World(rng)


@pytest.fixture
def quiet_world(world):
    """A world whose spawn timers never fire, for hand-placed scenarios."""
    world.obstacle_timer = math.inf
    world.treat_timer = math.inf
    return world

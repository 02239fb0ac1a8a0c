import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so gridsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from gridsnake.core.area import Area
from gridsnake.core.engine import TickEngine
from gridsnake.core.food import Food
from gridsnake.core.interfaces import Cell, Direction

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def area():
    return Area(Cell(8, 8), Cell(50, 25))

@pytest.fixture
def engine_factory(area, rng):
    def make(seed=(10, 10), direction=Direction.DOWN, food=None, **kwargs):
        eng = TickEngine(kwargs.pop("area", area), Cell(*seed), direction, rng, **kwargs)
        if food is not None:
            # place food deterministically
            eng.state.food = Food(rng, [Cell(*c) for c in food])
        return eng
    return make

# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((120, 120))

@pytest.fixture
def rules_factory():
    from config import AppConfig
    from core.interfaces import Direction
    from core.snake_rules import Rules
    def make(snake, direction=Direction.DOWN, food=None, grid_size=5, seed=0):
        # start_len=1 keeps construction valid for any grid; state is then overwritten
        r = Rules(AppConfig(grid_size=grid_size, seed=seed))
        r.set_state({
            "snake": [list(p) for p in snake],
            "dir": direction.name,
            "food": list(food) if food is not None else None,
        })
        return r
    return make

class FakeClock:
    """Manual time source: the loop's sleep() advances it."""
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, sec: float) -> None:
        self.sleeps.append(sec)
        self.now += sec

@pytest.fixture
def fake_clock():
    return FakeClock()

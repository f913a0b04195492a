"""
Fixtures for the gridwalk test suite.

Everything here runs headless: games use MemorySurface and a fake scheduler.
Only test_scene.py imports arcade, and it never opens a window.
"""
import os
import tempfile

import pytest

# Keep log files out of the working tree; must be set before gridwalk imports.
os.environ.setdefault("GRIDWALK_LOG_DIR", tempfile.mkdtemp(prefix="gridwalk-logs-"))

from gridwalk.world.game import Game
from gridwalk.world.renderer import MemorySurface
from gridwalk.world.settings import GameSettings


class FakeScheduler:
    """Records scheduled callbacks; fire() stands in for the timer."""

    def __init__(self):
        self.calls = []

    def __call__(self, callback, interval):
        self.calls.append((callback, interval))

    def fire(self, times=1):
        for _ in range(times):
            for callback, interval in self.calls:
                callback(interval)


class FakeKeySource:
    """Collects key handlers the way a window does and replays key presses."""

    def __init__(self):
        self.handlers = []

    def __call__(self, handler):
        self.handlers.append(handler)

    def press(self, key):
        for handler in self.handlers:
            handler(key)


@pytest.fixture
def settings():
    """Default 10x10 settings: start (0, 0) facing right, 5 steps/s."""
    return GameSettings()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def keys():
    return FakeKeySource()


@pytest.fixture
def surface():
    return MemorySurface()


@pytest.fixture
def game(settings, surface, scheduler, keys):
    """A game wired to fakes but not yet running."""
    return Game(settings, surface=surface, scheduler=scheduler, key_binder=keys)


@pytest.fixture
def running_game(game):
    game.run()
    return game

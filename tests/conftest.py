"""
conftest.py
-----------
Shared pytest configuration and fixtures for Endless Runner tests.

Contains:
- Headless SDL setup so pygame never opens a window or audio device
- Fixtures for tuning, session, input and the core entities
- Mock surface helpers for draw-order assertions
"""

import os
import random

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from unittest.mock import MagicMock

from endless_runner.core.debug.debug_logger import LoggerConfig
from endless_runner.core.runtime.game_session import GameSession
from endless_runner.core.runtime.runner_config import RunnerConfig
from endless_runner.core.services.input_manager import InputState
from endless_runner.entities.enemy import Enemy
from endless_runner.entities.player import Player
from endless_runner.graphics.background_manager import Background
from endless_runner.systems.enemy_pool import EnemyPool


GAME_WIDTH = 1200
GAME_HEIGHT = 720


@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for every test."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Tuning & State
# ===========================================================

@pytest.fixture
def config():
    """Built-in defaults (independent of the bundled runner.json)."""
    return RunnerConfig.default()


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def input_state(config):
    return InputState(config.input.touch_threshold)


# ===========================================================
# Entities
# ===========================================================

@pytest.fixture
def player(config):
    return Player(GAME_WIDTH, GAME_HEIGHT, config.player)


@pytest.fixture
def background(config):
    return Background(GAME_WIDTH, GAME_HEIGHT, config.background)


@pytest.fixture
def make_enemy(config):
    """Factory for enemies at an explicit x (defaults to the spawn edge)."""
    def _make(x=None):
        enemy = Enemy(GAME_WIDTH, GAME_HEIGHT, config.enemy)
        if x is not None:
            enemy.x = x
        return enemy
    return _make


@pytest.fixture
def enemy_pool(config):
    return EnemyPool(GAME_WIDTH, GAME_HEIGHT, config.enemy, config.spawn,
                     rng=random.Random(1234))


# ===========================================================
# Test Utilities
# ===========================================================

def create_mock_surface(width=GAME_WIDTH, height=GAME_HEIGHT):
    """Mock pygame.Surface that records blit/fill calls."""
    surface = MagicMock()
    surface.get_width.return_value = width
    surface.get_height.return_value = height
    surface.get_size.return_value = (width, height)
    return surface


@pytest.fixture
def mock_surface():
    return create_mock_surface()


def run_frames(player, input_state, session, frames, enemies=(), delta_time=16):
    """Advance a player for a number of frames with fixed input."""
    for _ in range(frames):
        player.update(input_state, delta_time, list(enemies), session)

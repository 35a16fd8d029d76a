"""
Runtime configuration exports.

Provides game-wide constants and session state. These are lightweight and
import neither pygame nor the config loader.
"""

from endless_runner.core.runtime.game_settings import (
    Display,
    Timing,
    Assets,
    Debug,
)
from endless_runner.core.runtime.game_session import GameSession

__all__ = [
    # Display
    'Display',
    # Configuration
    'Timing',
    'Assets',
    # Debug
    'Debug',
    # Session
    'GameSession',
]

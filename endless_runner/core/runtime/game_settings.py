"""
game_settings.py
----------------
Centralized static constants for all game systems.

Entity tuning (speeds, sprite sheets, spawn timing) lives in
config/runner.json and is read through RunnerConfig; values here are the
engine-level settings that never change during a run.
"""

import os


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1200
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Endless Runner"
    CLEAR_COLOR = (0, 0, 0)


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Frame timing. All game timers run in milliseconds."""
    MS_PER_SECOND: float = 1000.0
    # Frames slower than this are reported under the "performance" category
    FRAME_TIME_WARNING: float = 1000.0 / 30


# ===========================================================
# Asset & Config Locations
# ===========================================================

class Assets:
    """Filesystem locations for bundled data."""
    PACKAGE_ROOT: str = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    CONFIG_DIR: str = os.path.join(PACKAGE_ROOT, "config")
    IMAGE_DIR: str = os.path.join(PACKAGE_ROOT, "assets", "images")

    RUNNER_CONFIG: str = "runner.json"
    HUD_CONFIG: str = os.path.join("ui", "hud.yaml")


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 5
    HITBOX_COLOR = (255, 255, 255)

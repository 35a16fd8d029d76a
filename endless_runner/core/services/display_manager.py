"""
display_manager.py
------------------
Window management and presentation of the fixed-size game surface.

Responsibilities:
- Window creation and fullscreen toggling
- Aspect ratio preservation with letterboxing
- Screen-to-game coordinate conversion
- Alerting the player when fullscreen cannot be entered
"""

import pygame

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_settings import Display


class DisplayManager:
    """
    Owns the window and scales the logical game surface into it.

    All game code draws onto get_game_surface() at Display.WIDTH x
    Display.HEIGHT; render() scales that surface into the window, centred
    with black bars when the aspect ratios differ.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT, fullscreen=False):
        """
        Args:
            game_width: Logical game resolution width
            game_height: Logical game resolution height
            fullscreen: Start in fullscreen mode
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window = None
        self.is_fullscreen = False

        self.scale = 1.0
        self.offset_x = 0
        self.offset_y = 0
        self.scaled_size = (game_width, game_height)

        # Called with a message when a display operation fails
        self.on_alert = None

        self._create_window(fullscreen=False)
        if fullscreen:
            self.toggle_fullscreen()

        mode = "Fullscreen" if self.is_fullscreen else f"Windowed ({game_width}x{game_height})"
        DebugLogger.init_sub(f"Display Mode: {mode}", level=1)

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self) -> bool:
        """
        Switch between windowed and fullscreen.

        On failure the alert callback receives the error message and the
        display is left exactly as it was.

        Returns:
            bool: True if the mode changed
        """
        entering = not self.is_fullscreen
        try:
            self._create_window(fullscreen=entering)
        except pygame.error as e:
            action = "enable" if entering else "exit"
            message = f"Error, can't {action} full-screen mode: {e}"
            DebugLogger.fail(message, category="display")
            if self.on_alert is not None:
                self.on_alert(message)
            return False

        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen -> {state}", category="display")
        return True

    def _create_window(self, fullscreen: bool):
        """Create the window; raises pygame.error without touching current state."""
        if fullscreen:
            window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            window = pygame.display.set_mode((self.game_width, self.game_height))

        self.window = window
        self.is_fullscreen = fullscreen
        pygame.display.set_caption(Display.CAPTION)
        self._calculate_scale()

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """The logical game surface (always game_width x game_height)."""
        return self.game_surface

    def render(self):
        """Scale the game surface into the window and flip."""
        if self.scaled_size == (self.game_width, self.game_height) and not (self.offset_x or self.offset_y):
            self.window.blit(self.game_surface, (0, 0))
        else:
            self.window.fill((0, 0, 0))
            scaled = pygame.transform.scale(self.game_surface, self.scaled_size)
            self.window.blit(scaled, (self.offset_x, self.offset_y))
        pygame.display.flip()

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def screen_to_game_pos(self, screen_x: float, screen_y: float) -> tuple:
        """Convert window coordinates to game-space coordinates."""
        game_x = (screen_x - self.offset_x) / self.scale
        game_y = (screen_y - self.offset_y) / self.scale
        return game_x, game_y

    def get_window_size(self) -> tuple:
        return self.window.get_size()

    # ===========================================================
    # Internal: Scaling
    # ===========================================================

    def _calculate_scale(self):
        """Fit the game surface into the window preserving aspect ratio."""
        window_width, window_height = self.window.get_size()

        self.scale = min(window_width / self.game_width, window_height / self.game_height)
        scaled_width = int(self.game_width * self.scale)
        scaled_height = int(self.game_height * self.scale)
        self.scaled_size = (scaled_width, scaled_height)

        self.offset_x = (window_width - scaled_width) // 2
        self.offset_y = (window_height - scaled_height) // 2

        DebugLogger.trace(
            f"Scale={self.scale:.3f}, Offset=({self.offset_x},{self.offset_y})",
            category="display",
        )

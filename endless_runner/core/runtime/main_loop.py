"""
main_loop.py
------------
Pygame runtime: window, event pump, frame pacing and presentation.

Responsibilities:
- Initialize pygame and the core services (display, input, drawing, HUD)
- Build the GameLoop from the runner config
- Drain input events every frame, tick the GameLoop while it is running
- Hold the last frame on screen during GAME_OVER until a restart
"""

import time

import pygame

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_loop import GameLoop
from endless_runner.core.runtime.game_settings import Display, Timing
from endless_runner.core.runtime.runner_config import RunnerConfig
from endless_runner.core.services.display_manager import DisplayManager
from endless_runner.core.services.input_manager import InputManager
from endless_runner.graphics.draw_manager import DrawManager
from endless_runner.ui.hud_manager import HUDManager


class MainLoop:
    """Owns pygame and drives the GameLoop at Display.FPS."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config=None, fullscreen=False, show_hitboxes=False, rng=None):
        """
        Args:
            config: RunnerConfig (loads config/runner.json if None)
            fullscreen: Start in fullscreen mode
            show_hitboxes: Start with the hitbox overlay visible
            rng: random.Random for spawn timing
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems(fullscreen)
        self._init_game(config, show_hitboxes, rng)
        self._bind_input()

        self.clock = pygame.time.Clock()
        self.running = True
        self._frozen_frame = None
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("Main Loop Runtime")

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self, fullscreen):
        self.display = DisplayManager(Display.WIDTH, Display.HEIGHT, fullscreen=False)
        self.draw_manager = DrawManager()
        self.hud = HUDManager()

        self.display.on_alert = self.hud.show_alert
        if fullscreen:
            self.display.toggle_fullscreen()

    def _init_game(self, config, show_hitboxes, rng):
        config = config or RunnerConfig.load()
        self.game = GameLoop.create(
            config,
            draw_manager=self.draw_manager,
            hud=self.hud,
            rng=rng,
            width=Display.WIDTH,
            height=Display.HEIGHT,
        )
        self.game.show_hitboxes = show_hitboxes
        self.game.session.last_timestamp = pygame.time.get_ticks()

    def _bind_input(self):
        self.input_manager = InputManager(self.game.input_state, display_manager=self.display)
        self.input_manager.on_restart = self._restart
        self.input_manager.on_toggle_fullscreen = self.display.toggle_fullscreen
        self.input_manager.on_toggle_hitboxes = self.game.toggle_hitboxes
        self.input_manager.on_quit = self.stop

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Run frames until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            frame_ms = self.clock.tick(Display.FPS)
            self._handle_events()
            if not self.running:
                break

            start = time.perf_counter()
            self._frame(frame_ms)
            self._check_slow_frame((time.perf_counter() - start) * Timing.MS_PER_SECOND)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _frame(self, frame_ms):
        surface = self.display.get_game_surface()

        if self.game.running:
            self.game.tick(pygame.time.get_ticks(), surface)
            if not self.game.running:
                self._frozen_frame = surface.copy()
        else:
            # Loop halted: keep the game-over frame and only animate alerts
            surface.blit(self._frozen_frame, (0, 0))
            self.hud.update(frame_ms)
            self.hud.draw_alert(surface)

        self.display.render()

    def _handle_events(self):
        game_over = self.game.session.game_over
        for event in pygame.event.get():
            self.input_manager.handle_event(event, game_over=game_over)

    # ===========================================================
    # Actions
    # ===========================================================

    def _restart(self):
        if self.game.restart(pygame.time.get_ticks()):
            self._frozen_frame = None

    def stop(self):
        self.running = False
        DebugLogger.action("Quit signal received")

    def _check_slow_frame(self, frame_time_ms):
        """Log slow frames, at most once per second."""
        if frame_time_ms <= Timing.FRAME_TIME_WARNING:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f}ms", category="performance")

"""
hud_manager.py
--------------
Status text overlay: score, game-over prompt and transient alerts.

Layout (font, colors, positions, messages) is read from config/ui/hud.yaml;
every line is drawn twice, a dark shadow first and the colored text on top.
"""

import pygame

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_settings import Assets
from endless_runner.core.services.config_manager import load_config


DEFAULT_HUD_CONFIG = {
    "font": {"name": "helvetica", "size": 40},
    "shadow": {"color": [0, 0, 0], "offset": [-2, -2]},
    "score": {"text": "Score: {score}", "position": [22, 22],
              "color": [255, 255, 255], "align": "left"},
    "game_over": {"text": "Game Over, press Enter to restart or swipe down: ",
                  "position": [602, 172], "color": [255, 255, 255], "align": "center"},
    "best": {"text": "Best: {high_score}", "position": [602, 232],
             "color": [255, 255, 255], "align": "center"},
    "alert": {"position": [602, 640], "color": [255, 220, 80],
              "align": "center", "duration": 4000},
}


class HUDManager:
    """Draws the per-frame status text onto the game surface."""

    def __init__(self, config=None, font=None):
        """
        Args:
            config: HUD layout dict (loads config/ui/hud.yaml if None)
            font: pygame.font.Font to render with (SysFont from config if None)
        """
        self.config = config or load_config(Assets.HUD_CONFIG, DEFAULT_HUD_CONFIG)
        self._font = font

        self.alert_message = None
        self.alert_remaining = 0.0

        DebugLogger.init_entry("HUDManager")

    @property
    def font(self):
        """Created lazily so the HUD can be built before pygame.font.init()."""
        if self._font is None:
            font_cfg = self.config["font"]
            self._font = pygame.font.SysFont(font_cfg["name"], font_cfg["size"])
        return self._font

    # ===========================================================
    # Alerts
    # ===========================================================

    def show_alert(self, message: str, duration: float = None):
        """Show a message near the bottom of the screen for duration ms."""
        self.alert_message = message
        self.alert_remaining = duration if duration is not None else self.config["alert"]["duration"]
        DebugLogger.action(f"Alert: {message}", category="ui")

    def update(self, delta_time: float):
        """Count down the active alert."""
        if self.alert_message is None:
            return
        self.alert_remaining -= delta_time
        if self.alert_remaining <= 0:
            self.alert_message = None
            self.alert_remaining = 0.0

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface, session):
        """
        Draw the score, and the game-over prompt when the session is over.

        Args:
            surface: Target surface
            session: GameSession providing score, high score and game_over
        """
        values = {"score": session.score, "high_score": session.high_score}

        self._draw_line(surface, self.config["score"], values)
        if session.game_over:
            self._draw_line(surface, self.config["game_over"], values)
            self._draw_line(surface, self.config["best"], values)

        self.draw_alert(surface)

    def draw_alert(self, surface):
        """Draw the active alert, if any."""
        if self.alert_message:
            alert_cfg = dict(self.config["alert"], text=self.alert_message)
            self._draw_line(surface, alert_cfg, {})

    def _draw_line(self, surface, line_cfg, values):
        text = line_cfg["text"].format(**values) if values else line_cfg["text"]
        x, y = line_cfg["position"]
        dx, dy = self.config["shadow"]["offset"]

        self._blit_text(surface, text, (x + dx, y + dy),
                        tuple(self.config["shadow"]["color"]), line_cfg["align"])
        self._blit_text(surface, text, (x, y), tuple(line_cfg["color"]), line_cfg["align"])

    def _blit_text(self, surface, text, position, color, align):
        rendered = self.font.render(text, True, color)
        x, y = position
        if align == "center":
            x -= rendered.get_width() / 2
        surface.blit(rendered, (x, y))

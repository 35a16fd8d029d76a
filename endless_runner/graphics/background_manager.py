"""
background_manager.py
---------------------
Endless horizontally scrolling background.

The image scrolls left at a constant speed. Two copies are drawn side by
side so the seam is never visible, and the offset snaps back to 0 once the
first copy has fully left the screen.
"""

from endless_runner.core.debug.debug_logger import DebugLogger


class Background:
    """Single scrolling background layer."""

    __slots__ = ("game_width", "game_height", "image", "x", "y", "width", "height", "speed")

    def __init__(self, game_width, game_height, tuning, image=None):
        """
        Args:
            game_width, game_height: Game area size
            tuning: BackgroundTuning (image size and scroll speed)
            image: Background surface (None skips drawing)
        """
        self.game_width = game_width
        self.game_height = game_height
        self.image = image
        self.x = 0
        self.y = 0
        self.width = tuning.width
        self.height = tuning.height
        self.speed = tuning.speed

        DebugLogger.init_entry("Background")
        DebugLogger.init_sub(f"{self.width}x{self.height}, speed={self.speed}")

    # ===========================================================
    # Update
    # ===========================================================

    def update(self):
        """Scroll one frame; wrap once the whole image has passed."""
        self.x -= self.speed
        if self.x < 0 - self.width:
            self.x = 0

    def restart(self):
        self.x = 0

    # ===========================================================
    # Render
    # ===========================================================

    def draw(self, surface):
        """Draw the image and a second copy right after it."""
        if self.image is None:
            return
        surface.blit(self.image, (self.x, self.y))
        surface.blit(self.image, (self.x + self.width - self.speed, self.y))

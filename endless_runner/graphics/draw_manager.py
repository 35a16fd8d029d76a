"""
draw_manager.py
---------------
Image loading and caching for sprites and backgrounds.

Responsibilities:
- Load images from the bundled asset directory, scaled once at load time
- Substitute a solid placeholder when an image is missing, so the game is
  playable without art
- Keep every loaded surface in images by key
"""

import os

import pygame

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_settings import Assets


PLACEHOLDER_COLORS = {
    "player": (240, 200, 60),
    "enemy": (200, 60, 60),
    "background": (40, 60, 90),
}


class DrawManager:
    """Loads and caches every surface the game blits."""

    def __init__(self, image_dir=None):
        """
        Args:
            image_dir: Directory to resolve image filenames against
        """
        self.image_dir = image_dir or Assets.IMAGE_DIR
        self.images = {}
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, filename, size, scale=1.0):
        """
        Load, scale and cache an image.

        Args:
            key: Cache identifier ("player", "enemy", "background")
            filename: File inside the image directory
            size: (width, height) expected after scaling; used for the placeholder
            scale: Scale factor applied to the loaded image

        Returns:
            pygame.Surface: The loaded image or a placeholder of the given size
        """
        path = os.path.join(self.image_dir, filename)
        try:
            img = pygame.image.load(path)
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image {path} ({e}) - using placeholder", category="render")
            img = self._placeholder(key, size)
        else:
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
            if scale != 1.0:
                w, h = img.get_size()
                img = pygame.transform.scale(img, (int(w * scale), int(h * scale)))
            DebugLogger.init_sub(f"Loaded image '{key}' {img.get_size()}")

        self.images[key] = img
        return img

    def load_sprite_sheet(self, key, sheet, columns, rows):
        """
        Load a sprite sheet described by a SpriteSheet tuning record.

        Args:
            sheet: SpriteSheet (image, frame size, scale)
            columns: Frames per row (for the placeholder size)
            rows: Number of rows (for the placeholder size)
        """
        size = (int(sheet.width * columns), int(sheet.height * rows))
        return self.load_image(key, sheet.image, size, scale=sheet.scale)

    # ===========================================================
    # Internal
    # ===========================================================

    @staticmethod
    def _placeholder(key, size):
        surface = pygame.Surface((max(int(size[0]), 1), max(int(size[1]), 1)), pygame.SRCALPHA)
        surface.fill(PLACEHOLDER_COLORS.get(key, (255, 0, 255)))
        return surface

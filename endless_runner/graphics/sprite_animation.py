"""
sprite_animation.py
-------------------
Frame timer for sprite-sheet animation.

Sheets are laid out as rows of equally sized frames. The animation steps
one column every frame_interval milliseconds regardless of the render rate,
and wraps back to column 0 after max_frame.
"""

import pygame

from endless_runner.core.runtime.game_settings import Timing


class SpriteAnimation:
    """Column/row cursor into a sprite sheet driven by elapsed time."""

    __slots__ = ("frame_x", "frame_y", "max_frame", "frame_timer", "frame_interval")

    def __init__(self, fps: float, max_frame: int, row: int = 0):
        """
        Args:
            fps: Animation frames per second (independent of game FPS)
            max_frame: Last column index of the current row
            row: Sheet row to play
        """
        self.frame_x = 0
        self.frame_y = row
        self.max_frame = max_frame
        self.frame_timer = 0.0
        self.frame_interval = Timing.MS_PER_SECOND / fps

    def update(self, delta_time: float) -> bool:
        """
        Accumulate elapsed time; step one column once the interval is exceeded.

        The tick that crosses the interval only advances the frame, it does
        not carry leftover time into the next interval.

        Returns:
            bool: True if the frame changed
        """
        if self.frame_timer > self.frame_interval:
            if self.frame_x >= self.max_frame:
                self.frame_x = 0
            else:
                self.frame_x += 1
            self.frame_timer = 0.0
            return True

        self.frame_timer += delta_time
        return False

    def set_row(self, row: int, max_frame: int):
        """Switch sheet row (e.g. running -> jumping) keeping the column."""
        self.frame_y = row
        self.max_frame = max_frame

    def source_rect(self, frame_width: float, frame_height: float) -> pygame.Rect:
        """Area of the sheet holding the current frame."""
        return pygame.Rect(
            int(self.frame_x * frame_width),
            int(self.frame_y * frame_height),
            int(frame_width),
            int(frame_height),
        )

"""
enemy.py
--------
Ground enemy that runs in from the right edge towards the player.

Responsibilities
----------------
- Move left at a constant speed along the ground.
- Animate its sprite sheet on the shared frame-timer pattern.
- Flag itself for deletion once fully off the left edge, scoring one point
  for the player at that moment.
"""

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.graphics.sprite_animation import SpriteAnimation
from endless_runner.systems.collision_hitbox import CircleHitbox


class Enemy:
    """A single enemy instance owned by the EnemyPool."""

    __slots__ = (
        "game_width", "game_height", "tuning", "image",
        "width", "height", "x", "y", "speed",
        "animation", "marked_for_deletion",
    )

    def __init__(self, game_width, game_height, tuning, image=None):
        """
        Args:
            game_width: Width of the game area; the enemy starts just past it
            game_height: Height of the game area; the enemy stands on its floor
            tuning: EnemyTuning from RunnerConfig
            image: Sprite sheet surface (None skips drawing)
        """
        self.game_width = game_width
        self.game_height = game_height
        self.tuning = tuning
        self.image = image

        self.width = tuning.sprite.width
        self.height = tuning.sprite.height
        self.x = self.game_width
        self.y = self.game_height - self.height
        self.speed = tuning.speed

        self.animation = SpriteAnimation(tuning.fps, tuning.max_frame)
        self.marked_for_deletion = False

    def hitbox(self) -> CircleHitbox:
        spec = self.tuning.hitbox
        return CircleHitbox.for_entity(self, spec.offset, spec.radius_divisor)

    # ===========================================================
    # Update Logic
    # ===========================================================

    def update(self, delta_time, session):
        """
        Animate, move left and score once the enemy has left the screen.

        Args:
            delta_time: Elapsed milliseconds since the previous frame
            session: GameSession credited when the enemy escapes
        """
        if self.marked_for_deletion:
            return

        self.animation.update(delta_time)
        self.x -= self.speed

        if self.x < -self.width:
            self.marked_for_deletion = True
            session.add_score(1)
            DebugLogger.trace(
                f"Enemy left the screen, score {session.score}",
                category="entity_cleanup",
            )

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        if self.image is None:
            return
        area = self.animation.source_rect(self.width, self.height)
        surface.blit(self.image, (self.x, self.y), area)

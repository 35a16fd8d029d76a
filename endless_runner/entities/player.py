"""
player.py
---------
The runner controlled by the user.

Responsibilities
----------------
- Detect collisions with enemies and end the session on contact.
- Animate the sprite sheet (running row on the ground, jumping row airborne).
- Translate held input tokens into horizontal speed and jumps.
- Integrate position with gravity and keep the player inside the game area.

Movement is per frame: speed, vy and weight are pixels per frame, while the
animation timer runs on elapsed milliseconds.
"""

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.services.input_manager import MOVE_RIGHT, MOVE_LEFT, JUMP
from endless_runner.graphics.sprite_animation import SpriteAnimation
from endless_runner.systems.collision_hitbox import CircleHitbox


class Player:
    """Player runner: position, vertical velocity and animation state."""

    def __init__(self, game_width, game_height, tuning, image=None):
        """
        Args:
            game_width: Width of the game area in pixels
            game_height: Height of the game area in pixels
            tuning: PlayerTuning from RunnerConfig
            image: Sprite sheet surface, already scaled (None skips drawing)
        """
        self.game_width = game_width
        self.game_height = game_height
        self.tuning = tuning
        self.image = image

        self.width = tuning.sprite.width
        self.height = tuning.sprite.height

        self.x = tuning.start_x
        self.y = self.game_height - self.height
        self.speed = 0
        self.vy = 0

        run = tuning.run_animation
        self.animation = SpriteAnimation(tuning.fps, run.max_frame, run.row)

        DebugLogger.init_entry("Player")
        DebugLogger.init_sub(f"Size {self.width:.0f}x{self.height:.0f}, start ({self.x}, {self.y})")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def restart(self):
        """Back to the start position, standing and running. Leaves game_over alone."""
        self.x = self.tuning.start_x
        self.y = self.game_height - self.height
        self.speed = 0
        self.vy = 0
        run = self.tuning.run_animation
        self.animation.set_row(run.row, run.max_frame)

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def ground_y(self):
        return self.game_height - self.height

    def on_ground(self) -> bool:
        # Exact comparison: jump arcs are integral so the player lands on ground_y
        return self.y == self.ground_y

    def hitbox(self) -> CircleHitbox:
        spec = self.tuning.hitbox
        return CircleHitbox.for_entity(self, spec.offset, spec.radius_divisor)

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, input_state, delta_time, enemies, session):
        """
        Advance the player one frame.

        Args:
            input_state: InputState with the currently held tokens
            delta_time: Elapsed milliseconds since the previous frame
            enemies: Live enemies to test for collision
            session: GameSession; game_over is set on contact
        """
        self._check_collisions(enemies, session)
        self.animation.update(delta_time)
        self._apply_controls(input_state)
        self._move_horizontal()
        self._move_vertical()

    def _check_collisions(self, enemies, session):
        if session.game_over:
            return

        own = self.hitbox()
        for enemy in enemies:
            other = enemy.hitbox()
            if own.overlaps(other):
                DebugLogger.state(
                    f"Hit enemy at ({enemy.x:.0f}, {enemy.y:.0f}), "
                    f"distance {own.distance_to(other):.1f}",
                    category="collision",
                )
                session.end()
                return

    def _apply_controls(self, input_state):
        """One branch per frame: right, else left, else jump from the ground, else idle."""
        tuning = self.tuning
        if input_state.any_of(MOVE_RIGHT):
            self.speed = tuning.speed
        elif input_state.any_of(MOVE_LEFT):
            self.speed = -tuning.speed
        elif input_state.any_of(JUMP) and self.on_ground():
            self.speed = 0
            self.vy -= tuning.jump_impulse
        else:
            self.speed = 0

    def _move_horizontal(self):
        self.x += self.speed
        if self.x < 0:
            self.x = 0
        elif self.x > self.game_width - self.width:
            self.x = self.game_width - self.width

    def _move_vertical(self):
        self.y += self.vy
        if not self.on_ground():
            self.vy += self.tuning.weight
            jump = self.tuning.jump_animation
            self.animation.set_row(jump.row, jump.max_frame)
        else:
            self.vy = 0
            run = self.tuning.run_animation
            self.animation.set_row(run.row, run.max_frame)

        if self.y > self.ground_y:
            self.y = self.ground_y

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, surface):
        """Blit the current animation frame."""
        if self.image is None:
            return
        area = self.animation.source_rect(self.width, self.height)
        surface.blit(self.image, (self.x, self.y), area)

"""
game_loop.py
------------
Per-frame orchestration of a run.

Responsibilities
----------------
- Own the GameSession and every per-frame collaborator
- Run one frame in a fixed order: background, player, enemies, status text
- Track the RUNNING / GAME_OVER state and report whether to keep scheduling
- Reset the world in place on restart
"""

from enum import Enum

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.game_session import GameSession
from endless_runner.core.runtime.game_settings import Display, Debug
from endless_runner.core.services.input_manager import InputState
from endless_runner.entities.player import Player
from endless_runner.graphics.background_manager import Background
from endless_runner.systems.enemy_pool import EnemyPool


class LoopState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameLoop:
    """
    Ties input, player, background and enemies together for each frame.

    The loop keeps rescheduling only while RUNNING: tick() returns False
    from the frame the player is hit, and nothing advances again until
    restart() is called.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, player, background, enemy_pool, input_state=None,
                 session=None, hud=None):
        """
        Args:
            player: Player singleton for the process
            background: Background singleton for the process
            enemy_pool: EnemyPool owning live enemies and spawn timing
            input_state: InputState read by the player (fresh one if None)
            session: GameSession (fresh one if None)
            hud: Optional HUDManager for the status text
        """
        self.player = player
        self.background = background
        self.enemy_pool = enemy_pool
        self.input_state = input_state if input_state is not None else InputState()
        self.session = session if session is not None else GameSession()
        self.hud = hud

        self.state = LoopState.RUNNING
        self.show_hitboxes = Debug.HITBOX_VISIBLE
        self.frame_count = 0

        DebugLogger.init_entry("GameLoop")

    @classmethod
    def create(cls, config, draw_manager=None, hud=None, rng=None,
               width=Display.WIDTH, height=Display.HEIGHT):
        """
        Build a loop and its entities from a RunnerConfig.

        Args:
            config: RunnerConfig tuning
            draw_manager: DrawManager to load sprite images (no images if None)
            hud: Optional HUDManager
            rng: random.Random for spawn timing
        """
        player_image = enemy_image = background_image = None
        if draw_manager is not None:
            player_cfg = config.player
            columns = max(player_cfg.run_animation.max_frame, player_cfg.jump_animation.max_frame) + 1
            rows = max(player_cfg.run_animation.row, player_cfg.jump_animation.row) + 1
            player_image = draw_manager.load_sprite_sheet("player", player_cfg.sprite, columns, rows)
            enemy_image = draw_manager.load_sprite_sheet(
                "enemy", config.enemy.sprite, config.enemy.max_frame + 1, 1
            )
            background_image = draw_manager.load_image(
                "background", config.background.image,
                (config.background.width, config.background.height),
            )

        player = Player(width, height, config.player, player_image)
        background = Background(width, height, config.background, background_image)
        pool = EnemyPool(width, height, config.enemy, config.spawn, enemy_image, rng=rng)
        input_state = InputState(config.input.touch_threshold)

        return cls(player, background, pool, input_state, hud=hud)

    # ===========================================================
    # Frame
    # ===========================================================

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def tick(self, timestamp, surface=None) -> bool:
        """
        Run one frame.

        Args:
            timestamp: Current time in milliseconds
            surface: Surface to draw on (None runs logic only)

        Returns:
            bool: True if another frame should be scheduled
        """
        if not self.running:
            return False

        delta_time = self.session.advance_clock(timestamp)
        self.frame_count += 1

        if surface is not None:
            surface.fill(Display.CLEAR_COLOR)

        self._draw(self.background, surface)
        self.background.update()

        self._draw(self.player, surface)
        self.player.update(self.input_state, delta_time, self.enemy_pool.enemies, self.session)

        self.enemy_pool.tick(delta_time, self.session, surface)

        if self.session.game_over:
            self.state = LoopState.GAME_OVER
            stats = self.enemy_pool.get_stats()
            DebugLogger.state(
                f"Loop -> GAME_OVER (score={self.session.score}, frames={self.frame_count}, "
                f"spawned={stats['spawned']})",
                category="game_state",
            )

        if self.hud is not None:
            self.hud.update(delta_time)
            if surface is not None:
                self.hud.draw(surface, self.session)

        if self.show_hitboxes and surface is not None:
            self._draw_hitboxes(surface)

        return self.running

    @staticmethod
    def _draw(component, surface):
        if surface is not None:
            component.draw(surface)

    def _draw_hitboxes(self, surface):
        self.player.hitbox().draw_debug(surface)
        for enemy in self.enemy_pool.enemies:
            enemy.hitbox().draw_debug(surface)

    # ===========================================================
    # Control
    # ===========================================================

    def restart(self, timestamp=None) -> bool:
        """
        Start a new run after a game over.

        Resets player, background, enemy pool, score and game-over flag.
        The next tick measures its delta from timestamp.

        Returns:
            bool: True if the loop was restarted (False while still running)
        """
        if self.running:
            DebugLogger.trace("Restart ignored while running", category="game_state")
            return False

        self.player.restart()
        self.background.restart()
        self.enemy_pool.clear()
        self.session.reset(timestamp)
        self.state = LoopState.RUNNING
        self.frame_count = 0

        DebugLogger.state("Loop -> RUNNING (restart)", category="game_state")
        return True

    def toggle_hitboxes(self):
        self.show_hitboxes = not self.show_hitboxes
        DebugLogger.action(f"Hitboxes: {'ON' if self.show_hitboxes else 'OFF'}")

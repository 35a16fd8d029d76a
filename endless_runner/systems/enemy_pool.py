"""
enemy_pool.py
-------------
Spawns, updates, renders and removes enemies during a run.

Responsibilities
----------------
- Spawn a new enemy at the right edge once the spawn timer passes the base
  interval plus a random extra delay, then draw a new random delay.
- Draw then update every live enemy each frame, in spawn order.
- Sweep out enemies flagged for deletion, preserving survivor order.
"""

import random

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.entities.enemy import Enemy


class EnemyPool:
    """Ordered collection of live enemies plus its spawn timer."""

    def __init__(self, game_width, game_height, enemy_tuning, spawn_tuning,
                 image=None, rng=None):
        """
        Args:
            game_width, game_height: Game area passed to every spawned Enemy
            enemy_tuning: EnemyTuning for spawned enemies
            spawn_tuning: SpawnTuning with the base interval and random ranges
            image: Shared enemy sprite sheet
            rng: random.Random used for spawn delays (module RNG if None)
        """
        self.game_width = game_width
        self.game_height = game_height
        self.enemy_tuning = enemy_tuning
        self.spawn_tuning = spawn_tuning
        self.image = image
        self.rng = rng or random.Random()

        self.enemies = []
        self.enemy_timer = 0.0
        self.enemy_interval = spawn_tuning.interval
        self.random_enemy_interval = self._draw_delay(spawn_tuning.initial_extra)

        self._stats = {"spawned": 0, "escaped": 0}

        DebugLogger.init_entry("EnemyPool")
        DebugLogger.init_sub(f"Base interval {self.enemy_interval}ms", level=1)

    # ===========================================================
    # Per-frame Tick
    # ===========================================================

    def tick(self, delta_time, session, surface=None):
        """
        Spawn, draw+update, then sweep.

        Args:
            delta_time: Elapsed milliseconds since the previous frame
            session: GameSession credited when enemies escape
            surface: Target surface (None skips drawing)
        """
        if self.enemy_timer > self.enemy_interval + self.random_enemy_interval:
            self.spawn()
            self.random_enemy_interval = self._draw_delay(self.spawn_tuning.extra)
            self.enemy_timer = 0.0
        else:
            self.enemy_timer += delta_time

        for enemy in self.enemies:
            if surface is not None:
                enemy.draw(surface)
            enemy.update(delta_time, session)

        self.sweep()

    def spawn(self) -> Enemy:
        """Append a new enemy at the right edge."""
        enemy = Enemy(self.game_width, self.game_height, self.enemy_tuning, self.image)
        self.enemies.append(enemy)
        self._stats["spawned"] += 1
        DebugLogger.system(
            f"Spawned enemy #{self._stats['spawned']} at x={enemy.x}",
            category="entity_spawn",
        )
        return enemy

    def sweep(self) -> int:
        """Drop enemies marked for deletion. Returns how many were removed."""
        before = len(self.enemies)
        self.enemies = [e for e in self.enemies if not e.marked_for_deletion]
        removed = before - len(self.enemies)
        if removed:
            self._stats["escaped"] += removed
            DebugLogger.trace(f"Removed {removed} enemies", category="entity_cleanup")
        return removed

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear(self):
        """Remove every enemy and restart the spawn timer (new run)."""
        self.enemies = []
        self.enemy_timer = 0.0
        DebugLogger.action("Enemy pool cleared", category="game_state")

    # ===========================================================
    # Queries
    # ===========================================================

    def __len__(self):
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    def get_stats(self) -> dict:
        return dict(self._stats, active=len(self.enemies))

    # ===========================================================
    # Internal
    # ===========================================================

    def _draw_delay(self, bounds) -> float:
        """Uniform extra delay in [low, high)."""
        low, high = bounds
        return self.rng.random() * (high - low) + low

"""
game_session.py
---------------
Tracks the state of the current run: score, game-over flag and frame timing.
Owned by the GameLoop and passed explicitly to every per-frame update.
"""

from endless_runner.core.debug.debug_logger import DebugLogger


class GameSession:
    """Container for run-specific state. Reset when the player restarts."""

    __slots__ = ("score", "game_over", "last_timestamp", "high_score")

    def __init__(self, timestamp: float = 0.0):
        self.score = 0
        self.game_over = False
        self.last_timestamp = timestamp
        self.high_score = 0

    # ===========================================================
    # Scoring
    # ===========================================================

    def add_score(self, amount: int = 1):
        """Add to the current score. Negative amounts are rejected."""
        if amount < 0:
            raise ValueError(f"score increments must be non-negative, got {amount}")
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    # ===========================================================
    # Game Over
    # ===========================================================

    def end(self):
        """Flag the run as over. Stays set until reset()."""
        if self.game_over:
            return
        self.game_over = True
        DebugLogger.state(f"Game over at score {self.score}", category="game_state")

    # ===========================================================
    # Timing
    # ===========================================================

    def advance_clock(self, timestamp: float) -> float:
        """Record a frame timestamp and return the elapsed ms since the last one."""
        delta_time = timestamp - self.last_timestamp
        self.last_timestamp = timestamp
        return delta_time

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self, timestamp: float = None):
        """Reset for a new run. Keeps the high score for this process."""
        self.score = 0
        self.game_over = False
        if timestamp is not None:
            self.last_timestamp = timestamp

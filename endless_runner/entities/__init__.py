"""
Entity exports.

    Player - the runner controlled by the user
    Enemy  - ground enemy spawned by the EnemyPool
"""

from endless_runner.entities.player import Player
from endless_runner.entities.enemy import Enemy

__all__ = [
    'Player',
    'Enemy',
]

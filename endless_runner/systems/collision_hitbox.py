"""
collision_hitbox.py
-------------------
Circular collision bounds used by the player and enemies.

Sprites carry a lot of transparent padding, so each entity approximates
its body with a circle: centred on the sprite centre plus a fixed offset,
with a radius of width / radius_divisor.

Common Patterns
---------------
Player:  CircleHitbox.for_entity(player, offset=(0, 15))
Enemy:   CircleHitbox.for_entity(enemy, offset=(-20, 15))
Test:    player.hitbox().overlaps(enemy.hitbox())
"""

import math

import pygame

from endless_runner.core.runtime.game_settings import Debug


class CircleHitbox:
    """Immutable circle snapshot of an entity's collision area."""

    __slots__ = ("center_x", "center_y", "radius")

    def __init__(self, center_x: float, center_y: float, radius: float):
        self.center_x = center_x
        self.center_y = center_y
        self.radius = radius

    @classmethod
    def for_entity(cls, entity, offset=(0, 0), radius_divisor: float = 3):
        """
        Build a hitbox from an entity's top-left position and size.

        Args:
            entity: Object with x, y, width, height
            offset: (x, y) shift of the circle centre from the sprite centre
            radius_divisor: radius = width / radius_divisor
        """
        offset_x, offset_y = offset
        return cls(
            entity.x + entity.width / 2 + offset_x,
            entity.y + entity.height / 2 + offset_y,
            entity.width / radius_divisor,
        )

    # ===========================================================
    # Queries
    # ===========================================================

    def distance_to(self, other: "CircleHitbox") -> float:
        """Euclidean distance between the two centres."""
        dx = other.center_x - self.center_x
        dy = other.center_y - self.center_y
        return math.sqrt(dx * dx + dy * dy)

    def overlaps(self, other: "CircleHitbox") -> bool:
        """Strict overlap: circles that exactly touch do not collide."""
        return self.distance_to(other) < self.radius + other.radius

    # ===========================================================
    # Debug Rendering
    # ===========================================================

    def draw_debug(self, surface, color=None, width=None):
        """Outline the circle (F3 overlay)."""
        pygame.draw.circle(
            surface,
            color or Debug.HITBOX_COLOR,
            (int(self.center_x), int(self.center_y)),
            int(self.radius),
            width or Debug.HITBOX_LINE_WIDTH,
        )

    def __repr__(self):
        return (f"CircleHitbox(center=({self.center_x:.1f}, {self.center_y:.1f}), "
                f"radius={self.radius:.1f})")

"""
test_collision_hitbox.py
------------------------
Tests for circle hitbox construction and overlap rules.
"""

from types import SimpleNamespace
from unittest.mock import patch

from endless_runner.systems.collision_hitbox import CircleHitbox


def box(x, y, width, height):
    return SimpleNamespace(x=x, y=y, width=width, height=height)


class TestCircleHitbox:

    def test_for_entity_centres_with_offset(self):
        hitbox = CircleHitbox.for_entity(box(100, 580, 140, 140), offset=(0, 15))
        assert (hitbox.center_x, hitbox.center_y) == (170, 665)
        assert hitbox.radius == 140 / 3

    def test_custom_divisor(self):
        hitbox = CircleHitbox.for_entity(box(0, 0, 120, 60), radius_divisor=4)
        assert hitbox.radius == 30

    def test_distance(self):
        a = CircleHitbox(0, 0, 1)
        b = CircleHitbox(3, 4, 1)
        assert a.distance_to(b) == 5
        assert b.distance_to(a) == 5

    def test_overlap_is_strict(self):
        a = CircleHitbox(0, 0, 2)
        touching = CircleHitbox(5, 0, 3)
        inside = CircleHitbox(4.9, 0, 3)
        assert not a.overlaps(touching)
        assert a.overlaps(inside)
        assert inside.overlaps(a)

    def test_draw_debug_outlines_circle(self, mock_surface):
        with patch("pygame.draw.circle") as circle:
            CircleHitbox(10.6, 20.2, 5.9).draw_debug(mock_surface, color=(1, 2, 3), width=2)
        circle.assert_called_once_with(mock_surface, (1, 2, 3), (10, 20), 5, 2)

    def test_repr(self):
        assert repr(CircleHitbox(1, 2, 3)) == "CircleHitbox(center=(1.0, 2.0), radius=3.0)"

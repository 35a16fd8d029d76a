"""
test_enemy.py
-------------
Tests for enemy movement, escape scoring and rendering.
"""

from unittest.mock import MagicMock


class TestEnemyMovement:

    def test_spawns_at_right_edge_on_ground(self, make_enemy):
        enemy = make_enemy()
        assert enemy.x == 1200
        assert enemy.y == 720 - 119
        assert enemy.marked_for_deletion is False

    def test_moves_left_by_speed(self, make_enemy, session):
        enemy = make_enemy()
        for _ in range(3):
            enemy.update(16, session)
        assert enemy.x == 1200 - 24

    def test_still_visible_edge_is_not_marked(self, make_enemy, session):
        enemy = make_enemy(x=-152)
        enemy.update(16, session)
        # -160 is not past the edge yet
        assert enemy.x == -160
        assert enemy.marked_for_deletion is False
        assert session.score == 0


class TestEnemyEscape:

    def test_leaving_screen_scores_once(self, make_enemy, session):
        enemy = make_enemy(x=-155)
        enemy.update(16, session)

        assert enemy.marked_for_deletion is True
        assert session.score == 1

    def test_marked_enemy_is_frozen(self, make_enemy, session):
        enemy = make_enemy(x=-155)
        enemy.update(16, session)
        x = enemy.x

        for _ in range(5):
            enemy.update(16, session)

        assert enemy.x == x
        assert session.score == 1

    def test_full_crossing_scores_one(self, make_enemy, session):
        enemy = make_enemy()
        frames = 0
        while not enemy.marked_for_deletion:
            enemy.update(16, session)
            frames += 1

        # 1200 -> below -160 at 8px per frame
        assert frames == 171
        assert session.score == 1
        assert session.high_score == 1


class TestEnemyRendering:

    def test_hitbox_uses_offset_and_radius(self, make_enemy):
        hitbox = make_enemy(x=0).hitbox()
        assert hitbox.center_x == 60
        assert hitbox.center_y == 601 + 59.5 + 15
        assert hitbox.radius == 160 / 3

    def test_draw_blits_sheet_frame(self, make_enemy, mock_surface):
        enemy = make_enemy(x=500)
        enemy.image = MagicMock()
        enemy.animation.frame_x = 3

        enemy.draw(mock_surface)

        _, position, area = mock_surface.blit.call_args[0]
        assert position == (500, 601)
        assert (area.x, area.width, area.height) == (480, 160, 119)

    def test_animation_advances_with_time(self, make_enemy, session):
        enemy = make_enemy()
        # 50ms interval: three 20ms ticks accumulate 60ms, the fourth steps
        for _ in range(4):
            enemy.update(20, session)
        assert enemy.animation.frame_x == 1

"""
test_player.py
--------------
Tests for player movement, jumping, bounds and enemy contact.
"""

from unittest.mock import MagicMock, patch

from conftest import GAME_WIDTH, run_frames
from endless_runner.core.runtime.game_session import GameSession
from endless_runner.core.services.input_manager import (
    ARROW_UP, ARROW_LEFT, ARROW_RIGHT, SWIPE_UP, SWIPE_LEFT, SWIPE_RIGHT,
)


GROUND_Y = 580.0


class TestPlayerInitialization:

    def test_starts_on_the_ground(self, player):
        assert player.width == 140.0
        assert player.height == 140.0
        assert player.x == 100
        assert player.y == GROUND_Y
        assert player.on_ground()
        assert (player.speed, player.vy) == (0, 0)

    def test_idle_frames_keep_position(self, player, input_state, session):
        run_frames(player, input_state, session, 40)

        assert (player.x, player.y) == (100, GROUND_Y)
        assert player.vy == 0
        assert session.game_over is False


# ===========================================================
# Horizontal Movement
# ===========================================================

class TestHorizontalMovement:

    def test_right_moves_five_per_frame(self, player, input_state, session):
        input_state.press(ARROW_RIGHT)
        run_frames(player, input_state, session, 10)
        assert player.x == 150

    def test_swipe_left_moves_left(self, player, input_state, session):
        input_state.press(SWIPE_LEFT)
        run_frames(player, input_state, session, 4)
        assert player.x == 80

    def test_right_takes_priority_over_left(self, player, input_state, session):
        input_state.press(ARROW_LEFT)
        input_state.press(SWIPE_RIGHT)
        run_frames(player, input_state, session, 1)
        assert player.speed == 5
        assert player.x == 105

    def test_release_stops_immediately(self, player, input_state, session):
        input_state.press(ARROW_RIGHT)
        run_frames(player, input_state, session, 3)
        input_state.release(ARROW_RIGHT)
        run_frames(player, input_state, session, 1)
        assert player.speed == 0
        assert player.x == 115

    def test_clamped_to_left_edge(self, player, input_state, session):
        input_state.press(ARROW_LEFT)
        run_frames(player, input_state, session, 100)
        assert player.x == 0

    def test_clamped_to_right_edge(self, player, input_state, session):
        input_state.press(ARROW_RIGHT)
        run_frames(player, input_state, session, 400)
        assert player.x == GAME_WIDTH - player.width


# ===========================================================
# Jumping
# ===========================================================

class TestJump:

    def test_first_jump_frame(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 1)

        assert player.y == GROUND_Y - 25
        assert player.vy == -24
        assert player.speed == 0
        assert player.animation.frame_y == 1
        assert player.animation.max_frame == 6

    def test_gravity_adds_one_per_frame(self, player, input_state, session):
        input_state.press(SWIPE_UP)
        run_frames(player, input_state, session, 1)
        input_state.release(SWIPE_UP)

        velocities = []
        for _ in range(10):
            run_frames(player, input_state, session, 1)
            velocities.append(player.vy)
        assert velocities == list(range(-23, -13))

    def test_lands_exactly_on_ground(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 1)
        input_state.release(ARROW_UP)

        run_frames(player, input_state, session, 49)
        assert not player.on_ground()

        run_frames(player, input_state, session, 1)
        assert player.y == GROUND_Y
        assert player.vy == 0
        assert player.on_ground()
        assert player.animation.frame_y == 0
        assert player.animation.max_frame == 8

    def test_peak_height(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 1)
        input_state.release(ARROW_UP)

        lowest_y = player.y
        for _ in range(50):
            run_frames(player, input_state, session, 1)
            lowest_y = min(lowest_y, player.y)
        assert lowest_y == GROUND_Y - 325

    def test_no_double_jump_while_airborne(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 5)
        # -25 impulse once, then gravity only
        assert player.vy == -20

    def test_held_jump_repeats_after_landing(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 52)
        assert player.y == GROUND_Y - 25
        assert player.vy == -24

    def test_moving_right_blocks_jump(self, player, input_state, session):
        input_state.press(ARROW_RIGHT)
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 1)
        assert player.on_ground()
        assert player.x == 105


# ===========================================================
# Collision
# ===========================================================

class TestEnemyContact:

    def test_overlapping_enemy_ends_the_game(self, player, input_state, session, make_enemy):
        enemy = make_enemy(x=120)
        run_frames(player, input_state, session, 1, enemies=[enemy])
        assert session.game_over is True

    def test_distant_enemy_is_ignored(self, player, input_state, session, make_enemy):
        run_frames(player, input_state, session, 1, enemies=[make_enemy()])
        assert session.game_over is False

    def test_jump_clears_enemy(self, player, input_state, session, make_enemy):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 10)
        enemy = make_enemy(x=player.x)
        run_frames(player, input_state, session, 1, enemies=[enemy])
        assert session.game_over is False

    def test_collision_checked_against_position_before_move(self, player, input_state,
                                                            session, make_enemy):
        # Radii sum to 100; centres start 100.5 apart and close to 95.6 after one step
        enemy = make_enemy(x=210)
        input_state.press(ARROW_RIGHT)
        run_frames(player, input_state, session, 1, enemies=[enemy])
        assert session.game_over is False

        run_frames(player, input_state, session, 1, enemies=[enemy])
        assert session.game_over is True

    def test_only_first_hit_ends_session(self, player, input_state, session, make_enemy):
        enemies = [make_enemy(x=100), make_enemy(x=120)]
        with patch.object(GameSession, "end") as end:
            run_frames(player, input_state, session, 1, enemies=enemies)
        end.assert_called_once()

    def test_no_checks_after_game_over(self, player, input_state, session, make_enemy):
        session.end()
        with patch.object(GameSession, "end") as end:
            run_frames(player, input_state, session, 3, enemies=[make_enemy(x=120)])
        end.assert_not_called()


# ===========================================================
# Restart & Drawing
# ===========================================================

class TestRestartAndDraw:

    def test_restart_resets_motion_only(self, player, input_state, session):
        input_state.press(ARROW_UP)
        run_frames(player, input_state, session, 3)
        session.end()

        player.restart()

        assert (player.x, player.y) == (100, GROUND_Y)
        assert (player.speed, player.vy) == (0, 0)
        assert player.animation.frame_y == 0
        assert session.game_over is True

    def test_draw_blits_current_frame(self, player, mock_surface):
        player.image = MagicMock()
        player.animation.frame_x = 2

        player.draw(mock_surface)

        image, position, area = mock_surface.blit.call_args[0]
        assert image is player.image
        assert position == (100, GROUND_Y)
        assert (area.x, area.y, area.width, area.height) == (280, 0, 140, 140)

    def test_draw_without_image_is_noop(self, player, mock_surface):
        player.draw(mock_surface)
        mock_surface.blit.assert_not_called()

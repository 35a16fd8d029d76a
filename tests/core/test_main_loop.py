"""
test_main_loop.py
-----------------
Headless smoke tests for the pygame runtime and the command-line entry.
"""

import random
from unittest.mock import patch

import pygame
import pytest

from endless_runner.core.runtime.game_loop import LoopState
from endless_runner.core.runtime.main_loop import MainLoop
from endless_runner.main import build_parser, main


@pytest.fixture
def main_loop(config):
    loop = MainLoop(config=config, rng=random.Random(3))
    yield loop
    pygame.quit()


class TestMainLoop:

    def test_wiring(self, main_loop):
        assert main_loop.display.on_alert == main_loop.hud.show_alert
        assert main_loop.input_manager.state is main_loop.game.input_state
        assert main_loop.game.running

    def test_frames_advance_world(self, main_loop):
        main_loop._frame(16)
        main_loop._frame(16)
        assert main_loop.game.background.x < 0

    def test_game_over_freezes_frame_until_restart(self, main_loop):
        enemy = main_loop.game.enemy_pool.spawn()
        enemy.x = main_loop.game.player.x

        main_loop._frame(16)
        assert not main_loop.game.running
        assert main_loop._frozen_frame is not None

        main_loop._frame(16)
        assert not main_loop.game.running

        main_loop._restart()
        assert main_loop.game.running
        assert main_loop._frozen_frame is None

    def test_arrow_key_reaches_player(self, main_loop):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        main_loop._handle_events()

        start = main_loop.game.session.last_timestamp
        main_loop.game.tick(start + 16)

        assert main_loop.game.player.x == 105

    def test_enter_key_restarts_after_game_over(self, main_loop):
        main_loop.game.session.end()
        main_loop.game.state = LoopState.GAME_OVER
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))

        main_loop._handle_events()

        assert main_loop.game.running

    def test_quit_event_stops_run(self, main_loop):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        main_loop.run()
        assert main_loop.running is False


class TestCommandLine:

    def test_parser_flags(self):
        args = build_parser().parse_args(["--fullscreen", "--hitboxes", "--seed", "5"])
        assert args.fullscreen and args.hitboxes
        assert args.seed == 5
        assert args.debug is False

    def test_missing_config_exits_with_error(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.json")]) == 2

    def test_invalid_config_exits_with_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"spawn": {"extra": [9, 1]}}', encoding="utf-8")
        assert main(["--config", str(path)]) == 2

    def test_relative_config_path_uses_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "mine.json").write_text('{"enemy": {"speed": 12}}', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        with patch("endless_runner.core.runtime.main_loop.MainLoop") as loop_cls:
            assert main(["--config", "mine.json"]) == 0
        assert loop_cls.call_args[1]["config"].enemy.speed == 12

    def test_starts_main_loop(self):
        with patch("endless_runner.core.runtime.main_loop.MainLoop") as loop_cls:
            assert main(["--seed", "1", "--hitboxes"]) == 0
        kwargs = loop_cls.call_args[1]
        assert kwargs["show_hitboxes"] is True
        assert kwargs["fullscreen"] is False
        loop_cls.return_value.run.assert_called_once()

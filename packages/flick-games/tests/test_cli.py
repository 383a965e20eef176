"""Tests for the command-line entry point (headless paths only)."""
from __future__ import annotations

import pytest

from flick import VirtualClock

from flick_games.cli import build, main, parse_args, run_headless
from flick_games.scene import MENU


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.game == "platformer"
        assert (args.width, args.height) == (960, 540)
        assert args.fps == 60
        assert args.max_dt == 2.0
        assert args.headless_frames is None

    @pytest.mark.parametrize("argv", [
        ["--width", "0"],
        ["--height", "-4"],
        ["--fps", "0"],
        ["--max-dt", "0"],
        ["--headless-frames", "-1"],
        ["--game", "tetris"],
    ])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestHeadless:
    def test_build_applies_size(self):
        game = build(parse_args(["--game", "dodger", "--width", "640", "--height", "480"]),
                     clock=VirtualClock())
        assert game.name == "dodger"
        assert (game.scene.width, game.scene.height) == (640, 480)

    def test_run_headless_summary(self):
        game = build(parse_args(["--seed", "3"]), clock=VirtualClock())
        summary = run_headless(game, 30)
        assert summary["frames"] == 30
        assert summary["state"] == MENU
        assert summary["draw_calls"] > 0

    @pytest.mark.parametrize("name", ["platformer", "dodger"])
    def test_main_prints_summary(self, name, capsys):
        assert main(["--game", name, "--seed", "1", "--headless-frames", "10"]) == 0
        out = capsys.readouterr().out
        assert f"game: {name}" in out
        assert "frames: 10" in out
        assert "state: menu" in out

"""Command-line entry point: ``flick [--game dodger] [--headless-frames N]``."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from flick import RecordingSurface, VirtualClock

from flick_games.config import FPS, HEIGHT, MAX_DT, WIDTH, DodgerConfig, PlatformerConfig
from flick_games.dodger import build_dodger
from flick_games.game import Game
from flick_games.platformer import build_platformer

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(name)s] %(levelname)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="flick", description="flick - twin robots and glider")
    p.add_argument("--game", choices=("platformer", "dodger"), default="platformer",
                   help="Which game to run (default: platformer)")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--width", type=int, default=WIDTH, help=f"Surface width (default: {WIDTH})")
    p.add_argument("--height", type=int, default=HEIGHT, help=f"Surface height (default: {HEIGHT})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Target refresh rate (default: {FPS})")
    p.add_argument("--max-dt", type=float, default=MAX_DT,
                   help=f"Largest dt one frame may apply, in ticks (default: {MAX_DT})")
    p.add_argument("--headless-frames", type=int, default=None, metavar="N",
                   help="Run N frames without a window and print a summary")
    p.add_argument("--log-level", default="WARNING",
                   choices=("DEBUG", "INFO", "WARNING", "ERROR"), help="Logging level")
    args = p.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        p.error("--width and --height must be positive")
    if args.fps <= 0:
        p.error("--fps must be positive")
    if args.max_dt <= 0:
        p.error("--max-dt must be positive")
    if args.headless_frames is not None and args.headless_frames < 0:
        p.error("--headless-frames must not be negative")
    return args


def build(args: argparse.Namespace, clock=None) -> Game:
    if args.game == "dodger":
        cfg = replace(DodgerConfig(), width=args.width, height=args.height)
        return build_dodger(cfg, seed=args.seed, clock=clock, fps=args.fps, max_dt=args.max_dt)
    cfg = replace(PlatformerConfig(), width=args.width, height=args.height)
    return build_platformer(cfg, seed=args.seed, clock=clock, fps=args.fps, max_dt=args.max_dt)


def run_headless(game: Game, frames: int) -> dict[str, object]:
    """Step ``frames`` frames against a virtual clock and a recording surface."""
    surface = RecordingSurface(int(game.scene.width), int(game.scene.height))
    game.attach(surface)
    game.engine.run(frames)
    return {
        "game": game.name,
        "frames": game.engine.frame_clock.tick_number,
        "state": game.state,
        "score": game.scene.score,
        "particles": len(game.scene.particles),
        "status": game.scene.status.text,
        "draw_calls": len(surface.calls),
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.headless_frames is not None:
        game = build(args, clock=VirtualClock())
        summary = run_headless(game, args.headless_frames)
        for key, value in summary.items():
            print(f"{key}: {value}")
        return 0

    from flick_games import pygame_app

    game = build(args)
    logger.info("seed %d", game.engine.seed)
    pygame_app.run(game, fps=args.fps)
    return 0


if __name__ == "__main__":
    sys.exit(main())

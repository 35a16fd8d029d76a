"""
main.py
-------
Command-line entry point.

Usage:
    python -m endless_runner                 # Windowed
    python -m endless_runner --fullscreen    # Start fullscreen
    python -m endless_runner --debug         # Verbose logging
    python -m endless_runner --hitboxes      # Show collision circles (F3)
    python -m endless_runner --seed 42       # Reproducible enemy spawns
"""

import argparse
import os
import random
import sys

from endless_runner.core.debug.debug_logger import DebugLogger
from endless_runner.core.runtime.runner_config import RunnerConfig, RunnerConfigError


def build_parser():
    parser = argparse.ArgumentParser(
        prog="endless-runner",
        description="Side-scrolling runner: dodge the enemies, score when they pass.",
    )
    parser.add_argument("--fullscreen", action="store_true",
                        help="Start in fullscreen mode")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logging for every category")
    parser.add_argument("--hitboxes", action="store_true",
                        help="Draw collision circles")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for enemy spawn timing")
    parser.add_argument("--config", default=None,
                        help="Path to an alternative runner.json")
    return parser


def main(argv=None):
    """Parse arguments, start the game, return the process exit code."""
    args = build_parser().parse_args(argv)

    if args.debug:
        DebugLogger.configure(
            level="VERBOSE",
            enable={"entity_spawn": True, "entity_cleanup": True, "loading": True,
                    "animation": True, "timing": True, "performance": True},
        )

    try:
        # Relative paths are relative to the working directory, not the bundled config dir
        config_path = os.path.abspath(args.config) if args.config else None
        config = RunnerConfig.load(config_path, strict=config_path is not None)
    except (RunnerConfigError, FileNotFoundError) as e:
        DebugLogger.fail(f"Cannot start: {e}", category="loading")
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None

    # Imported late so --help and config errors never import pygame
    from endless_runner.core.runtime.main_loop import MainLoop

    MainLoop(config=config, fullscreen=args.fullscreen,
             show_hitboxes=args.hitboxes, rng=rng).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

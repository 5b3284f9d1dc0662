from __future__ import annotations

import argparse

from game.engine import GameEngine
from game.ruleset import DEFAULT_RULES, ConfigurationError
from ui.cli import gameloop
from utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    p.add_argument(
        "--length",
        type=int,
        default=DEFAULT_RULES["code_length"],
        help="Number of slots in the secret code (2, 4 and 6 have presets).",
    )
    p.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_RULES["max_attempts"],
        help="Number of guesses before the game is lost.",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible secret."
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="Also write logs here.")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        engine = GameEngine(args.length, args.attempts, seed=args.seed)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 2

    gameloop(engine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

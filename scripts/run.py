#!/usr/bin/env python3
"""
Play a single simulated game. Verifies the engine works end-to-end.

Usage:
    python -m scripts.run [--seed SEED] [--strategy {random,block}]
"""
import argparse
import logging
import random
import sys

from trapcat.autoplay import CLICK_PROVIDERS, run_game
from trapcat.config import load_game_config
from trapcat.logger import GameLogger


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a trapcat game with simulated clicks")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--strategy", choices=sorted(CLICK_PROVIDERS), default="random",
                        help="How the simulated player picks cells")
    parser.add_argument("--config", default=None, help="Path to a config YAML (default: config.yaml)")
    parser.add_argument("--save", action="store_true", help="Write a JSON transcript to data/games/")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-turn output")
    parser.add_argument("--debug", action="store_true", help="Log every cat decision")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.seed is not None:
        random.seed(args.seed)
        print(f"[seed={args.seed}]")

    config = load_game_config(args.config)
    game_logger = GameLogger() if args.save else None
    game = run_game(
        config=config,
        click_provider=CLICK_PROVIDERS[args.strategy],
        verbose=not args.quiet,
        game_logger=game_logger,
    )

    if args.quiet:
        print(f"{game.state.value}: {game.status} after {game.turn} turns")

    if game_logger is not None:
        path = game_logger.save()
        print(f"Transcript saved to {path}")

    sys.exit(0)


if __name__ == "__main__":
    main()

"""Tallgrass entry point.

Usage:
    python -m tallgrass.main
    python -m tallgrass.main --seed 7 --verbose
    Fullscreen:     python -m tallgrass.main --fullscreen
    Toggle fullscreen in-game: F11
"""

from __future__ import annotations

import argparse
import logging

import pygame

from tallgrass.config import CELL_HEIGHT, CELL_WIDTH, DEFAULT_SEED, MAP_SIZE
from tallgrass.game import Game


def main() -> None:
    parser = argparse.ArgumentParser(description="Tallgrass: wander the wild grass")
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help="World generation seed",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Start in fullscreen mode (toggle with F11 in-game)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        # Leave room for the status line under the map
        screen = pygame.display.set_mode(
            (MAP_SIZE * CELL_WIDTH + 2 * CELL_WIDTH,
             MAP_SIZE * CELL_HEIGHT + 2 * CELL_HEIGHT),
        )
    pygame.display.set_caption("Tallgrass")

    Game(screen, seed=args.seed).run()

    pygame.quit()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Falling Rocks - Standalone entry point.

Usage:
    python -m games.FallingRocks.main
    python -m games.FallingRocks.main --fullscreen
    python -m games.FallingRocks.main --width 480 --height 800 --seed 7
"""

import argparse
import os
import sys

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from rockfall.logging import configure_logging
from games.FallingRocks import config
from games.FallingRocks.game_mode import FallingRocksMode


def build_parser() -> argparse.ArgumentParser:
    """CLI parser built from the game's argument definitions."""
    parser = argparse.ArgumentParser(description=FallingRocksMode.DESCRIPTION)
    for arg in FallingRocksMode.get_arguments():
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level (TRACE, DEBUG, INFO, WARNING, ERROR, OFF)')
    return parser


def main(argv=None):
    """Run Falling Rocks."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()

    if args.fullscreen or config.FULLSCREEN:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    pygame.display.set_caption(FallingRocksMode.NAME)

    game = FallingRocksMode(width=width, height=height, seed=args.seed)

    clock = pygame.time.Clock()
    running = True

    print("=" * 50)
    print("FALLING ROCKS")
    print("=" * 50)
    print("\nDodge the rocks and collect coins!")
    print("\nControls:")
    print("  - LEFT/RIGHT or A/D to move (or hold a side of the screen)")
    print("  - SPACE/ENTER to start or play again")
    print("  - R to restart")
    print("  - ESC to quit")
    print("=" * 50)

    while running:
        dt = clock.tick(args.fps) / 1000.0

        events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                game.reset()
            else:
                events.append(event)

        game.handle_input(events)
        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    print(f"\nFinal score: {game.get_score()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
app.py - Windowed host for a GameSession.

Polls pygame events, turns key presses into direction intents, offers the
session a tick every frame and draws the resulting snapshot.
"""

import argparse
import logging

import numpy as np
import pygame

from snake_sim.controls import direction_from_key
from snake_sim.renderer import CELL_SIZE, draw_snapshot
from snake_sim.session import GameSession

logger = logging.getLogger(__name__)

# Host poll rate; the session gates its own simulation rate.
POLL_FPS = 60


def run(grid_width=GameSession.GRID_WIDTH, grid_height=GameSession.GRID_HEIGHT,
        cell_size=CELL_SIZE, frames_per_second=GameSession.FRAMES_PER_SECOND, seed=None):
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")

    pygame.init()
    pygame.display.set_caption("Snake Game")
    display_screen = pygame.display.set_mode((grid_width * cell_size, grid_height * cell_size))
    clock = pygame.time.Clock()

    session = GameSession(
        rng=np.random.default_rng(seed),
        now=pygame.time.get_ticks(),
        grid_width=grid_width,
        grid_height=grid_height,
        frames_per_second=frames_per_second,
    )
    logger.info(
        "Window %dx%d px, grid %dx%d, %.1f ticks/s",
        grid_width * cell_size, grid_height * cell_size, grid_width, grid_height, frames_per_second,
    )

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    session.set_direction_intent(direction_from_key(event.key))

        session.tick(pygame.time.get_ticks())

        draw_snapshot(display_screen, session.snapshot(), cell_size)
        pygame.display.flip()
        clock.tick(POLL_FPS)

    pygame.quit()


def _grid_size(value):
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"grid dimensions must be positive, got {value!r}")
    return width, height


def build_parser():
    parser = argparse.ArgumentParser(prog="snake-sim", description="Play snake on a wrapping grid.")
    parser.add_argument("--grid", type=_grid_size, default=(GameSession.GRID_WIDTH, GameSession.GRID_HEIGHT),
                        help="grid size as WIDTHxHEIGHT (default: 25x25)")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="pixel size of one grid cell (default: 25)")
    parser.add_argument("--fps", type=float, default=GameSession.FRAMES_PER_SECOND,
                        help="simulation ticks per second (default: 8)")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for food placement (default: random)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    grid_width, grid_height = args.grid
    run(grid_width, grid_height, args.cell_size, args.fps, args.seed)


if __name__ == "__main__":
    main()

"""
session.py - Orchestrates one game: tick gating, collision resolution,
game over / restart and input arbitration.

Time and randomness come in from the caller (``now`` in milliseconds, a numpy
``Generator``), so a session is fully deterministic under a fixed clock and a
seeded generator.
"""

import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np

from snake_sim.food import Food
from snake_sim.grid import Direction, GridPosition, random_position
from snake_sim.organism import Collision, Organism

logger = logging.getLogger(__name__)


class Snapshot(NamedTuple):
    head_position: GridPosition
    body_positions: Tuple[GridPosition, ...]
    food_position: GridPosition
    is_game_over: bool


class GameSession:
    # --- Constants ---
    GRID_WIDTH = 25
    GRID_HEIGHT = 25
    FRAMES_PER_SECOND = 8.0

    def __init__(self, rng=None, now=0, grid_width=None, grid_height=None, frames_per_second=None):
        self.grid_width = self.GRID_WIDTH if grid_width is None else grid_width
        self.grid_height = self.GRID_HEIGHT if grid_height is None else grid_height
        self.frames_per_second = (
            self.FRAMES_PER_SECOND if frames_per_second is None else frames_per_second
        )

        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.grid_width}x{self.grid_height}"
            )
        if self.frames_per_second <= 0:
            raise ValueError(f"frames_per_second must be positive, got {self.frames_per_second}")

        self.frame_interval = 1000.0 / self.frames_per_second
        self.rng = rng if rng is not None else np.random.default_rng()

        # State variables are initialized in restart()
        self.organism = None
        self.food = None
        self.game_over = False
        self.tick_count = 0
        self.last_tick_timestamp = now

        self.restart()

    @property
    def start_position(self):
        return GridPosition(self.grid_width // 4, self.grid_height // 2)

    def restart(self):
        """Recreate the organism and food at their start-of-session layout."""
        self.organism = Organism(self.start_position, self.grid_width, self.grid_height)
        self.food = Food(random_position(self.rng, self.grid_width, self.grid_height))
        self.game_over = False
        self.tick_count = 0
        logger.info("Session started: organism at %s, food at %s", self.start_position, self.food.position)

    def tick(self, now) -> bool:
        """
        Advance the simulation if at least one frame interval has elapsed.

        Returns True when the tick was accepted, False when it was coalesced
        into the previous one.
        """
        if now - self.last_tick_timestamp < self.frame_interval:
            return False
        self.last_tick_timestamp = now

        # The tick that notices game over is spent on the reset alone
        if self.game_over:
            self.restart()
            return True

        self.tick_count += 1
        outcome = self.organism.move_one_step(self.food)

        if outcome is Collision.ATE_FOOD:
            self.food.relocate(self.rng, self.grid_width, self.grid_height)
        elif outcome is Collision.HIT_SELF:
            self.game_over = True
            logger.info(
                "Game over at tick %d with length %d", self.tick_count, self.organism.length
            )
        return True

    def set_direction_intent(self, direction: Optional[Direction]) -> None:
        if direction is None:
            return
        self.organism.set_direction(direction)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head_position=self.organism.head.position,
            body_positions=self.organism.body_positions(),
            food_position=self.food.position,
            is_game_over=self.game_over,
        )

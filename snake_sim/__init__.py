"""
snake_sim - A snake game on a wrapping grid.

  grid       - wrap(), GridPosition, Direction.
  organism   - Organism, Segment, Collision.
  food       - Food.
  session    - GameSession (tick gating, restart, input), Snapshot.
  renderer   - pygame shape drawing of a Snapshot.
  controls   - key / action to Direction mapping.
  env        - gymnasium GameEnv.
  app        - windowed host loop and CLI.
"""

from snake_sim.food import Food
from snake_sim.grid import Direction, GridPosition, wrap
from snake_sim.organism import Collision, Organism, Segment
from snake_sim.session import GameSession, Snapshot

__all__ = [
    "Collision",
    "Direction",
    "Food",
    "GameSession",
    "GridPosition",
    "Organism",
    "Segment",
    "Snapshot",
    "wrap",
]

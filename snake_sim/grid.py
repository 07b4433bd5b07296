"""Toroidal grid arithmetic shared by the organism and the food."""

from enum import Enum
from typing import NamedTuple


def wrap(value, dimension):
    """Map ``value`` into ``[0, dimension)``, negative inputs included."""
    return ((value % dimension) + dimension) % dimension


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def inverse(self):
        return _INVERSE[self]

    @property
    def unit_vector(self):
        return self.value


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GridPosition(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction, width: int, height: int) -> "GridPosition":
        dx, dy = direction.unit_vector
        return GridPosition(wrap(self.x + dx, width), wrap(self.y + dy, height))


def random_position(rng, width, height):
    # Draw x then y, each uniform over its whole axis
    x = int(rng.integers(0, width))
    y = int(rng.integers(0, height))
    return GridPosition(x, y)

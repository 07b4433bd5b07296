"""
The snake itself: an ordered body that moves one cell per tick, grows when it
eats and detects when its head runs into its own body.
"""

from collections import deque
from enum import Enum
from typing import NamedTuple

from snake_sim.grid import Direction, GridPosition, wrap


class Collision(Enum):
    NONE = "none"
    ATE_FOOD = "ate_food"
    HIT_SELF = "hit_self"


class Segment(NamedTuple):
    position: GridPosition


class Organism:
    """
    Attributes
    ----------
    head                   : Segment     - the leading cell.
    body                   : deque       - Segments ordered newest -> tail.
                                           body[0] was the head one move ago.
    facing                 : Direction   - applied on the next move.
    last_applied_direction : Direction   - used by the most recent move.
    pending_collision      : Collision   - outcome of the most recent move.
    """

    def __init__(self, position, width, height, body=None, facing=Direction.RIGHT):
        self.width = width
        self.height = height

        head = GridPosition(*position)
        if body is None:
            # One trailing segment directly behind a right-facing head
            body = [(wrap(head.x - 1, width), head.y)]

        self.head = Segment(head)
        self.body = deque(Segment(GridPosition(*p)) for p in body)
        self.facing = facing
        self.last_applied_direction = facing
        self.pending_collision = Collision.NONE

    @property
    def length(self):
        return len(self.body) + 1

    def body_positions(self):
        return tuple(segment.position for segment in self.body)

    def positions(self):
        return (self.head.position,) + self.body_positions()

    def eats(self, food):
        return self.head.position == food.position

    def collides_with_itself(self):
        return any(self.head.position == segment.position for segment in self.body)

    def move_one_step(self, food) -> Collision:
        new_head_position = self.head.position.moved(self.facing, self.width, self.height)

        self.body.appendleft(self.head)
        self.head = Segment(new_head_position)

        # Checked before the tail is trimmed, so the vacating tail cell and
        # the previous head both count as occupied.
        if self.collides_with_itself():
            outcome = Collision.HIT_SELF
        elif self.eats(food):
            outcome = Collision.ATE_FOOD
        else:
            outcome = Collision.NONE

        if outcome is not Collision.ATE_FOOD:
            self.body.pop()

        self.last_applied_direction = self.facing
        self.pending_collision = outcome
        return outcome

    def is_facing_opposite(self, candidate: Direction) -> bool:
        return candidate is self.last_applied_direction.inverse

    def set_direction(self, candidate: Direction) -> None:
        if not self.is_facing_opposite(candidate):
            self.facing = candidate

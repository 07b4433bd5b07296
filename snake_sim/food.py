import logging

from snake_sim.grid import GridPosition, random_position

logger = logging.getLogger(__name__)


class Food:
    """The single active food item.

    Relocation draws over the whole grid; cells under the organism are not
    excluded, so food can land beneath the body.
    """

    def __init__(self, position: GridPosition):
        self.position = GridPosition(*position)

    def relocate(self, rng, width: int, height: int) -> None:
        self.position = random_position(rng, width, height)
        logger.debug("Food relocated to %s", self.position)

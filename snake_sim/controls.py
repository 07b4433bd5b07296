import pygame

from snake_sim.grid import Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

# movement component of a MultiDiscrete([5, 2, 2]) action
ACTION_DIRECTIONS = {
    1: Direction.UP,
    2: Direction.DOWN,
    3: Direction.LEFT,
    4: Direction.RIGHT,
}


def direction_from_key(key):
    """Arrow keys and WASD; any other key maps to None."""
    return KEY_DIRECTIONS.get(key)


def direction_from_action(movement):
    return ACTION_DIRECTIONS.get(int(movement))

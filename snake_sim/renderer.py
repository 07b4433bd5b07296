"""Minimal shape rendering of a session snapshot onto a pygame surface."""

import numpy as np
import pygame

COLOR_BG = (0, 255, 0)
COLOR_BODY = (255, 128, 0)
COLOR_HEAD = (255, 0, 0)
COLOR_FOOD = (0, 0, 255)

CELL_SIZE = 25


def cell_rect(position, cell_size=CELL_SIZE):
    x, y = position
    return pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size)


def draw_snapshot(surface, snapshot, cell_size=CELL_SIZE):
    surface.fill(COLOR_BG)

    for position in snapshot.body_positions:
        pygame.draw.rect(surface, COLOR_BODY, cell_rect(position, cell_size))
    pygame.draw.rect(surface, COLOR_HEAD, cell_rect(snapshot.head_position, cell_size))

    # Food is drawn last so it stays visible when it spawns under the body
    pygame.draw.rect(surface, COLOR_FOOD, cell_rect(snapshot.food_position, cell_size))


def surface_to_array(surface):
    arr = pygame.surfarray.array3d(surface)
    return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

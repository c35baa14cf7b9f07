from __future__ import annotations

import numpy as np

from gridsnake.game import SnakeGame


def pixel_image(game: SnakeGame) -> np.ndarray:
    """Current frame as a (size, size, 3) uint8 array, indexed [row, column]."""
    size = game.size
    image = np.array([cell.as_tuple() for cell in game.cells], dtype=np.uint8)
    return image.reshape(size, size, 3)


def pixel_buffer(game: SnakeGame) -> np.ndarray:
    """Flat RGB bytes, addressable with ``game.pixel_buffer_index``."""
    return pixel_image(game).reshape(-1)


def occupancy(game: SnakeGame) -> np.ndarray:
    """Agent-friendly planes built from the game state rather than the frame."""
    size = game.size
    # Channel 0: snake body (1 where a segment exists)
    # Channel 1: food
    state = np.zeros((2, size, size), dtype=np.float32)

    for row, column in game.snake:
        state[0, row, column] = 1.0

    food_row, food_column = game.current_food
    state[1, food_row, food_column] = 1.0

    return state

"""
Food placement.
"""

import random
from typing import Collection, Optional, Tuple


def spawn_food(
    occupied: Collection[Tuple[int, int]],
    grid_size: int,
    rng: random.Random,
) -> Optional[Tuple[int, int]]:
    """
    Return a random cell (x, y) not occupied by the snake.

    Draws uniformly over the whole grid and retries until a free cell comes
    up. This slows down as the board fills, which is fine at this grid size.
    When every cell is taken there is nothing to draw and None is returned.
    """
    occupied = set(occupied)
    if len(occupied) >= grid_size * grid_size:
        return None

    while True:
        x = rng.randrange(grid_size)
        y = rng.randrange(grid_size)
        if (x, y) not in occupied:
            return (x, y)

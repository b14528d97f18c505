"""
SimulationState - the single mutable value the engine advances.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import GameConfig, DEFAULT_CONFIG
from .constants import START_LENGTH
from .direction import Direction, RIGHT
from .food import spawn_food
from .phase import Phase
from .snake import Snake


@dataclass
class SimulationState:
    """
    Everything the engine needs to advance one tick.

    Attributes:
        snake: the snake body, head first
        direction: the direction applied on the last tick
        pending_direction: the buffered intent, applied on the next tick
        food: cell of the single food item, None once the snake fills the board
        score: points earned so far
        tick_interval_ms: milliseconds between ticks, shrinks as the snake feeds
        phase: NOT_STARTED, RUNNING or OVER
        config: the tunables this game was built from
        death_reason: 'wall', 'self' or 'board_full' once the game is over
        ticks: number of ticks that moved the snake or ended the game
    """

    snake: Snake
    direction: Direction
    pending_direction: Direction
    food: Optional[Tuple[int, int]]
    score: int = 0
    tick_interval_ms: float = DEFAULT_CONFIG.initial_interval_ms
    phase: Phase = Phase.NOT_STARTED
    config: GameConfig = field(default=DEFAULT_CONFIG)
    death_reason: Optional[str] = None
    ticks: int = 0

    @property
    def grid_size(self) -> int:
        return self.config.grid_size


def starting_snake(grid_size: int) -> Snake:
    """
    Return the canonical horizontal snake, head at the centre facing right.

    On the default 20x20 grid this is [(10, 10), (9, 10), (8, 10)].
    """
    cx, cy = grid_size // 2, grid_size // 2
    return Snake([(cx - i, cy) for i in range(START_LENGTH)])


def new_game(config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> SimulationState:
    """
    Build a fresh game in the NOT_STARTED phase.

    The whole state is new; nothing is carried over from a previous game.
    """
    config = config or DEFAULT_CONFIG
    rng = rng or random.Random()
    snake = starting_snake(config.grid_size)
    food = spawn_food(snake.positions, config.grid_size, rng)
    return SimulationState(
        snake=snake,
        direction=RIGHT,
        pending_direction=RIGHT,
        food=food,
        score=0,
        tick_interval_ms=config.initial_interval_ms,
        phase=Phase.NOT_STARTED,
        config=config,
    )

"""
Grid simulation engine.

Advances a SimulationState by exactly one discrete step per call. The step
depends only on the state and the random source it is handed; there is no
clock in here. Time is the tick scheduler's business.
"""

import logging
import random
from enum import Enum

from .constants import DEATH_WALL, DEATH_SELF, DEATH_BOARD_FULL
from .food import spawn_food
from .phase import Phase, PhaseEvent, next_phase
from .state import SimulationState

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    IDLE = "idle"          # not running, nothing changed
    MOVED = "moved"
    FED = "fed"
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


def _end_game(state: SimulationState, reason: str) -> None:
    state.phase = next_phase(state.phase, PhaseEvent.COLLIDE)
    state.death_reason = reason
    logger.info(
        f"Game over ({reason}) after {state.ticks} ticks: "
        f"score={state.score}, length={len(state.snake)}"
    )


def tick(state: SimulationState, rng: random.Random) -> TickOutcome:
    """
    Execute one tick:
      1) If the game is not running, do nothing
      2) Apply the buffered direction
      3) Compute the new head
      4) Wall collision ends the game, leaving the snake where it was
      5) Self collision ends the game, checked against the whole current
         body including the tail cell that would otherwise vacate
      6) Move the head
      7) Feed (grow + score + speed up + new food) or drop the tail
    """
    if state.phase is not Phase.RUNNING:
        return TickOutcome.IDLE

    state.direction = state.pending_direction
    new_head = state.direction.step(state.snake.head)
    state.ticks += 1

    x, y = new_head
    size = state.grid_size
    if x < 0 or x >= size or y < 0 or y >= size:
        _end_game(state, DEATH_WALL)
        return TickOutcome.WALL

    # The tail still counts here: stepping onto it is fatal even though it
    # would move away this tick.
    if new_head in state.snake:
        _end_game(state, DEATH_SELF)
        return TickOutcome.SELF

    fed = new_head == state.food
    state.snake.advance(new_head, grow=fed)

    if not fed:
        return TickOutcome.MOVED

    config = state.config
    state.score += config.feed_reward
    state.tick_interval_ms = max(
        config.min_interval_ms, state.tick_interval_ms - config.speed_step_ms
    )
    logger.debug(
        f"Fed at {new_head}: score={state.score}, "
        f"interval={state.tick_interval_ms}ms"
    )

    state.food = spawn_food(state.snake.positions, size, rng)
    if state.food is None:
        # Nowhere left to put food: the snake fills the board
        _end_game(state, DEATH_BOARD_FULL)
        return TickOutcome.BOARD_FULL

    return TickOutcome.FED

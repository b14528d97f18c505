"""
GameSnapshot - a read-only view of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import START_MESSAGE, GAME_OVER_MESSAGE
from .direction import Direction
from .phase import Phase
from .state import SimulationState


@dataclass(frozen=True)
class GameSnapshot:
    """
    What the presentation layer reads once per frame.

    Attributes:
        snake: cells from head to tail
        food: the food cell, None after a board-full game over
        score: current score
        phase: NOT_STARTED, RUNNING or OVER
        direction: the direction applied on the last tick
        grid_size: width and height of the board
        tick_interval_ms: current milliseconds between ticks
        death_reason: why the game ended, if it has
    """

    snake: Tuple[Tuple[int, int], ...]
    food: Optional[Tuple[int, int]]
    score: int
    phase: Phase
    direction: Direction
    grid_size: int
    tick_interval_ms: float
    death_reason: Optional[str] = None

    @classmethod
    def from_state(cls, state: SimulationState) -> "GameSnapshot":
        return cls(
            snake=tuple(state.snake.positions),
            food=state.food,
            score=state.score,
            phase=state.phase,
            direction=state.direction,
            grid_size=state.grid_size,
            tick_interval_ms=state.tick_interval_ms,
            death_reason=state.death_reason,
        )

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    @property
    def status_message(self) -> str:
        """Overlay text: a prompt before the start, the final score after game over."""
        if self.phase is Phase.NOT_STARTED:
            return START_MESSAGE
        if self.phase is Phase.OVER:
            return GAME_OVER_MESSAGE.format(score=self.score)
        return ""

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        (0,0) is the top left, matching screen coordinates, with x-axis
        labels at the bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Only the last digit, so columns stay aligned past 9
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly mapping of the snapshot."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "phase": self.phase.value,
            "direction": self.direction.name,
            "grid_size": self.grid_size,
            "tick_interval_ms": self.tick_interval_ms,
            "death_reason": self.death_reason,
            "status_message": self.status_message,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot phase={self.phase.value}, score={self.score}, "
            f"length={len(self.snake)}, food={self.food}>"
        )

"""
Direction entity - a unit step on the grid.
"""

from enum import Enum
from typing import Any, Optional, Tuple


class Direction(Enum):
    """
    One of the four grid directions.

    Values are (dx, dy) deltas in screen coordinates: y grows downwards,
    so UP decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def is_orthogonal_to(self, other: "Direction") -> bool:
        """True if the two directions travel along different axes."""
        return self.dx * other.dx + self.dy * other.dy == 0

    def step(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Return the cell one step away from `cell` in this direction."""
        x, y = cell
        return (x + self.dx, y + self.dy)

    @classmethod
    def coerce(cls, value: Any) -> Optional["Direction"]:
        """
        Turn a loosely-typed input into a Direction.

        Accepts a Direction or a direction name in any case ("up", "LEFT").
        Anything else returns None rather than raising, since host input
        sources are noisy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

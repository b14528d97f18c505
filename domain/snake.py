"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.positions)

    def advance(self, new_head: Tuple[int, int], grow: bool) -> None:
        """
        Move the head onto `new_head`.

        The tail is kept when growing (net +1 cell), otherwise dropped so the
        length stays the same.
        """
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
